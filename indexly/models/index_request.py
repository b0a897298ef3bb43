from typing import List

from pydantic import BaseModel, Field

from indexly.models.page import PageModel

# Absolute ceiling on pages accepted in a single request
MAX_PAGES_HARD_LIMIT = 5000


class IndexRequest(BaseModel):
    pages: List[PageModel] = Field(
        default_factory=list,
        max_length=MAX_PAGES_HARD_LIMIT,
        description="Ordered page collection (at most 5000 pages).",
    )
    include_permalink: bool = False
    """Copy each page's ``permalink`` into its search document.

    ``permalink`` is always declared as an indexed field; when this flag is
    off the field stays empty on every document.
    """
