from typing import Any, Dict, Optional

from pydantic import BaseModel, Field


class SearchDocument(BaseModel):
    """Flattened record extracted from one page for the search index."""

    id: str
    title: str
    content: str  # plain text, markup removed
    extra: Dict[str, Any] = Field(default_factory=dict)
    permalink: Optional[str] = None
