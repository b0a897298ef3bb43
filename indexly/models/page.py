from typing import Any, Dict, Optional

from pydantic import BaseModel, Field, field_validator


class PageModel(BaseModel):
    """One content page handed over by the site build pipeline.

    Exports write ``null`` for fields a page does not set; those read as empty
    text or an empty mapping.
    """

    title: str = ""
    content: str = ""  # rendered page body (HTML)
    extra: Dict[str, Any] = Field(default_factory=dict)  # author-defined front-matter extras
    permalink: Optional[str] = None

    @field_validator("title", "content", mode="before")
    @classmethod
    def _null_text_is_empty(cls, value: Any) -> Any:
        return "" if value is None else value

    @field_validator("extra", mode="before")
    @classmethod
    def _null_extra_is_empty(cls, value: Any) -> Any:
        return {} if value is None else value
