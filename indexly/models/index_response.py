from typing import Any, Dict, List

from pydantic import BaseModel


class IndexResponse(BaseModel):
    documents_indexed: int
    fields: List[str]
    index: Dict[str, Any]
