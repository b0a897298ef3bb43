from typing import List

from pydantic import BaseModel

from indexly.models.document import SearchDocument


class DocumentsResponse(BaseModel):
    documents_found: int
    documents: List[SearchDocument]
