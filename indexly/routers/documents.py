import logging

from fastapi import APIRouter, Request
from slowapi import Limiter
from slowapi.util import get_remote_address

from indexly.models.documents_response import DocumentsResponse
from indexly.models.index_request import IndexRequest
from indexly.services.collector import build_documents

logger = logging.getLogger(__name__)

limiter = Limiter(key_func=get_remote_address)
router = APIRouter()


@router.post(
    "/documents",
    response_model=DocumentsResponse,
    summary="Preview the search documents for a page collection",
)
@limiter.limit("30/minute")
async def collect_documents(request: Request, body: IndexRequest) -> DocumentsResponse:
    """Return the documents ``/index`` would index, without building the index."""
    logger.info("Documents request received", extra={"pages": len(body.pages)})
    documents = build_documents(body.pages, include_permalink=body.include_permalink)
    return DocumentsResponse(documents_found=len(documents), documents=documents)
