"""Index endpoint: collects search documents and returns the serialized index."""

import logging

from fastapi import APIRouter, HTTPException, Request
from slowapi import Limiter
from slowapi.util import get_remote_address

from indexly.models.index_request import IndexRequest
from indexly.models.index_response import IndexResponse
from indexly.services.collector import DEFAULT_FIELDS, build_index
from indexly.services.indexer import IndexerError

logger = logging.getLogger(__name__)

limiter = Limiter(key_func=get_remote_address)
router = APIRouter()


@router.post(
    "/index",
    response_model=IndexResponse,
    summary="Build a client-side search index",
    description=(
        "Turns the ordered page collection into one search document per page "
        "(sequential id, title, tag-stripped content, extras) and returns the "
        "serialized lunr index over `title`, `content` and `permalink`."
    ),
)
@limiter.limit("20/minute")
async def index_pages(request: Request, body: IndexRequest) -> IndexResponse:
    logger.info(
        "Index request received",
        extra={"pages": len(body.pages), "include_permalink": body.include_permalink},
    )

    try:
        artifact = build_index(body.pages, include_permalink=body.include_permalink)
    except IndexerError as exc:
        logger.error("Indexer rejected %d pages: %s", len(body.pages), exc)
        raise HTTPException(status_code=502, detail=str(exc))

    return IndexResponse(
        documents_indexed=len(body.pages),
        fields=list(DEFAULT_FIELDS),
        index=artifact,
    )
