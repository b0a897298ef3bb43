import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded

from indexly.log import configure_logging
from indexly.routers.documents import router as documents_router
from indexly.routers.index import limiter, router as index_router

configure_logging()

logger = logging.getLogger(__name__)

app = FastAPI(
    title="Indexly – Search Index Builder API",
    description="Collects site pages into search documents and returns a serialized client-side search index.",
    version="1.0.0",
)

# Rate-limiting state
app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)


@app.exception_handler(Exception)
async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled exception while serving %s %s", request.method, request.url.path)
    return JSONResponse(status_code=500, content={"detail": "An unexpected error occurred."})


app.include_router(index_router)
app.include_router(documents_router)


@app.get("/", summary="Health check")
async def root() -> dict:
    return {"message": "Hello from Indexly"}
