# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-10-18
# Description: main.py
# -----------------------------------------------------------------------------
import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from api.routers import health, ingest, query
from utility.errors import (
    BatchWriteError,
    EmbeddingError,
    QueryError,
    QuoteSearchError,
    SourceFormatError,
)

logging.basicConfig(level=logging.INFO, format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",)
logger = logging.getLogger(__name__)

app = FastAPI(title="quote-vector-search API")
app.include_router(health.router)
app.include_router(query.router)
app.include_router(ingest.router)


def _status_for(exc: QuoteSearchError) -> int:
    if isinstance(exc, (QueryError, SourceFormatError)):
        return 400
    # includes StoreConnectionError (a TransportError)
    if isinstance(exc, EmbeddingError):
        return 502
    # SchemaError, BatchWriteError, DimensionMismatchError
    return 500


@app.exception_handler(QuoteSearchError)
async def quote_search_error_handler(request: Request, exc: QuoteSearchError) -> JSONResponse:
    status = _status_for(exc)
    logger.error("%s %s failed (%d): %s", request.method, request.url.path, status, exc)

    body = {"detail": str(exc), "error": type(exc).__name__}
    if isinstance(exc, BatchWriteError):
        body["errors"] = exc.errors
    return JSONResponse(status_code=status, content=body)
