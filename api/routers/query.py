# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-10-18
# Description: query router
# -----------------------------------------------------------------------------
import logging

from fastapi import APIRouter, Depends, HTTPException

from api.dependencies import get_query_service
from api.schemas.query import QueryRequest, QueryResponse, QueryHit
from services.QuoteQueryService import QuoteQueryService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/query", tags=["query"])


@router.post("", response_model=QueryResponse)
def post_query(
    req: QueryRequest,
    svc: QuoteQueryService = Depends(get_query_service),
) -> QueryResponse:
    query_text = (req.query or "").strip()
    if not query_text:
        raise HTTPException(status_code=400, detail="query must not be empty")

    # pipeline errors are mapped to responses by the handlers in api.main
    results = svc.query(query_text, top_k=req.top_k)
    hits = [QueryHit(**h) for h in svc.to_hits(results)]

    return QueryResponse(
        query=query_text,
        class_name=svc.class_name,
        results=hits,
    )
