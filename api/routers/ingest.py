# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-10-18
# Description: ingest router
# -----------------------------------------------------------------------------
import logging

from fastapi import APIRouter, Depends, HTTPException

from api.dependencies import get_ingest_service
from api.schemas.ingest import IngestRequest, IngestResponse, ObjectErrorModel
from document.QuoteRecord import QuoteRecord
from services.QuoteIngestService import QuoteIngestService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/ingest", tags=["ingest"])


@router.post("", response_model=IngestResponse)
def post_ingest(
    req: IngestRequest,
    svc: QuoteIngestService = Depends(get_ingest_service),
) -> IngestResponse:
    records = [
        QuoteRecord(character=r.character.strip(), quote=r.quote.strip(), row=i)
        for i, r in enumerate(req.records, start=1)
    ]
    blank = [rec.row for rec in records if not rec.quote]
    if blank:
        raise HTTPException(status_code=400, detail=f"records {blank} have an empty quote")
    logger.info("POST /ingest called with %d record(s)", len(records))

    result = svc.ingest(records)

    return IngestResponse(
        class_name=result.class_name,
        requested=result.requested,
        written=result.written,
        errors=[ObjectErrorModel(**e.to_dict()) for e in result.errors],
    )
