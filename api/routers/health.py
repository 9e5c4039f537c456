# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-10-18
# Description: health.py
# -----------------------------------------------------------------------------
import logging
from fastapi import APIRouter, Depends, Query

import settings
from api.schemas.health import HealthResponse, DeepHealthResponse
from api.dependencies import get_health_service
from services.QuoteHealthService import QuoteHealthService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/health", tags=["health"])


@router.get("/", response_model=HealthResponse)
async def health_check():
    # liveness only; does not build the container or need credentials
    return HealthResponse(class_name=settings.VECTOR_CLASS_NAME)


@router.get("/deep", response_model=DeepHealthResponse)
def deep_health_check(
    svc: QuoteHealthService = Depends(get_health_service),
    check_class: bool = Query(False, description="Also require the quote class to hold data"),
) -> DeepHealthResponse:
    logger.info("GET /health/deep called (check_class=%s)", check_class)
    result = svc.deep_health(check_class=check_class)
    logger.info("GET /health/deep completed with status=%s", result.status)
    return result
