# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-10-18
# Description: health.py
# -----------------------------------------------------------------------------
from typing import Dict, Literal

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    status: Literal["ok"] = "ok"
    service: str = "quote-vector-search"
    class_name: str


class CheckSummary(BaseModel):
    total: int
    passed: int
    failed: int


class DeepHealthResponse(BaseModel):
    status: Literal["ok", "error"]
    class_name: str
    # store_health, embedding_health and optionally class_health
    checks: Dict[str, bool] = Field(default_factory=dict)
    summary: CheckSummary
