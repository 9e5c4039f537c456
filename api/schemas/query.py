# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-10-18
# Description: query.py
# -----------------------------------------------------------------------------
from typing import List, Optional

from pydantic import Field, BaseModel

class QueryRequest(BaseModel):
    query: str = Field(..., min_length=1)
    top_k: Optional[int] = Field(None, ge=1, le=100)

class QueryHit(BaseModel):
    rank: int
    quote: str
    character: Optional[str] = None
    certainty: float
    distance: float

class QueryResponse(BaseModel):
    query: str
    class_name: str
    results: List[QueryHit]
