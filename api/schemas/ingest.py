# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-10-18
# Description: ingest.py
# -----------------------------------------------------------------------------
from typing import List, Optional

from pydantic import BaseModel, Field


class QuoteIn(BaseModel):
    # may be blank, as in the CSV source; the quote may not
    character: str = ""
    quote: str = Field(..., min_length=1)


class IngestRequest(BaseModel):
    records: List[QuoteIn] = Field(..., min_length=1)


class ObjectErrorModel(BaseModel):
    index: int
    object_id: Optional[str] = None
    message: str


class IngestResponse(BaseModel):
    class_name: str
    requested: int
    written: int
    errors: List[ObjectErrorModel]
