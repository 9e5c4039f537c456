# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-10-18
# Description: types.py
# -----------------------------------------------------------------------------
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

import numpy as np

from utility.errors import BatchWriteError


@dataclass
class StoredObject:
    class_name: str
    properties: Dict[str, str]
    vector: np.ndarray
    id: Optional[str] = None


@dataclass(frozen=True)
class ObjectError:
    index: int  # position in the submitted batch
    object_id: Optional[str]
    message: str

    def to_dict(self) -> Dict[str, Any]:
        return {"index": self.index, "object_id": self.object_id, "message": self.message}


@dataclass
class BatchWriteResult:
    """Per-object outcome of a single write_batch call."""
    class_name: str
    requested: int = 0
    written_ids: List[str] = field(default_factory=list)
    errors: List[ObjectError] = field(default_factory=list)

    @property
    def written(self) -> int:
        return len(self.written_ids)

    @property
    def ok(self) -> bool:
        return not self.errors

    def raise_for_errors(self) -> None:
        if self.errors:
            raise BatchWriteError(
                f"{len(self.errors)}/{self.requested} object(s) rejected by class '{self.class_name}'",
                errors=[e.to_dict() for e in self.errors],
            )


@dataclass(frozen=True)
class SearchHit:
    object_id: str
    properties: Dict[str, Any]
    certainty: float
    distance: float


@dataclass(frozen=True)
class QueryResult:
    quote_text: str
    certainty: float
    distance: float
    character: Optional[str] = None
