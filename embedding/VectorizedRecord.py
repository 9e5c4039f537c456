# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-10-18
# Description: VectorizedRecord.py
# -----------------------------------------------------------------------------
import uuid
from dataclasses import dataclass

import numpy as np

from document.QuoteRecord import QuoteRecord
from vectorstore.types import StoredObject


@dataclass
class VectorizedRecord:
    """Embedding vector + the quote record it was computed from."""
    record: QuoteRecord
    vector: np.ndarray

    @property
    def dimension(self) -> int:
        return int(self.vector.shape[0])

    def object_id(self, class_name: str) -> str:
        """
        Stable id derived from class + content, so reloading the same quotes
        upserts in place instead of adding copies.
        """
        key = f"{class_name}/{self.record.character}/{self.record.quote}"
        return uuid.uuid5(uuid.NAMESPACE_URL, key).hex

    def to_stored_object(self, class_name: str) -> StoredObject:
        return StoredObject(
            class_name=class_name,
            properties=self.record.to_properties(),
            vector=self.vector,
            id=self.object_id(class_name),
        )
