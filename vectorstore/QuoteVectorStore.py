# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-10-18
# Description: QuoteVectorStore
# -----------------------------------------------------------------------------

from typing import AbstractSet, List, Optional, Protocol, Sequence, runtime_checkable

import numpy as np

from vectorstore.types import BatchWriteResult, SearchHit, StoredObject


@runtime_checkable
class QuoteVectorStore(Protocol):
    def test_connection(self) -> bool:
        ...

    def create_class(self, name: str) -> None:
        ...

    def delete_class(self, name: str) -> None:
        ...

    def count(self, class_name: str) -> int:
        ...

    def write_batch(self, objects: Sequence[StoredObject]) -> BatchWriteResult:
        ...

    def nearest_vector_search(
            self,
            class_name: str,
            query_vector: np.ndarray,
            fields: AbstractSet[str],
            limit: Optional[int] = None,
    ) -> List[SearchHit]:
        ...
