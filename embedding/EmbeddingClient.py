# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-10-18
# Description: EmbeddingClient
# -----------------------------------------------------------------------------

from typing import Protocol, runtime_checkable

import numpy as np


@runtime_checkable
class EmbeddingClient(Protocol):
    def embed(self, text: str) -> np.ndarray:
        ...

    def test_connection(self) -> bool:
        ...
