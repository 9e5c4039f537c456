# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-10-18
# Description: conftest.py
# -----------------------------------------------------------------------------

import os
import re
import sys
import uuid
import zlib
from pathlib import Path
from typing import Dict, List, Optional

import numpy as np
import pytest

# add project root to sys.path
ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT))

os.environ.setdefault("ANONYMIZED_TELEMETRY", "False")

from config.Config import Config  # noqa: E402
from utility.errors import TransportError  # noqa: E402
from vectorstore.ChromaQuoteVectorStore import ChromaQuoteVectorStore  # noqa: E402


class FakeEmbedder:
    """
    Deterministic bag-of-words embedder: identical texts map to identical
    unit vectors, texts sharing words land close together.
    """

    def __init__(self, dim: int = 32, fail_on: Optional[str] = None, dims: Optional[Dict[str, int]] = None):
        self.dim = dim
        self.fail_on = fail_on
        self.dims = dims or {}
        self.calls: List[str] = []

    def _token_vector(self, token: str, dim: int) -> np.ndarray:
        rng = np.random.default_rng(zlib.crc32(token.encode("utf-8")))
        return rng.normal(size=dim)

    def embed(self, text: str) -> np.ndarray:
        self.calls.append(text)
        if self.fail_on is not None and text == self.fail_on:
            raise TransportError(f"simulated failure for {text!r}")
        dim = self.dims.get(text, self.dim)
        vec = np.zeros(dim)
        for token in re.findall(r"\w+", text.lower()):
            vec += self._token_vector(token, dim)
        norm = np.linalg.norm(vec)
        if norm == 0:
            vec[0] = 1.0
            norm = 1.0
        return (vec / norm).astype(np.float32)

    def test_connection(self) -> bool:
        return True


@pytest.fixture
def fake_embedder() -> FakeEmbedder:
    return FakeEmbedder()


@pytest.fixture(scope="session")
def chroma_client():
    import chromadb
    from chromadb.config import Settings

    return chromadb.EphemeralClient(settings=Settings(anonymized_telemetry=False))


@pytest.fixture
def store(chroma_client) -> ChromaQuoteVectorStore:
    return ChromaQuoteVectorStore(client=chroma_client, default_limit=10)


@pytest.fixture
def class_name(store):
    # Ephemeral collections live for the whole session; keep names unique
    name = f"Quote_{uuid.uuid4().hex[:12]}"
    yield name
    store.delete_class(name)


@pytest.fixture
def cfg() -> Config:
    return Config(
        hf_token="hf_test_token",
        hf_model_id="sentence-transformers/all-MiniLM-L6-v2",
        hf_api_base="https://example.test/pipeline/feature-extraction",
    )


@pytest.fixture
def quotes_csv(tmp_path) -> Path:
    path = tmp_path / "quotes.csv"
    path.write_text(
        "character,quote\n"
        "Bodhi,Vaya con Dios.\n"
        "Johnny,I am an F.B.I. agent.\n",
        encoding="utf-8",
    )
    return path
