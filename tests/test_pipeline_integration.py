# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-10-18
# Description: test_pipeline_integration.py
# -----------------------------------------------------------------------------
import logging
import os

import pytest

from config.Config import Config
from embedding.HFEmbeddingClient import HFEmbeddingClient
from services.QuoteIngestService import QuoteIngestService
from services.QuoteQueryService import QuoteQueryService

logger = logging.getLogger(__name__)

pytestmark = [
    pytest.mark.integration,
    pytest.mark.skipif(not os.getenv("HF_TOKEN"), reason="HF_TOKEN not set"),
]


@pytest.fixture
def hf_client():
    client = HFEmbeddingClient(Config.from_env(), max_retries=2)
    yield client
    client.close()


def test_live_embedding_has_stable_dimension(hf_client):
    a = hf_client.embed("Vaya con Dios.")
    b = hf_client.embed("I am an F.B.I. agent.")

    assert a.shape == b.shape
    assert a.shape[0] > 0


def test_load_then_query_round_trip(hf_client, store, class_name, quotes_csv):
    ingest = QuoteIngestService(embedder=hf_client, store=store, class_name=class_name)
    result = ingest.ingest_csv(quotes_csv)
    assert result.ok

    results = QuoteQueryService(embedder=hf_client, store=store, class_name=class_name).query("Vaya con Dios.")
    for r in results:
        logger.info("%s: %s (certainty=%.4f)", r.character, r.quote_text, r.certainty)

    assert results[0].character == "Bodhi"
    assert results[0].certainty > 0.9
    assert results[0].certainty > results[1].certainty
