# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-10-18
# Description: test_quote_query_service.py
# -----------------------------------------------------------------------------
from unittest.mock import MagicMock

import numpy as np
import pytest

from services.QuoteIngestService import QuoteIngestService
from services.QuoteQueryService import QUERY_FIELDS, QuoteQueryService
from utility.errors import QueryError
from vectorstore.QuoteVectorStore import QuoteVectorStore
from vectorstore.types import QueryResult, SearchHit


@pytest.fixture
def loaded_class(quotes_csv, fake_embedder, store, class_name):
    QuoteIngestService(embedder=fake_embedder, store=store, class_name=class_name).ingest_csv(quotes_csv)
    return class_name


@pytest.mark.parametrize("text", ["", "   ", None])
def test_blank_query_rejected_before_embedding(fake_embedder, text):
    store = MagicMock(spec=QuoteVectorStore)
    service = QuoteQueryService(embedder=fake_embedder, store=store, class_name="Quote")

    with pytest.raises(QueryError):
        service.query(text)

    assert fake_embedder.calls == []
    store.nearest_vector_search.assert_not_called()


def test_exact_quote_ranks_first(fake_embedder, store, loaded_class):
    service = QuoteQueryService(embedder=fake_embedder, store=store, class_name=loaded_class)

    results = service.query("Vaya con Dios.")

    assert [r.character for r in results] == ["Bodhi", "Johnny"]
    assert results[0].quote_text == "Vaya con Dios."
    assert results[0].certainty > results[1].certainty
    assert results[0].certainty == pytest.approx(1.0, abs=1e-4)


def test_top_k_limits_results(fake_embedder, store, loaded_class):
    service = QuoteQueryService(embedder=fake_embedder, store=store, class_name=loaded_class, top_k=1)

    assert len(service.query("Vaya con Dios.")) == 1
    # per-call value overrides the service default
    assert len(service.query("Vaya con Dios.", top_k=2)) == 2


def test_query_unknown_class_raises(fake_embedder, store, class_name):
    service = QuoteQueryService(embedder=fake_embedder, store=store, class_name=class_name)

    with pytest.raises(QueryError):
        service.query("Vaya con Dios.")


def test_query_passes_fields_and_limit_to_store(fake_embedder):
    store = MagicMock(spec=QuoteVectorStore)
    store.nearest_vector_search.return_value = [
        SearchHit("b", {"quote": "I am an F.B.I. agent.", "character": "Johnny"}, certainty=0.6, distance=0.8),
        SearchHit("a", {"quote": "Vaya con Dios.", "character": "Bodhi"}, certainty=0.9, distance=0.2),
    ]
    service = QuoteQueryService(embedder=fake_embedder, store=store, class_name="Quote", top_k=5)

    results = service.query("  surf  ")

    args, kwargs = store.nearest_vector_search.call_args
    assert args[0] == "Quote"
    assert isinstance(args[1], np.ndarray)
    assert args[2] == QUERY_FIELDS
    assert kwargs["limit"] == 5
    assert fake_embedder.calls == ["surf"]
    assert [r.certainty for r in results] == [0.9, 0.6]


def test_to_hits_numbers_ranks():
    hits = QuoteQueryService.to_hits([
        QueryResult("Vaya con Dios.", 0.97, 0.06, character="Bodhi"),
        QueryResult("I am an F.B.I. agent.", 0.55, 0.9, character="Johnny"),
    ])

    assert hits[0] == {
        "rank": 1,
        "quote": "Vaya con Dios.",
        "character": "Bodhi",
        "certainty": 0.97,
        "distance": 0.06,
    }
    assert hits[1]["rank"] == 2
