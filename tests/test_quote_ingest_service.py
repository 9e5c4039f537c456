# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-10-18
# Description: test_quote_ingest_service.py
# -----------------------------------------------------------------------------
from unittest.mock import MagicMock

import pytest

from conftest import FakeEmbedder
from document.QuoteRecord import QuoteRecord
from services.QuoteIngestService import QuoteIngestService
from utility.errors import (
    ClassAlreadyExistsError,
    DimensionMismatchError,
    SourceFormatError,
    TransportError,
)
from vectorstore.QuoteVectorStore import QuoteVectorStore
from vectorstore.types import BatchWriteResult

RECORDS = [
    QuoteRecord("Bodhi", "Vaya con Dios."),
    QuoteRecord("Johnny", "I am an F.B.I. agent."),
    QuoteRecord("Pappas", "Utah, get me two."),
    QuoteRecord("Bodhi", "It's not tragic to die doing what you love."),
]


def _mock_store() -> MagicMock:
    store = MagicMock(spec=QuoteVectorStore)
    store.write_batch.side_effect = lambda objs: BatchWriteResult(
        class_name=objs[0].class_name,
        requested=len(objs),
        written_ids=[f"id-{i}" for i in range(len(objs))],
    )
    return store


def test_ingest_writes_all_records_in_one_batch(fake_embedder):
    store = _mock_store()
    service = QuoteIngestService(embedder=fake_embedder, store=store, class_name="Quote")

    result = service.ingest(RECORDS)

    store.create_class.assert_called_once_with("Quote")
    store.write_batch.assert_called_once()
    objects = store.write_batch.call_args.args[0]
    assert len(objects) == len(RECORDS)
    assert [o.properties for o in objects] == [r.to_properties() for r in RECORDS]
    assert all(o.class_name == "Quote" for o in objects)
    assert fake_embedder.calls == [r.quote for r in RECORDS]
    assert result.written == len(RECORDS)


def test_existing_class_is_reused(fake_embedder):
    store = _mock_store()
    store.create_class.side_effect = ClassAlreadyExistsError("exists", class_name="Quote")
    service = QuoteIngestService(embedder=fake_embedder, store=store, class_name="Quote")

    result = service.ingest(RECORDS[:1])

    assert result.ok
    store.write_batch.assert_called_once()


def test_embedding_failure_writes_nothing():
    embedder = FakeEmbedder(fail_on=RECORDS[2].quote)
    store = _mock_store()
    service = QuoteIngestService(embedder=embedder, store=store, class_name="Quote")

    with pytest.raises(TransportError):
        service.ingest(RECORDS)

    store.write_batch.assert_not_called()
    # Sequential mode stops at the failing record
    assert embedder.calls == [r.quote for r in RECORDS[:3]]


def test_concurrent_embedding_failure_writes_nothing():
    embedder = FakeEmbedder(fail_on=RECORDS[1].quote)
    store = _mock_store()
    service = QuoteIngestService(embedder=embedder, store=store, class_name="Quote", max_workers=3)

    with pytest.raises(TransportError):
        service.ingest(RECORDS)

    store.write_batch.assert_not_called()


def test_concurrent_embedding_keeps_record_order(fake_embedder):
    store = _mock_store()
    service = QuoteIngestService(embedder=fake_embedder, store=store, class_name="Quote", max_workers=4)

    service.ingest(RECORDS)

    objects = store.write_batch.call_args.args[0]
    assert [o.properties["quote"] for o in objects] == [r.quote for r in RECORDS]
    for obj, record in zip(objects, RECORDS):
        assert obj.vector.tolist() == pytest.approx(FakeEmbedder().embed(record.quote).tolist())


def test_mixed_dimensions_raise_before_write():
    embedder = FakeEmbedder(dim=16, dims={RECORDS[3].quote: 8})
    store = _mock_store()
    service = QuoteIngestService(embedder=embedder, store=store, class_name="Quote")

    with pytest.raises(DimensionMismatchError) as exc_info:
        service.ingest(RECORDS)

    assert exc_info.value.index == 3
    assert exc_info.value.expected == 16
    assert exc_info.value.actual == 8
    store.write_batch.assert_not_called()


def test_empty_input_creates_class_but_writes_nothing(fake_embedder):
    store = _mock_store()
    service = QuoteIngestService(embedder=fake_embedder, store=store, class_name="Quote")

    result = service.ingest([])

    store.create_class.assert_called_once_with("Quote")
    store.write_batch.assert_not_called()
    assert result.written == 0
    assert result.ok


def test_malformed_csv_fails_before_embedding(tmp_path, fake_embedder):
    path = tmp_path / "quotes.csv"
    path.write_text("character,quote\nBodhi,Vaya con Dios.\nJohnny\n", encoding="utf-8")
    store = _mock_store()
    service = QuoteIngestService(embedder=fake_embedder, store=store, class_name="Quote")

    with pytest.raises(SourceFormatError):
        service.ingest_csv(path)

    assert fake_embedder.calls == []
    store.create_class.assert_not_called()
    store.write_batch.assert_not_called()


def test_invalid_worker_count_rejected(fake_embedder):
    with pytest.raises(ValueError):
        QuoteIngestService(embedder=fake_embedder, store=_mock_store(), class_name="Quote", max_workers=0)


def test_ingest_csv_into_chroma(quotes_csv, fake_embedder, store, class_name):
    service = QuoteIngestService(embedder=fake_embedder, store=store, class_name=class_name)

    result = service.ingest_csv(quotes_csv)

    assert result.ok
    assert result.written == 2
    assert store.count(class_name) == 2


def test_reloading_same_csv_does_not_duplicate(quotes_csv, fake_embedder, store, class_name):
    service = QuoteIngestService(embedder=fake_embedder, store=store, class_name=class_name)

    first = service.ingest_csv(quotes_csv)
    second = service.ingest_csv(quotes_csv)

    assert second.ok
    assert sorted(second.written_ids) == sorted(first.written_ids)
    assert store.count(class_name) == 2


def test_object_ids_depend_on_class_and_content(fake_embedder):
    store = _mock_store()
    QuoteIngestService(embedder=fake_embedder, store=store, class_name="Quote").ingest(RECORDS[:2])
    QuoteIngestService(embedder=fake_embedder, store=store, class_name="Quote").ingest(RECORDS[:2])
    QuoteIngestService(embedder=fake_embedder, store=store, class_name="Other").ingest(RECORDS[:2])

    first, again, other = ([o.id for o in call.args[0]] for call in store.write_batch.call_args_list)
    assert first == again
    assert len(set(first)) == 2
    assert not set(first) & set(other)


def test_ingest_failure_leaves_chroma_class_empty(store, class_name):
    embedder = FakeEmbedder(fail_on=RECORDS[1].quote)
    service = QuoteIngestService(embedder=embedder, store=store, class_name=class_name)

    with pytest.raises(TransportError):
        service.ingest(RECORDS)

    assert store.count(class_name) == 0
