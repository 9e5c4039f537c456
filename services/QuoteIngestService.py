# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-10-18
# Description: QuoteIngestService.py
# -----------------------------------------------------------------------------
from __future__ import annotations

import logging
from concurrent.futures import FIRST_EXCEPTION, ThreadPoolExecutor, wait
from pathlib import Path
from typing import List, Sequence

import numpy as np

from document.QuoteRecord import QuoteRecord
from embedding.EmbeddingClient import EmbeddingClient
from embedding.VectorizedRecord import VectorizedRecord
from ingestion.QuoteCSVSource import QuoteCSVSource
from utility.errors import ClassAlreadyExistsError, DimensionMismatchError
from utility.logging_utils import get_class_logger
from vectorstore.QuoteVectorStore import QuoteVectorStore
from vectorstore.types import BatchWriteResult


class QuoteIngestService:
    """
    Owns the ingest pipeline:
      - ensure the target class exists (an existing class is fine)
      - embed every quote (sequential, or bounded fan-out)
      - check all vectors share one dimension
      - write everything in a single batch

    Nothing is written unless every record embedded successfully.
    """

    def __init__(
        self,
        *,
        embedder: EmbeddingClient,
        store: QuoteVectorStore,
        class_name: str,
        max_workers: int = 1,
        logger: logging.Logger | None = None,
    ) -> None:
        if max_workers < 1:
            raise ValueError(f"max_workers must be >= 1, got {max_workers}")
        self.embedder = embedder
        self.store = store
        self.class_name = class_name
        self.max_workers = max_workers
        self.logger = logger or get_class_logger(self.__class__)

    def ensure_class(self) -> None:
        try:
            self.store.create_class(self.class_name)
        except ClassAlreadyExistsError:
            self.logger.info("Class '%s' already exists; reusing it", self.class_name)

    def ingest_csv(self, path: str | Path) -> BatchWriteResult:
        records = QuoteCSVSource(path).read_records()
        return self.ingest(records)

    def ingest(self, records: Sequence[QuoteRecord]) -> BatchWriteResult:
        records = list(records)
        self.logger.info(
            "Ingesting %d record(s) into class '%s' (max_workers=%d)",
            len(records),
            self.class_name,
            self.max_workers,
        )

        # Schema first so a bad store never costs any embedding calls
        self.ensure_class()

        if not records:
            self.logger.warning("No records to ingest into '%s'", self.class_name)
            return BatchWriteResult(class_name=self.class_name)

        vectorized = self.vectorize(records)
        self._check_dimensions(vectorized)

        objects = [v.to_stored_object(self.class_name) for v in vectorized]
        result = self.store.write_batch(objects)

        for err in result.errors:
            self.logger.warning(
                "Object %d (%s) rejected: %s",
                err.index,
                records[err.index].short_preview(),
                err.message,
            )
        self.logger.info(
            "Ingest complete: %d/%d object(s) written into '%s'",
            result.written,
            result.requested,
            self.class_name,
        )
        return result

    def vectorize(self, records: Sequence[QuoteRecord]) -> List[VectorizedRecord]:
        if self.max_workers == 1 or len(records) == 1:
            vectors = [self._embed_one(r) for r in records]
        else:
            vectors = self._embed_concurrently(records)
        return [VectorizedRecord(record=r, vector=v) for r, v in zip(records, vectors)]

    def _embed_one(self, record: QuoteRecord) -> np.ndarray:
        self.logger.debug("Embedding %s", record.short_preview())
        return self.embedder.embed(record.quote)

    def _embed_concurrently(self, records: Sequence[QuoteRecord]) -> List[np.ndarray]:
        workers = min(self.max_workers, len(records))
        with ThreadPoolExecutor(max_workers=workers, thread_name_prefix="embed") as pool:
            futures = [pool.submit(self._embed_one, r) for r in records]
            done, pending = wait(futures, return_when=FIRST_EXCEPTION)

            failed = next((f for f in futures if f in done and f.exception() is not None), None)
            if failed is not None:
                for f in pending:
                    f.cancel()
                self.logger.error(
                    "Embedding failed; cancelled %d pending request(s): %s",
                    len(pending),
                    failed.exception(),
                )
                raise failed.exception()

            return [f.result() for f in futures]

    def _check_dimensions(self, vectorized: Sequence[VectorizedRecord]) -> None:
        expected = vectorized[0].dimension
        for i, v in enumerate(vectorized):
            if v.dimension != expected:
                raise DimensionMismatchError(
                    f"Record {i} ({v.record.short_preview()}) embedded to length {v.dimension}, "
                    f"expected {expected}",
                    expected=expected,
                    actual=v.dimension,
                    index=i,
                )
