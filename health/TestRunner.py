# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-10-18
# Description: TestRunner
# -----------------------------------------------------------------------------

from __future__ import annotations

import logging
from typing import Dict, Optional

from embedding.EmbeddingClient import EmbeddingClient
from utility.logging_utils import get_class_logger
from vectorstore.QuoteVectorStore import QuoteVectorStore


class TestRunner:
    """
    Orchestrates the smoke tests and reports a consolidated result.

    Tests included:
      - embedding_health (feature-extraction round trip)
      - store_health     (vector store heartbeat)
      - class_health     (target class present), optional
    """

    __test__ = False  # not a pytest test class

    def __init__(
        self,
        embedder: EmbeddingClient,
        store: QuoteVectorStore,
        class_name: str,
        logger: Optional[logging.Logger] = None,
    ):
        self.embedder = embedder
        self.store = store
        self.class_name = class_name
        self.logger = logger or get_class_logger(self.__class__)

    # -------------------------------------------------------------------------
    def run_all(self, check_class: bool = False) -> Dict[str, bool]:
        """
        Run all configured smoke tests.

        :param check_class: If True, also require the target class to hold data.
        :return: Dict mapping test names to True/False.
        """
        self.logger.info("Starting smoke test suite (check_class=%s)", check_class)

        results: Dict[str, bool] = {}

        try:
            ok_store = self.store.test_connection()
            results["store_health"] = ok_store
            self._log_result("StoreHealth", ok_store)
        except Exception as e:
            self.logger.exception("store.test_connection() raised an exception: %s", e)
            results["store_health"] = False

        try:
            ok_embed = self.embedder.test_connection()
            results["embedding_health"] = ok_embed
            self._log_result("EmbeddingHealth", ok_embed)
        except Exception as e:
            self.logger.exception("embedder.test_connection() raised an exception: %s", e)
            results["embedding_health"] = False

        if check_class:
            try:
                ok_class = self.store.count(self.class_name) > 0
                results["class_health"] = ok_class
                self._log_result(f"ClassHealth({self.class_name})", ok_class)
            except Exception as e:
                self.logger.exception("store.count('%s') raised an exception: %s", self.class_name, e)
                results["class_health"] = False

        self._log_summary(results)
        return results

    # -------------------------------------------------------------------------
    def _log_result(self, name: str, ok: bool) -> None:
        if ok:
            self.logger.info("%s: PASS", name)
        else:
            self.logger.error("%s: FAIL", name)

    def _log_summary(self, results: Dict[str, bool]) -> None:
        total = len(results)
        passed = sum(1 for v in results.values() if v)
        failed = total - passed

        self.logger.info("Smoke test summary: %d total, %d passed, %d failed", total, passed, failed)
