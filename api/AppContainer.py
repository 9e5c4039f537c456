# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-10-18
# Description: AppContainer.py
# -----------------------------------------------------------------------------
from typing import Optional

import settings
from config.Config import Config
from embedding.HFEmbeddingClient import HFEmbeddingClient
from health.TestRunner import TestRunner
from services.QuoteHealthService import QuoteHealthService
from services.QuoteIngestService import QuoteIngestService
from services.QuoteQueryService import QuoteQueryService
from utility.logging_utils import get_class_logger
from vectorstore.ChromaQuoteVectorStore import ChromaQuoteVectorStore


class AppContainer:
    """
    Owns heavy object instantiation and application wiring.
    Shared by the CLI and, as a singleton, by the FastAPI dependencies.
    """

    def __init__(
        self,
        cfg: Optional[Config] = None,
        *,
        class_name: Optional[str] = None,
        max_workers: Optional[int] = None,
        top_k: Optional[int] = None,
    ) -> None:
        self.logger = get_class_logger(self.__class__)

        # Configuration
        self.cfg = cfg or Config.from_env()
        self.class_name = class_name or settings.VECTOR_CLASS_NAME
        self.logger.info("Configuration: %s", self.cfg.summary())

        # Core infrastructure
        self.embedder = HFEmbeddingClient(
            self.cfg,
            use_cache=settings.EMBED_USE_CACHE,
            wait_for_model=settings.EMBED_WAIT_FOR_MODEL,
            timeout=settings.EMBED_TIMEOUT_SECONDS,
            max_retries=settings.EMBED_MAX_RETRIES,
        )
        self.store = ChromaQuoteVectorStore.from_config(
            self.cfg,
            default_limit=settings.STORE_DEFAULT_LIMIT,
        )

        self.ingest_service = QuoteIngestService(
            embedder=self.embedder,
            store=self.store,
            class_name=self.class_name,
            max_workers=max_workers or settings.INGEST_MAX_WORKERS,
        )

        self.query_service = QuoteQueryService(
            embedder=self.embedder,
            store=self.store,
            class_name=self.class_name,
            top_k=top_k if top_k is not None else settings.QUERY_TOP_K,
        )

        # Smoke tests / health
        self.test_runner = TestRunner(
            embedder=self.embedder,
            store=self.store,
            class_name=self.class_name,
        )
        self.health_service = QuoteHealthService(test_runner=self.test_runner)
