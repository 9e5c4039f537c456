# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-10-18
# Description: QuoteQueryService
# -----------------------------------------------------------------------------
import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Sequence

from embedding.EmbeddingClient import EmbeddingClient
from utility.errors import QueryError
from utility.logging_utils import get_class_logger
from vectorstore.QuoteVectorStore import QuoteVectorStore
from vectorstore.types import QueryResult

QUERY_FIELDS = frozenset({"quote", "character"})


@dataclass
class QuoteQueryService:
    embedder: EmbeddingClient
    store: QuoteVectorStore
    class_name: str
    top_k: Optional[int] = None  # None defers to the store's default limit
    logger: Optional[logging.Logger] = None

    def __post_init__(self) -> None:
        self.logger = self.logger or get_class_logger(self.__class__)

    def query(self, query_text: str, top_k: Optional[int] = None) -> List[QueryResult]:
        """
        Embed the query, run a near-vector search and return results ranked
        by descending certainty. There is no keyword fallback.
        """
        text = (query_text or "").strip()
        if not text:
            raise QueryError("query text must not be empty")

        limit = top_k if top_k is not None else self.top_k
        self.logger.info("Query on '%s': %r (top_k=%s)", self.class_name, text, limit)

        vector = self.embedder.embed(text)
        hits = self.store.nearest_vector_search(
            self.class_name,
            vector,
            QUERY_FIELDS,
            limit=limit,
        )

        results = [
            QueryResult(
                quote_text=hit.properties.get("quote") or "",
                certainty=hit.certainty,
                distance=hit.distance,
                character=hit.properties.get("character"),
            )
            for hit in hits
        ]
        results.sort(key=lambda r: r.certainty, reverse=True)
        return results

    @staticmethod
    def to_hits(results: Sequence[QueryResult]) -> List[Dict[str, Any]]:
        """
        Flatten results into plain dicts for the API layer, keeping rank order.
        """
        return [
            {
                "rank": i,
                "quote": r.quote_text,
                "character": r.character,
                "certainty": r.certainty,
                "distance": r.distance,
            }
            for i, r in enumerate(results, start=1)
        ]
