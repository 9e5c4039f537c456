# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-10-18
# Description: ChromaQuoteVectorStore
# -----------------------------------------------------------------------------
import uuid
from dataclasses import dataclass
from typing import AbstractSet, Any, Dict, List, Optional, Sequence, Tuple

import chromadb
import numpy as np
from chromadb import ClientAPI

from config.Config import Config
from utility.errors import (
    BatchWriteError,
    ClassAlreadyExistsError,
    QueryError,
    SchemaError,
    StoreConnectionError,
)
from utility.logging_utils import get_class_logger
from vectorstore.QuoteVectorStore import QuoteVectorStore
from vectorstore.types import BatchWriteResult, ObjectError, SearchHit, StoredObject


def _is_connection_error(e: Exception) -> bool:
    # chromadb surfaces transport failures as httpx/OSError or a plain
    # ValueError/Exception whose message mentions the connection
    if isinstance(e, (ConnectionError, OSError)):
        return True
    name = type(e).__name__.lower()
    msg = str(e).lower()
    return "connect" in name or "could not connect" in msg or "connection refused" in msg


def _is_missing_collection(e: Exception) -> bool:
    msg = str(e).lower()
    return "does not exist" in msg or "not found" in msg or type(e).__name__ == "NotFoundError"


@dataclass
class ChromaQuoteVectorStore(QuoteVectorStore):
    """
    Chroma-backed implementation of the class / batch / near-vector contract.
    One class maps to one Chroma collection in cosine space.
    """
    client: ClientAPI
    default_limit: int = 10
    logger: Any = None

    def __post_init__(self) -> None:
        self.logger = self.logger or get_class_logger(self.__class__)

    @classmethod
    def from_config(cls, cfg: Config, **kwargs) -> "ChromaQuoteVectorStore":
        return cls(client=cls.build_client(cfg), **kwargs)

    @staticmethod
    def build_client(cfg: Config) -> ClientAPI:
        logger = get_class_logger(ChromaQuoteVectorStore)
        try:
            if cfg.vector_store_host:
                logger.info(
                    "Initialising Chroma HTTP client (host=%s, port=%d)",
                    cfg.vector_store_host,
                    cfg.vector_store_port,
                )
                headers = {"X-Chroma-Token": cfg.vector_store_api_key} if cfg.vector_store_api_key else None
                return chromadb.HttpClient(
                    host=cfg.vector_store_host,
                    port=cfg.vector_store_port,
                    headers=headers,
                )

            logger.info("Initialising embedded Chroma client (path=%s)", cfg.vector_store_path)
            return chromadb.PersistentClient(path=cfg.vector_store_path)
        except Exception as e:
            logger.error("Failed to initialise Chroma client: %s", e)
            raise StoreConnectionError(f"Could not initialise vector store client: {e}") from e

    def test_connection(self) -> bool:
        """
        Simple health check: can we talk to Chroma?
        """
        try:
            self.client.heartbeat()
            return True
        except Exception as e:
            self.logger.error("Chroma connection failed: %s", e)
            return False

    # -------------------------------------------------------------------------
    # Schema
    # -------------------------------------------------------------------------
    def create_class(self, name: str) -> None:
        self.logger.info("Creating class '%s'", name)
        try:
            self.client.create_collection(name=name, metadata={"hnsw:space": "cosine"})
        except Exception as e:
            if "already exists" in str(e).lower():
                raise ClassAlreadyExistsError(f"Class '{name}' already exists", class_name=name) from e
            if _is_connection_error(e):
                raise StoreConnectionError(f"Vector store unreachable while creating '{name}': {e}") from e
            raise SchemaError(f"Could not create class '{name}': {e}", class_name=name) from e
        self.logger.info("Class '%s' created", name)

    def delete_class(self, name: str) -> None:
        """
        Delete a class and all of its objects. Missing classes are ignored.
        """
        try:
            self.client.delete_collection(name)
            self.logger.info("Deleted class '%s'", name)
        except Exception as e:
            if _is_connection_error(e):
                raise StoreConnectionError(f"Vector store unreachable while deleting '{name}': {e}") from e
            if _is_missing_collection(e):
                self.logger.info("Class '%s' not found, nothing to delete", name)
                return
            raise SchemaError(f"Could not delete class '{name}': {e}", class_name=name) from e

    def _get_collection(self, name: str):
        try:
            return self.client.get_collection(name=name)
        except Exception as e:
            if _is_connection_error(e):
                raise StoreConnectionError(f"Vector store unreachable: {e}") from e
            if _is_missing_collection(e):
                return None
            raise

    def count(self, class_name: str) -> int:
        collection = self._get_collection(class_name)
        return collection.count() if collection is not None else 0

    # -------------------------------------------------------------------------
    # Writes
    # -------------------------------------------------------------------------
    def _stored_dimension(self, collection) -> Optional[int]:
        if collection.count() == 0:
            return None
        res = collection.get(limit=1, include=["embeddings"])
        embeddings = res.get("embeddings")
        if embeddings is None or len(embeddings) == 0:
            return None
        return len(embeddings[0])

    @staticmethod
    def _validate_object(obj: StoredObject, class_name: str, dimension: Optional[int]) -> Optional[str]:
        if obj.class_name != class_name:
            return f"object targets class '{obj.class_name}' but batch targets '{class_name}'"
        if obj.vector is None or len(obj.vector) == 0:
            return "vector is empty"
        if dimension is not None and len(obj.vector) != dimension:
            return f"vector length {len(obj.vector)} does not match class dimension {dimension}"
        if not obj.properties:
            return "properties must not be empty"
        bad = [k for k, v in obj.properties.items() if not isinstance(v, str)]
        if bad:
            return f"properties must be strings: {bad}"
        return None

    def write_batch(self, objects: Sequence[StoredObject]) -> BatchWriteResult:
        if not objects:
            raise BatchWriteError("write_batch called with no objects")

        class_name = objects[0].class_name
        result = BatchWriteResult(class_name=class_name, requested=len(objects))

        collection = self._get_collection(class_name)
        if collection is None:
            for i, obj in enumerate(objects):
                result.errors.append(ObjectError(i, obj.id, f"class '{class_name}' is not declared"))
            self.logger.warning("Batch rejected: class '%s' is not declared", class_name)
            return result

        dimension = self._stored_dimension(collection)

        accepted: List[Tuple[int, str, StoredObject]] = []
        seen_ids = set()
        for i, obj in enumerate(objects):
            error = self._validate_object(obj, class_name, dimension)
            object_id = obj.id or uuid.uuid4().hex
            if error is None and object_id in seen_ids:
                error = f"duplicate object id '{object_id}' in batch"
            if error is not None:
                result.errors.append(ObjectError(i, obj.id, error))
                continue
            # First valid object fixes the dimension for an empty class
            if dimension is None:
                dimension = len(obj.vector)
            seen_ids.add(object_id)
            accepted.append((i, object_id, obj))

        if accepted:
            ids = [object_id for _, object_id, _ in accepted]
            embeddings = [np.asarray(obj.vector, dtype=np.float32).tolist() for _, _, obj in accepted]
            metadatas = [dict(obj.properties) for _, _, obj in accepted]
            try:
                collection.upsert(ids=ids, embeddings=embeddings, metadatas=metadatas)
            except Exception as e:
                self.logger.error("Batch write to '%s' failed: %s", class_name, e)
                if _is_connection_error(e):
                    raise StoreConnectionError(f"Vector store unreachable during batch write: {e}") from e
                raise BatchWriteError(
                    f"Vector store rejected the batch for '{class_name}': {e}",
                    errors=[e_.to_dict() for e_ in result.errors],
                ) from e
            result.written_ids.extend(ids)

        self.logger.info(
            "Batch write to class '%s': %d/%d written, %d rejected",
            class_name,
            result.written,
            result.requested,
            len(result.errors),
        )
        return result

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------
    @staticmethod
    def certainty_from_distance(distance: float) -> float:
        # Cosine distance lies in [0, 2]
        return max(0.0, min(1.0, 1.0 - distance / 2.0))

    def nearest_vector_search(
            self,
            class_name: str,
            query_vector: np.ndarray,
            fields: AbstractSet[str],
            limit: Optional[int] = None,
    ) -> List[SearchHit]:
        if not fields or any(not isinstance(f, str) or not f.strip() for f in fields):
            raise QueryError(f"fields must be a non-empty set of property names, got {fields!r}")
        if limit is not None and limit < 1:
            raise QueryError(f"limit must be >= 1, got {limit}")
        if query_vector is None or len(query_vector) == 0:
            raise QueryError("query vector is empty")

        collection = self._get_collection(class_name)
        if collection is None:
            raise QueryError(f"Class '{class_name}' does not exist")

        total = collection.count()
        if total == 0:
            self.logger.info("Class '%s' is empty; nothing to search", class_name)
            return []

        n_results = min(limit or self.default_limit, total)
        self.logger.info(
            "Near-vector search on '%s' (n_results=%d, fields=%s)",
            class_name,
            n_results,
            sorted(fields),
        )

        try:
            res: Dict[str, Any] = collection.query(
                query_embeddings=[np.asarray(query_vector, dtype=np.float32).tolist()],
                n_results=n_results,
                include=["metadatas", "distances"],
            )
        except Exception as e:
            self.logger.error("Error during near-vector search: %s", e, exc_info=True)
            if _is_connection_error(e):
                raise StoreConnectionError(f"Vector store unreachable during query: {e}") from e
            raise QueryError(f"Near-vector search on '{class_name}' failed: {e}") from e

        ids = (res.get("ids") or [[]])[0]
        metas = (res.get("metadatas") or [[]])[0]
        dists = (res.get("distances") or [[]])[0]

        known = set().union(*(md.keys() for md in metas if md))
        unknown = set(fields) - known
        if unknown:
            raise QueryError(f"Class '{class_name}' has no properties named {sorted(unknown)}")

        hits: List[SearchHit] = []
        for object_id, md, dist in zip(ids, metas, dists):
            md = md or {}
            distance = float(dist)
            hits.append(SearchHit(
                object_id=object_id,
                properties={f: md.get(f) for f in fields},
                certainty=self.certainty_from_distance(distance),
                distance=distance,
            ))

        hits.sort(key=lambda h: h.certainty, reverse=True)
        self.logger.info("Near-vector search complete: returned %d results", len(hits))
        return hits
