# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-10-18
# Description: HFEmbeddingClient
# -----------------------------------------------------------------------------
import numbers
import time
from typing import Any, Dict, Optional

import numpy as np
import requests

from config.Config import Config
from utility.errors import AuthError, DecodeError, TransportError
from utility.logging_utils import get_class_logger


class HFEmbeddingClient:
    """
    Calls the Hugging Face feature-extraction pipeline for one text at a time.

    The endpoint is derived from the Config value passed in, so clients for
    different models can live side by side.
    """

    def __init__(
            self,
            cfg: Config,
            *,
            use_cache: bool = True,
            wait_for_model: bool = True,
            timeout: float = 30.0,
            max_retries: int = 0,
            session: Optional[requests.Session] = None,
            logger=None,
    ):
        self.cfg = cfg
        self.use_cache = use_cache
        self.wait_for_model = wait_for_model
        self.timeout = timeout
        self.max_retries = max_retries
        self.session = session or requests.Session()
        self.logger = logger or get_class_logger(self.__class__)

        self.model_id = cfg.hf_model_id
        self.endpoint = cfg.embedding_endpoint
        self.dimension: Optional[int] = None
        self.logger.info(
            "HF embedding client initialized for '%s' (use_cache=%s, wait_for_model=%s, retries=%d)",
            self.model_id,
            self.use_cache,
            self.wait_for_model,
            self.max_retries,
        )

    def _payload(self, text: str) -> Dict[str, Any]:
        return {
            "inputs": text,
            "options": {
                "use_cache": self.use_cache,
                "wait_for_model": self.wait_for_model,
            },
        }

    def _headers(self) -> Dict[str, str]:
        token = (self.cfg.hf_token or "").strip()
        if not token:
            raise AuthError("HF_TOKEN is not set; cannot call the feature-extraction service")
        return {
            "Authorization": f"Bearer {token}",
            "Content-Type": "application/json",
        }

    def _post(self, text: str) -> np.ndarray:
        headers = self._headers()
        try:
            resp = self.session.post(
                self.endpoint,
                json=self._payload(text),
                headers=headers,
                timeout=self.timeout,
            )
        except requests.exceptions.RequestException as e:
            raise TransportError(f"Error making request to {self.endpoint}: {e}") from e

        self.logger.info("Hugging Face feature extraction response status: %s", resp.status_code)

        if resp.status_code in (401, 403):
            raise AuthError(
                f"Feature-extraction service rejected the credential (HTTP {resp.status_code})",
                status_code=resp.status_code,
            )
        if not 200 <= resp.status_code < 300:
            raise TransportError(
                f"Feature-extraction service returned HTTP {resp.status_code}: {resp.text[:200]}",
                status_code=resp.status_code,
            )

        try:
            data = resp.json()
        except ValueError as e:
            raise DecodeError(f"Error decoding response body: {e}") from e

        return self._to_vector(data)

    @staticmethod
    def _to_vector(data: Any) -> np.ndarray:
        if not isinstance(data, list) or not data:
            raise DecodeError(f"Expected a non-empty JSON array of numbers, got {type(data).__name__}")
        for v in data:
            # bool is a numbers.Number subclass; reject it explicitly
            if isinstance(v, bool) or not isinstance(v, numbers.Real):
                raise DecodeError(f"Embedding contains a non-numeric element: {v!r}")
        return np.asarray(data, dtype=np.float32)

    def embed(self, text: str) -> np.ndarray:
        """
        Embed a single text. Errors propagate unchanged unless max_retries > 0,
        in which case retryable transport failures are retried with backoff.
        """
        delay = 0.8
        attempts = self.max_retries + 1
        for attempt in range(1, attempts + 1):
            try:
                vec = self._post(text)
                self.dimension = int(vec.shape[0])
                return vec
            except TransportError as e:
                if not e.retryable or attempt == attempts:
                    raise
                self.logger.warning(f"Embedding request failed (attempt {attempt}/{attempts}): {e}")
                time.sleep(delay)
                delay *= 1.7  # backoff

        # Unreachable and include for type checkers
        return np.empty((0,), dtype=np.float32)

    def test_connection(self) -> bool:
        """
        Health check: embed a fixed probe string and confirm a vector comes back.
        """
        try:
            vec = self.embed("feature extraction healthcheck")
            self.logger.info("Embedding healthcheck returned dimension %d", vec.shape[0])
            return vec.shape[0] > 0
        except Exception as e:
            self.logger.error("Embedding healthcheck failed: %s", e)
            return False

    def close(self) -> None:
        self.session.close()
