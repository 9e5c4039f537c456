# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-10-18
# Description: errors.py
# -----------------------------------------------------------------------------
"""
Exception taxonomy for the quote search pipeline.

Nothing in the core recovers from these locally; they surface to the CLI
or the API layer, which decide how to report them.
"""
from typing import Any, Dict, List, Optional


class QuoteSearchError(Exception):
    """Base exception for all pipeline errors."""
    pass


class EmbeddingError(QuoteSearchError):
    """Base for failures talking to the feature-extraction service."""
    pass


class TransportError(EmbeddingError):
    """
    Network-level failure: unreachable host, refused connection, timeout,
    or a non-success HTTP status that is not an auth failure.
    """

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code

    @property
    def retryable(self) -> bool:
        # No status means the request never completed
        if self.status_code is None:
            return True
        return self.status_code == 429 or self.status_code >= 500


class AuthError(EmbeddingError):
    """Credential missing, or rejected by the remote service."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class DecodeError(EmbeddingError):
    """Response body is not a well-formed numeric vector."""
    pass


class StoreConnectionError(TransportError):
    """The vector store could not be reached."""
    pass


class SchemaError(QuoteSearchError):
    """Class creation conflict or invalid class definition."""

    def __init__(self, message: str, class_name: Optional[str] = None):
        super().__init__(message)
        self.class_name = class_name


class ClassAlreadyExistsError(SchemaError):
    """Raised by create_class when the class is already declared."""
    pass


class BatchWriteError(QuoteSearchError):
    """
    Whole-batch rejection by the store, or a partial batch failure promoted
    to an error by BatchWriteResult.raise_for_errors().
    """

    def __init__(self, message: str, errors: Optional[List[Dict[str, Any]]] = None):
        super().__init__(message)
        self.errors = errors or []


class QueryError(QuoteSearchError):
    """Malformed search request or store-side query failure."""
    pass


class SourceFormatError(QuoteSearchError):
    """Malformed tabular input: wrong column count, missing header, unreadable file."""

    def __init__(self, message: str, row: Optional[int] = None):
        super().__init__(message)
        self.row = row


class DimensionMismatchError(QuoteSearchError):
    """Vectors produced for one collection do not share a single length."""

    def __init__(self, message: str, expected: int, actual: int, index: Optional[int] = None):
        super().__init__(message)
        self.expected = expected
        self.actual = actual
        self.index = index
