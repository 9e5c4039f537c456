# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-10-18
# Description: settings.py
# -----------------------------------------------------------------------------
import os
from typing import Optional

from dotenv import find_dotenv, load_dotenv

# Tunables below are read at import, so .env must be loaded first
load_dotenv(find_dotenv(usecwd=True))


def _env(name: str, default: str = "") -> str:
    """Read env var safely and strip whitespace."""
    return (os.getenv(name) or default).strip()


def _env_int(name: str, default: int) -> int:
    v = _env(name, "")
    if v == "":
        return default
    try:
        return int(v)
    except ValueError as e:
        raise RuntimeError(f"Env var {name} must be an int, got {v!r}") from e


def _env_optional_int(name: str) -> Optional[int]:
    v = _env(name, "")
    if v == "":
        return None
    return _env_int(name, 0)


def _env_float(name: str, default: float) -> float:
    v = _env(name, "")
    if v == "":
        return default
    try:
        return float(v)
    except ValueError as e:
        raise RuntimeError(f"Env var {name} must be a float, got {v!r}") from e


def _env_bool(name: str, default: bool) -> bool:
    v = _env(name, "")
    if v == "":
        return default
    v = v.lower()
    if v in ("1", "true", "t", "yes", "y", "on"):
        return True
    if v in ("0", "false", "f", "no", "n", "off"):
        return False
    raise RuntimeError(f"Env var {name} must be a boolean, got {v!r}")


# -----------------------------------------------------------------------------
# Vector class (Chroma collection name)
# -----------------------------------------------------------------------------
VECTOR_CLASS_NAME = _env("QVS_VECTOR_CLASS", "PointBreakQuote")


# -----------------------------------------------------------------------------
# CLI defaults
# -----------------------------------------------------------------------------
QUOTES_CSV_DEFAULT = _env("QVS_QUOTES_CSV", "quotes.csv")
DEFAULT_QUERY = _env("QVS_DEFAULT_QUERY", "Vaya con Dios.")


# -----------------------------------------------------------------------------
# Embedding request options
# -----------------------------------------------------------------------------
EMBED_USE_CACHE = _env_bool("QVS_EMBED_USE_CACHE", True)
EMBED_WAIT_FOR_MODEL = _env_bool("QVS_EMBED_WAIT_FOR_MODEL", True)
EMBED_TIMEOUT_SECONDS = _env_float("QVS_EMBED_TIMEOUT", 30.0)

# 0 keeps the single-attempt behaviour; >0 retries transport failures only
EMBED_MAX_RETRIES = _env_int("QVS_EMBED_MAX_RETRIES", 0)


# -----------------------------------------------------------------------------
# Ingest / query tuning
# -----------------------------------------------------------------------------
INGEST_MAX_WORKERS = _env_int("QVS_INGEST_MAX_WORKERS", 1)

# Unset means "let the store decide" (STORE_DEFAULT_LIMIT below)
QUERY_TOP_K = _env_optional_int("QVS_QUERY_TOP_K")

STORE_DEFAULT_LIMIT = _env_int("QVS_STORE_DEFAULT_LIMIT", 10)


# -----------------------------------------------------------------------------
# Sanity checks
# -----------------------------------------------------------------------------
if not VECTOR_CLASS_NAME:
    raise RuntimeError("VECTOR_CLASS_NAME resolved to empty value")

if EMBED_MAX_RETRIES < 0:
    raise RuntimeError("QVS_EMBED_MAX_RETRIES must be >= 0")

if INGEST_MAX_WORKERS < 1:
    raise RuntimeError("QVS_INGEST_MAX_WORKERS must be >= 1")

if QUERY_TOP_K is not None and QUERY_TOP_K < 1:
    raise RuntimeError("QVS_QUERY_TOP_K must be >= 1 when set")

if STORE_DEFAULT_LIMIT < 1:
    raise RuntimeError("QVS_STORE_DEFAULT_LIMIT must be >= 1")
