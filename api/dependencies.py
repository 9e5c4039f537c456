# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-10-18
# Description: dependencies.py
# -----------------------------------------------------------------------------
from functools import lru_cache

from api.AppContainer import AppContainer
from services.QuoteHealthService import QuoteHealthService
from services.QuoteIngestService import QuoteIngestService
from services.QuoteQueryService import QuoteQueryService


@lru_cache
def get_container() -> AppContainer:
    # built on first request so importing the app needs no credentials
    return AppContainer()

def get_health_service() -> QuoteHealthService:
    return get_container().health_service

def get_ingest_service() -> QuoteIngestService:
    return get_container().ingest_service

def get_query_service() -> QuoteQueryService:
    return get_container().query_service
