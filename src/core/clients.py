"""Lazy-initialized clients and services — reused across warm Lambda invocations."""

from functools import lru_cache

from core.config import get_config
from core.db.postgres import PostgresClient
from core.services.travel import TravelService


@lru_cache(maxsize=1)
def get_postgres_client() -> PostgresClient:
    client = PostgresClient(get_config())
    client.connect()
    return client


@lru_cache(maxsize=1)
def get_travel_service() -> TravelService:
    client = get_postgres_client()
    return TravelService(repository=client, users=client)
