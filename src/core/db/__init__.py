"""
Database ORM models and clients for Space Drivers.

Importing this package registers all models on Base.metadata,
which Alembic needs for autogenerate.
"""

from core.db.postgres import PostgresClient
from core.db.repository import RecordNotFoundError, TravelRepository, UserDirectory
from core.db.schemas.base import Base
from core.db.schemas.travel import TravelRow
from core.db.schemas.user import UserRow

__all__ = [
    "Base",
    "PostgresClient",
    "RecordNotFoundError",
    "TravelRepository",
    "TravelRow",
    "UserDirectory",
    "UserRow",
]
