"""Shared test fixtures for Space Drivers."""

import sys
from pathlib import Path

import pytest
from dotenv import load_dotenv

# Load .env file for test configuration
load_dotenv()

# Add src directory to Python path for imports
src_path = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_path))


@pytest.fixture
def make_travel():
    """Factory for stored travels, coordinates given as (lat, lng) tuples."""
    from core.models import Point, Travel

    def _make(travel_id=1, from_=(1, 2), to=(-1, -2), status="pending", user_id=0):
        return Travel(
            id=travel_id,
            status=status,
            from_=Point(latitude=from_[0], longitude=from_[1]),
            to=Point(latitude=to[0], longitude=to[1]),
            user_id=user_id,
        )

    return _make


@pytest.fixture
def make_request():
    from core.models import Point, TravelRequest

    def _make(from_=(1, 2), to=(-1, -2), status="pending", user_id=0):
        return TravelRequest(
            status=status,
            from_=Point(latitude=from_[0], longitude=from_[1]),
            to=Point(latitude=to[0], longitude=to[1]),
            user_id=user_id,
        )

    return _make


@pytest.fixture
def admin():
    from core.auth import Identity, Role

    return Identity(user_id=1, role=Role.ADMIN)


@pytest.fixture
def driver():
    from core.auth import Identity, Role

    return Identity(user_id=1, role=Role.DRIVER)


# PostgreSQL fixtures
@pytest.fixture
def pg_connection():
    """Provide a PostgreSQL connection for integration tests."""
    import psycopg
    from core.config import get_config

    config = get_config()
    conn_str = (
        f"host={config.db_host} port={config.db_port} "
        f"dbname={config.db_name} user={config.db_user} "
        f"password={config.db_password}"
    )

    conn = psycopg.connect(conn_str)
    yield conn

    # Rollback any uncommitted changes
    conn.rollback()
    conn.close()


@pytest.fixture
def pg_driver_id(pg_connection):
    """Insert a driver row and remove it, with its travels, after the test."""
    import uuid

    with pg_connection.cursor() as cur:
        cur.execute(
            "INSERT INTO users (email, password, role) VALUES (%s, '!', 'driver') RETURNING id",
            (f"{uuid.uuid4().hex[:12]}@test.local",),
        )
        user_id = cur.fetchone()[0]
    pg_connection.commit()

    yield user_id

    pg_connection.rollback()
    with pg_connection.cursor() as cur:
        cur.execute("DELETE FROM travels WHERE user_id = %s", (user_id,))
        cur.execute("DELETE FROM users WHERE id = %s", (user_id,))
    pg_connection.commit()
