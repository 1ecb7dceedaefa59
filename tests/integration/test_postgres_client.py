"""Integration tests for PostgresClient and the travels schema constraints."""

import psycopg.errors
import pytest

from core.config import get_config
from core.db import PostgresClient, RecordNotFoundError
from core.models import Point, Travel, TravelStatus


@pytest.fixture
def client():
    with PostgresClient(get_config()) as c:
        yield c


@pytest.fixture
def created_ids(pg_connection):
    """Collects ids of travels created by a test and deletes them afterwards."""
    ids: list[int] = []
    yield ids
    pg_connection.rollback()
    with pg_connection.cursor() as cur:
        cur.execute("DELETE FROM travels WHERE id = ANY(%s)", (ids,))
    pg_connection.commit()


def _travel(**overrides) -> Travel:
    fields = {
        "status": TravelStatus.PENDING,
        "from_": Point(latitude=-100.121091, longitude=2.19918919),
        "to": Point(latitude=0.1 + 0.2, longitude=-179.99999999999997),
        "user_id": 0,
    }
    fields.update(overrides)
    return Travel(**fields)


# ── Schema constraint tests ───────────────────────────────────────────────────


@pytest.mark.integration
def test_travels_table_columns(pg_connection):
    with pg_connection.cursor() as cur:
        cur.execute("""
            SELECT column_name FROM information_schema.columns
            WHERE table_name = 'travels' ORDER BY ordinal_position
        """)
        columns = [row[0] for row in cur.fetchall()]
    assert set(columns) == {"id", "user_id", "from", "to", "status"}


@pytest.mark.integration
def test_status_check_constraint(pg_connection):
    with pg_connection.cursor() as cur:
        with pytest.raises(psycopg.errors.CheckViolation):
            cur.execute("""INSERT INTO travels (status, "from", "to") VALUES ('cancelled', '1, 2', '3, 4')""")
    pg_connection.rollback()


@pytest.mark.integration
def test_started_travel_requires_user(pg_connection):
    with pg_connection.cursor() as cur:
        with pytest.raises(psycopg.errors.CheckViolation):
            cur.execute("""INSERT INTO travels (status, "from", "to") VALUES ('in_process', '1, 2', '3, 4')""")
    pg_connection.rollback()


@pytest.mark.integration
def test_user_fk_constraint(pg_connection):
    with pg_connection.cursor() as cur:
        with pytest.raises(psycopg.errors.ForeignKeyViolation):
            cur.execute("""INSERT INTO travels ("from", "to", user_id) VALUES ('1, 2', '3, 4', -1)""")
    pg_connection.rollback()


# ── PostgresClient tests ──────────────────────────────────────────────────────


@pytest.mark.integration
def test_health_check(client):
    assert client.health_check() is True


@pytest.mark.integration
def test_health_check_when_disconnected():
    assert PostgresClient(get_config()).health_check() is False


@pytest.mark.integration
def test_save_and_get_unassigned_travel(client, created_ids):
    saved = client.save_travel(_travel())
    created_ids.append(saved.id)

    assert saved.id > 0
    fetched = client.get_travel(saved.id)
    assert fetched == saved
    assert fetched.user_id == 0


@pytest.mark.integration
def test_points_are_stored_exactly(client, created_ids, pg_connection):
    saved = client.save_travel(_travel())
    created_ids.append(saved.id)

    with pg_connection.cursor() as cur:
        cur.execute('SELECT "from" FROM travels WHERE id = %s', (saved.id,))
        assert cur.fetchone()[0] == "-100.121091, 2.19918919"
    assert client.get_travel(saved.id).to == saved.to


@pytest.mark.integration
def test_edit_travel(client, created_ids, pg_driver_id):
    saved = client.save_travel(_travel())
    created_ids.append(saved.id)

    edited = saved.model_copy(update={"user_id": pg_driver_id, "status": TravelStatus.IN_PROCESS})
    client.edit_travel(edited)

    assert client.get_travel(saved.id) == edited


@pytest.mark.integration
def test_get_missing_travel(client):
    with pytest.raises(RecordNotFoundError):
        client.get_travel(2_000_000_000)


@pytest.mark.integration
def test_edit_missing_travel(client):
    with pytest.raises(RecordNotFoundError):
        client.edit_travel(_travel(id=2_000_000_000))


@pytest.mark.integration
def test_user_exists(client, pg_driver_id):
    assert client.user_exists(pg_driver_id) is True
    assert client.user_exists(2_000_000_000) is False
