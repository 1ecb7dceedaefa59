"""PostgreSQL connection management and travel persistence."""

import json
import logging

import boto3
import psycopg

from core.config import Config
from core.db.repository import RecordNotFoundError, TravelRepository, UserDirectory
from core.errors import SpaceDriversError
from core.models.travel import Point, Travel, TravelStatus

logger = logging.getLogger(__name__)

_SELECT_TRAVEL_SQL = 'SELECT id, status, "from", "to", user_id FROM travels WHERE id = %s'

_INSERT_TRAVEL_SQL = """
    INSERT INTO travels (status, "from", "to", user_id)
    VALUES (%s, %s, %s, %s)
    RETURNING id
"""

_UPDATE_TRAVEL_SQL = """
    UPDATE travels
    SET status = %s, "from" = %s, "to" = %s, user_id = %s
    WHERE id = %s
"""

_USER_EXISTS_SQL = "SELECT 1 FROM users WHERE id = %s"


def _nullable_user(user_id: int) -> int | None:
    return user_id or None


class PostgresClient(TravelRepository, UserDirectory):
    def __init__(self, config: Config) -> None:
        self._config = config
        self._conn: psycopg.Connection | None = None
        self._secret_cache: dict[str, str] | None = None

    def _get_credentials(self) -> dict[str, str]:
        if self._config.db_secret_arn:
            if self._secret_cache is None:
                client = boto3.client("secretsmanager", region_name=self._config.aws_region)
                secret = client.get_secret_value(SecretId=self._config.db_secret_arn)
                self._secret_cache = json.loads(secret["SecretString"])
            return self._secret_cache
        return {
            "host": self._config.db_host,
            "port": str(self._config.db_port),
            "dbname": self._config.db_name,
            "user": self._config.db_user,
            "password": self._config.db_password,
        }

    def connect(self) -> None:
        creds = self._get_credentials()
        self._conn = psycopg.connect(
            host=creds.get("host", self._config.db_host),
            port=int(creds.get("port", self._config.db_port)),
            dbname=creds.get("dbname", self._config.db_name),
            user=creds.get("username", creds.get("user", self._config.db_user)),
            password=creds.get("password", self._config.db_password),
            autocommit=True,
        )

    def disconnect(self) -> None:
        if self._conn and not self._conn.closed:
            self._conn.close()
        self._conn = None

    def _require_connection(self) -> psycopg.Connection:
        """Return the active connection or raise if not connected."""
        if self._conn is None or self._conn.closed:
            raise SpaceDriversError("PostgresClient is not connected. Call connect() first.")
        return self._conn

    def health_check(self) -> bool:
        try:
            conn = self._require_connection()
            with conn.cursor() as cur:
                cur.execute("SELECT 1")
            return True
        except Exception:
            return False

    def get_travel(self, travel_id: int) -> Travel:
        conn = self._require_connection()
        with conn.transaction():
            with conn.cursor() as cur:
                cur.execute(_SELECT_TRAVEL_SQL, (travel_id,))
                row = cur.fetchone()

        if row is None:
            raise RecordNotFoundError("travels", travel_id)

        return Travel(
            id=row[0],
            status=TravelStatus(row[1]),
            from_=Point.from_storage(row[2]),
            to=Point.from_storage(row[3]),
            user_id=row[4],
        )

    def save_travel(self, travel: Travel) -> Travel:
        conn = self._require_connection()
        with conn.transaction():
            with conn.cursor() as cur:
                cur.execute(
                    _INSERT_TRAVEL_SQL,
                    (
                        travel.status.value,
                        travel.from_.to_storage(),
                        travel.to.to_storage(),
                        _nullable_user(travel.user_id),
                    ),
                )
                row = cur.fetchone()

        logger.info("Inserted travel %s", row[0])
        return travel.model_copy(update={"id": row[0]})

    def edit_travel(self, travel: Travel) -> None:
        conn = self._require_connection()
        with conn.transaction():
            with conn.cursor() as cur:
                cur.execute(
                    _UPDATE_TRAVEL_SQL,
                    (
                        travel.status.value,
                        travel.from_.to_storage(),
                        travel.to.to_storage(),
                        _nullable_user(travel.user_id),
                        travel.id,
                    ),
                )
                affected = cur.rowcount

        if affected != 1:
            raise RecordNotFoundError("travels", travel.id)

    def user_exists(self, user_id: int) -> bool:
        conn = self._require_connection()
        with conn.transaction():
            with conn.cursor() as cur:
                cur.execute(_USER_EXISTS_SQL, (user_id,))
                return cur.fetchone() is not None

    def __enter__(self) -> "PostgresClient":
        self.connect()
        return self

    def __exit__(self, *args: object) -> None:
        self.disconnect()
