"""Run Alembic migrations programmatically — invoked via the MigrateFunction Lambda."""

import io
import json
import logging
import os

import boto3
from alembic.config import Config

from alembic import command

logger = logging.getLogger(__name__)

ALEMBIC_INI = os.environ.get("ALEMBIC_INI", "/var/task/alembic.ini")
ALEMBIC_SCRIPTS = os.environ.get("ALEMBIC_SCRIPTS", "/var/task/alembic")


def _load_credentials_from_secret(secret_arn: str) -> None:
    """Fetch database credentials from Secrets Manager and set env vars."""
    sm = boto3.client("secretsmanager", region_name=os.environ.get("AWS_REGION", "us-east-1"))
    secret = json.loads(sm.get_secret_value(SecretId=secret_arn)["SecretString"])
    os.environ["DB_USER"] = secret.get("username", "space_drivers")
    os.environ["DB_PASSWORD"] = secret.get("password", "")
    os.environ["DB_HOST"] = secret.get("host", os.environ.get("DB_HOST", ""))
    os.environ["DB_PORT"] = str(secret.get("port", 5432))
    os.environ["DB_NAME"] = secret.get("dbname", os.environ.get("DB_NAME", "space_drivers"))


def database_url() -> str:
    return "postgresql+psycopg://{user}:{password}@{host}:{port}/{name}".format(
        user=os.environ.get("DB_USER", "space_drivers"),
        password=os.environ.get("DB_PASSWORD", "localdev"),
        host=os.environ.get("DB_HOST", "localhost"),
        port=os.environ.get("DB_PORT", "5432"),
        name=os.environ.get("DB_NAME", "space_drivers"),
    )


def run_migrations(revision: str = "head") -> dict[str, str]:
    secret_arn = os.environ.get("DB_SECRET_ARN")
    if secret_arn:
        _load_credentials_from_secret(secret_arn)

    cfg = Config(ALEMBIC_INI)
    cfg.set_main_option("script_location", ALEMBIC_SCRIPTS)
    cfg.set_main_option("sqlalchemy.url", database_url().replace("%", "%%"))

    stderr_buf = io.StringIO()
    stream_handler = logging.StreamHandler(stderr_buf)
    alembic_logger = logging.getLogger("alembic")
    alembic_logger.addHandler(stream_handler)

    try:
        command.upgrade(cfg, revision)
        output = stderr_buf.getvalue()
        logger.info("Migration to %s complete: %s", revision, output)
        return {"status": "success", "revision": revision, "output": output}
    except Exception as e:
        logger.error("Migration failed: %s", e)
        raise
    finally:
        alembic_logger.removeHandler(stream_handler)
