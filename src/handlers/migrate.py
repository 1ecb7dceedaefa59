"""MigrateFunction handler — applies pending Alembic migrations."""

from typing import Any

from core.services.migration import run_migrations


def handler(event: dict[str, Any], context: object) -> dict[str, Any]:
    revision = (event or {}).get("revision", "head")
    return run_migrations(revision)
