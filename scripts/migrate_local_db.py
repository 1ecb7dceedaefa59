#!/usr/bin/env python3
"""Apply the Alembic migrations to the local PostgreSQL database.

Creates the users and travels tables configured by the DB_* environment
variables (defaults match docker-compose). Optionally seeds an admin and a
driver so travels can be assigned during manual testing.

Usage:
    python scripts/migrate_local_db.py [--seed]
"""

import os
import sys
from pathlib import Path

import psycopg

ROOT = Path(__file__).parent.parent

# Add src to path for core imports
sys.path.insert(0, str(ROOT / "src"))
os.environ.setdefault("ALEMBIC_INI", str(ROOT / "alembic.ini"))
os.environ.setdefault("ALEMBIC_SCRIPTS", str(ROOT / "alembic"))

from core.config import get_config
from core.services.migration import run_migrations

SEED_USERS = [
    ("admin@spacedrivers.local", "admin"),
    ("driver@spacedrivers.local", "driver"),
]


def seed_users():
    config = get_config()
    with psycopg.connect(
        host=config.db_host,
        port=config.db_port,
        dbname=config.db_name,
        user=config.db_user,
        password=config.db_password,
    ) as conn:
        with conn.cursor() as cur:
            for email, role in SEED_USERS:
                # Login is out of scope here; "!" is never a valid password hash.
                cur.execute(
                    "INSERT INTO users (email, password, role) VALUES (%s, '!', %s) "
                    "ON CONFLICT (email) DO NOTHING RETURNING id",
                    (email, role),
                )
                row = cur.fetchone()
                if row:
                    print(f"✓ Created {role} {email} with id {row[0]}")
                else:
                    print(f"✓ {email} already exists")


def main():
    config = get_config()
    print(f"Migrating {config.db_name} at {config.db_host}:{config.db_port}...")

    result = run_migrations()
    print(result["output"] or "✓ Already at head")

    if "--seed" in sys.argv:
        seed_users()

    print()
    print("✅ Local database ready")


if __name__ == "__main__":
    main()
