from __future__ import annotations

import logging

from sqlalchemy import inspect, text
from sqlalchemy.engine import Connection, Engine

from nexjob.auth import hash_password
from nexjob.config import settings
from nexjob.models.user import ROLE_SUPER_ADMIN, ROLE_USER

logger = logging.getLogger(__name__)


def _add_column_if_missing(conn: Connection, table_name: str, column_name: str, column_sql: str) -> None:
    columns = {column["name"] for column in inspect(conn).get_columns(table_name)}
    if column_name in columns:
        return
    conn.execute(text(f"ALTER TABLE {table_name} ADD COLUMN {column_sql}"))
    logger.info("Added column %s.%s", table_name, column_name)


def _ensure_owner(conn: Connection) -> None:
    owner_username = settings.default_owner_username.strip().lower()
    owner_row = conn.execute(
        text("SELECT id, role FROM users WHERE username = :username"),
        {"username": owner_username},
    ).fetchone()
    if owner_row is None:
        conn.execute(
            text(
                "INSERT INTO users (username, password_hash, role, is_active) "
                "VALUES (:username, :password_hash, :role, :is_active)"
            ),
            {
                "username": owner_username,
                "password_hash": hash_password(settings.default_owner_password),
                "role": ROLE_SUPER_ADMIN,
                "is_active": True,
            },
        )
        logger.info("Created super admin account %r", owner_username)
        return
    if owner_row[1] != ROLE_SUPER_ADMIN:
        conn.execute(
            text("UPDATE users SET role = :role WHERE id = :owner_id"),
            {"role": ROLE_SUPER_ADMIN, "owner_id": int(owner_row[0])},
        )


def run_runtime_migrations(engine: Engine) -> None:
    with engine.begin() as conn:
        _add_column_if_missing(conn, "users", "role", f"role VARCHAR(32) NOT NULL DEFAULT '{ROLE_USER}'")
        _add_column_if_missing(conn, "admin_settings", "robots_txt", "robots_txt TEXT")
        _add_column_if_missing(conn, "admin_settings", "last_sitemap_update", "last_sitemap_update DATETIME")
        _ensure_owner(conn)
