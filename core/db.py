"""NOCOMMERCE FILE PURPOSE
Purpose: SQLite scaffold for channel-scoped settings and the channel registry.
Hot path: yes (one short-lived connection per gated request; schema DDL only on first use of a file).
Feature flags: none.
Failure mode: deterministic exceptions; caller controls retry/rollback behavior.
"""

from __future__ import annotations

import os
import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator


DEFAULT_DB_PATH = "ops/nocommerce.sqlite3"

# Stored in place of NULL so the unique index also covers default rows.
DEFAULT_KEY = ""

_SCHEMA_READY: set[str] = set()


def _db_path() -> str:
    return os.getenv("NOCO_DB_PATH", DEFAULT_DB_PATH)


def validate_required(value: str, name: str) -> None:
    if not isinstance(value, str) or not value.strip():
        raise ValueError(f"{name} is required")


def init_schema(conn: sqlite3.Connection) -> None:
    conn.execute(
        """
        CREATE TABLE IF NOT EXISTS channels (
            code TEXT PRIMARY KEY,
            hostname TEXT,
            created_ts INTEGER NOT NULL
        )
        """
    )
    conn.execute(
        "CREATE INDEX IF NOT EXISTS idx_channels_hostname ON channels(hostname)"
    )
    conn.execute(
        """
        CREATE TABLE IF NOT EXISTS settings (
            channel_code TEXT NOT NULL,
            scope TEXT NOT NULL,
            setting_key TEXT NOT NULL,
            value_json TEXT NOT NULL,
            updated_ts INTEGER NOT NULL
        )
        """
    )
    conn.execute(
        """
        CREATE UNIQUE INDEX IF NOT EXISTS idx_settings_channel_scope_key
        ON settings(channel_code, scope, setting_key)
        """
    )
    conn.commit()


@contextmanager
def get_conn(db_path: str | None = None) -> Iterator[sqlite3.Connection]:
    """Open, commit-or-rollback, then close. DDL runs once per database file."""
    path = db_path or _db_path()
    needs_schema = path == ":memory:" or path not in _SCHEMA_READY or not Path(path).exists()
    if path != ":memory:":
        Path(path).parent.mkdir(parents=True, exist_ok=True)

    conn = sqlite3.connect(path)
    try:
        conn.row_factory = sqlite3.Row
        if needs_schema:
            init_schema(conn)
            if path != ":memory:":
                _SCHEMA_READY.add(path)
        with conn:
            yield conn
    finally:
        conn.close()
