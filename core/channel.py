"""NOCOMMERCE FILE PURPOSE
Purpose: sales-channel registry and request -> channel resolution.
Hot path: yes (one indexed lookup per gated request).
Feature flags: NOCO_DEFAULT_CHANNEL.
Failure mode: ChannelNotFoundError when no channel applies (CLI, unknown host).
"""

from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Any

from core.config import env_str
from core.db import get_conn, validate_required


class ChannelNotFoundError(LookupError):
    pass


@dataclass(frozen=True)
class Channel:
    code: str
    hostname: str | None = None


def _row_to_channel(row: Any) -> Channel:
    return Channel(code=str(row["code"]), hostname=row["hostname"])


def register_channel(code: str, hostname: str | None = None, db_path: str | None = None) -> Channel:
    validate_required(code, "code")
    host = hostname.strip().lower() if hostname else None
    with get_conn(db_path) as conn:
        conn.execute(
            """
            INSERT INTO channels(code, hostname, created_ts) VALUES (?, ?, ?)
            ON CONFLICT(code) DO UPDATE SET hostname = excluded.hostname
            """,
            (code, host, int(time.time())),
        )
        conn.commit()
    return Channel(code=code, hostname=host)


def get_channel_by_code(code: str, db_path: str | None = None) -> Channel | None:
    with get_conn(db_path) as conn:
        row = conn.execute("SELECT code, hostname FROM channels WHERE code = ?", (code,)).fetchone()
    return _row_to_channel(row) if row is not None else None


def get_channel_by_hostname(hostname: str, db_path: str | None = None) -> Channel | None:
    with get_conn(db_path) as conn:
        row = conn.execute(
            "SELECT code, hostname FROM channels WHERE hostname = ? ORDER BY code LIMIT 1",
            (hostname.strip().lower(),),
        ).fetchone()
    return _row_to_channel(row) if row is not None else None


def list_channels(db_path: str | None = None) -> list[Channel]:
    with get_conn(db_path) as conn:
        rows = conn.execute("SELECT code, hostname FROM channels ORDER BY code").fetchall()
    return [_row_to_channel(r) for r in rows]


class HostnameChannelContext:
    """Resolves the channel from the request host, then NOCO_DEFAULT_CHANNEL."""

    def __init__(self, db_path: str | None = None) -> None:
        self.db_path = db_path

    def get_channel(self, request: Any = None) -> Channel:
        if request is not None:
            host = request.url.hostname or ""
            if host:
                channel = get_channel_by_hostname(host, db_path=self.db_path)
                if channel is not None:
                    return channel

        fallback = env_str("NOCO_DEFAULT_CHANNEL")
        if fallback:
            channel = get_channel_by_code(fallback, db_path=self.db_path)
            if channel is not None:
                return channel

        raise ChannelNotFoundError("channel not found")
