"""NOCOMMERCE FILE PURPOSE
Purpose: channel-scoped key/value settings (JSON values) backed by core.db.
Hot path: yes (one read per gated request).
Feature flags: none.
Failure mode: unset keys resolve to None; malformed input raises ValueError.
"""

from __future__ import annotations

import json
import time
from typing import Any

from core.db import DEFAULT_KEY, get_conn, validate_required

DISABLED_FIREWALL_CONTEXTS = "disabled_firewall_contexts"


def _channel_code(channel: Any) -> str:
    if channel is None:
        return DEFAULT_KEY
    code = getattr(channel, "code", channel)
    validate_required(code, "channel")
    return code


def _scope_key(scope: str | None) -> str:
    return scope or DEFAULT_KEY


def _candidates(channel_code: str, scope: str) -> list[tuple[str, str]]:
    """Most specific first: (channel, scope), (channel, -), (-, scope), (-, -)."""
    out: list[tuple[str, str]] = []
    for c in (channel_code, DEFAULT_KEY):
        for s in (scope, DEFAULT_KEY):
            if (c, s) not in out:
                out.append((c, s))
    return out


def get_current_value(channel: Any, scope: str | None, key: str, db_path: str | None = None) -> Any:
    validate_required(key, "key")
    channel_code = _channel_code(channel)
    scope_key = _scope_key(scope)

    with get_conn(db_path) as conn:
        for c, s in _candidates(channel_code, scope_key):
            row = conn.execute(
                """
                SELECT value_json
                FROM settings
                WHERE channel_code = ? AND scope = ? AND setting_key = ?
                LIMIT 1
                """,
                (c, s, key),
            ).fetchone()
            if row is not None:
                return json.loads(str(row["value_json"]))
    return None


def set_value(channel: Any, scope: str | None, key: str, value: Any, db_path: str | None = None) -> None:
    validate_required(key, "key")
    value_json = json.dumps(value, sort_keys=True, separators=(",", ":"))
    now_ts = int(time.time())

    with get_conn(db_path) as conn:
        conn.execute(
            """
            INSERT INTO settings(channel_code, scope, setting_key, value_json, updated_ts)
            VALUES (?, ?, ?, ?, ?)
            ON CONFLICT(channel_code, scope, setting_key)
            DO UPDATE SET value_json = excluded.value_json, updated_ts = excluded.updated_ts
            """,
            (_channel_code(channel), _scope_key(scope), key, value_json, now_ts),
        )
        conn.commit()


def delete_value(channel: Any, scope: str | None, key: str, db_path: str | None = None) -> bool:
    validate_required(key, "key")
    with get_conn(db_path) as conn:
        cur = conn.execute(
            "DELETE FROM settings WHERE channel_code = ? AND scope = ? AND setting_key = ?",
            (_channel_code(channel), _scope_key(scope), key),
        )
        conn.commit()
        return cur.rowcount > 0


class SqliteSettings:
    """Injectable settings provider; db_path=None follows NOCO_DB_PATH at call time."""

    def __init__(self, db_path: str | None = None) -> None:
        self.db_path = db_path

    def get_current_value(self, channel: Any, scope: str | None, key: str) -> Any:
        return get_current_value(channel, scope, key, db_path=self.db_path)

    def set_value(self, channel: Any, scope: str | None, key: str, value: Any) -> None:
        set_value(channel, scope, key, value, db_path=self.db_path)

    def delete_value(self, channel: Any, scope: str | None, key: str) -> bool:
        return delete_value(channel, scope, key, db_path=self.db_path)


def disabled_firewall_contexts(settings: Any, channel: Any) -> list[str]:
    raw = settings.get_current_value(channel, None, DISABLED_FIREWALL_CONTEXTS)
    if not raw:
        return []
    if isinstance(raw, (list, tuple)):
        return [str(v) for v in raw]
    return [str(raw)]
