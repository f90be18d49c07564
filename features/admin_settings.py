"""NOCOMMERCE FILE PURPOSE
Purpose: admin endpoints to read/update a channel's disabled firewall contexts.
Hot path: no (admin control-plane only).
Feature flags: NOCO_ADMIN_API_KEY (endpoints unauthorized when unset).
Failure mode: auth failures return 401; unknown channel returns 404; bad input returns 400.
"""

from __future__ import annotations

import os
import re
from typing import Any

from fastapi import APIRouter, Header, HTTPException
from pydantic import BaseModel

from core.channel import get_channel_by_code
from core.logging import debug_log
from core.settings import DISABLED_FIREWALL_CONTEXTS, SqliteSettings, disabled_firewall_contexts

router = APIRouter(prefix="/admin/no-commerce", tags=["no-commerce"])

_CONTEXT_RE = re.compile(r"^[A-Za-z0-9_.-]+$")


class DisabledContextsUpdate(BaseModel):
    contexts: list[str]


def _admin_api_key() -> str | None:
    key = os.getenv("NOCO_ADMIN_API_KEY", "").strip()
    return key or None


def _authorized(auth_header: str | None) -> bool:
    configured = _admin_api_key()
    if not configured or not isinstance(auth_header, str):
        return False
    prefix = "Bearer "
    if not auth_header.startswith(prefix):
        return False
    token = auth_header[len(prefix) :].strip()
    return token == configured


def _require_admin_bearer(authorization: str | None) -> None:
    if not _authorized(authorization):
        raise HTTPException(status_code=401, detail="unauthorized")


def _require_channel(code: str) -> Any:
    channel = get_channel_by_code(code)
    if channel is None:
        raise HTTPException(status_code=404, detail="unknown_channel")
    return channel


@router.get("/channels/{code}/disabled-contexts", name="noco_admin_disabled_contexts_show")
async def disabled_contexts_show(code: str, authorization: str | None = Header(default=None)) -> dict[str, Any]:
    _require_admin_bearer(authorization)
    channel = _require_channel(code)
    return {"channel": channel.code, "contexts": disabled_firewall_contexts(SqliteSettings(), channel)}


@router.put("/channels/{code}/disabled-contexts", name="noco_admin_disabled_contexts_update")
async def disabled_contexts_update(
    code: str,
    req: DisabledContextsUpdate,
    authorization: str | None = Header(default=None),
) -> dict[str, Any]:
    _require_admin_bearer(authorization)
    channel = _require_channel(code)

    contexts: list[str] = []
    for raw in req.contexts:
        ctx = raw.strip()
        if not _CONTEXT_RE.fullmatch(ctx):
            raise HTTPException(status_code=400, detail="invalid_context")
        if ctx not in contexts:
            contexts.append(ctx)

    SqliteSettings().set_value(channel, None, DISABLED_FIREWALL_CONTEXTS, contexts)
    debug_log("DISABLED_CONTEXTS_UPDATED channel=%s contexts=%s", channel.code, contexts)
    return {"channel": channel.code, "contexts": contexts}
