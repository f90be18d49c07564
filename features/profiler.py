"""NOCOMMERCE FILE PURPOSE
Purpose: debug toolbar/profiler endpoints (route table introspection).
Hot path: no.
Feature flags: none; always reachable, the feature gate skips these route names.
Failure mode: unknown token returns an empty profile.
"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Request

router = APIRouter(tags=["profiler"])


def _route_table(request: Request) -> list[dict[str, Any]]:
    table = getattr(request.app.state, "route_table", None)
    if table is None:
        return []
    return [
        {"name": name, "path": route.path, "methods": list(route.methods), "suppressed": route.suppressed}
        for name, route in table
    ]


@router.get("/_wdt/{token}", name="_wdt")
async def toolbar(token: str) -> dict[str, Any]:
    return {"token": token}


@router.get("/_profiler/search", name="_profiler_search")
async def profiler_search() -> dict[str, Any]:
    return {"results": []}


@router.get("/_profiler/search/results", name="_profiler_search_results")
async def profiler_search_results() -> dict[str, Any]:
    return {"results": []}


@router.get("/_profiler/{token}", name="_profiler")
async def profiler(token: str, request: Request) -> dict[str, Any]:
    return {"token": token, "routes": _route_table(request)}
