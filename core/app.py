"""NOCOMMERCE FILE PURPOSE
Purpose: create FastAPI app, build the filtered route table, install the feature gate.
Hot path: no (startup only).
Feature flags: NOCO_ALLOW_* (route suppression), disabled_firewall_contexts (request gate).
Failure mode: LoadError from route import aborts startup; suppressed routes answer 404.
"""

from __future__ import annotations

from typing import Any

from fastapi import FastAPI

from core.channel import HostnameChannelContext
from core.config import NoCommerceConfig
from core.feature_gate import RequestFeatureGate
from core.firewall import FirewallMap
from core.loaders import RouteLoader, default_loader
from core.route_builder import build_route_table
from core.routing import ConditionalAPIRoute, install_routes
from core.settings import SqliteSettings

# (resource, mount prefix, loader type)
ROUTE_IMPORTS: list[tuple[Any, str, str | None]] = [
    ("features", "/", "package"),
]


def create_app(
    config: NoCommerceConfig | None = None,
    loader: RouteLoader | None = None,
    settings: Any = None,
    channel_context: Any = None,
    firewall_map: FirewallMap | None = None,
) -> FastAPI:
    app = FastAPI()
    app.router.route_class = ConditionalAPIRoute

    @app.get("/", name="noco_root")
    async def root() -> dict[str, bool]:
        return {"ok": True}

    routes = build_route_table(config or NoCommerceConfig.from_env(), loader or default_loader(), ROUTE_IMPORTS)
    install_routes(app, routes)

    app.state.route_table = routes
    app.state.feature_gate = RequestFeatureGate(
        firewall_map or FirewallMap(),
        settings if settings is not None else SqliteSettings(),
        channel_context if channel_context is not None else HostnameChannelContext(),
    )
    return app
