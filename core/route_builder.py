"""NOCOMMERCE FILE PURPOSE
Purpose: build the application route table, suppressing disabled feature groups on import.
Hot path: no (startup only).
Feature flags: NOCO_ALLOW_CUSTOMERS, NOCO_ALLOW_ZONES, NOCO_ALLOW_COUNTRIES (via NoCommerceConfig).
Failure mode: LoadError propagates unchanged; the app must not start with a partial table.
"""

from __future__ import annotations

from typing import Any

from core.config import NoCommerceConfig
from core.loaders import LoadError, RouteLoader
from core.logging import debug_log
from core.routing import Route, RouteCollection, normalize_prefix
from core.suppression import compute_active_suppression_list, suppress


class RouteCollectionBuilder:
    def __init__(self, config: NoCommerceConfig, loader: RouteLoader | None = None) -> None:
        self.config = config
        self.loader = loader
        self.prefix = ""
        self._entries: list[tuple[str, Any]] = []  # ("route", (name, Route)) | ("builder", builder)
        self._resources: list[Any] = []

    def create_builder(self) -> "RouteCollectionBuilder":
        return RouteCollectionBuilder(self.config, self.loader)

    def add_route(self, route: Route, name: str) -> "RouteCollectionBuilder":
        self._entries.append(("route", (name, route)))
        return self

    def add_resource(self, resource: Any) -> "RouteCollectionBuilder":
        if resource not in self._resources:
            self._resources.append(resource)
        return self

    def mount(self, prefix: str, builder: "RouteCollectionBuilder") -> None:
        builder.prefix = normalize_prefix(prefix)
        self._entries.append(("builder", builder))

    def import_routes(self, resource: Any, prefix: str = "/", type: str | None = None) -> "RouteCollectionBuilder":
        collections = self._load(resource, type)

        builder = self.create_builder()
        suppression_list = compute_active_suppression_list(self.config)

        suppressed = 0
        for collection in collections:
            filtered = suppress(collection, suppression_list)
            for name, route in filtered:
                if route.suppressed:
                    suppressed += 1
                builder.add_route(route, name)
            for route_resource in collection.resources:
                builder.add_resource(route_resource)

        self.mount(prefix, builder)
        debug_log(
            "ROUTES_IMPORTED resource=%s collections=%d suppressed=%d",
            resource,
            len(collections),
            suppressed,
        )
        return builder

    def _load(self, resource: Any, type: str | None = None) -> list[RouteCollection]:
        if self.loader is None:
            raise LoadError(resource, type, "no route loader configured on this builder")

        if self.loader.supports(resource, type):
            collections = self.loader.load(resource, type)
        else:
            loader = self.loader.get_resolver().resolve(resource, type)
            if loader is None:
                raise LoadError(resource, type, "no loader supports this resource")
            collections = loader.load(resource, type)

        return collections if isinstance(collections, list) else [collections]

    def build(self) -> RouteCollection:
        collection = RouteCollection()
        for kind, entry in self._entries:
            if kind == "route":
                name, route = entry
                collection.add(name, route)
            else:
                collection.add_collection(entry.build())
        for resource in self._resources:
            collection.add_resource(resource)
        collection.add_prefix(self.prefix)
        return collection


def build_route_table(
    config: NoCommerceConfig,
    loader: RouteLoader,
    imports: list[tuple[Any, str, str | None]],
) -> RouteCollection:
    root = RouteCollectionBuilder(config, loader)
    for resource, prefix, type in imports:
        root.import_routes(resource, prefix, type)
    return root.build()
