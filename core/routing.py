"""NOCOMMERCE FILE PURPOSE
Purpose: named route collections and their installation as conditional FastAPI routes.
Hot path: yes (ConditionalAPIRoute.matches/handle run for every request during dispatch).
Feature flags: none.
Failure mode: false condition or rejected firewall context => stock 404.
"""

from __future__ import annotations

import functools
import os
from dataclasses import dataclass, field, replace
from typing import Any, Callable, Iterator

from fastapi import FastAPI, HTTPException
from fastapi.routing import APIRoute
from starlette.requests import Request
from starlette.routing import Match
from starlette.types import Receive, Scope, Send

from core.feature_gate import gate_rejects

Condition = Callable[[Scope], bool]


def always(scope: Scope) -> bool:
    return True


def never(scope: Scope) -> bool:
    return False


@dataclass(frozen=True)
class FileResource:
    """A file a route collection was loaded from."""

    path: str

    def is_fresh(self, timestamp: float) -> bool:
        try:
            return os.path.getmtime(self.path) <= timestamp
        except OSError:
            return False

    def __str__(self) -> str:
        return self.path


@dataclass
class Route:
    path: str
    endpoint: Callable[..., Any]
    methods: tuple[str, ...] = ("GET",)
    condition: Condition = always
    options: dict[str, Any] = field(default_factory=dict)

    @property
    def suppressed(self) -> bool:
        return self.condition is never

    def with_condition(self, condition: Condition) -> "Route":
        return replace(self, condition=condition, options=dict(self.options))


class RouteCollection:
    """Ordered name -> Route mapping plus the resources it was built from."""

    def __init__(self) -> None:
        self._routes: dict[str, Route] = {}
        self._resources: list[Any] = []

    def add(self, name: str, route: Route) -> None:
        # re-adding a name moves it to the end
        self._routes.pop(name, None)
        self._routes[name] = route

    def get(self, name: str) -> Route | None:
        return self._routes.get(name)

    def remove(self, name: str) -> None:
        self._routes.pop(name, None)

    def all(self) -> dict[str, Route]:
        return dict(self._routes)

    def names(self) -> list[str]:
        return list(self._routes)

    def __iter__(self) -> Iterator[tuple[str, Route]]:
        return iter(list(self._routes.items()))

    def __len__(self) -> int:
        return len(self._routes)

    def __contains__(self, name: object) -> bool:
        return name in self._routes

    @property
    def resources(self) -> list[Any]:
        return list(self._resources)

    def add_resource(self, resource: Any) -> None:
        if resource not in self._resources:
            self._resources.append(resource)

    def add_collection(self, other: "RouteCollection") -> None:
        for name, route in other:
            self.add(name, route)
        for resource in other.resources:
            self.add_resource(resource)

    def add_prefix(self, prefix: str) -> None:
        prefix = normalize_prefix(prefix)
        if not prefix:
            return
        for name, route in self:
            self._routes[name] = replace(route, path=join_path(prefix, route.path))

    def is_fresh(self, timestamp: float) -> bool:
        return all(r.is_fresh(timestamp) for r in self._resources)


def normalize_prefix(prefix: str) -> str:
    prefix = (prefix or "").strip()
    return "/" + prefix.strip("/") if prefix.strip("/") else ""


def join_path(prefix: str, path: str) -> str:
    prefix = normalize_prefix(prefix)
    path = "/" + (path or "").lstrip("/")
    if prefix and path == "/":
        return prefix
    return prefix + path


class ConditionalAPIRoute(APIRoute):
    def __init__(self, path: str, endpoint: Callable[..., Any], *, condition: Condition = always, **kwargs: Any) -> None:
        super().__init__(path, endpoint, **kwargs)
        self.condition = condition

    @property
    def suppressed(self) -> bool:
        return self.condition is never

    def matches(self, scope: Scope) -> tuple[Match, Scope]:
        if not self.condition(scope):
            return Match.NONE, {}
        return super().matches(scope)

    async def handle(self, scope: Scope, receive: Receive, send: Send) -> None:
        # runs for full and method-mismatch matches, before the body is read
        if gate_rejects(Request(scope, receive)):
            raise HTTPException(status_code=404, detail="Not Found")
        await super().handle(scope, receive, send)


def install_routes(app: FastAPI, collection: RouteCollection) -> None:
    for name, route in collection:
        app.router.add_api_route(
            route.path,
            route.endpoint,
            methods=list(route.methods),
            name=name,
            route_class_override=functools.partial(ConditionalAPIRoute, condition=route.condition),
            **route.options,
        )
