"""NOCOMMERCE FILE PURPOSE
Purpose: route loaders that turn feature modules/packages into RouteCollections.
Hot path: no (startup only).
Feature flags: none.
Failure mode: unsupported or unloadable resources raise LoadError (startup must stop).
"""

from __future__ import annotations

import importlib
import pkgutil
from typing import Any, Iterable

from fastapi.routing import APIRoute

from core.logging import debug_log
from core.routing import FileResource, Route, RouteCollection

# APIRoute attributes carried over to the installed route.
_ROUTE_OPTIONS = (
    "response_model",
    "status_code",
    "tags",
    "dependencies",
    "summary",
    "description",
    "response_description",
    "responses",
    "deprecated",
    "include_in_schema",
    "response_class",
    "openapi_extra",
)


class LoadError(Exception):
    def __init__(self, resource: Any, type: str | None = None, reason: str = "") -> None:
        self.resource = resource
        self.type = type
        msg = f"cannot load resource {resource!r}"
        if type:
            msg += f" (type {type!r})"
        if reason:
            msg += f": {reason}"
        super().__init__(msg)


class RouteLoader:
    def __init__(self) -> None:
        self._resolver: LoaderResolver | None = None

    def supports(self, resource: Any, type: str | None = None) -> bool:
        raise NotImplementedError

    def load(self, resource: Any, type: str | None = None) -> RouteCollection | list[RouteCollection]:
        raise NotImplementedError

    def get_resolver(self) -> "LoaderResolver":
        if self._resolver is None:
            self._resolver = LoaderResolver([self])
        return self._resolver

    def set_resolver(self, resolver: "LoaderResolver") -> None:
        self._resolver = resolver


class LoaderResolver:
    def __init__(self, loaders: Iterable[RouteLoader] = ()) -> None:
        self.loaders: list[RouteLoader] = []
        for loader in loaders:
            self.add_loader(loader)

    def add_loader(self, loader: RouteLoader) -> None:
        self.loaders.append(loader)
        loader.set_resolver(self)

    def resolve(self, resource: Any, type: str | None = None) -> RouteLoader | None:
        for loader in self.loaders:
            if loader.supports(resource, type):
                return loader
        return None


def collection_from_router(router: Any, source_file: str | None = None) -> RouteCollection:
    collection = RouteCollection()
    for api_route in getattr(router, "routes", []):
        if not isinstance(api_route, APIRoute):
            continue
        options = {k: getattr(api_route, k) for k in _ROUTE_OPTIONS if hasattr(api_route, k)}
        collection.add(
            api_route.name,
            Route(
                path=api_route.path,
                endpoint=api_route.endpoint,
                methods=tuple(sorted(api_route.methods or ("GET",))),
                options=options,
            ),
        )
    if source_file:
        collection.add_resource(FileResource(source_file))
    return collection


def _is_module_name(resource: Any) -> bool:
    return isinstance(resource, str) and bool(resource) and all(
        part.isidentifier() for part in resource.split(".")
    )


class ModuleRouteLoader(RouteLoader):
    """Loads the `router` attribute of a dotted module name."""

    def supports(self, resource: Any, type: str | None = None) -> bool:
        return type in (None, "module") and _is_module_name(resource)

    def load(self, resource: Any, type: str | None = None) -> RouteCollection:
        try:
            module = importlib.import_module(resource)
        except ImportError as e:
            raise LoadError(resource, type, f"{e.__class__.__name__}: {e}") from e
        router = getattr(module, "router", None)
        if router is None:
            raise LoadError(resource, type, "module has no router")
        return collection_from_router(router, getattr(module, "__file__", None))


class PackageRouteLoader(RouteLoader):
    """Loads one collection per public submodule of a package that defines a router."""

    def supports(self, resource: Any, type: str | None = None) -> bool:
        return type == "package" and _is_module_name(resource)

    def load(self, resource: Any, type: str | None = None) -> list[RouteCollection]:
        try:
            package = importlib.import_module(resource)
        except ImportError as e:
            raise LoadError(resource, type, f"{e.__class__.__name__}: {e}") from e
        if not hasattr(package, "__path__"):
            raise LoadError(resource, type, "not a package")

        collections: list[RouteCollection] = []
        for mod in sorted(pkgutil.iter_modules(package.__path__), key=lambda m: m.name):
            if mod.ispkg or mod.name.startswith("_"):
                continue
            module_name = f"{resource}.{mod.name}"
            try:
                m = importlib.import_module(module_name)
            except ImportError as e:
                raise LoadError(resource, type, f"{module_name}: {e.__class__.__name__}: {e}") from e
            router = getattr(m, "router", None)
            if router is None:
                debug_log("ROUTE_MODULE_SKIPPED module=%s reason=no_router", mod.name)
                continue
            collections.append(collection_from_router(router, getattr(m, "__file__", None)))
        return collections


class DelegatingLoader(RouteLoader):
    def __init__(self, resolver: LoaderResolver) -> None:
        super().__init__()
        self._resolver = resolver

    def supports(self, resource: Any, type: str | None = None) -> bool:
        return self.get_resolver().resolve(resource, type) is not None

    def load(self, resource: Any, type: str | None = None) -> RouteCollection | list[RouteCollection]:
        loader = self.get_resolver().resolve(resource, type)
        if loader is None:
            raise LoadError(resource, type, "no loader supports this resource")
        return loader.load(resource, type)


def default_loader() -> DelegatingLoader:
    return DelegatingLoader(LoaderResolver([ModuleRouteLoader(), PackageRouteLoader()]))
