"""NOCOMMERCE FILE PURPOSE
Purpose: firewall map; resolves the security context a request path belongs to.
Hot path: yes (regex match per gated request; first match wins).
Feature flags: none.
Failure mode: no matching firewall => None (callers treat as context "").
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Any, Iterable


@dataclass(frozen=True)
class FirewallConfig:
    name: str
    pattern: str
    context: str | None = None
    _regex: re.Pattern[str] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "_regex", re.compile(self.pattern))

    def matches(self, path: str) -> bool:
        return self._regex.match(path) is not None

    def get_name(self) -> str:
        return self.name

    def get_context(self) -> str | None:
        return self.context


DEFAULT_FIREWALLS: tuple[FirewallConfig, ...] = (
    FirewallConfig(name="dev", pattern=r"^/(_(profiler|wdt)|css|images|js)/"),
    FirewallConfig(name="new_api_admin_user", pattern=r"^/api/v2/admin", context="admin"),
    FirewallConfig(name="new_api_shop_user", pattern=r"^/api/v2/shop", context="shop"),
    FirewallConfig(name="admin", pattern=r"^/admin", context="admin"),
    FirewallConfig(name="shop", pattern=r"^/(?!admin|api/.*|api$|media/.*)", context="shop"),
)


class FirewallMap:
    def __init__(self, configs: Iterable[FirewallConfig] = DEFAULT_FIREWALLS) -> None:
        self.configs = tuple(configs)

    def get_firewall_config(self, request: Any) -> FirewallConfig | None:
        path = request if isinstance(request, str) else request.url.path
        for config in self.configs:
            if config.matches(path):
                return config
        return None


def firewall_context_name(firewall_map: FirewallMap, request: Any) -> str:
    config = firewall_map.get_firewall_config(request)
    if config is None:
        return ""
    context = config.get_context()
    return context if context is not None else config.get_name()
