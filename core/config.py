"""NOCOMMERCE FILE PURPOSE
Purpose: environment configuration helpers and the no-commerce policy object.
Hot path: yes (read-only env lookups; lightweight).
Feature flags: NOCO_DEBUG, NOCO_ALLOW_CUSTOMERS, NOCO_ALLOW_ZONES, NOCO_ALLOW_COUNTRIES.
Failure mode: safe defaults when unset (every optional feature disabled).
"""

from __future__ import annotations

import os
from dataclasses import dataclass


def env_flag(name: str, default: str = "0") -> bool:
    v = (os.getenv(name) or default).strip().lower()
    return v in ("1", "true", "yes", "on")


def env_str(name: str, default: str = "") -> str:
    return (os.getenv(name) or default).strip()


def is_debug() -> bool:
    return env_flag("NOCO_DEBUG", "0")


@dataclass(frozen=True)
class NoCommerceConfig:
    """Which commerce features stay reachable on this installation."""

    allow_customers: bool = False
    allow_zones: bool = False
    allow_countries: bool = False

    def are_customers_allowed(self) -> bool:
        return self.allow_customers

    def are_zones_allowed(self) -> bool:
        return self.allow_zones

    def are_countries_allowed(self) -> bool:
        return self.allow_countries

    @classmethod
    def from_env(cls) -> "NoCommerceConfig":
        return cls(
            allow_customers=env_flag("NOCO_ALLOW_CUSTOMERS", "0"),
            allow_zones=env_flag("NOCO_ALLOW_ZONES", "0"),
            allow_countries=env_flag("NOCO_ALLOW_COUNTRIES", "0"),
        )
