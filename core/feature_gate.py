"""NOCOMMERCE FILE PURPOSE
Purpose: reject requests addressed to a firewall context the current channel disabled.
Hot path: yes (checked by every ConditionalAPIRoute before body parsing; one settings read per main request).
Feature flags: per-channel setting `disabled_firewall_contexts`.
Failure mode: fail open without a channel (CLI, unknown host); rejects look like a plain 404.
"""

from __future__ import annotations

import enum
from typing import Any

from core.channel import ChannelNotFoundError
from core.firewall import FirewallMap, firewall_context_name
from core.logging import debug_log
from core.settings import disabled_firewall_contexts

PROFILER_ROUTES = ("_wdt", "_profiler", "_profiler_search", "_profiler_search_results")


class Decision(enum.Enum):
    ALLOW = "allow"
    REJECT_NOT_FOUND = "reject_not_found"


def route_name(request: Any) -> str | None:
    route = request.scope.get("route")
    return getattr(route, "name", None)


def is_main_request(request: Any) -> bool:
    scope = request.scope
    return scope.get("type") == "http" and not scope.get("sub_request", False)


class RequestFeatureGate:
    def __init__(self, firewall_map: FirewallMap, settings: Any, channel_context: Any) -> None:
        self.firewall_map = firewall_map
        self.settings = settings
        self.channel_context = channel_context

    def can_check_route(self, request: Any) -> bool:
        # profiler/toolbar routes stay reachable
        return is_main_request(request) and route_name(request) not in PROFILER_ROUTES

    def evaluate(self, request: Any) -> Decision:
        if not self.can_check_route(request):
            return Decision.ALLOW

        try:
            channel = self.channel_context.get_channel(request)
        except ChannelNotFoundError:
            debug_log("FEATURE_GATE_SKIP reason=no_channel path=%s", request.url.path)
            return Decision.ALLOW

        disabled = disabled_firewall_contexts(self.settings, channel)
        if not disabled:
            return Decision.ALLOW

        context = firewall_context_name(self.firewall_map, request)
        if context in disabled:
            debug_log("FEATURE_GATE_REJECT channel=%s context=%s", getattr(channel, "code", channel), context)
            return Decision.REJECT_NOT_FOUND
        return Decision.ALLOW


def gate_rejects(request: Any) -> bool:
    app = request.scope.get("app")
    gate: RequestFeatureGate | None = getattr(getattr(app, "state", None), "feature_gate", None)
    if gate is None:
        return False
    return gate.evaluate(request) is Decision.REJECT_NOT_FOUND
