from __future__ import annotations

from types import SimpleNamespace

from starlette.requests import Request

from core.channel import Channel, ChannelNotFoundError
from core.feature_gate import PROFILER_ROUTES, Decision, RequestFeatureGate
from core.firewall import FirewallConfig, FirewallMap, firewall_context_name


class _Settings:
    def __init__(self, values: dict[str, object]) -> None:
        self.values = values
        self.calls: list[tuple[object, object, str]] = []

    def get_current_value(self, channel, scope, key):
        self.calls.append((channel, scope, key))
        return self.values.get(channel.code)


class _Channels:
    def __init__(self, channel: Channel | None) -> None:
        self.channel = channel

    def get_channel(self, request=None) -> Channel:
        if self.channel is None:
            raise ChannelNotFoundError("channel not found")
        return self.channel


def _request(path: str, route_name: str | None = None, **extra) -> Request:
    scope = {
        "type": "http",
        "method": "GET",
        "path": path,
        "root_path": "",
        "scheme": "http",
        "query_string": b"",
        "headers": [(b"host", b"shop.test")],
        "server": ("shop.test", 80),
    }
    if route_name is not None:
        scope["route"] = SimpleNamespace(name=route_name)
    scope.update(extra)
    return Request(scope)


def _gate(disabled: object, channel: Channel | None = Channel("default")) -> RequestFeatureGate:
    return RequestFeatureGate(FirewallMap(), _Settings({"default": disabled}), _Channels(channel))


def test_disabled_shop_context_rejects_as_not_found() -> None:
    gate = _gate(["shop"])
    assert gate.evaluate(_request("/pages/about", "noco_shop_page_show")) is Decision.REJECT_NOT_FOUND


def test_other_contexts_are_allowed() -> None:
    gate = _gate(["shop"])
    assert gate.evaluate(_request("/admin/channels", "sylius_admin_channel_index")) is Decision.ALLOW


def test_profiler_routes_always_allowed() -> None:
    gate = _gate(["shop", "admin", ""])
    for name in PROFILER_ROUTES:
        assert gate.evaluate(_request("/_profiler", name)) is Decision.ALLOW


def test_no_channel_fails_open() -> None:
    gate = _gate(["shop"], channel=None)
    assert gate.evaluate(_request("/pages/about", "noco_shop_page_show")) is Decision.ALLOW


def test_sub_request_is_not_checked() -> None:
    settings = _Settings({"default": ["shop"]})
    gate = RequestFeatureGate(FirewallMap(), settings, _Channels(Channel("default")))
    assert gate.evaluate(_request("/pages/about", "noco_shop_page_show", sub_request=True)) is Decision.ALLOW
    assert settings.calls == []


def test_unset_or_scalar_setting() -> None:
    assert _gate(None).evaluate(_request("/pages/about")) is Decision.ALLOW
    assert _gate([]).evaluate(_request("/pages/about")) is Decision.ALLOW
    assert _gate("shop").evaluate(_request("/pages/about")) is Decision.REJECT_NOT_FOUND


def test_settings_are_read_with_disabled_contexts_key() -> None:
    settings = _Settings({"default": []})
    gate = RequestFeatureGate(FirewallMap(), settings, _Channels(Channel("default")))
    gate.evaluate(_request("/pages/about"))
    assert settings.calls == [(Channel("default"), None, "disabled_firewall_contexts")]


def test_context_match_is_exact() -> None:
    gate = _gate(["Shop", "sho"])
    assert gate.evaluate(_request("/pages/about")) is Decision.ALLOW


def test_unmatched_path_has_empty_context() -> None:
    firewall_map = FirewallMap([FirewallConfig(name="admin", pattern=r"^/admin", context="admin")])
    assert firewall_context_name(firewall_map, _request("/pages/about")) == ""

    gate = RequestFeatureGate(firewall_map, _Settings({"default": [""]}), _Channels(Channel("default")))
    assert gate.evaluate(_request("/pages/about")) is Decision.REJECT_NOT_FOUND


def test_context_label_preferred_over_firewall_name() -> None:
    firewall_map = FirewallMap(
        [
            FirewallConfig(name="new_api_shop_user", pattern=r"^/api/v2/shop", context="shop"),
            FirewallConfig(name="main", pattern=r"^/"),
        ]
    )
    assert firewall_context_name(firewall_map, _request("/api/v2/shop/products")) == "shop"
    assert firewall_context_name(firewall_map, _request("/contact")) == "main"


def test_default_firewalls() -> None:
    fw = FirewallMap()
    assert firewall_context_name(fw, "/admin/zones") == "admin"
    assert firewall_context_name(fw, "/api/v2/admin/orders") == "admin"
    assert firewall_context_name(fw, "/api/v2/shop/orders") == "shop"
    assert firewall_context_name(fw, "/_profiler/abc") == "dev"
    assert firewall_context_name(fw, "/") == "shop"
    assert firewall_context_name(fw, "/api/legacy") == ""


def test_empty_context_label_is_kept() -> None:
    firewall_map = FirewallMap([FirewallConfig(name="main", pattern=r"^/", context="")])
    assert firewall_context_name(firewall_map, "/pages/about") == ""

    gate = RequestFeatureGate(firewall_map, _Settings({"default": ["main"]}), _Channels(Channel("default")))
    assert gate.evaluate(_request("/pages/about")) is Decision.ALLOW
