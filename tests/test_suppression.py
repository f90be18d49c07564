from __future__ import annotations

import itertools

from core.config import NoCommerceConfig
from core.routing import FileResource, Route, RouteCollection, always, never
from core.suppression import (
    FEATURE_GROUPS,
    compute_active_suppression_list,
    exempted_groups,
    is_suppressed_name,
    matching_prefixes,
    suppress,
)


def _endpoint() -> dict:
    return {}


def _collection(*names: str) -> RouteCollection:
    c = RouteCollection()
    for n in names:
        c.add(n, Route(path=f"/{n}", endpoint=_endpoint))
    return c


def _all_configs() -> list[NoCommerceConfig]:
    return [
        NoCommerceConfig(allow_customers=a, allow_zones=b, allow_countries=c)
        for a, b, c in itertools.product((False, True), repeat=3)
    ]


def test_default_config_suppresses_every_group() -> None:
    out = compute_active_suppression_list(NoCommerceConfig())
    expected = {p for prefixes in FEATURE_GROUPS.values() for p in prefixes}
    assert out == expected


def test_group_exemptions_follow_config_for_every_state() -> None:
    for config in _all_configs():
        out = compute_active_suppression_list(config)
        customer = set(FEATURE_GROUPS["customer"])
        zone = set(FEATURE_GROUPS["zone"])
        country = set(FEATURE_GROUPS["country"])

        assert customer.isdisjoint(out) is config.allow_customers
        assert zone.isdisjoint(out) is config.allow_zones
        assert country.isdisjoint(out) is (config.allow_zones or config.allow_countries)
        # other groups are never exempted
        assert set(FEATURE_GROUPS["checkout"]) <= out
        assert set(FEATURE_GROUPS["payment"]) <= out


def test_zones_allowed_alone_exempts_countries() -> None:
    config = NoCommerceConfig(allow_zones=True, allow_countries=False)
    assert exempted_groups(config) == frozenset({"zone", "country"})
    out = compute_active_suppression_list(config)
    assert "sylius_admin_country" not in out
    assert "sylius_admin_zone" not in out


def test_countries_allowed_keeps_zones_suppressed() -> None:
    config = NoCommerceConfig(allow_countries=True)
    out = compute_active_suppression_list(config)
    assert "sylius_admin_country" not in out
    assert "sylius_admin_zone" in out


def test_compute_is_deterministic_and_does_not_mutate_table() -> None:
    before = {k: tuple(v) for k, v in FEATURE_GROUPS.items()}
    config = NoCommerceConfig(allow_customers=True)
    assert compute_active_suppression_list(config) == compute_active_suppression_list(config)
    assert compute_active_suppression_list(NoCommerceConfig()) >= set(FEATURE_GROUPS["customer"])
    assert {k: tuple(v) for k, v in FEATURE_GROUPS.items()} == before


def test_suppress_checkout_example() -> None:
    routes = _collection("sylius_shop_checkout_complete", "sylius_shop_account_order")
    out = suppress(routes, {"sylius_shop_checkout"})

    assert out.get("sylius_shop_checkout_complete").suppressed is True
    assert out.get("sylius_shop_checkout_complete").condition is never
    assert out.get("sylius_shop_account_order").suppressed is False
    assert out.get("sylius_shop_account_order").condition is always


def test_suppress_matches_substring_anywhere_case_sensitive() -> None:
    routes = _collection(
        "custom_sylius_admin_zone_export",
        "SYLIUS_ADMIN_ZONE_INDEX",
        "sylius_admin_channel_index",
    )
    out = suppress(routes, {"sylius_admin_zone"})

    assert out.get("custom_sylius_admin_zone_export").suppressed is True
    assert out.get("SYLIUS_ADMIN_ZONE_INDEX").suppressed is False
    assert out.get("sylius_admin_channel_index").suppressed is False


def test_short_prefix_hits_unrelated_names() -> None:
    # "api_pay" is contained in "app_api_payload_debug"; substring semantics are kept
    assert is_suppressed_name("app_api_payload_debug", {"api_pay"}) is True


def test_suppress_keeps_order_membership_and_resources() -> None:
    routes = _collection("b_route", "sylius_shop_cart_summary", "a_route", "api_cart_get")
    routes.add_resource(FileResource("/tmp/features/shop.py"))

    out = suppress(routes, {"sylius_shop_cart", "api_cart"})

    assert out.names() == ["b_route", "sylius_shop_cart_summary", "a_route", "api_cart_get"]
    assert out.resources == [FileResource("/tmp/features/shop.py")]
    assert [r.suppressed for _, r in out] == [False, True, False, True]


def test_suppress_does_not_touch_input_and_passes_untouched_routes_through() -> None:
    routes = _collection("sylius_shop_cart_summary", "noco_shop_page_show")
    out = suppress(routes, {"sylius_shop_cart"})

    assert routes.get("sylius_shop_cart_summary").suppressed is False
    assert out.get("noco_shop_page_show") is routes.get("noco_shop_page_show")


def test_suppress_is_idempotent() -> None:
    routes = _collection("sylius_admin_order_index", "sylius_admin_customer_order_index", "noco_root")
    prefixes = {"sylius_admin_order", "sylius_admin_customer_order", "sylius_admin_customer"}

    once = suppress(routes, prefixes)
    twice = suppress(once, prefixes)

    assert once.names() == twice.names()
    assert [r.suppressed for _, r in once] == [r.suppressed for _, r in twice] == [True, True, False]


def test_matching_prefixes_lists_every_hit() -> None:
    hits = matching_prefixes(
        "sylius_admin_customer_order_index",
        {"sylius_admin_customer", "sylius_admin_customer_order", "api_order"},
    )
    assert hits == ["sylius_admin_customer", "sylius_admin_customer_order"]


def test_empty_prefix_suppresses_nothing() -> None:
    out = suppress(_collection("noco_root"), {""})
    assert out.get("noco_root").suppressed is False
