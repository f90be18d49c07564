"""NOCOMMERCE FILE PURPOSE
Purpose: feature-group rule table and route suppression by route-name substring.
Hot path: no (runs while the route table is built at startup).
Feature flags: NOCO_ALLOW_CUSTOMERS, NOCO_ALLOW_ZONES, NOCO_ALLOW_COUNTRIES (via NoCommerceConfig).
Failure mode: pure functions; suppressed routes stay registered but never match.

Matching is a plain substring test, not a prefix test: a short entry such as
"api_pay" also hits any route that merely contains it. Known sharp edge, kept.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Callable, Iterable, Mapping

from core.config import NoCommerceConfig
from core.routing import RouteCollection, never

FEATURE_GROUPS: Mapping[str, tuple[str, ...]] = MappingProxyType(
    {
        # customers, accounts and shop users
        "customer": (
            "sylius_admin_partial_customer",
            "sylius_admin_customer",
            "api_customer",
            "sylius_shop_log",
            "sylius_shop_register",
            "sylius_shop_request_password_reset_token",
            "sylius_shop_password_reset",
            "sylius_shop_user_request_verification_token",
            "sylius_shop_user_verification",
            "sylius_shop_account",
            "api_register_shop_users_post_collection",
            "sylius_api_shop_authentication_token",
            "sylius_shop_ajax_user_check_action",
        ),
        "product": (
            "sylius_admin_product",
            "sylius_admin_api_product",
            "sylius_admin_ajax_product",
            "sylius_shop_partial_product",
            "sylius_shop_product",
            "sylius_admin_partial_product",
            "sylius_admin_ajax_generate_product_slug",
            "api_product",
        ),
        "taxon": (
            "sylius_admin_partial_taxon",
            "sylius_admin_ajax_taxon",
            "sylius_admin_taxon",
            "sylius_admin_api_taxon",
            "sylius_shop_partial_taxon",
            "sylius_admin_ajax_generate_taxon_slug",
            "sylius_shop_partial_channel_menu_taxon_index",
            "api_taxon",
        ),
        "checkout": (
            "sylius_admin_api_checkout",
            "sylius_shop_checkout",
            "sylius_shop_register_after_checkout",
        ),
        "address": (
            "sylius_shop_account_address",
            "sylius_admin_partial_address",
        ),
        "order": (
            "sylius_admin_order",
            "sylius_admin_api_order",
            "sylius_shop_account_order",
            "sylius_shop_order",
            "sylius_admin_partial_order",
            "sylius_admin_customer_order",
            "sylius_admin_api_customer_order",
            "api_order",
        ),
        "adjustment": (
            "sylius_admin_api_adjustment",
            "sylius_shop_ajax_render_province_form",
            "api_adjustment",
        ),
        "promotion": (
            "sylius_admin_partial_promotion",
            "sylius_admin_promotion",
            "sylius_admin_api_promotion",
            "api_promo",
        ),
        "shipment": (
            "sylius_admin_partial_shipment",
            "sylius_admin_ship",
            "sylius_admin_api_ship",
            "api_ship",
        ),
        "inventory": ("sylius_admin_inventory",),
        "attribute": (
            "sylius_admin_get_attribute_types",
            "sylius_admin_get_product_attributes",
            "sylius_admin_render_attribute_forms",
        ),
        "payment": (
            "sylius_admin_payment",
            "sylius_admin_get_payment",
            "payum_",
            "sylius_admin_api_payment",
            "api_pay",
        ),
        "paypal": ("sylius_paypal",),
        "tax": (
            "sylius_admin_tax_",
            "sylius_admin_api_tax_",
            "api_tax",
        ),
        "currency": (
            "sylius_admin_currency",
            "sylius_admin_api_currency",
            "sylius_shop_switch_currency",
            "api_currencies",
        ),
        "exchange": (
            "sylius_admin_exchange",
            "sylius_admin_api_exchange",
            "api_exchange",
        ),
        "zone": (
            "sylius_admin_zone",
            "sylius_admin_api_zone",
            "api_zone",
        ),
        "country": (
            "sylius_admin_country",
            "sylius_admin_api_country",
            "api_countries",
        ),
        "province": (
            "sylius_admin_api_province",
            "sylius_admin_ajax_render_province_form",
            "api_province",
        ),
        "cart": (
            "sylius_admin_api_cart",
            "sylius_shop_ajax_cart",
            "sylius_shop_partial_cart",
            "sylius_shop_cart",
            "api_cart",
        ),
        "dashboard": ("sylius_admin_dashboard_statistics",),
        "other": (
            "api_shop_billing",
            "api_channels_shop",
        ),
    }
)

# A group is left reachable when its predicate holds.
GROUP_EXEMPTIONS: tuple[tuple[str, Callable[[NoCommerceConfig], bool]], ...] = (
    ("customer", lambda c: c.are_customers_allowed()),
    ("zone", lambda c: c.are_zones_allowed()),
    ("country", lambda c: c.are_zones_allowed() or c.are_countries_allowed()),
)


def exempted_groups(config: NoCommerceConfig) -> frozenset[str]:
    return frozenset(group for group, allowed in GROUP_EXEMPTIONS if allowed(config))


def compute_active_suppression_list(config: NoCommerceConfig) -> frozenset[str]:
    exempt = exempted_groups(config)
    prefixes: set[str] = set()
    for group, group_prefixes in FEATURE_GROUPS.items():
        if group in exempt:
            continue
        prefixes.update(group_prefixes)
    return frozenset(prefixes)


def matching_prefixes(name: str, suppression_list: Iterable[str]) -> list[str]:
    return sorted(p for p in suppression_list if p and p in name)


def is_suppressed_name(name: str, suppression_list: Iterable[str]) -> bool:
    return any(p and p in name for p in suppression_list)


def suppress(routes: RouteCollection, suppression_list: Iterable[str]) -> RouteCollection:
    """Return a copy of routes where every name containing a listed prefix never matches.

    Membership, order and resources are kept; unmatched routes are passed through as-is.
    """
    prefixes = tuple(suppression_list)
    out = RouteCollection()
    for name, route in routes:
        if is_suppressed_name(name, prefixes) and not route.suppressed:
            route = route.with_condition(never)
        out.add(name, route)
    for resource in routes.resources:
        out.add_resource(resource)
    return out
