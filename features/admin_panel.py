"""NOCOMMERCE FILE PURPOSE
Purpose: back-office index pages (dashboard, customers, zones, countries, channels, orders).
Hot path: no (admin control-plane only).
Feature flags: NOCO_ALLOW_CUSTOMERS, NOCO_ALLOW_ZONES, NOCO_ALLOW_COUNTRIES.
Failure mode: stub listings; channel listing reads the channel registry.
"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter

from core.channel import list_channels

router = APIRouter(prefix="/admin", tags=["admin"])


@router.get("/", name="sylius_admin_dashboard")
async def dashboard() -> dict[str, Any]:
    return {"section": "dashboard"}


@router.get("/dashboard/statistics", name="sylius_admin_dashboard_statistics")
async def dashboard_statistics() -> dict[str, Any]:
    return {"sales": []}


@router.get("/customers", name="sylius_admin_customer_index")
async def customer_index() -> dict[str, Any]:
    return {"customers": []}


@router.get("/zones", name="sylius_admin_zone_index")
async def zone_index() -> dict[str, Any]:
    return {"zones": []}


@router.get("/countries", name="sylius_admin_country_index")
async def country_index() -> dict[str, Any]:
    return {"countries": []}


@router.get("/orders", name="sylius_admin_order_index")
async def order_index() -> dict[str, Any]:
    return {"orders": []}


@router.get("/channels", name="sylius_admin_channel_index")
async def channel_index() -> dict[str, Any]:
    return {"channels": [{"code": c.code, "hostname": c.hostname} for c in list_channels()]}
