"""NOCOMMERCE FILE PURPOSE
Purpose: cart, checkout, payment and currency switch routes of the shop.
Hot path: no (suppressed on a no-commerce installation).
Feature flags: none; the cart/checkout/order/currency groups are always suppressed.
Failure mode: stub responses only.
"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter

router = APIRouter(tags=["shop-checkout"])


@router.get("/cart", name="sylius_shop_cart_summary")
async def cart_summary() -> dict[str, Any]:
    return {"items": [], "total": 0}


@router.post("/checkout/address", name="sylius_shop_checkout_address")
async def checkout_address() -> dict[str, Any]:
    return {"step": "address"}


@router.post("/checkout/complete", name="sylius_shop_checkout_complete")
async def checkout_complete() -> dict[str, Any]:
    return {"step": "complete"}


@router.get("/order/{token}/pay", name="sylius_shop_order_pay")
async def order_pay(token: str) -> dict[str, Any]:
    return {"token": token, "step": "pay"}


@router.get("/switch-currency/{code}", name="sylius_shop_switch_currency")
async def switch_currency(code: str) -> dict[str, Any]:
    return {"currency": code.upper()}
