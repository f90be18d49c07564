"""NOCOMMERCE FILE PURPOSE
Purpose: shop user security and account pages (login, register, account area).
Hot path: no.
Feature flags: NOCO_ALLOW_CUSTOMERS keeps these routes reachable.
Failure mode: stub responses only; no user storage here.
"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter
from pydantic import BaseModel

router = APIRouter(tags=["shop-account"])


class RegisterRequest(BaseModel):
    email: str
    password: str


@router.get("/login", name="sylius_shop_login")
async def login() -> dict[str, Any]:
    return {"form": "login"}


@router.post("/register", name="sylius_shop_register")
async def register(req: RegisterRequest) -> dict[str, Any]:
    return {"status": "registration_pending", "email": req.email}


@router.get("/account/dashboard", name="sylius_shop_account_dashboard")
async def account_dashboard() -> dict[str, Any]:
    return {"section": "dashboard"}


@router.get("/account/orders", name="sylius_shop_account_order_index")
async def account_orders() -> dict[str, Any]:
    return {"section": "orders", "orders": []}


@router.get("/account/address-book", name="sylius_shop_account_address_book_index")
async def account_address_book() -> dict[str, Any]:
    return {"section": "address_book", "addresses": []}
