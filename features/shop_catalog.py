"""NOCOMMERCE FILE PURPOSE
Purpose: storefront catalog and content pages (products, taxons, CMS pages, contact).
Hot path: yes (public shop pages).
Feature flags: product/taxon routes are suppressed unless their groups stay enabled.
Failure mode: unknown slugs return 404.
"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel

router = APIRouter(tags=["shop-catalog"])

_PAGES: dict[str, dict[str, str]] = {
    "about": {"title": "About us", "content": "We are a showcase shop."},
    "legal-notice": {"title": "Legal notice", "content": "Published by the shop owner."},
}

_PRODUCTS: dict[str, dict[str, str]] = {
    "classic-mug": {"name": "Classic mug", "taxon": "mugs"},
    "summer-tee": {"name": "Summer tee", "taxon": "t-shirts"},
}


class ContactRequest(BaseModel):
    email: str
    message: str


@router.get("/pages/{slug}", name="noco_shop_page_show")
async def page_show(slug: str) -> dict[str, Any]:
    page = _PAGES.get(slug)
    if page is None:
        raise HTTPException(status_code=404, detail="Not Found")
    return {"slug": slug, **page}


@router.post("/contact", name="sylius_shop_contact_request")
async def contact_request(req: ContactRequest) -> dict[str, Any]:
    if "@" not in req.email:
        raise HTTPException(status_code=400, detail="invalid_email")
    return {"ok": True}


@router.get("/products/{slug}", name="sylius_shop_product_show")
async def product_show(slug: str) -> dict[str, Any]:
    product = _PRODUCTS.get(slug)
    if product is None:
        raise HTTPException(status_code=404, detail="Not Found")
    return {"slug": slug, **product}


@router.get("/taxons/{slug}", name="sylius_shop_product_index")
async def product_index(slug: str) -> dict[str, Any]:
    items = [s for s, p in _PRODUCTS.items() if p["taxon"] == slug]
    return {"taxon": slug, "products": items}


@router.get("/_partial/taxons/menu", name="sylius_shop_partial_channel_menu_taxon_index")
async def taxon_menu() -> dict[str, Any]:
    return {"taxons": sorted({p["taxon"] for p in _PRODUCTS.values()})}
