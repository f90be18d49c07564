"""NOCOMMERCE FILE PURPOSE
Purpose: FastAPI entrypoint for the no-commerce storefront.
Hot path: no (process-level startup only).
Feature flags: NOCO_ALLOW_*.
Failure mode: fail fast on import or route-load errors.
"""

from core.app import create_app

app = create_app()
