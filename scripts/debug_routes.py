#!/usr/bin/env python3
"""Print the filtered route table (name, methods, path, suppressed).

Suppressed routes stay listed; they are registered but never match.

Supported invocation from repo root:
  python scripts/debug_routes.py [--only-suppressed | --only-active]
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from core.app import ROUTE_IMPORTS  # noqa: E402
from core.config import NoCommerceConfig  # noqa: E402
from core.loaders import default_loader  # noqa: E402
from core.route_builder import build_route_table  # noqa: E402


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Show the route table after feature-group suppression.")
    group = parser.add_mutually_exclusive_group()
    group.add_argument("--only-suppressed", action="store_true", help="List suppressed routes only")
    group.add_argument("--only-active", action="store_true", help="List reachable routes only")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    table = build_route_table(NoCommerceConfig.from_env(), default_loader(), ROUTE_IMPORTS)
    for name, route in table:
        if args.only_suppressed and not route.suppressed:
            continue
        if args.only_active and route.suppressed:
            continue
        state = "SUPPRESSED" if route.suppressed else "active"
        print(f"{name:<50} {','.join(route.methods):<10} {route.path:<45} {state}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
