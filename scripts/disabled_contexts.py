#!/usr/bin/env python3
"""Read or replace a channel's disabled firewall contexts.

Supported invocation from repo root:
  python scripts/disabled_contexts.py --channel default [--register-host shop.example.com]
  python scripts/disabled_contexts.py --channel default --set shop admin
  python scripts/disabled_contexts.py --channel default --clear
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from core.channel import get_channel_by_code, register_channel  # noqa: E402
from core.settings import (  # noqa: E402
    DISABLED_FIREWALL_CONTEXTS,
    SqliteSettings,
    disabled_firewall_contexts,
)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Manage disabled firewall contexts per channel.")
    parser.add_argument("--channel", required=True, help="Channel code")
    parser.add_argument("--register-host", help="Create/update the channel with this hostname first")
    action = parser.add_mutually_exclusive_group()
    action.add_argument("--set", nargs="+", metavar="CONTEXT", help="Replace the disabled contexts")
    action.add_argument("--clear", action="store_true", help="Remove the channel's disabled contexts")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    if args.register_host:
        register_channel(args.channel, args.register_host)

    channel = get_channel_by_code(args.channel)
    if channel is None:
        print(f"unknown channel: {args.channel}", file=sys.stderr)
        return 1

    settings = SqliteSettings()
    if args.clear:
        settings.delete_value(channel, None, DISABLED_FIREWALL_CONTEXTS)
    elif args.set:
        settings.set_value(channel, None, DISABLED_FIREWALL_CONTEXTS, list(dict.fromkeys(args.set)))

    print(f"{channel.code}: {disabled_firewall_contexts(settings, channel)}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
