"""Command line demo: build a cart from the sample catalog and print its breakdown.

Usage::

    python -m cart_pricing --add 1:3 --tier Silver
    python -m cart_pricing --catalog
"""

from __future__ import annotations

import argparse
import json
import sys

import structlog

from .catalog import SAMPLE_CATALOG
from .config import Settings, configure_logging
from .errors import CartError
from .models import LoyaltyTier

logger = structlog.get_logger()


def parse_add(value: str) -> tuple[int, int]:
    """Parse ``ID`` or ``ID:QTY``."""
    product_id, _, quantity = value.partition(":")
    try:
        return int(product_id), int(quantity) if quantity else 1
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"expected ID[:QTY], got {value!r}") from e


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cart_pricing",
        description="Price a cart built from the sample catalog",
    )
    parser.add_argument(
        "--catalog",
        action="store_true",
        help="Print the sample catalog and exit",
    )
    parser.add_argument(
        "--add",
        metavar="ID[:QTY]",
        type=parse_add,
        action="append",
        default=[],
        help="Add a catalog item (repeatable)",
    )
    parser.add_argument(
        "--tier",
        choices=[tier.value for tier in LoyaltyTier],
        default=None,
        help="Customer loyalty tier (default: CART_DEFAULT_TIER or Silver)",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        settings = Settings.from_env()
    except CartError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2
    configure_logging(settings)

    if args.catalog:
        for item in SAMPLE_CATALOG:
            print(f"{item.id:>3}  {item.category.value:<12} {item.unit_price:>8}  {item.name}")
        return 0

    store = settings.new_store()
    if args.tier:
        store.set_loyalty_tier(args.tier)

    try:
        for product_id, quantity in args.add:
            store.add_item(SAMPLE_CATALOG.require(product_id), quantity)
    except CartError as e:
        logger.warning("intent_rejected", reason=str(e))
        print(f"error: {e}", file=sys.stderr)
        return 2

    print(json.dumps(store.breakdown().to_dict(), indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
