#!/usr/bin/env python3
"""
Price a cart from the command line.

Reads a cart JSON file (a list of lines, or an object with an "items" list),
applies the combo catalog and the spend-threshold gift promotion, and prints
the pricing breakdown as JSON on stdout.

Usage:
    python run.py cart.json
    python run.py cart.json --catalog combo_catalogs/default.json --log-level DEBUG
"""

import argparse
import json
import logging
import sys
from pathlib import Path

import config
from exceptions import PricingEngineException
from models.pricing import PromotionSettingsDTO
from services.cart import CartService
from services.pricing import PricingService
from utils.combo_catalog_loader import load_combo_catalog
from utils.config_validator import validate_or_exit
from utils.logging_config import setup_logging


def read_cart_file(path: Path) -> list:
    with open(path, "r", encoding="utf-8") as f:
        payload = json.load(f)
    # Stored carts wrap their lines as {"items": [...]}
    if isinstance(payload, dict):
        return payload.get("items") or []
    return payload


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Compute combo discounts and gift promotion for a cart")
    parser.add_argument("cart", type=Path, help="Path to the cart JSON file")
    parser.add_argument("--catalog", default=None, help="Combo catalog JSON (default: COMBO_CATALOG_PATH)")
    parser.add_argument("--log-level", default=None, help="Override LOG_LEVEL (DEBUG, INFO, WARNING, ERROR)")
    args = parser.parse_args(argv)

    setup_logging(args.log_level)
    validate_or_exit(config)

    try:
        catalog = load_combo_catalog(args.catalog)
        cart_items = CartService.parse_cart_items(read_cart_file(args.cart))
    except PricingEngineException as e:
        logging.error(json.dumps(e.to_dict(), default=str))
        print(f"ERROR: {e}", file=sys.stderr)
        return 1
    except (OSError, json.JSONDecodeError) as e:
        logging.error(f"Failed to read cart {args.cart}: {e}")
        print(f"ERROR: Failed to read cart {args.cart}: {e}", file=sys.stderr)
        return 1

    result = PricingService.calculate_pricing(cart_items, catalog, PromotionSettingsDTO.from_config())
    logging.info(
        f"Priced {len(cart_items)} cart lines: original={result.original_total}, "
        f"final={result.final_total}, combos={len(result.applied_combos)}"
    )
    print(result.model_dump_json(indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
