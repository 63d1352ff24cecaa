import argparse
import logging
import os
import sys
from typing import List, Optional

from dotenv import load_dotenv

from cart_loader import load_cart
from discount import DiscountEngine
from pricing_config import load_config
from pricing_errors import (
    CartFileNotFound,
    CartFileUnreadable,
    DuplicateCampaignCategory,
    InvalidExtension,
    InvalidInputShape,
    InvalidJson,
    PricingError,
)
from receipt import render_json, render_receipt

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_BAD_CONFIG = 1
# 2 is argparse's own status for a bad command line
EXIT_USAGE = 2
EXIT_CODES = {
    InvalidExtension: 3,
    CartFileNotFound: 4,
    CartFileUnreadable: 5,
    InvalidJson: 6,
    InvalidInputShape: 7,
    DuplicateCampaignCategory: 8,
}

# Environment configuration from the working directory or the project root
dotenv_paths = [
    os.path.join(os.getcwd(), ".env"),
    os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), ".env"),
    os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), ".env.example"),
]


def _load_env() -> None:
    for path in dotenv_paths:
        if os.path.exists(path):
            load_dotenv(path)
            break


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cart-discount",
        description="Compute the final price of a cart after Coupon, On Top and Seasonal campaigns.",
        epilog="Campaigns are applied in the order Coupon > On Top > Seasonal, at most one per category.",
    )
    parser.add_argument("cart_file", nargs="?", help="path to a .json file with 'items' and 'discounts'")
    parser.add_argument("--json", action="store_true", help="print the result as JSON instead of a receipt")
    parser.add_argument("-v", "--verbose", action="store_true", help="log each discount stage")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """
    Runs the cart-discount command line tool.

    Returns:
        int: Process exit status. 0 on success or when only usage was printed,
             otherwise the status mapped to the error kind in EXIT_CODES.
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.cart_file is None:
        parser.print_help()
        return EXIT_OK

    _load_env()
    try:
        config = load_config()
    except ValueError as e:
        print(f"error: {e}", file=sys.stderr)
        return EXIT_BAD_CONFIG

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else config.LOG_LEVEL.upper(),
        format="%(asctime)s - %(levelname)s - %(message)s",
    )

    try:
        cart = load_cart(args.cart_file, config)
        result = DiscountEngine(config).compute(cart.items, cart.discounts)
    except PricingError as e:
        logger.debug(f"{type(e).__name__} while pricing {args.cart_file}")
        print(f"error: {e}", file=sys.stderr)
        return EXIT_CODES.get(type(e), EXIT_BAD_CONFIG)

    if args.json:
        print(render_json(result))
    else:
        print(render_receipt(result, cart.items))
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
