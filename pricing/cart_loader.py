import json
import logging
import os
from typing import Any, List, Optional

from pydantic import ValidationError

from cart_schema import Cart
from pricing_config import PricingConfig, config as default_config
from pricing_errors import CartFileNotFound, CartFileUnreadable, InvalidExtension, InvalidInputShape, InvalidJson

logger = logging.getLogger(__name__)


def _format_problems(exc: ValidationError) -> List[str]:
    problems = []
    for err in exc.errors():
        location = ".".join(str(part) for part in err["loc"]) or "cart"
        problems.append(f"{location}: {err['msg']}")
    return problems


def parse_cart(document: Any) -> Cart:
    """
    Validates an already-decoded JSON document as a Cart.

    Raises:
        InvalidInputShape: With one problem string per schema violation.
    """
    try:
        return Cart.model_validate(document)
    except ValidationError as e:
        raise InvalidInputShape(_format_problems(e)) from e


def load_cart(path: str, config: Optional[PricingConfig] = None) -> Cart:
    """
    Reads and validates a cart file.

    Checks run in this order: file extension, file existence, JSON decoding,
    then schema validation, so the first problem found is the one reported.

    Args:
        path: Location of the cart file.
        config: Supplies the accepted file extension.

    Returns:
        Cart: The validated line items and campaigns.
    """
    config = config or default_config

    if not path.lower().endswith(config.CART_FILE_EXTENSION.lower()):
        raise InvalidExtension(path, config.CART_FILE_EXTENSION)

    if not os.path.isfile(path):
        raise CartFileNotFound(path)

    logger.info(f"Loading cart from {path}")
    try:
        with open(path, "r", encoding="utf-8") as f:
            document = json.load(f)
    except ValueError as e:  # JSONDecodeError or undecodable bytes
        raise InvalidJson(path, str(e)) from e
    except OSError as e:
        raise CartFileUnreadable(path, e.strerror or str(e)) from e

    cart = parse_cart(document)
    logger.info(f"Loaded {len(cart.items)} items and {len(cart.discounts)} campaigns.")
    return cart
