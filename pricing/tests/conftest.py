import json

import pytest


@pytest.fixture
def write_cart(tmp_path):
    """Writes a cart document (or raw text) to a file and returns its path."""

    def _write(document, filename="cart.json"):
        path = tmp_path / filename
        if isinstance(document, str):
            path.write_text(document, encoding="utf-8")
        else:
            path.write_text(json.dumps(document), encoding="utf-8")
        return str(path)

    return _write


@pytest.fixture
def sample_document():
    """The mixed-campaign cart: 600 THB, Coupon 50, On Top 10% Clothing, Seasonal 20 per 100."""
    return {
        "items": [
            {"name": "T-Shirt", "price": 400, "category": "Clothing"},
            {"name": "Hat", "price": 200, "category": "Accessories"},
        ],
        "discounts": [
            {"category": "Seasonal", "type": "Special", "everyXThb": 100, "discountYThb": 20},
            {"category": "Coupon", "type": "Fixed", "amount": 50},
            {"category": "On Top", "type": "Percentage", "targetCategory": "Clothing", "percentage": 10},
        ],
    }
