import pytest
from pydantic import ValidationError

from cart_schema import (
    AppliedCampaign,
    CampaignCategory,
    Cart,
    CategoryPercentageDiscount,
    DiscountResult,
    FixedAmountCoupon,
    ItemCategory,
    LineItem,
    PercentageCoupon,
    PointsDiscount,
    SeasonalDiscount,
)


def _cart(discounts, items=None):
    return {
        "items": items or [{"name": "Shirt", "price": 100, "category": "Clothing"}],
        "discounts": discounts,
    }


class TestLineItem:
    def test_quantity_defaults_to_one(self):
        item = LineItem.model_validate({"name": "Shirt", "price": 350, "category": "Clothing"})
        assert item.quantity == 1
        assert item.category == ItemCategory.CLOTHING

    @pytest.mark.parametrize("field, value", [
        ("name", ""),
        ("price", -1),
        ("category", "Food"),
        ("quantity", 0),
        ("quantity", 1.5),
        ("price", "350"),
        ("price", True),
        ("quantity", "2"),
        ("quantity", True),
    ])
    def test_invalid_fields_are_rejected(self, field, value):
        document = {"name": "Shirt", "price": 100, "category": "Clothing", "quantity": 2}
        document[field] = value
        with pytest.raises(ValidationError):
            LineItem.model_validate(document)

    def test_items_are_immutable(self):
        item = LineItem(name="Shirt", price=100, category="Clothing")
        with pytest.raises(ValidationError):
            item.price = 1


class TestCampaignUnion:
    @pytest.mark.parametrize("document, expected_type", [
        ({"category": "Coupon", "type": "Fixed", "amount": 50}, FixedAmountCoupon),
        ({"category": "Coupon", "type": "Percentage", "percentage": 10}, PercentageCoupon),
        ({"category": "On Top", "type": "Percentage", "targetCategory": "Clothing", "percentage": 15},
         CategoryPercentageDiscount),
        ({"category": "On Top", "type": "Fixed", "customerPoints": 68}, PointsDiscount),
        ({"category": "Seasonal", "type": "Special", "everyXThb": 300, "discountYThb": 40}, SeasonalDiscount),
    ])
    def test_each_variant_is_selected_by_category_and_type(self, document, expected_type):
        cart = Cart.model_validate(_cart([document]))
        assert isinstance(cart.discounts[0], expected_type)

    def test_camel_case_keys_map_to_attributes(self):
        cart = Cart.model_validate(_cart([
            {"category": "Seasonal", "type": "Special", "everyXThb": 300, "discountYThb": 40},
        ]))
        seasonal = cart.discounts[0]
        assert (seasonal.every_x_thb, seasonal.discount_y_thb) == (300, 40)

    @pytest.mark.parametrize("document", [
        {"category": "Seasonal", "type": "Fixed", "amount": 10},
        {"category": "Coupon", "type": "Special", "amount": 10},
        {"category": "Clearance", "type": "Fixed", "amount": 10},
        {"category": "Coupon", "type": "Fixed", "amount": -5},
        {"category": "Coupon", "type": "Percentage", "percentage": 101},
        {"category": "On Top", "type": "Percentage", "targetCategory": "Food", "percentage": 10},
        {"category": "On Top", "type": "Fixed", "customerPoints": 2.5},
        {"category": "On Top", "type": "Fixed", "customerPoints": -1},
        {"category": "On Top", "type": "Fixed", "customerPoints": "68"},
        {"category": "On Top", "type": "Fixed", "customerPoints": True},
        {"category": "Coupon", "type": "Fixed", "amount": "50"},
        {"category": "Coupon", "type": "Percentage", "percentage": "10"},
        {"category": "Seasonal", "type": "Special", "everyXThb": "300", "discountYThb": 40},
        {"category": "Seasonal", "type": "Special", "everyXThb": 0, "discountYThb": 40},
        {"category": "Seasonal", "type": "Special", "everyXThb": 300, "discountYThb": 0},
        {"type": "Fixed", "amount": 10},
    ])
    def test_malformed_campaigns_are_rejected(self, document):
        with pytest.raises(ValidationError):
            Cart.model_validate(_cart([document]))


class TestCart:
    def test_cart_needs_at_least_one_item(self):
        with pytest.raises(ValidationError):
            Cart.model_validate({"items": [], "discounts": []})

    def test_discounts_default_to_empty(self):
        cart = Cart.model_validate({"items": [{"name": "Hat", "price": 250, "category": "Accessories"}]})
        assert cart.discounts == []

    def test_duplicate_categories_pass_the_schema(self):
        cart = Cart.model_validate(_cart([
            {"category": "Coupon", "type": "Fixed", "amount": 50},
            {"category": "Coupon", "type": "Percentage", "percentage": 10},
        ]))
        assert len(cart.discounts) == 2


class TestDiscountResult:
    def test_dumps_with_camel_case_keys(self):
        result = DiscountResult(
            original_total=600,
            final_total=550,
            total_discount=50,
            applied_campaigns=[AppliedCampaign(category=CampaignCategory.COUPON, discount_amount=50)],
        )
        dumped = result.model_dump(mode="json", by_alias=True)
        assert dumped == {
            "originalTotal": 600.0,
            "finalTotal": 550.0,
            "totalDiscount": 50.0,
            "appliedCampaigns": [{"category": "Coupon", "discountAmount": 50.0}],
        }

    def test_discount_for_missing_category_is_zero(self):
        result = DiscountResult(original_total=0, final_total=0, total_discount=0, applied_campaigns=[])
        assert result.discount_for(CampaignCategory.SEASONAL) == 0
