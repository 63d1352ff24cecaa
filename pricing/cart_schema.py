"""
Cart, campaign and result schemas.

Campaigns form a closed union keyed first by `category` and then by `type`.
JSON documents use camelCase keys; Python code uses the snake_case attribute
names. Both spellings are accepted when validating.

Numeric input fields are strict: JSON strings and booleans are rejected
rather than coerced. Enum fields stay lax since JSON carries them as strings.
"""
from enum import Enum
from typing import Annotated, List, Literal, Union

from pydantic import BaseModel, ConfigDict, Field


class ItemCategory(str, Enum):
    CLOTHING = "Clothing"
    ACCESSORIES = "Accessories"
    ELECTRONICS = "Electronics"


class CampaignCategory(str, Enum):
    COUPON = "Coupon"
    ON_TOP = "On Top"
    SEASONAL = "Seasonal"


class DiscountType(str, Enum):
    FIXED = "Fixed"
    PERCENTAGE = "Percentage"
    SPECIAL = "Special"


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True, allow_inf_nan=False)


class LineItem(_Frozen):
    name: str = Field(min_length=1)
    price: float = Field(ge=0, strict=True)
    category: ItemCategory
    quantity: int = Field(default=1, ge=1, strict=True)


# ── Coupon ───────────────────────────────────────────────────────────────────

class FixedAmountCoupon(_Frozen):
    category: Literal["Coupon"] = "Coupon"
    type: Literal["Fixed"] = "Fixed"
    amount: float = Field(ge=0, strict=True)


class PercentageCoupon(_Frozen):
    category: Literal["Coupon"] = "Coupon"
    type: Literal["Percentage"] = "Percentage"
    percentage: float = Field(ge=0, le=100, strict=True)


# ── On Top ───────────────────────────────────────────────────────────────────

class CategoryPercentageDiscount(_Frozen):
    category: Literal["On Top"] = "On Top"
    type: Literal["Percentage"] = "Percentage"
    target_category: ItemCategory = Field(alias="targetCategory")
    percentage: float = Field(ge=0, le=100, strict=True)


class PointsDiscount(_Frozen):
    category: Literal["On Top"] = "On Top"
    type: Literal["Fixed"] = "Fixed"
    customer_points: int = Field(alias="customerPoints", ge=0, strict=True)


# ── Seasonal ─────────────────────────────────────────────────────────────────

class SeasonalDiscount(_Frozen):
    category: Literal["Seasonal"] = "Seasonal"
    type: Literal["Special"] = "Special"
    every_x_thb: float = Field(alias="everyXThb", ge=1, strict=True)
    discount_y_thb: float = Field(alias="discountYThb", ge=1, strict=True)


CouponCampaign = Annotated[
    Union[FixedAmountCoupon, PercentageCoupon],
    Field(discriminator="type"),
]
OnTopCampaign = Annotated[
    Union[CategoryPercentageDiscount, PointsDiscount],
    Field(discriminator="type"),
]
DiscountCampaign = Annotated[
    Union[CouponCampaign, OnTopCampaign, SeasonalDiscount],
    Field(discriminator="category"),
]


class Cart(_Frozen):
    items: List[LineItem] = Field(min_length=1)
    discounts: List[DiscountCampaign] = Field(default_factory=list)


# ── Result ───────────────────────────────────────────────────────────────────

class AppliedCampaign(_Frozen):
    category: CampaignCategory
    discount_amount: float = Field(alias="discountAmount", ge=0)


class DiscountResult(_Frozen):
    original_total: float = Field(alias="originalTotal", ge=0)
    final_total: float = Field(alias="finalTotal", ge=0)
    total_discount: float = Field(alias="totalDiscount", ge=0)
    applied_campaigns: List[AppliedCampaign] = Field(alias="appliedCampaigns")

    def discount_for(self, category: CampaignCategory) -> float:
        """Amount recorded for one campaign category (0.0 when none was supplied)."""
        for applied in self.applied_campaigns:
            if applied.category == category:
                return applied.discount_amount
        return 0.0
