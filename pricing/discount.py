from __future__ import annotations

import logging
import math
from decimal import ROUND_HALF_UP, Decimal
from typing import Callable, Dict, Iterable, Optional, Sequence, Tuple

from cart_schema import (
    AppliedCampaign,
    CampaignCategory,
    CategoryPercentageDiscount,
    CouponCampaign,
    DiscountCampaign,
    DiscountResult,
    FixedAmountCoupon,
    LineItem,
    OnTopCampaign,
    PercentageCoupon,
    PointsDiscount,
    SeasonalDiscount,
)
from pricing_config import PricingConfig, config as default_config
from pricing_errors import DuplicateCampaignCategory

logger = logging.getLogger(__name__)

# (running_total, original_items, campaign_or_None) -> discount amount
Stage = Callable[[float, Sequence[LineItem], Optional[DiscountCampaign]], float]


def partition_campaigns(campaigns: Iterable[DiscountCampaign]) -> Dict[CampaignCategory, DiscountCampaign]:
    """
    Buckets campaigns into their category slot, at most one per slot.

    Raises:
        DuplicateCampaignCategory: On the second campaign seen for a category.
    """
    slots: Dict[CampaignCategory, DiscountCampaign] = {}
    for campaign in campaigns:
        category = CampaignCategory(campaign.category)
        if category in slots:
            raise DuplicateCampaignCategory(category)
        slots[category] = campaign
    return slots


def calculate_original_total(items: Iterable[LineItem]) -> float:
    """Sum of price x quantity over the items, unrounded."""
    return sum((item.price * item.quantity for item in items), 0.0)


def round_half_up(value: float, places: int) -> float:
    quantum = Decimal(1).scaleb(-places)
    return float(Decimal(repr(value)).quantize(quantum, rounding=ROUND_HALF_UP))


class DiscountEngine:
    """
    Applies at most one campaign per category to a cart and reports the totals.

    Discount order
    --------------
    Campaign categories are always applied in this order, whatever order the
    campaigns were supplied in:

      1. Coupon    -- a flat amount, or a percentage of the running total.
      2. On Top    -- a percentage of one item category's original subtotal,
                      or loyalty points capped at a share of the running total.
      3. Seasonal  -- a fixed amount for every complete spending threshold.

    Each stage sees the running total left by the stages before it. The final
    total is clamped at zero and rounded; per-stage amounts are reported as
    computed.
    """

    def __init__(self, config: Optional[PricingConfig] = None) -> None:
        self.config = config or default_config
        self.stages: Tuple[Tuple[CampaignCategory, Stage], ...] = (
            (CampaignCategory.COUPON, self.apply_coupon),
            (CampaignCategory.ON_TOP, self.apply_on_top),
            (CampaignCategory.SEASONAL, self.apply_seasonal),
        )

    # ── Stages ───────────────────────────────────────────────────────────────

    def apply_coupon(
        self, running_total: float, items: Sequence[LineItem], campaign: Optional[CouponCampaign]
    ) -> float:
        if campaign is None:
            return 0.0
        if isinstance(campaign, FixedAmountCoupon):
            # Not capped here; an oversized coupon is absorbed by the final clamp.
            return float(campaign.amount)
        if isinstance(campaign, PercentageCoupon):
            return max(running_total, 0.0) * campaign.percentage / 100
        raise TypeError(f"Not a Coupon campaign: {campaign!r}")

    def apply_on_top(
        self, running_total: float, items: Sequence[LineItem], campaign: Optional[OnTopCampaign]
    ) -> float:
        if campaign is None:
            return 0.0
        if isinstance(campaign, PointsDiscount):
            points_value = campaign.customer_points * self.config.POINTS_TO_THB_RATIO
            cap = max(running_total, 0.0) * self.config.POINTS_CAP_PERCENTAGE
            return min(points_value, cap)
        if isinstance(campaign, CategoryPercentageDiscount):
            # Based on original prices, not on the post-coupon total.
            category_total = calculate_original_total(
                item for item in items if item.category == campaign.target_category
            )
            return category_total * campaign.percentage / 100
        raise TypeError(f"Not an On Top campaign: {campaign!r}")

    def apply_seasonal(
        self, running_total: float, items: Sequence[LineItem], campaign: Optional[SeasonalDiscount]
    ) -> float:
        if campaign is None:
            return 0.0
        if isinstance(campaign, SeasonalDiscount):
            tiers = math.floor(max(running_total, 0.0) / campaign.every_x_thb)
            return tiers * campaign.discount_y_thb
        raise TypeError(f"Not a Seasonal campaign: {campaign!r}")

    # ── Pipeline ─────────────────────────────────────────────────────────────

    def compute(self, items: Sequence[LineItem], campaigns: Iterable[DiscountCampaign]) -> DiscountResult:
        """
        Computes the discounted total of a cart.

        Args:
            items: Validated line items. They are only read.
            campaigns: Validated campaigns in any order, at most one per category.

        Returns:
            DiscountResult: Totals plus one applied entry per category, in
                            Coupon, On Top, Seasonal order.

        Raises:
            DuplicateCampaignCategory: If two campaigns share a category. No
                                       stage runs in that case.
        """
        items = list(items)
        slots = partition_campaigns(campaigns)

        original_total = calculate_original_total(items)
        running_total = original_total
        applied = []

        for category, stage in self.stages:
            amount = stage(running_total, items, slots.get(category))
            logger.debug(f"{category.value} stage: {running_total:.2f} - {amount:.2f}")
            running_total -= amount
            applied.append(AppliedCampaign(category=category, discount_amount=amount))

        final_total = max(0.0, running_total)
        places = self.config.ROUNDING_PLACES

        return DiscountResult(
            original_total=round_half_up(original_total, places),
            final_total=round_half_up(final_total, places),
            total_discount=round_half_up(original_total - final_total, places),
            applied_campaigns=applied,
        )


def compute_discount(
    items: Sequence[LineItem],
    campaigns: Iterable[DiscountCampaign],
    config: Optional[PricingConfig] = None,
) -> DiscountResult:
    """Shorthand for DiscountEngine(config).compute(items, campaigns)."""
    return DiscountEngine(config).compute(items, campaigns)
