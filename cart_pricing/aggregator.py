"""Cart aggregation: fold priced line items into a pricing breakdown.

Order of application:

1. Sum base prices, taxes and item discounts over all line items.
2. Bulk discount on (subtotal + tax - item discounts), only above the threshold.
3. Loyalty discount on what remains after the bulk discount.
4. Clamp the final total at zero.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Sequence

import structlog

from .errors import ConfigurationError, errmsg
from .models import ZERO, CustomerProfile, LoyaltyTier, PricedLineItem, PricingBreakdown
from .rules import LOYALTY_RULES, LoyaltyRule, RuleTable

logger = structlog.get_logger()


@dataclass(frozen=True)
class BulkDiscountPolicy:
    """Single cliff-edge bulk discount: ``rate`` off once the amount exceeds ``threshold``."""

    threshold: Decimal = Decimal("200")
    rate: Decimal = Decimal("0.10")

    def __post_init__(self) -> None:
        if not self.threshold.is_finite() or self.threshold < 0:
            raise ConfigurationError(f"{errmsg.THRESHOLD_NON_NEGATIVE}: bulk={self.threshold}")
        if not self.rate.is_finite() or not ZERO <= self.rate <= Decimal("1"):
            raise ConfigurationError(f"{errmsg.RATE_RANGE}: bulk={self.rate}")

    def discount_for(self, amount: Decimal) -> Decimal:
        return amount * self.rate if amount > self.threshold else ZERO


class CartAggregator:
    def __init__(
        self,
        loyalty_rules: RuleTable[LoyaltyTier, LoyaltyRule] = LOYALTY_RULES,
        bulk_policy: BulkDiscountPolicy | None = None,
    ) -> None:
        self.loyalty_rules = loyalty_rules
        self.bulk_policy = bulk_policy or BulkDiscountPolicy()

    def aggregate(
        self,
        items: Sequence[PricedLineItem],
        profile: CustomerProfile,
    ) -> PricingBreakdown:
        if not items:
            return PricingBreakdown.empty()

        subtotal = sum((line.base_price for line in items), ZERO)
        total_tax = sum((line.tax_amount for line in items), ZERO)
        total_item_discounts = sum((line.item_discount for line in items), ZERO)

        amount = subtotal + total_tax - total_item_discounts
        bulk_discount = self.bulk_policy.discount_for(amount)
        after_bulk = amount - bulk_discount
        loyalty_discount = after_bulk * self.loyalty_rules.rate_for(profile.loyalty_tier)
        final_total = max(ZERO, after_bulk - loyalty_discount)

        breakdown = PricingBreakdown(
            subtotal=subtotal,
            total_tax=total_tax,
            total_item_discounts=total_item_discounts,
            bulk_discount=bulk_discount,
            loyalty_discount=loyalty_discount,
            final_total=final_total,
            items=tuple(items),
        )

        logger.debug(
            "breakdown_calculated",
            line_items=len(items),
            loyalty_tier=profile.loyalty_tier.value,
            subtotal=str(subtotal),
            bulk_discount=str(bulk_discount),
            loyalty_discount=str(loyalty_discount),
            final_total=str(final_total),
        )

        return breakdown
