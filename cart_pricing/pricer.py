"""Line item pricing: base price, tax, item discount and net total."""

from __future__ import annotations

from typing import Iterable

import structlog

from .models import ZERO, Category, LineItem, PricedLineItem
from .rules import ITEM_DISCOUNT_RULES, TAX_RULES, ItemDiscountRule, RuleTable, TaxRule

logger = structlog.get_logger()


class LineItemPricer:
    """Prices one raw line item at a time against the tax and item discount tables."""

    def __init__(
        self,
        tax_rules: RuleTable[Category, TaxRule] = TAX_RULES,
        discount_rules: RuleTable[Category, ItemDiscountRule] = ITEM_DISCOUNT_RULES,
    ) -> None:
        self.tax_rules = tax_rules
        self.discount_rules = discount_rules

    def price(self, line: LineItem) -> PricedLineItem:
        item = line.item
        base_price = item.unit_price * line.quantity
        tax_amount = base_price * self.tax_rules.rate_for(item.category)

        rule = self.discount_rules.rule_for(item.category)
        item_discount = rule.discount_for(base_price, line.quantity) if rule else ZERO

        total_price = base_price + tax_amount - item_discount

        logger.debug(
            "line_item_priced",
            product_id=item.id,
            quantity=line.quantity,
            base_price=str(base_price),
            tax_amount=str(tax_amount),
            item_discount=str(item_discount),
            total_price=str(total_price),
        )

        return PricedLineItem(
            item=item,
            quantity=line.quantity,
            base_price=base_price,
            tax_amount=tax_amount,
            item_discount=item_discount,
            total_price=total_price,
        )

    def price_all(self, lines: Iterable[LineItem]) -> tuple[PricedLineItem, ...]:
        return tuple(self.price(line) for line in lines)
