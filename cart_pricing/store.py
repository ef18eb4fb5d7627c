"""Cart state store: authoritative raw cart plus its derived pricing breakdown.

The store owns the raw line items and the customer profile. Every mutator
runs under the store lock and bumps ``version``; ``breakdown()`` reprices the
whole cart when the cached result belongs to an older version, so a read
never sees a stale or half-applied state.
"""

from __future__ import annotations

import threading
import uuid
from dataclasses import replace
from decimal import Decimal

import structlog

from .aggregator import CartAggregator
from .errors import errmsg
from .models import (
    ZERO,
    CatalogItem,
    Category,
    CustomerProfile,
    LineItem,
    LoyaltyTier,
    PricedLineItem,
    PricingBreakdown,
)
from .pricer import LineItemPricer
from .validation import require_instance, require_int, require_quantity

logger = structlog.get_logger()


class CartStore:
    def __init__(
        self,
        profile: CustomerProfile | None = None,
        pricer: LineItemPricer | None = None,
        aggregator: CartAggregator | None = None,
        cart_id: str | None = None,
    ) -> None:
        self.cart_id = cart_id or uuid.uuid4().hex
        self.pricer = pricer or LineItemPricer()
        self.aggregator = aggregator or CartAggregator()
        self.log = logger.bind(cart_id=self.cart_id)

        # product id -> line item; dict order is cart order
        self._lines: dict[int, LineItem] = {}
        self._profile = profile or CustomerProfile()
        self._version = 0
        self._cached: tuple[int, PricingBreakdown] | None = None
        self._lock = threading.RLock()

    @property
    def version(self) -> int:
        return self._version

    def _commit(self) -> None:
        self._version += 1

    # --- Mutators ---

    def add_item(self, item: CatalogItem, quantity: int = 1) -> None:
        require_instance(item, CatalogItem, errmsg.NOT_A_CATALOG_ITEM)
        require_quantity(quantity)

        with self._lock:
            existing = self._lines.get(item.id)
            if existing is not None:
                self._lines[item.id] = replace(existing, quantity=existing.quantity + quantity)
            else:
                self._lines[item.id] = LineItem(item=item, quantity=quantity)
            self.log.info(
                "adding_item",
                product_id=item.id,
                quantity=quantity,
                new_quantity=self._lines[item.id].quantity,
            )
            self._commit()

    def remove_item(self, product_id: int) -> None:
        with self._lock:
            if self._lines.pop(product_id, None) is None:
                self.log.debug("item_not_in_cart", product_id=product_id)
                return
            self.log.info("removing_item", product_id=product_id)
            self._commit()

    def update_quantity(self, product_id: int, new_quantity: int) -> None:
        require_int(new_quantity)

        if new_quantity <= 0:
            self.remove_item(product_id)
            return

        with self._lock:
            existing = self._lines.get(product_id)
            if existing is None:
                self.log.debug("item_not_in_cart", product_id=product_id)
                return
            self.log.info(
                "updating_quantity",
                product_id=product_id,
                old_quantity=existing.quantity,
                new_quantity=new_quantity,
            )
            self._lines[product_id] = replace(existing, quantity=new_quantity)
            self._commit()

    def update_customer(self, profile: CustomerProfile) -> None:
        require_instance(profile, CustomerProfile, errmsg.NOT_A_PROFILE)

        with self._lock:
            self.log.info("updating_customer", loyalty_tier=profile.loyalty_tier.value)
            self._profile = profile
            self._commit()

    def set_loyalty_tier(self, tier: LoyaltyTier | str) -> None:
        self.update_customer(CustomerProfile(loyalty_tier=LoyaltyTier.parse(tier)))

    def clear(self) -> None:
        with self._lock:
            self.log.info("clearing_cart", line_items=len(self._lines))
            self._lines.clear()
            self._commit()

    def recalculate(self) -> None:
        """Drop the cached breakdown so the next read reprices everything."""
        with self._lock:
            self._commit()

    # --- Accessors ---

    def breakdown(self) -> PricingBreakdown:
        with self._lock:
            if self._cached is not None and self._cached[0] == self._version:
                return self._cached[1]
            priced = self.pricer.price_all(self._lines.values())
            result = self.aggregator.aggregate(priced, self._profile)
            self._cached = (self._version, result)
            return result

    def line_items(self) -> tuple[PricedLineItem, ...]:
        return self.breakdown().items

    def customer(self) -> CustomerProfile:
        return self._profile

    def item_count(self) -> int:
        with self._lock:
            return sum(line.quantity for line in self._lines.values())

    def unique_item_count(self) -> int:
        return len(self._lines)

    def is_empty(self) -> bool:
        return not self._lines

    def has_category(self, category: Category) -> bool:
        with self._lock:
            return any(line.item.category is category for line in self._lines.values())

    def average_unit_price(self) -> Decimal:
        with self._lock:
            if not self._lines:
                return ZERO
            total = sum((line.item.unit_price for line in self._lines.values()), ZERO)
            return total / len(self._lines)

    def items_in(self, category: Category) -> tuple[PricedLineItem, ...]:
        return self.breakdown().items_in(category)

    def total_for(self, category: Category) -> Decimal:
        return self.breakdown().total_for(category)
