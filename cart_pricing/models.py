"""Cart domain types: catalog items, line items, profiles and breakdowns."""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import Any

from .errors import InvalidArgumentError, errmsg
from .validation import require_int, require_non_negative

ZERO = Decimal("0")


class Category(Enum):
    ELECTRONICS = "Electronics"
    BOOKS = "Books"
    CLOTHING = "Clothing"

    @classmethod
    def parse(cls, value: Category | str) -> Category:
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError as e:
            raise InvalidArgumentError(f"{errmsg.UNKNOWN_CATEGORY}: {value!r}", e) from e


class LoyaltyTier(Enum):
    BRONZE = "Bronze"
    SILVER = "Silver"
    GOLD = "Gold"

    @classmethod
    def parse(cls, value: LoyaltyTier | str) -> LoyaltyTier:
        """Accept a tier or its display value ("Gold")."""
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError as e:
            raise InvalidArgumentError(f"{errmsg.UNKNOWN_TIER}: {value!r}", e) from e


def as_amount(value: Any) -> Decimal:
    """Convert a price-like value to Decimal.

    Floats go through ``str`` so 19.99 stays 19.99 rather than its binary
    expansion.
    """
    if isinstance(value, Decimal) and value.is_finite():
        return value
    if isinstance(value, bool):
        raise InvalidArgumentError(f"not an amount: {value!r}")
    try:
        amount = Decimal(str(value)) if isinstance(value, float) else Decimal(value)
    except (InvalidOperation, TypeError, ValueError) as e:
        raise InvalidArgumentError(f"not an amount: {value!r}", e) from e
    if not amount.is_finite():
        raise InvalidArgumentError(f"not an amount: {value!r}")
    return amount


@dataclass(frozen=True)
class CatalogItem:
    id: int
    name: str
    category: Category
    unit_price: Decimal

    def __post_init__(self) -> None:
        require_int(self.id, errmsg.PRODUCT_ID_INTEGER)
        price = as_amount(self.unit_price)
        require_non_negative(price, errmsg.PRICE_NON_NEGATIVE)
        object.__setattr__(self, "category", Category.parse(self.category))
        object.__setattr__(self, "unit_price", price)


@dataclass(frozen=True)
class LineItem:
    """A catalog item and how many of it are in the cart."""

    item: CatalogItem
    quantity: int


@dataclass(frozen=True)
class PricedLineItem:
    item: CatalogItem
    quantity: int
    base_price: Decimal
    tax_amount: Decimal
    item_discount: Decimal
    total_price: Decimal

    @property
    def category(self) -> Category:
        return self.item.category


@dataclass(frozen=True)
class CustomerProfile:
    loyalty_tier: LoyaltyTier = LoyaltyTier.SILVER


@dataclass(frozen=True)
class PricingBreakdown:
    """Derived pricing result for one cart state.

    Always produced whole by the aggregator; callers never build or patch
    one field at a time.
    """

    subtotal: Decimal = ZERO
    total_tax: Decimal = ZERO
    total_item_discounts: Decimal = ZERO
    bulk_discount: Decimal = ZERO
    loyalty_discount: Decimal = ZERO
    final_total: Decimal = ZERO
    items: tuple[PricedLineItem, ...] = field(default_factory=tuple)

    @classmethod
    def empty(cls) -> PricingBreakdown:
        return cls()

    def items_in(self, category: Category) -> tuple[PricedLineItem, ...]:
        return tuple(line for line in self.items if line.category is category)

    def total_for(self, category: Category) -> Decimal:
        return sum((line.total_price for line in self.items_in(category)), ZERO)

    def to_dict(self) -> dict:
        """Render as plain JSON-friendly data, amounts as strings."""
        return {
            "subtotal": str(self.subtotal),
            "total_tax": str(self.total_tax),
            "total_item_discounts": str(self.total_item_discounts),
            "bulk_discount": str(self.bulk_discount),
            "loyalty_discount": str(self.loyalty_discount),
            "final_total": str(self.final_total),
            "items": [
                {
                    "id": line.item.id,
                    "name": line.item.name,
                    "category": line.category.value,
                    "quantity": line.quantity,
                    "base_price": str(line.base_price),
                    "tax_amount": str(line.tax_amount),
                    "item_discount": str(line.item_discount),
                    "total_price": str(line.total_price),
                }
                for line in self.items
            ],
        }
