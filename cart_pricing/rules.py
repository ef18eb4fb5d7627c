"""Static pricing rule tables.

Each table maps a closed enumeration (product category or loyalty tier) to
exactly one rule. Tables are built once at import time and never mutated;
adding a category is a data change here, not a code change in the pricer
or aggregator.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from types import MappingProxyType
from typing import Callable, Generic, Iterable, Protocol, TypeVar

import structlog

from .errors import ConfigurationError, errmsg
from .models import ZERO, Category, LoyaltyTier

logger = structlog.get_logger()

ONE = Decimal("1")

K = TypeVar("K", bound=Enum)


class Rule(Protocol):
    @property
    def key(self) -> Enum: ...

    @property
    def rate(self) -> Decimal: ...


R = TypeVar("R", bound=Rule)


def _check_rate(rate: Decimal, key: Enum) -> None:
    if not rate.is_finite() or not ZERO <= rate <= ONE:
        raise ConfigurationError(f"{errmsg.RATE_RANGE}: {key.value}={rate}")


@dataclass(frozen=True)
class TaxRule:
    category: Category
    rate: Decimal
    description: str

    def __post_init__(self) -> None:
        _check_rate(self.rate, self.category)

    @property
    def key(self) -> Category:
        return self.category


@dataclass(frozen=True)
class LoyaltyRule:
    tier: LoyaltyTier
    rate: Decimal
    label: str

    def __post_init__(self) -> None:
        _check_rate(self.rate, self.tier)

    @property
    def key(self) -> LoyaltyTier:
        return self.tier


@dataclass(frozen=True)
class ItemDiscountRule:
    """Per-category item discount: ``rate`` off the base price when
    ``applies(quantity)`` holds."""

    category: Category
    applies: Callable[[int], bool]
    rate: Decimal
    description: str

    def __post_init__(self) -> None:
        _check_rate(self.rate, self.category)

    @property
    def key(self) -> Category:
        return self.category

    def discount_for(self, base_price: Decimal, quantity: int) -> Decimal:
        if not self.applies(quantity):
            return ZERO
        return min(base_price * self.rate, base_price)


class RuleTable(Generic[K, R]):
    """Immutable lookup of one rule per enumeration value.

    A missing rule is a configuration slip, not a reason to fail a whole
    breakdown: lookups fall back to a zero rate and log ``rule_missing``.
    """

    def __init__(self, name: str, keys: type[K], rules: Iterable[R]) -> None:
        self.name = name
        self._keys = keys
        table: dict[K, R] = {}
        for rule in rules:
            if rule.key in table:
                raise ConfigurationError(f"{errmsg.DUPLICATE_RULE} in {name}: {rule.key.value}")
            table[rule.key] = rule
        self._rules = MappingProxyType(table)

    def __len__(self) -> int:
        return len(self._rules)

    def __iter__(self):
        return iter(self._rules.values())

    def rule_for(self, key: K) -> R | None:
        return self._rules.get(key)

    def rate_for(self, key: K) -> Decimal:
        rule = self._rules.get(key)
        if rule is None:
            logger.error("rule_missing", table=self.name, key=getattr(key, "value", key))
            return ZERO
        return rule.rate

    def missing_keys(self) -> list[K]:
        return [key for key in self._keys if key not in self._rules]


TAX_RULES: RuleTable[Category, TaxRule] = RuleTable(
    "tax",
    Category,
    [
        TaxRule(Category.ELECTRONICS, Decimal("0.10"), "10% Electronics Tax"),
        TaxRule(Category.BOOKS, Decimal("0.00"), "Tax-Free Books"),
        TaxRule(Category.CLOTHING, Decimal("0.05"), "5% Clothing Tax"),
    ],
)

LOYALTY_RULES: RuleTable[LoyaltyTier, LoyaltyRule] = RuleTable(
    "loyalty",
    LoyaltyTier,
    [
        LoyaltyRule(LoyaltyTier.BRONZE, Decimal("0.05"), "Bronze (5% loyalty discount)"),
        LoyaltyRule(LoyaltyTier.SILVER, Decimal("0.10"), "Silver (10% loyalty discount)"),
        LoyaltyRule(LoyaltyTier.GOLD, Decimal("0.15"), "Gold (15% loyalty discount)"),
    ],
)

# Categories without an entry simply get no item discount.
ITEM_DISCOUNT_RULES: RuleTable[Category, ItemDiscountRule] = RuleTable(
    "item_discount",
    Category,
    [
        ItemDiscountRule(
            Category.ELECTRONICS,
            lambda quantity: quantity > 2,
            Decimal("0.15"),
            "15% off 3 or more electronics",
        ),
    ],
)
