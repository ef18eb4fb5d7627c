"""Cart pricing engine: tax, item, bulk and loyalty discounts over a cart."""

from .aggregator import BulkDiscountPolicy, CartAggregator
from .catalog import SAMPLE_CATALOG, Catalog
from .config import Settings, configure_logging
from .errors import (
    CartError,
    ConfigurationError,
    InvalidArgumentError,
    UnknownProductError,
    errmsg,
)
from .models import (
    CatalogItem,
    Category,
    CustomerProfile,
    LineItem,
    LoyaltyTier,
    PricedLineItem,
    PricingBreakdown,
)
from .pricer import LineItemPricer
from .registry import CartRegistry
from .rules import (
    ITEM_DISCOUNT_RULES,
    LOYALTY_RULES,
    TAX_RULES,
    ItemDiscountRule,
    LoyaltyRule,
    RuleTable,
    TaxRule,
)
from .store import CartStore

__all__ = [
    "BulkDiscountPolicy",
    "CartAggregator",
    "SAMPLE_CATALOG",
    "Catalog",
    "Settings",
    "configure_logging",
    "CartError",
    "ConfigurationError",
    "InvalidArgumentError",
    "UnknownProductError",
    "errmsg",
    "CatalogItem",
    "Category",
    "CustomerProfile",
    "LineItem",
    "LoyaltyTier",
    "PricedLineItem",
    "PricingBreakdown",
    "LineItemPricer",
    "CartRegistry",
    "ITEM_DISCOUNT_RULES",
    "LOYALTY_RULES",
    "TAX_RULES",
    "ItemDiscountRule",
    "LoyaltyRule",
    "RuleTable",
    "TaxRule",
    "CartStore",
]
