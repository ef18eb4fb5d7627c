"""Shared pytest fixtures for cart pricing tests."""

from decimal import Decimal

import pytest
import structlog

from cart_pricing import CartStore, CatalogItem, Category, CustomerProfile, LoyaltyTier


@pytest.fixture(autouse=True)
def reset_structlog():
    """Undo any configure_logging() a test performed."""
    yield
    structlog.reset_defaults()


@pytest.fixture
def laptop() -> CatalogItem:
    return CatalogItem(1, "Gaming Laptop", Category.ELECTRONICS, Decimal("1200"))


@pytest.fixture
def headphones() -> CatalogItem:
    return CatalogItem(2, "Wireless Headphones", Category.ELECTRONICS, Decimal("150"))


@pytest.fixture
def clean_code() -> CatalogItem:
    return CatalogItem(6, "Clean Code", Category.BOOKS, Decimal("40"))


@pytest.fixture
def tshirt() -> CatalogItem:
    return CatalogItem(9, "Premium T-Shirt", Category.CLOTHING, Decimal("35"))


@pytest.fixture
def store() -> CartStore:
    return CartStore(cart_id="test-cart")


@pytest.fixture
def make_store():
    """Factory for a store whose customer sits in the given tier."""

    def _make(tier: LoyaltyTier) -> CartStore:
        return CartStore(profile=CustomerProfile(loyalty_tier=tier), cart_id="test-cart")

    return _make
