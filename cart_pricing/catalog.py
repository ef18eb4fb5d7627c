"""Read-only product catalog and the sample catalog used by the demo."""

from __future__ import annotations

from decimal import Decimal
from types import MappingProxyType
from typing import Iterable, Iterator

from .errors import InvalidArgumentError, UnknownProductError, errmsg
from .models import CatalogItem, Category


class Catalog:
    """Immutable id-keyed product lookup.

    Intents that carry a product id go through ``require`` so an unknown id
    is rejected before it reaches a cart.
    """

    def __init__(self, items: Iterable[CatalogItem]) -> None:
        products: dict[int, CatalogItem] = {}
        for item in items:
            if item.id in products:
                raise InvalidArgumentError(f"{errmsg.DUPLICATE_PRODUCT}: {item.id}")
            products[item.id] = item
        self._products = MappingProxyType(products)

    def __iter__(self) -> Iterator[CatalogItem]:
        return iter(self._products.values())

    def __len__(self) -> int:
        return len(self._products)

    def __contains__(self, product_id: object) -> bool:
        return product_id in self._products

    def get(self, product_id: int) -> CatalogItem | None:
        return self._products.get(product_id)

    def require(self, product_id: int) -> CatalogItem:
        item = self._products.get(product_id)
        if item is None:
            raise UnknownProductError(product_id)
        return item

    def by_category(self, category: Category) -> list[CatalogItem]:
        return [item for item in self._products.values() if item.category is category]

    def find_by_name(self, name: str) -> CatalogItem | None:
        for item in self._products.values():
            if item.name == name:
                return item
        return None


SAMPLE_CATALOG = Catalog(
    [
        CatalogItem(1, "Gaming Laptop", Category.ELECTRONICS, Decimal("1200")),
        CatalogItem(2, "Wireless Headphones", Category.ELECTRONICS, Decimal("150")),
        CatalogItem(3, "Smartphone", Category.ELECTRONICS, Decimal("800")),
        CatalogItem(4, "Smart Watch", Category.ELECTRONICS, Decimal("300")),
        CatalogItem(5, "JavaScript: The Good Parts", Category.BOOKS, Decimal("45")),
        CatalogItem(6, "Clean Code", Category.BOOKS, Decimal("40")),
        CatalogItem(7, "Design Patterns", Category.BOOKS, Decimal("55")),
        CatalogItem(8, "The Pragmatic Programmer", Category.BOOKS, Decimal("50")),
        CatalogItem(9, "Premium T-Shirt", Category.CLOTHING, Decimal("35")),
        CatalogItem(10, "Designer Jeans", Category.CLOTHING, Decimal("120")),
        CatalogItem(11, "Winter Jacket", Category.CLOTHING, Decimal("200")),
        CatalogItem(12, "Running Shoes", Category.CLOTHING, Decimal("150")),
    ]
)
