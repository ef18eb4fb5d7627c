"""Error types and error message constants for the cart pricing engine."""

from typing import Optional


class errmsg:
    """Error message constants for the cart domain."""

    QUANTITY_POSITIVE = "Quantity must be positive"
    QUANTITY_INTEGER = "Quantity must be an integer"
    PRICE_NON_NEGATIVE = "Unit price cannot be negative"
    NOT_A_CATALOG_ITEM = "Expected a catalog item"
    NOT_A_PROFILE = "Expected a customer profile"
    UNKNOWN_PRODUCT = "Product not in catalog"
    UNKNOWN_TIER = "Unknown loyalty tier"
    DUPLICATE_PRODUCT = "Duplicate catalog id"
    DUPLICATE_RULE = "Duplicate rule"
    RATE_RANGE = "Rate must be between 0 and 1"
    THRESHOLD_NON_NEGATIVE = "Threshold must be a finite non-negative amount"
    PRODUCT_ID_INTEGER = "Catalog id must be an integer"
    UNKNOWN_CATEGORY = "Unknown category"


class CartError(Exception):
    """Base class for cart pricing errors."""

    def __init__(self, message: str, cause: Optional[Exception] = None):
        super().__init__(message)
        self.message = message
        self.cause = cause

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message


class InvalidArgumentError(CartError):
    """Invalid argument provided by caller."""

    def __init__(self, message: str, cause: Optional[Exception] = None):
        super().__init__(f"invalid argument: {message}", cause)


class UnknownProductError(CartError):
    """Catalog lookup for an id that does not exist."""

    def __init__(self, product_id: int):
        super().__init__(f"{errmsg.UNKNOWN_PRODUCT}: {product_id}")
        self.product_id = product_id


class ConfigurationError(CartError):
    """Rule tables or settings are malformed."""

    def __init__(self, message: str, cause: Optional[Exception] = None):
        super().__init__(f"configuration error: {message}", cause)
