"""Validation helpers for precondition checks at the cart boundary.

Every store mutator validates its arguments with these before touching
state, so a rejected call leaves the cart exactly as it was.
"""

from decimal import Decimal
from typing import Any

from .errors import InvalidArgumentError, errmsg


def require_int(value: Any, error_msg: str = errmsg.QUANTITY_INTEGER) -> None:
    """Require a real integer (bool is rejected)."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgumentError(f"{error_msg}, got {value!r}")


def require_positive(value: int, error_msg: str) -> None:
    """Require that a value is greater than zero."""
    if value <= 0:
        raise InvalidArgumentError(error_msg)


def require_non_negative(value: Decimal, error_msg: str) -> None:
    """Require that a value is zero or greater."""
    if value < 0:
        raise InvalidArgumentError(error_msg)


def require_instance(value: Any, expected: type, error_msg: str) -> None:
    """Require that a value is an instance of the expected type."""
    if not isinstance(value, expected):
        raise InvalidArgumentError(f"{error_msg}, got {type(value).__name__}")


def require_quantity(value: Any) -> None:
    """Require a quantity that can be added to a cart."""
    require_int(value)
    require_positive(value, errmsg.QUANTITY_POSITIVE)
