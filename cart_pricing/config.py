"""Environment settings and structlog configuration."""

from __future__ import annotations

import logging
import os
import sys
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Mapping

import structlog

from .aggregator import BulkDiscountPolicy, CartAggregator
from .errors import CartError, ConfigurationError
from .models import CustomerProfile, LoyaltyTier
from .store import CartStore

LOG_LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
}

LOG_FORMATS = ("console", "json")


def _decimal(environ: Mapping[str, str], name: str, default: str) -> Decimal:
    raw = environ.get(name, default)
    try:
        value = Decimal(raw)
    except InvalidOperation as e:
        raise ConfigurationError(f"{name} is not a number: {raw!r}", e) from e
    if not value.is_finite():
        raise ConfigurationError(f"{name} is not a number: {raw!r}")
    return value


@dataclass(frozen=True)
class Settings:
    log_level: str = "INFO"
    log_format: str = "console"
    default_tier: LoyaltyTier = LoyaltyTier.SILVER
    bulk_threshold: Decimal = Decimal("200")
    bulk_rate: Decimal = Decimal("0.10")

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> Settings:
        environ = os.environ if environ is None else environ

        log_level = environ.get("CART_LOG_LEVEL", "INFO").upper()
        if log_level not in LOG_LEVELS:
            raise ConfigurationError(f"CART_LOG_LEVEL must be one of {sorted(LOG_LEVELS)}")

        log_format = environ.get("CART_LOG_FORMAT", "console").lower()
        if log_format not in LOG_FORMATS:
            raise ConfigurationError(f"CART_LOG_FORMAT must be one of {list(LOG_FORMATS)}")

        try:
            default_tier = LoyaltyTier.parse(environ.get("CART_DEFAULT_TIER", "Silver"))
        except CartError as e:
            raise ConfigurationError("CART_DEFAULT_TIER", e) from e

        settings = cls(
            log_level=log_level,
            log_format=log_format,
            default_tier=default_tier,
            bulk_threshold=_decimal(environ, "CART_BULK_THRESHOLD", "200"),
            bulk_rate=_decimal(environ, "CART_BULK_RATE", "0.10"),
        )
        settings.bulk_policy()
        return settings

    def bulk_policy(self) -> BulkDiscountPolicy:
        return BulkDiscountPolicy(threshold=self.bulk_threshold, rate=self.bulk_rate)

    def new_store(self, cart_id: str | None = None) -> CartStore:
        return CartStore(
            profile=CustomerProfile(loyalty_tier=self.default_tier),
            aggregator=CartAggregator(bulk_policy=self.bulk_policy()),
            cart_id=cart_id,
        )


def configure_logging(settings: Settings) -> None:
    """Configure structlog for an entry point. Library modules never call this."""
    renderer = (
        structlog.processors.JSONRenderer()
        if settings.log_format == "json"
        else structlog.dev.ConsoleRenderer(colors=False)
    )
    structlog.configure(
        processors=[
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(LOG_LEVELS[settings.log_level]),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
    )
