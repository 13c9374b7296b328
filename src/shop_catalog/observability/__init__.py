"""Observability module for logging."""

from shop_catalog.observability.logging import (
    ServiceContextFilter,
    StructuredLogFormatter,
    configure_logging,
)

__all__ = [
    "ServiceContextFilter",
    "StructuredLogFormatter",
    "configure_logging",
]
