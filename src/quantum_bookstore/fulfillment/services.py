"""Default fulfillment services that record dispatches in the log."""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)


class LoggingShippingService:
    def ship(self, address: str, title: str) -> None:
        logger.info("Shipping '%s' to %s", title, address)


class LoggingMailService:
    def deliver(self, email: str, title: str) -> None:
        logger.info("Sending EBook '%s' to %s", title, email)


__all__ = ["LoggingMailService", "LoggingShippingService"]
