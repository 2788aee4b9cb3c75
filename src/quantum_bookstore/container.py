"""Service container wiring application components."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from quantum_bookstore.config import AppSettings
from quantum_bookstore.fulfillment import FulfillmentChannels, default_channels
from quantum_bookstore.inventory import BookStore
from quantum_bookstore.utils import current_year

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class ServiceContainer:
    """Aggregates the store and its collaborators with shared configuration."""

    settings: AppSettings
    channels: FulfillmentChannels
    store: BookStore

    def resolve_year(self) -> int:
        return current_year(self.settings.current_year)


def build_container(
    settings: AppSettings | None = None,
    *,
    channels: FulfillmentChannels | None = None,
) -> ServiceContainer:
    """Construct the primary service container."""

    resolved_settings = settings or AppSettings.from_env()
    resolved_channels = channels or default_channels()
    store = BookStore(resolved_channels, logger=logging.getLogger("quantum_bookstore.store"))
    logger.debug(
        "Built container for %s (%s)",
        resolved_settings.store_name,
        resolved_settings.environment,
    )
    return ServiceContainer(
        settings=resolved_settings,
        channels=resolved_channels,
        store=store,
    )


__all__ = ["ServiceContainer", "build_container"]
