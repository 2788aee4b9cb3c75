"""Fulfillment subsystem exports."""

from .interfaces import DeliveryService, FulfillmentChannels, ShippingService
from .services import LoggingMailService, LoggingShippingService


def default_channels() -> FulfillmentChannels:
    """Return channels backed by the logging services."""

    return FulfillmentChannels(
        shipping=LoggingShippingService(),
        delivery=LoggingMailService(),
    )


__all__ = [
    "DeliveryService",
    "FulfillmentChannels",
    "LoggingMailService",
    "LoggingShippingService",
    "ShippingService",
    "default_channels",
]
