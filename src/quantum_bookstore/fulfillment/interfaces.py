"""Protocols for purchase fulfillment collaborators."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol


class ShippingService(Protocol):
    """Sends a physical copy to a postal address."""

    def ship(self, address: str, title: str) -> None: ...


class DeliveryService(Protocol):
    """Sends an electronic copy to an e-mail address."""

    def deliver(self, email: str, title: str) -> None: ...


@dataclass(frozen=True, slots=True)
class FulfillmentChannels:
    """Pair of collaborators a store dispatches successful purchases to."""

    shipping: ShippingService
    delivery: DeliveryService


__all__ = ["DeliveryService", "FulfillmentChannels", "ShippingService"]
