from __future__ import annotations

import sys
from dataclasses import dataclass, field
from pathlib import Path

import pytest

# Ensure the src/ directory is importable when tests run without an install.
sys.path.append(str(Path(__file__).resolve().parents[1] / "src"))

from quantum_bookstore.fulfillment import FulfillmentChannels  # noqa: E402


@dataclass
class RecordingShipping:
    calls: list[tuple[str, str]] = field(default_factory=list)

    def ship(self, address: str, title: str) -> None:
        self.calls.append((address, title))


@dataclass
class RecordingDelivery:
    calls: list[tuple[str, str]] = field(default_factory=list)

    def deliver(self, email: str, title: str) -> None:
        self.calls.append((email, title))


@pytest.fixture
def shipping() -> RecordingShipping:
    return RecordingShipping()


@pytest.fixture
def delivery() -> RecordingDelivery:
    return RecordingDelivery()


@pytest.fixture
def channels(shipping: RecordingShipping, delivery: RecordingDelivery) -> FulfillmentChannels:
    return FulfillmentChannels(shipping=shipping, delivery=delivery)
