from __future__ import annotations

import logging

import pytest

from quantum_bookstore.fulfillment import (
    LoggingMailService,
    LoggingShippingService,
    default_channels,
)


def test_logging_services_record_dispatch(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.INFO, logger="quantum_bookstore.fulfillment"):
        LoggingShippingService().ship("123 Main St", "Blue Elephant")
        LoggingMailService().deliver("reader@mail.com", "Sea")

    assert "Shipping 'Blue Elephant' to 123 Main St" in caplog.text
    assert "Sending EBook 'Sea' to reader@mail.com" in caplog.text


def test_default_channels_use_logging_services() -> None:
    channels = default_channels()
    assert isinstance(channels.shipping, LoggingShippingService)
    assert isinstance(channels.delivery, LoggingMailService)
