"""Purchase failures raised by the bookstore domain."""

from __future__ import annotations


class PurchaseError(RuntimeError):
    """Base class for recoverable bookstore failures."""


class BookNotFoundError(PurchaseError):
    """Raised when no book with the requested ISBN exists."""


class NotForSaleError(PurchaseError):
    """Raised when the matched book may not be sold."""


class InsufficientStockError(PurchaseError):
    """Raised when a paper book purchase exceeds available stock."""


class InvalidBookTypeError(PurchaseError):
    """Raised when a value outside the known book variants reaches the store."""


class InvalidQuantityError(PurchaseError):
    """Raised when a purchase asks for fewer than one copy."""


__all__ = [
    "BookNotFoundError",
    "InsufficientStockError",
    "InvalidBookTypeError",
    "InvalidQuantityError",
    "NotForSaleError",
    "PurchaseError",
]
