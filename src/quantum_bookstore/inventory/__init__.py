"""Inventory layer exports."""

from quantum_bookstore.domain.exceptions import (
    BookNotFoundError,
    InsufficientStockError,
    InvalidBookTypeError,
    InvalidQuantityError,
    NotForSaleError,
    PurchaseError,
)

from .store import BookStore

__all__ = [
    "BookNotFoundError",
    "BookStore",
    "InsufficientStockError",
    "InvalidBookTypeError",
    "InvalidQuantityError",
    "NotForSaleError",
    "PurchaseError",
]
