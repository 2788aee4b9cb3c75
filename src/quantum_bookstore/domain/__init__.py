"""Domain layer exports."""

from .base import DomainModel, MutableDomainModel
from .books import BOOK_VARIANTS, Book, EBook, PaperBook, ShowcaseBook
from .enums import BookKind, FileFormat
from .exceptions import (
    BookNotFoundError,
    InsufficientStockError,
    InvalidBookTypeError,
    InvalidQuantityError,
    NotForSaleError,
    PurchaseError,
)
from .types import Isbn

__all__ = [
    "BOOK_VARIANTS",
    "Book",
    "BookKind",
    "BookNotFoundError",
    "DomainModel",
    "EBook",
    "FileFormat",
    "InsufficientStockError",
    "InvalidBookTypeError",
    "InvalidQuantityError",
    "Isbn",
    "MutableDomainModel",
    "NotForSaleError",
    "PaperBook",
    "PurchaseError",
    "ShowcaseBook",
]
