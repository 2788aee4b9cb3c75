"""In-memory inventory manager executing the purchase workflow."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from decimal import Decimal

from quantum_bookstore.domain import (
    BOOK_VARIANTS,
    Book,
    BookNotFoundError,
    InvalidBookTypeError,
    InvalidQuantityError,
    NotForSaleError,
)
from quantum_bookstore.fulfillment import FulfillmentChannels, default_channels


def _copy(book: Book) -> Book:
    return book.model_copy(deep=True)


class BookStore:
    """Sole owner and mutator of an ordered book collection.

    Books are copied on the way in and on the way out, so stock only ever
    changes through :meth:`buy_book` and books only leave through
    :meth:`remove_outdated_books`.
    """

    def __init__(
        self,
        channels: FulfillmentChannels | None = None,
        *,
        books: Iterable[Book] = (),
        logger: logging.Logger | None = None,
    ) -> None:
        self._channels = channels or default_channels()
        self._logger = logger or logging.getLogger(__name__)
        self._inventory: list[Book] = []
        for book in books:
            self.add_book(book)

    def __len__(self) -> int:
        return len(self._inventory)

    def __contains__(self, isbn: object) -> bool:
        return any(book.isbn == isbn for book in self._inventory)

    def add_book(self, book: Book) -> None:
        """Append ``book``; duplicate ISBNs are accepted and shadowed on lookup."""

        if not isinstance(book, BOOK_VARIANTS):
            msg = f"Unsupported book type: {type(book).__name__}"
            raise InvalidBookTypeError(msg)
        self._inventory.append(_copy(book))
        self._logger.debug("Added %s '%s' (ISBN %s)", book.kind, book.title, book.isbn)

    def list_books(self) -> tuple[Book, ...]:
        return tuple(_copy(book) for book in self._inventory)

    def get_book(self, isbn: str) -> Book:
        return _copy(self._find(isbn))

    def display_inventory(self) -> tuple[str, ...]:
        return tuple(book.describe() for book in self._inventory)

    def remove_outdated_books(self, max_age_years: int, current_year: int) -> tuple[str, ...]:
        """Drop books older than ``max_age_years`` and return their titles.

        A book exactly ``max_age_years`` old is kept.
        """

        kept: list[Book] = []
        removed: list[str] = []
        for book in self._inventory:
            if book.age(current_year) > max_age_years:
                self._logger.info("Removing outdated book: %s", book.title)
                removed.append(book.title)
            else:
                kept.append(book)
        self._inventory = kept
        return tuple(removed)

    def buy_book(self, isbn: str, quantity: int, email: str, address: str) -> Decimal:
        """Sell ``quantity`` copies of the first book matching ``isbn``.

        Failures are checked in order: unknown ISBN, not for sale, quantity
        below one, then variant-specific stock. Nothing is mutated or
        dispatched when a check fails. Returns ``price * quantity``.
        """

        book = self._find(isbn)
        if not book.is_for_sale():
            msg = f"'{book.title}' (ISBN {isbn}) is not for sale"
            raise NotForSaleError(msg)
        if quantity < 1:
            msg = f"Quantity must be at least 1, got {quantity}"
            raise InvalidQuantityError(msg)

        book.fulfil(quantity, email=email, address=address, channels=self._channels)

        total = book.price * quantity
        self._logger.info(
            "Sold %d x '%s' (ISBN %s) for $%s", quantity, book.title, isbn, total
        )
        return total

    def _find(self, isbn: str) -> Book:
        for book in self._inventory:
            if book.isbn == isbn:
                return book
        msg = f"Book with ISBN {isbn} not found"
        raise BookNotFoundError(msg)


__all__ = ["BookStore"]
