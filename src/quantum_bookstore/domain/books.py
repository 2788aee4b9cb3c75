"""Book catalog models and their per-variant sale behaviour."""

from __future__ import annotations

from abc import ABC, abstractmethod
from decimal import Decimal
from typing import TYPE_CHECKING, Annotated, Literal

from pydantic import Field, field_validator

from .base import MutableDomainModel
from .enums import BookKind, FileFormat
from .exceptions import InsufficientStockError, NotForSaleError
from .types import Isbn

if TYPE_CHECKING:
    from quantum_bookstore.fulfillment import FulfillmentChannels


class Book(MutableDomainModel, ABC):
    """Catalog entry shared by every variant.

    Base attributes are frozen; only variant state such as paper stock may
    change after construction.
    """

    isbn: Annotated[Isbn, Field(min_length=1, frozen=True)]
    title: Annotated[str, Field(frozen=True)]
    author: Annotated[str, Field(frozen=True)]
    year: Annotated[int, Field(frozen=True)]
    price: Annotated[Decimal, Field(ge=0, frozen=True)]

    kind: BookKind

    def is_for_sale(self) -> bool:
        return True

    def has_stock(self, quantity: int = 1) -> bool:
        return True

    def reduce_stock(self, quantity: int) -> None:
        return None

    def age(self, current_year: int) -> int:
        return current_year - self.year

    def describe(self) -> str:
        """Return the base summary followed by the variant line."""

        summary = (
            f"Book: {self.title} by {self.author}, Year: {self.year}, "
            f"Price: ${self.price:.2f}, ISBN: {self.isbn}"
        )
        return f"{summary}\n{self.details()}"

    @abstractmethod
    def details(self) -> str:
        """Return the variant-specific line of the description."""

    @abstractmethod
    def fulfil(
        self,
        quantity: int,
        *,
        email: str,
        address: str,
        channels: FulfillmentChannels,
    ) -> None:
        """Apply the variant's side of a purchase of ``quantity`` copies."""


class PaperBook(Book):
    """Physical copy tracked by stock and shipped to an address."""

    kind: Literal[BookKind.PAPER] = Field(default=BookKind.PAPER, frozen=True)
    # Not floored: reduce_stock trusts callers to check has_stock first.
    stock: int = 0

    def has_stock(self, quantity: int = 1) -> bool:
        return self.stock >= quantity

    def reduce_stock(self, quantity: int) -> None:
        self.stock -= quantity

    def details(self) -> str:
        return f"Type: PaperBook, Stock: {self.stock}"

    def fulfil(
        self,
        quantity: int,
        *,
        email: str,
        address: str,
        channels: FulfillmentChannels,
    ) -> None:
        if not self.has_stock(quantity):
            msg = (
                f"Not enough stock available for '{self.title}': "
                f"requested {quantity}, have {self.stock}"
            )
            raise InsufficientStockError(msg)
        self.reduce_stock(quantity)
        channels.shipping.ship(address, self.title)


class EBook(Book):
    """Electronic copy with unlimited availability, delivered by e-mail."""

    kind: Literal[BookKind.EBOOK] = Field(default=BookKind.EBOOK, frozen=True)
    file_format: Annotated[FileFormat, Field(frozen=True)]

    @field_validator("file_format", mode="before")
    @classmethod
    def normalize_file_format(cls, value: object) -> object:
        if isinstance(value, str) and not isinstance(value, FileFormat):
            normalized = value.strip().lower()
            if normalized and not normalized.startswith("."):
                normalized = f".{normalized}"
            return normalized
        return value

    def details(self) -> str:
        return f"Type: EBook, File Type: {self.file_format.value}"

    def fulfil(
        self,
        quantity: int,
        *,
        email: str,
        address: str,
        channels: FulfillmentChannels,
    ) -> None:
        channels.delivery.deliver(email, self.title)


class ShowcaseBook(Book):
    """Display-only copy that can never be sold."""

    kind: Literal[BookKind.SHOWCASE] = Field(default=BookKind.SHOWCASE, frozen=True)

    def is_for_sale(self) -> bool:
        return False

    def details(self) -> str:
        return "Type: Showcase/Demo Book - Not for sale"

    def fulfil(
        self,
        quantity: int,
        *,
        email: str,
        address: str,
        channels: FulfillmentChannels,
    ) -> None:
        msg = f"'{self.title}' is not for sale"
        raise NotForSaleError(msg)


BOOK_VARIANTS: tuple[type[Book], ...] = (PaperBook, EBook, ShowcaseBook)

__all__ = ["BOOK_VARIANTS", "Book", "EBook", "PaperBook", "ShowcaseBook"]
