"""Scripted end-to-end scenario exercising the store."""

from __future__ import annotations

from decimal import Decimal

from quantum_bookstore.domain import (
    Book,
    DomainModel,
    EBook,
    FileFormat,
    PaperBook,
    PurchaseError,
    ShowcaseBook,
)
from quantum_bookstore.inventory import BookStore


def sample_books() -> tuple[Book, ...]:
    return (
        PaperBook(
            isbn="123",
            title="bule elephant",
            author="Ahmed Morad",
            year=2020,
            price=Decimal("35.0"),
            stock=5,
        ),
        EBook(
            isbn="456",
            title="The Old Man And The Sea",
            author="wael hossam",
            year=2021,
            price=Decimal("25.0"),
            file_format=FileFormat.PDF,
        ),
        ShowcaseBook(
            isbn="789",
            title="Sample Demo Book",
            author="Admin",
            year=2019,
            price=Decimal("0.0"),
        ),
    )


class PurchaseAttempt(DomainModel):
    isbn: str
    quantity: int
    email: str = ""
    address: str = ""


class PurchaseOutcome(DomainModel):
    """Result of one scripted purchase; exactly one of total/error is set."""

    attempt: PurchaseAttempt
    total: Decimal | None = None
    error: str | None = None

    @property
    def succeeded(self) -> bool:
        return self.error is None


class DemoReport(DomainModel):
    """Descriptions and book snapshots captured at each step of the session."""

    initial_inventory: tuple[str, ...]
    purchases: tuple[PurchaseOutcome, ...]
    inventory_after_purchases: tuple[str, ...]
    removed_titles: tuple[str, ...]
    final_inventory: tuple[str, ...]
    initial_books: tuple[Book, ...]
    books_after_purchases: tuple[Book, ...]
    final_books: tuple[Book, ...]


SCRIPTED_PURCHASES: tuple[PurchaseAttempt, ...] = (
    PurchaseAttempt(isbn="123", quantity=2, email="customer@mail.com", address="123 Main St"),
    PurchaseAttempt(isbn="456", quantity=1, email="customer@mail.com"),
    PurchaseAttempt(isbn="999", quantity=1, email="customer@mail.com", address="Nowhere"),
)


def attempt_purchase(store: BookStore, attempt: PurchaseAttempt) -> PurchaseOutcome:
    try:
        total = store.buy_book(attempt.isbn, attempt.quantity, attempt.email, attempt.address)
    except PurchaseError as exc:
        return PurchaseOutcome(attempt=attempt, error=str(exc))
    return PurchaseOutcome(attempt=attempt, total=total)


def run_demo(store: BookStore, *, current_year: int, max_age: int = 3) -> DemoReport:
    """Stock an empty ``store`` with the sample books and play the scripted session.

    The scripted purchases assume the sample ISBNs are the only entries, so a
    store that already holds books is rejected with ``ValueError``.
    """

    if len(store):
        msg = f"Demo requires an empty store, found {len(store)} books"
        raise ValueError(msg)
    for book in sample_books():
        store.add_book(book)
    initial = store.display_inventory()
    initial_books = store.list_books()
    outcomes = tuple(attempt_purchase(store, attempt) for attempt in SCRIPTED_PURCHASES)
    after_purchases = store.display_inventory()
    books_after_purchases = store.list_books()
    removed = store.remove_outdated_books(max_age, current_year)
    return DemoReport(
        initial_inventory=initial,
        purchases=outcomes,
        inventory_after_purchases=after_purchases,
        removed_titles=removed,
        final_inventory=store.display_inventory(),
        initial_books=initial_books,
        books_after_purchases=books_after_purchases,
        final_books=store.list_books(),
    )


__all__ = [
    "DemoReport",
    "PurchaseAttempt",
    "PurchaseOutcome",
    "SCRIPTED_PURCHASES",
    "attempt_purchase",
    "run_demo",
    "sample_books",
]
