from __future__ import annotations

from decimal import Decimal

import pytest
from pydantic import ValidationError

from quantum_bookstore.domain import (
    Book,
    BookKind,
    EBook,
    FileFormat,
    NotForSaleError,
    PaperBook,
    ShowcaseBook,
)


def _paper(stock: int = 5) -> PaperBook:
    return PaperBook(
        isbn="123", title="Blue Elephant", author="Ahmed Morad", year=2020, price=35, stock=stock
    )


def test_variants_report_sale_and_stock() -> None:
    paper = _paper(stock=2)
    ebook = EBook(
        isbn="456", title="Sea", author="Wael", year=2021, price=25, file_format="epub"
    )
    showcase = ShowcaseBook(isbn="789", title="Demo", author="Admin", year=2019, price=0)

    assert paper.is_for_sale() and ebook.is_for_sale()
    assert not showcase.is_for_sale()
    assert paper.has_stock() and paper.has_stock(2)
    assert not paper.has_stock(3)
    assert ebook.has_stock(10_000)
    assert showcase.has_stock(10_000)
    assert {paper.kind, ebook.kind, showcase.kind} == set(BookKind)


def test_reduce_stock_only_affects_paper_books() -> None:
    paper = _paper(stock=1)
    paper.reduce_stock(3)
    assert paper.stock == -2

    ebook = EBook(isbn="456", title="Sea", author="Wael", year=2021, price=25, file_format=".pdf")
    ebook.reduce_stock(3)
    assert ebook.has_stock()


def test_base_attributes_are_frozen() -> None:
    paper = _paper()
    with pytest.raises(ValidationError):
        paper.isbn = "999"
    with pytest.raises(ValidationError):
        paper.price = Decimal("1")
    paper.stock = 9
    assert paper.stock == 9


def test_price_must_not_be_negative() -> None:
    with pytest.raises(ValidationError):
        ShowcaseBook(isbn="1", title="T", author="A", year=2000, price=-1)


def test_empty_isbn_rejected() -> None:
    with pytest.raises(ValidationError):
        ShowcaseBook(isbn="", title="T", author="A", year=2000, price=0)


def test_file_format_normalization() -> None:
    ebook = EBook(isbn="1", title="T", author="A", year=2000, price=1, file_format=" EPUB ")
    assert ebook.file_format is FileFormat.EPUB
    with pytest.raises(ValidationError):
        EBook(isbn="1", title="T", author="A", year=2000, price=1, file_format="mobi")


def test_book_base_is_abstract() -> None:
    with pytest.raises(TypeError):
        Book(isbn="1", title="T", author="A", year=2000, price=1, kind=BookKind.PAPER)  # type: ignore[abstract]


def test_describe_includes_variant_details() -> None:
    lines = _paper(stock=5).describe().splitlines()
    assert lines[0] == (
        "Book: Blue Elephant by Ahmed Morad, Year: 2020, Price: $35.00, ISBN: 123"
    )
    assert lines[1] == "Type: PaperBook, Stock: 5"

    ebook = EBook(isbn="4", title="T", author="A", year=2000, price=1, file_format="pdf")
    assert ebook.describe().endswith("Type: EBook, File Type: .pdf")
    showcase = ShowcaseBook(isbn="7", title="T", author="A", year=2000, price=0)
    assert showcase.describe().endswith("Not for sale")


def test_showcase_fulfil_always_refuses(channels) -> None:
    showcase = ShowcaseBook(isbn="7", title="Demo", author="A", year=2000, price=0)
    with pytest.raises(NotForSaleError):
        showcase.fulfil(1, email="a@b.c", address="x", channels=channels)
    assert channels.shipping.calls == []
    assert channels.delivery.calls == []


def test_age_uses_supplied_year() -> None:
    assert _paper().age(2025) == 5


def test_details_describe_each_variant() -> None:
    ebook = EBook(isbn="4", title="T", author="A", year=2000, price=1, file_format="docx")
    showcase = ShowcaseBook(isbn="7", title="T", author="A", year=2000, price=0)

    assert _paper(stock=2).details() == "Type: PaperBook, Stock: 2"
    assert ebook.details() == "Type: EBook, File Type: .docx"
    assert showcase.details() == "Type: Showcase/Demo Book - Not for sale"
