"""Enumerations used across the bookstore domain layer."""

from __future__ import annotations

from enum import StrEnum


class BookKind(StrEnum):
    """Closed set of book variants carried by the catalog."""

    PAPER = "paper"
    EBOOK = "ebook"
    SHOWCASE = "showcase"


class FileFormat(StrEnum):
    """File types an e-book can be delivered in."""

    PDF = ".pdf"
    EPUB = ".epub"
    DOCX = ".docx"
