"""Quantum Book Store inventory and purchase workflow."""

from .domain import Book, EBook, FileFormat, PaperBook, ShowcaseBook
from .inventory import BookStore

__all__ = ["Book", "BookStore", "EBook", "FileFormat", "PaperBook", "ShowcaseBook"]
