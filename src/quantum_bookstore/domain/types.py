"""Shared type aliases for the domain layer."""

from __future__ import annotations

from typing import NewType

Isbn = NewType("Isbn", str)

__all__ = ["Isbn"]
