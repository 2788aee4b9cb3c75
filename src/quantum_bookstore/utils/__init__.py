"""Utility helpers exports."""

from .time import current_year, utc_now

__all__ = ["current_year", "utc_now"]
