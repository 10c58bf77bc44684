"""
Semester selector and its fetch window.
"""

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class Semester:
    """A half-year period, e.g. winter 2024/25 or summer 2025."""

    year: int
    is_winter: bool

    def start_date(self) -> date | None:
        """First day of the fetch window, or None if not a valid date."""
        if self.is_winter:
            return _safe_date(self.year, 9, 1)
        return _safe_date(self.year, 3, 1)

    def end_date(self) -> date | None:
        """Last day of the fetch window, or None if not a valid date."""
        if self.is_winter:
            return _safe_date(self.year + 1, 3, 15)
        return _safe_date(self.year, 9, 15)


def _safe_date(year: int, month: int, day: int) -> date | None:
    try:
        return date(year, month, day)
    except (ValueError, OverflowError):
        return None
