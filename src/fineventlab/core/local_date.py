"""
Timezone-free calendar dates for month-resolution scenario evaluation.

The engine never touches ``datetime`` objects during evaluation: a month is
identified by a ``(y, m, d)`` triple and all arithmetic is done on those
components. This keeps month boundaries stable regardless of the host
timezone.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Any


@dataclass(frozen=True, order=True, slots=True)
class LocalDate:
    """
    Immutable calendar date with no timezone.

    Ordering is lexicographic on ``(y, m, d)``, which is calendar order for
    valid dates. ``d`` is carried through month arithmetic unchanged, so a
    value such as ``2025-02-31`` can exist; it still orders and keys correctly.

    Attributes:
        y: Year
        m: Month (1-12)
        d: Day of month
    """

    y: int
    m: int
    d: int = 1

    @classmethod
    def from_date(cls, value: date) -> LocalDate:
        """Build from a ``datetime.date`` (or ``datetime``)."""
        return cls(value.year, value.month, value.day)

    @classmethod
    def today(cls) -> LocalDate:
        return cls.from_date(date.today())

    @classmethod
    def parse(cls, value: str) -> LocalDate:
        """
        Parse ``YYYY-MM-DD`` or ``YYYY-MM`` (day defaults to 1).

        Raises:
            ValueError: If the string is not in one of the accepted shapes
        """
        parts = value.strip().split("-")
        if len(parts) not in (2, 3):
            raise ValueError(f"Invalid date string '{value}', expected YYYY-MM[-DD]")
        try:
            numbers = [int(p) for p in parts]
        except ValueError as exc:
            raise ValueError(f"Invalid date string '{value}'") from exc
        y, m = numbers[0], numbers[1]
        d = numbers[2] if len(numbers) == 3 else 1
        if not 1 <= m <= 12:
            raise ValueError(f"Invalid month {m} in '{value}'")
        return cls(y, m, d)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> LocalDate:
        return cls(int(data["y"]), int(data["m"]), int(data.get("d", 1)))

    def to_dict(self) -> dict[str, int]:
        return {"y": self.y, "m": self.m, "d": self.d}

    def to_date(self) -> date:
        """Convert to ``datetime.date``; fails for overflowed days like Feb 31."""
        return date(self.y, self.m, self.d)

    def __str__(self) -> str:
        return f"{self.y:04d}-{self.m:02d}-{self.d:02d}"


# Upper bound used for open-ended ``date-in-range`` conditions
FAR_FUTURE = LocalDate(2999, 12, 1)


def ld(y: int, m: int, d: int = 1) -> LocalDate:
    """Shorthand constructor: ``ld(2025, 1, 15)``."""
    return LocalDate(y, m, d)


def start_of_month(value: LocalDate) -> LocalDate:
    return LocalDate(value.y, value.m, 1)


def is_after(a: LocalDate, b: LocalDate) -> bool:
    """True iff ``a`` is strictly later than ``b``."""
    return a > b


def add_months(value: LocalDate, months: int) -> LocalDate:
    """
    Shift by ``months`` (may be negative), keeping the day component as-is.

    Example:
        >>> add_months(ld(2025, 11, 15), 3)
        LocalDate(y=2026, m=2, d=15)
    """
    total = value.y * 12 + (value.m - 1) + months
    y, m0 = divmod(total, 12)
    return LocalDate(y, m0 + 1, value.d)


def to_month_key(value: LocalDate) -> str:
    """Canonical ``yyyy-MM`` key for the month containing ``value``."""
    return f"{value.y}-{value.m:02d}"


def from_month_key(key: str) -> LocalDate:
    """Inverse of :func:`to_month_key`; returns the first day of the month."""
    return LocalDate.parse(key)


def is_within_interval(value: LocalDate, start: LocalDate, end: LocalDate) -> bool:
    """Inclusive containment: ``start <= value <= end``."""
    return not is_after(value, end) and not is_after(start, value)


def is_same_month(a: LocalDate, b: LocalDate) -> bool:
    return a.y == b.y and a.m == b.m


def months_between(start: LocalDate, end: LocalDate) -> int:
    """
    Number of months in the inclusive range ``[month(start), month(end)]``.

    Returns 0 when ``end`` falls in a month before ``start``.
    """
    span = (end.y - start.y) * 12 + (end.m - start.m) + 1
    return max(span, 0)


def month_keys(start: LocalDate, end: LocalDate) -> list[str]:
    """All month keys from ``start`` to ``end`` inclusive, in order."""
    first = start_of_month(start)
    return [to_month_key(add_months(first, i)) for i in range(months_between(start, end))]
