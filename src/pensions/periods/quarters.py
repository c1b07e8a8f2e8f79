"""Calendar-quarter arithmetic.

Quarters follow the calendar year: Q1 is January to March, Q2 April to
June, Q3 July to September and Q4 October to December.
"""
from __future__ import annotations

from dataclasses import dataclass
from datetime import date, timedelta

_MONTHS_PER_QUARTER = 3


def quarter_of(value: date) -> int:
    """Return the calendar quarter (1-4) that ``value`` falls in."""
    return (value.month - 1) // _MONTHS_PER_QUARTER + 1


@dataclass(frozen=True, slots=True)
class QuarterRange:
    """Inclusive date range ``[start, end]`` covering one calendar quarter.

    Parameters
    ----------
    start:
        First day of the quarter.
    end:
        Last day of the quarter.
    """

    start: date
    end: date

    def __str__(self) -> str:
        return f"{self.start.isoformat()} to {self.end.isoformat()}"

    @property
    def quarter(self) -> int:
        return quarter_of(self.start)

    @property
    def label(self) -> str:
        """Short label such as ``"2025-Q4"``."""
        return f"{self.start.year}-Q{self.quarter}"

    def contains(self, value: date) -> bool:
        """Return True if ``value`` lies on or between ``start`` and ``end``."""
        return self.start <= value <= self.end

    def __contains__(self, value: object) -> bool:
        return isinstance(value, date) and self.contains(value)


def quarter_range(year: int, quarter: int) -> QuarterRange:
    """Return the range of ``quarter`` (1-4) in ``year``.

    Raises
    ------
    ValueError
        If ``quarter`` is outside 1-4.
    """
    if not 1 <= quarter <= 4:
        raise ValueError(f"quarter must be between 1 and 4, got {quarter}")
    start = date(year, (quarter - 1) * _MONTHS_PER_QUARTER + 1, 1)
    # the day before the first day of the following quarter
    if quarter == 4:
        following = date(year + 1, 1, 1)
    else:
        following = date(year, start.month + _MONTHS_PER_QUARTER, 1)
    return QuarterRange(start=start, end=following - timedelta(days=1))


def next_quarter_range(current: date) -> QuarterRange:
    """Return the range of the calendar quarter after the one ``current`` is in.

    A date in Q4 rolls over to Q1 of the following year.

    Example
    -------
    ::

        >>> str(next_quarter_range(date(2025, 9, 30)))
        '2025-10-01 to 2025-12-31'
    """
    quarter = quarter_of(current)
    if quarter == 4:
        return quarter_range(current.year + 1, 1)
    return quarter_range(current.year, quarter + 1)
