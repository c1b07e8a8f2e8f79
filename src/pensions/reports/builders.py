"""Report builders for employee-pensions.

Two reports are available:

``all_employees_report``
    Every employee, highest salary first; equal salaries are ordered by
    last name.
``quarterly_upcoming_enrollees``
    Employees without a pension plan whose qualification date falls in
    the calendar quarter after ``as_of``, most recently employed first.

Both builders are pure functions over an iterable of ``Employee``
records and never mutate their input.
"""
from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from datetime import date

from pensions.periods.quarters import QuarterRange, next_quarter_range
from pensions.records.models import QUALIFYING_YEARS, Employee

logger = logging.getLogger(__name__)


def all_employees_report(employees: Iterable[Employee]) -> list[Employee]:
    """Return employees sorted by salary descending, then last name ascending.

    Parameters
    ----------
    employees:
        The roster to sort.

    Returns
    -------
    list[Employee]
        A new sorted list; ties on both keys keep their input order.
    """
    # two stable passes: secondary key first, then primary key reversed
    ordered = sorted(employees, key=lambda e: e.last_name)
    ordered.sort(key=lambda e: e.yearly_salary, reverse=True)
    logger.debug("All employees report: %d record(s)", len(ordered))
    return ordered


@dataclass(frozen=True)
class EnrolleesReport:
    """Result of the quarterly upcoming enrollees report.

    Parameters
    ----------
    as_of:
        The date the next quarter was computed from.
    quarter:
        The next calendar quarter relative to ``as_of``.
    entries:
        Qualifying employees, most recent employment date first.
    """

    as_of: date
    quarter: QuarterRange
    entries: list[Employee] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[Employee]:
        return iter(self.entries)


def is_upcoming_enrollee(
    employee: Employee, quarter: QuarterRange, years: int = QUALIFYING_YEARS
) -> bool:
    """Return True if ``employee`` is unenrolled and qualifies within ``quarter``."""
    if employee.is_enrolled:
        return False
    return quarter.contains(employee.qualification_date(years))


def quarterly_upcoming_enrollees(
    employees: Iterable[Employee],
    as_of: date,
    years: int = QUALIFYING_YEARS,
) -> EnrolleesReport:
    """Build the quarterly upcoming enrollees report.

    Parameters
    ----------
    employees:
        The roster to filter.
    as_of:
        Reference "current" date; the report covers the quarter after it.
    years:
        Years of service required before enrollment.

    Returns
    -------
    EnrolleesReport
        The next-quarter range and the qualifying employees sorted by
        employment date descending.
    """
    quarter = next_quarter_range(as_of)
    roster = list(employees)
    entries = [e for e in roster if is_upcoming_enrollee(e, quarter, years)]
    entries.sort(key=lambda e: e.employment_date, reverse=True)
    logger.debug(
        "Upcoming enrollees for %s (as of %s): kept %d of %d record(s)",
        quarter.label,
        as_of.isoformat(),
        len(entries),
        len(roster),
    )
    return EnrolleesReport(as_of=as_of, quarter=quarter, entries=entries)
