"""employee-pensions — employee roster reports and pension enrollment forecasting.

Public API
----------
The stable public surface is everything exported from this module.
Anything inside submodules not re-exported here is considered private
and may change without notice.

Example
-------
::

    from datetime import date

    import pensions

    employees = pensions.load_initial_data()

    # Everyone, highest salary first
    print(pensions.to_json(pensions.all_employees_report(employees)))

    # Unenrolled staff reaching three years of service next quarter
    report = pensions.quarterly_upcoming_enrollees(employees, as_of=date(2025, 9, 30))
    print(report.quarter, pensions.to_json(report.entries))

    pensions.__version__
    '0.1.0'
"""
from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING

__version__: str = "0.1.0"

if TYPE_CHECKING:
    from datetime import date

    from pensions.records.models import Employee
    from pensions.reports.builders import EnrolleesReport


def load_initial_data() -> list["Employee"]:
    """Return the built-in employee roster."""
    from pensions.data.seed import load_initial_data as _load

    return _load()


def all_employees_report(employees: Iterable["Employee"]) -> list["Employee"]:
    """Sort employees by yearly salary descending, then last name ascending.

    Parameters
    ----------
    employees:
        The roster to report on.

    Returns
    -------
    list[Employee]
        A new, sorted list.
    """
    from pensions.reports.builders import all_employees_report as _report

    return _report(employees)


def quarterly_upcoming_enrollees(
    employees: Iterable["Employee"], as_of: "date"
) -> "EnrolleesReport":
    """Find unenrolled employees who qualify for a plan next quarter.

    Parameters
    ----------
    employees:
        The roster to report on.
    as_of:
        The reference date; the report covers the calendar quarter after it.

    Returns
    -------
    EnrolleesReport
        The quarter range and the qualifying employees, most recently
        employed first.
    """
    from pensions.reports.builders import quarterly_upcoming_enrollees as _report

    return _report(employees, as_of)


def to_json(employees: Iterable["Employee"], indent: int = 2) -> str:
    """Render employees as a pretty-printed JSON array."""
    from pensions.records.serializer import ReportSerializer

    return ReportSerializer().to_json(employees, indent=indent)


__all__ = [
    "__version__",
    "load_initial_data",
    "all_employees_report",
    "quarterly_upcoming_enrollees",
    "to_json",
]
