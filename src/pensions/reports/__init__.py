"""Employee report builders."""
from __future__ import annotations

from pensions.reports.builders import (
    EnrolleesReport,
    all_employees_report,
    is_upcoming_enrollee,
    quarterly_upcoming_enrollees,
)

__all__ = [
    "EnrolleesReport",
    "all_employees_report",
    "is_upcoming_enrollee",
    "quarterly_upcoming_enrollees",
]
