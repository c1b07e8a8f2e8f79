"""Employee and pension plan records plus their serializer."""
from __future__ import annotations

from pensions.records.models import QUALIFYING_YEARS, Employee, PensionPlan, add_years
from pensions.records.serializer import ReportSerializer

__all__ = [
    "QUALIFYING_YEARS",
    "Employee",
    "PensionPlan",
    "add_years",
    "ReportSerializer",
]
