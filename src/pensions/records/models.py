"""Domain records for employee-pensions.

Every record is a frozen dataclass so that rosters are immutable and
can be shared freely between report builders.  Dates are plain
``datetime.date`` values; money amounts are ``float``.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date

from pensions.errors import InvalidPensionPlanError

#: Years of service an employee needs before becoming eligible for a plan.
QUALIFYING_YEARS: int = 3


def add_years(value: date, years: int) -> date:
    """Return ``value`` shifted by ``years`` calendar years.

    A 29 February that lands in a non-leap year is clamped to 28 February.
    """
    try:
        return value.replace(year=value.year + years)
    except ValueError:
        return value.replace(year=value.year + years, day=28)


# ---------------------------------------------------------------------------
# Pension plan
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class PensionPlan:
    """An employee's enrollment in a pension plan.

    Parameters
    ----------
    plan_reference_number:
        Non-empty plan identifier, e.g. ``"EX1089"``.
    enrollment_date:
        Date the employee joined the plan.
    monthly_contribution:
        Amount contributed every month.

    Raises
    ------
    InvalidPensionPlanError
        If ``plan_reference_number`` is empty or ``None``.
    """

    plan_reference_number: str
    enrollment_date: date
    monthly_contribution: float

    def __post_init__(self) -> None:
        if not self.plan_reference_number:
            raise InvalidPensionPlanError()


# ---------------------------------------------------------------------------
# Employee
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class Employee:
    """A single employee record, optionally enrolled in a pension plan.

    Parameters
    ----------
    employee_id:
        Unique numeric identifier.
    first_name:
        Given name.
    last_name:
        Family name; used as the secondary sort key in reports.
    employment_date:
        First day of employment.
    yearly_salary:
        Gross yearly salary.
    pension_plan:
        The plan the employee is enrolled in, or ``None`` when not yet
        enrolled.
    """

    employee_id: int
    first_name: str
    last_name: str
    employment_date: date
    yearly_salary: float
    pension_plan: PensionPlan | None = field(default=None)

    @property
    def is_enrolled(self) -> bool:
        """Return True if the employee already has a pension plan."""
        return self.pension_plan is not None

    def qualification_date(self, years: int = QUALIFYING_YEARS) -> date:
        """Return the date the employee completes ``years`` of service."""
        return add_years(self.employment_date, years)

    def __str__(self) -> str:
        plan = self.pension_plan.plan_reference_number if self.pension_plan else "None"
        return (
            f"Employee(employee_id={self.employee_id}, "
            f"first_name={self.first_name!r}, last_name={self.last_name!r}, "
            f"employment_date={self.employment_date.isoformat()}, "
            f"yearly_salary={self.yearly_salary}, pension_plan={plan})"
        )
