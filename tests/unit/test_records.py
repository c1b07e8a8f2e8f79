"""Unit tests for pensions.records.models."""
from __future__ import annotations

import dataclasses
from datetime import date

import pytest

from pensions.errors import InvalidPensionPlanError, PensionsError
from pensions.records.models import QUALIFYING_YEARS, Employee, PensionPlan, add_years


# ===========================================================================
# add_years
# ===========================================================================


class TestAddYears:
    def test_plain_date(self) -> None:
        assert add_years(date(2022, 9, 3), 3) == date(2025, 9, 3)

    def test_leap_day_to_non_leap_year_clamps(self) -> None:
        assert add_years(date(2020, 2, 29), 3) == date(2023, 2, 28)

    def test_leap_day_to_leap_year_kept(self) -> None:
        assert add_years(date(2020, 2, 29), 4) == date(2024, 2, 29)


# ===========================================================================
# PensionPlan
# ===========================================================================


class TestPensionPlan:
    def test_fields_accessible(self, plan: PensionPlan) -> None:
        assert plan.plan_reference_number == "ZZ0001"
        assert plan.enrollment_date == date(2020, 2, 1)
        assert plan.monthly_contribution == 250.0

    def test_empty_reference_rejected(self) -> None:
        with pytest.raises(InvalidPensionPlanError, match="reference number"):
            PensionPlan("", date(2020, 1, 1), 10.0)

    def test_none_reference_rejected(self) -> None:
        with pytest.raises(InvalidPensionPlanError):
            PensionPlan(None, date(2020, 1, 1), 10.0)  # type: ignore[arg-type]

    def test_error_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            PensionPlan("", date(2020, 1, 1), 10.0)
        assert issubclass(InvalidPensionPlanError, PensionsError)

    def test_frozen(self, plan: PensionPlan) -> None:
        with pytest.raises(dataclasses.FrozenInstanceError):
            plan.monthly_contribution = 1.0  # type: ignore[misc]


# ===========================================================================
# Employee
# ===========================================================================


class TestEmployee:
    def test_not_enrolled_by_default(self) -> None:
        e = Employee(2, "Bernard", "Shaw", date(2022, 9, 3), 197750.00)
        assert e.pension_plan is None
        assert not e.is_enrolled

    def test_enrolled_with_plan(self, plan: PensionPlan) -> None:
        e = Employee(9, "Ada", "Byron", date(2019, 1, 1), 1.0, plan)
        assert e.is_enrolled

    def test_qualification_date_default_years(self) -> None:
        e = Employee(2, "Bernard", "Shaw", date(2022, 9, 3), 197750.00)
        assert QUALIFYING_YEARS == 3
        assert e.qualification_date() == date(2025, 9, 3)

    def test_qualification_date_custom_years(self) -> None:
        e = Employee(2, "Bernard", "Shaw", date(2022, 9, 3), 197750.00)
        assert e.qualification_date(5) == date(2027, 9, 3)

    def test_str_names_plan_reference(self, plan: PensionPlan) -> None:
        e = Employee(9, "Ada", "Byron", date(2019, 1, 1), 1.0, plan)
        assert "pension_plan=ZZ0001" in str(e)

    def test_str_without_plan(self) -> None:
        e = Employee(2, "Bernard", "Shaw", date(2022, 9, 3), 197750.00)
        text = str(e)
        assert "pension_plan=None" in text
        assert "employment_date=2022-09-03" in text

    def test_equality(self) -> None:
        a = Employee(2, "Bernard", "Shaw", date(2022, 9, 3), 197750.00)
        b = Employee(2, "Bernard", "Shaw", date(2022, 9, 3), 197750.00)
        assert a == b
