"""Shared fixtures: the built-in roster and a few hand-made records."""
from __future__ import annotations

from datetime import date

import pytest

from pensions.data.seed import load_initial_data
from pensions.records.models import Employee, PensionPlan


@pytest.fixture()
def roster() -> list[Employee]:
    """The built-in six-employee roster."""
    return load_initial_data()


@pytest.fixture()
def plan() -> PensionPlan:
    return PensionPlan("ZZ0001", date(2020, 2, 1), 250.0)


@pytest.fixture()
def nan_salary_employee() -> Employee:
    """An employee whose salary cannot be written as strict JSON."""
    return Employee(7, "Nora", "Quill", date(2023, 5, 2), float("nan"))
