"""Test that the quickstart API works for employee-pensions."""
from __future__ import annotations

from datetime import date


def test_version() -> None:
    import pensions

    assert pensions.__version__ == "0.1.0"


def test_quickstart_all_employees() -> None:
    import pensions

    employees = pensions.all_employees_report(pensions.load_initial_data())
    assert employees[0].last_name == "Agar"
    assert '"lastName": "Agar"' in pensions.to_json(employees)


def test_quickstart_enrollees() -> None:
    import pensions

    report = pensions.quarterly_upcoming_enrollees(
        pensions.load_initial_data(), as_of=date(2025, 6, 30)
    )
    assert report.quarter.label == "2025-Q3"
    assert [e.last_name for e in report.entries] == ["Shaw"]
