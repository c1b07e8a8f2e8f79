"""Unit tests for pensions.data — seed roster and file loading."""
from __future__ import annotations

import json
from datetime import date
from pathlib import Path

import pytest

from pensions.data import load_employees, load_initial_data
from pensions.errors import DataLoadError
from pensions.records.serializer import ReportSerializer


class TestSeed:
    def test_six_employees(self) -> None:
        employees = load_initial_data()
        assert [e.employee_id for e in employees] == [1, 2, 3, 4, 5, 6]

    def test_enrolled_employees(self) -> None:
        enrolled = {e.employee_id: e.pension_plan for e in load_initial_data() if e.is_enrolled}
        assert set(enrolled) == {1, 3}
        assert enrolled[1].plan_reference_number == "EX1089"
        assert enrolled[3].plan_reference_number == "SM2307"
        assert enrolled[3].enrollment_date == date(2017, 5, 17)
        assert enrolled[3].monthly_contribution == 1555.50

    def test_carly_agar(self) -> None:
        carly = load_initial_data()[2]
        assert (carly.first_name, carly.last_name) == ("Carly", "Agar")
        assert carly.employment_date == date(2014, 5, 16)
        assert carly.yearly_salary == 842000.75

    def test_fresh_list_each_call(self) -> None:
        first = load_initial_data()
        first.clear()
        assert len(load_initial_data()) == 6


class TestLoadEmployees:
    def test_json_file(self, tmp_path: Path, roster: list) -> None:
        path = tmp_path / "roster.json"
        path.write_text(ReportSerializer().to_json(roster), encoding="utf-8")
        assert load_employees(path) == roster

    def test_yaml_file(self, tmp_path: Path, roster: list) -> None:
        path = tmp_path / "roster.yml"
        path.write_text(ReportSerializer().to_yaml(roster), encoding="utf-8")
        assert load_employees(str(path)) == roster

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(DataLoadError, match="file not found"):
            load_employees(tmp_path / "absent.json")

    def test_bad_contents(self, tmp_path: Path) -> None:
        path = tmp_path / "roster.json"
        path.write_text(json.dumps({"employees": []}), encoding="utf-8")
        with pytest.raises(DataLoadError) as exc_info:
            load_employees(path)
        assert exc_info.value.source == str(path)


class TestExampleRoster:
    _PATH = Path(__file__).resolve().parents[2] / "examples" / "roster.yaml"

    def test_loads(self) -> None:
        employees = load_employees(self._PATH)
        assert [e.employee_id for e in employees] == [101, 102, 103]
        assert employees[1].pension_plan is not None
        assert employees[1].pension_plan.enrollment_date == date(2022, 4, 8)

    def test_enrollees_for_q4_2025(self) -> None:
        from pensions.reports import quarterly_upcoming_enrollees

        report = quarterly_upcoming_enrollees(load_employees(self._PATH), date(2025, 9, 30))
        assert [e.last_name for e in report.entries] == ["Abbas", "Okafor"]


class TestMalformedFiles:
    def test_not_utf8(self, tmp_path: Path) -> None:
        path = tmp_path / "roster.json"
        path.write_bytes(b"\xff\xfe")
        with pytest.raises(DataLoadError, match="not valid UTF-8"):
            load_employees(path)

    def test_non_finite_yaml_salary(self, tmp_path: Path) -> None:
        path = tmp_path / "roster.yaml"
        path.write_text(
            "- employeeId: 1\n"
            "  firstName: A\n"
            "  lastName: B\n"
            "  employmentDate: 2021-01-01\n"
            "  yearlySalary: .inf\n",
            encoding="utf-8",
        )
        with pytest.raises(DataLoadError, match="finite"):
            load_employees(path)
