"""Serialization of employee records to and from JSON and YAML.

The wire format uses camelCase keys and ISO-8601 dates.  A missing
pension plan is written as ``null`` and every employee carries a
derived ``enrolled`` flag, which is ignored when reading data back.

Usage
-----
::

    from pensions.records.serializer import ReportSerializer

    serializer = ReportSerializer()
    text = serializer.to_json(employees)
    employees2 = serializer.from_json(text)
    assert employees == employees2
"""
from __future__ import annotations

import json
import math
from collections.abc import Iterable
from datetime import date, datetime

import yaml

from pensions.errors import DataLoadError, InvalidPensionPlanError
from pensions.records.models import Employee, PensionPlan


class ReportSerializer:
    """Converts between ``Employee`` records and plain Python structures.

    Parameters
    ----------
    source:
        Label used in ``DataLoadError`` messages, typically a file path.
    """

    def __init__(self, source: str = "<string>") -> None:
        self._source = source

    # ------------------------------------------------------------------
    # Serialization (records → dict)
    # ------------------------------------------------------------------

    def plan_to_dict(self, plan: PensionPlan) -> dict[str, object]:
        return {
            "planReferenceNumber": plan.plan_reference_number,
            "enrollmentDate": plan.enrollment_date.isoformat(),
            "monthlyContribution": plan.monthly_contribution,
        }

    def to_dict(self, employee: Employee) -> dict[str, object]:
        """Serialize one ``Employee`` to a JSON-compatible dict."""
        return {
            "employeeId": employee.employee_id,
            "firstName": employee.first_name,
            "lastName": employee.last_name,
            "employmentDate": employee.employment_date.isoformat(),
            "yearlySalary": employee.yearly_salary,
            "pensionPlan": (
                self.plan_to_dict(employee.pension_plan) if employee.pension_plan else None
            ),
            "enrolled": employee.is_enrolled,
        }

    def to_list(self, employees: Iterable[Employee]) -> list[dict[str, object]]:
        """Serialize a sequence of employees, preserving order."""
        return [self.to_dict(e) for e in employees]

    # ------------------------------------------------------------------
    # Deserialization (dict → records)
    # ------------------------------------------------------------------

    def _date(self, value: object, key: str) -> date:
        # YAML loads unquoted ISO dates as date objects already
        if isinstance(value, datetime):
            return value.date()
        if isinstance(value, date):
            return value
        if not isinstance(value, str):
            raise DataLoadError(f"invalid date for {key!r}: {value!r}", self._source)
        try:
            return date.fromisoformat(value)
        except ValueError:
            raise DataLoadError(f"invalid date for {key!r}: {value!r}", self._source) from None

    def _text(self, value: object, key: str) -> str:
        if not isinstance(value, str):
            raise DataLoadError(f"{key!r} must be a string, got {value!r}", self._source)
        return value

    def _integer(self, value: object, key: str) -> int:
        # bool is an int subclass; true/false is never a valid id
        if isinstance(value, bool) or not isinstance(value, int):
            raise DataLoadError(f"{key!r} must be an integer, got {value!r}", self._source)
        return value

    def _amount(self, value: object, key: str) -> float:
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise DataLoadError(f"{key!r} must be a number, got {value!r}", self._source)
        if not math.isfinite(value):
            raise DataLoadError(f"{key!r} must be finite, got {value!r}", self._source)
        return float(value)

    def plan_from_dict(self, d: dict[str, object]) -> PensionPlan:
        try:
            return PensionPlan(
                plan_reference_number=self._text(
                    d["planReferenceNumber"], "planReferenceNumber"
                ),
                enrollment_date=self._date(d["enrollmentDate"], "enrollmentDate"),
                monthly_contribution=self._amount(
                    d["monthlyContribution"], "monthlyContribution"
                ),
            )
        except KeyError as exc:
            raise DataLoadError(f"pension plan is missing {exc.args[0]!r}", self._source) from None
        except InvalidPensionPlanError as exc:
            raise DataLoadError(str(exc), self._source) from exc

    def from_dict(self, d: object) -> Employee:
        """Deserialize one ``Employee``; the ``enrolled`` key is ignored.

        Raises
        ------
        DataLoadError
            If a key is missing or a value has the wrong type.
        """
        if not isinstance(d, dict):
            raise DataLoadError(f"expected an object, got {type(d).__name__}", self._source)
        plan_data = d.get("pensionPlan")
        if plan_data is not None and not isinstance(plan_data, dict):
            raise DataLoadError("'pensionPlan' must be an object or null", self._source)
        try:
            return Employee(
                employee_id=self._integer(d["employeeId"], "employeeId"),
                first_name=self._text(d["firstName"], "firstName"),
                last_name=self._text(d["lastName"], "lastName"),
                employment_date=self._date(d["employmentDate"], "employmentDate"),
                yearly_salary=self._amount(d["yearlySalary"], "yearlySalary"),
                pension_plan=self.plan_from_dict(plan_data) if plan_data is not None else None,
            )
        except KeyError as exc:
            raise DataLoadError(f"employee is missing {exc.args[0]!r}", self._source) from None

    def from_list(self, data: object) -> list[Employee]:
        if not isinstance(data, list):
            raise DataLoadError("expected a list of employees", self._source)
        return [self.from_dict(item) for item in data]

    # ------------------------------------------------------------------
    # JSON helpers
    # ------------------------------------------------------------------

    def to_json(self, employees: Iterable[Employee], indent: int = 2) -> str:
        """Serialize employees to a pretty-printed JSON array.

        Raises
        ------
        ValueError
            If a salary or contribution is NaN or infinite.
        """
        return json.dumps(
            self.to_list(employees), indent=indent, ensure_ascii=False, allow_nan=False
        )

    def from_json(self, text: str) -> list[Employee]:
        try:
            data = json.loads(text)
        except json.JSONDecodeError as exc:
            raise DataLoadError(f"invalid JSON: {exc}", self._source) from exc
        return self.from_list(data)

    # ------------------------------------------------------------------
    # YAML helpers
    # ------------------------------------------------------------------

    def to_yaml(self, employees: Iterable[Employee]) -> str:
        return yaml.dump(
            self.to_list(employees), default_flow_style=False, allow_unicode=True, sort_keys=False
        )

    def from_yaml(self, text: str) -> list[Employee]:
        try:
            data = yaml.safe_load(text)
        except yaml.YAMLError as exc:
            raise DataLoadError(f"invalid YAML: {exc}", self._source) from exc
        return self.from_list(data)
