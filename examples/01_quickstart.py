#!/usr/bin/env python3
"""Example: Quickstart — employee-pensions

Print the all-employees report, then the upcoming enrollees for the
quarter after a fixed reference date.

Usage:
    python examples/01_quickstart.py

Requirements:
    pip install employee-pensions
"""
from __future__ import annotations

from datetime import date

import pensions

AS_OF = date(2025, 12, 31)


def main() -> None:
    print(f"employee-pensions version: {pensions.__version__}")

    employees = pensions.load_initial_data()

    # Step 1: Everyone, highest salary first
    print(pensions.to_json(pensions.all_employees_report(employees)))

    # Step 2: Unenrolled employees reaching three years of service next quarter
    report = pensions.quarterly_upcoming_enrollees(employees, as_of=AS_OF)
    print(f"Current Date Used: {report.as_of}")
    print(f"Next Quarter Range: {report.quarter}")
    print(pensions.to_json(report.entries))


if __name__ == "__main__":
    main()
