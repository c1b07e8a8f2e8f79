"""The built-in employee roster."""
from __future__ import annotations

from datetime import date

from pensions.records.models import Employee, PensionPlan


def load_initial_data() -> list[Employee]:
    """Return the fixed six-employee roster with its two pension plans.

    A fresh list is returned on every call.
    """
    ex1089 = PensionPlan("EX1089", date(2023, 1, 17), 100.00)
    sm2307 = PensionPlan("SM2307", date(2017, 5, 17), 1555.50)

    return [
        Employee(1, "Daniel", "Agar", date(2023, 1, 17), 105945.50, ex1089),
        Employee(2, "Bernard", "Shaw", date(2022, 9, 3), 197750.00),
        Employee(3, "Carly", "Agar", date(2014, 5, 16), 842000.75, sm2307),
        Employee(4, "Wesley", "Schneider", date(2023, 7, 21), 74500.00),
        Employee(5, "Anna", "Wiltord", date(2023, 3, 15), 85750.00),
        Employee(6, "Yosef", "Tesfalem", date(2024, 10, 31), 100000.00),
    ]
