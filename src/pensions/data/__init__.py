"""Employee roster sources: the built-in seed data and file loading."""
from __future__ import annotations

from pensions.data.loader import load_employees
from pensions.data.seed import load_initial_data

__all__ = ["load_employees", "load_initial_data"]
