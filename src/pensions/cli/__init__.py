"""Command-line interface for employee-pensions."""
from __future__ import annotations
