"""Calendar-quarter date ranges."""
from __future__ import annotations

from pensions.periods.quarters import QuarterRange, next_quarter_range, quarter_of, quarter_range

__all__ = ["QuarterRange", "next_quarter_range", "quarter_of", "quarter_range"]
