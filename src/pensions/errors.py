"""Exception types raised by employee-pensions.

All library errors derive from ``PensionsError`` so that callers (and the
CLI) can catch the whole family with a single ``except`` clause.
"""
from __future__ import annotations


class PensionsError(Exception):
    """Base class for every error raised by this package."""


class InvalidPensionPlanError(PensionsError, ValueError):
    """Raised when a ``PensionPlan`` is constructed without a reference number."""

    def __init__(self, message: str = "Pension plan must have a reference number.") -> None:
        super().__init__(message)


class DataLoadError(PensionsError):
    """Raised when an employee roster cannot be read or decoded.

    Parameters
    ----------
    message:
        Human-readable description of the problem.
    source:
        Where the data came from (a file path or ``"<string>"``).
    """

    def __init__(self, message: str, source: str = "<string>") -> None:
        self.source = source
        super().__init__(f"{source}: {message}")

