"""Reading an employee roster from a JSON or YAML file.

The file holds a list of employees in the same shape the reports are
printed in, so a report's output can be fed back in as input.
"""
from __future__ import annotations

import logging
from pathlib import Path

from pensions.errors import DataLoadError
from pensions.records.models import Employee
from pensions.records.serializer import ReportSerializer

logger = logging.getLogger(__name__)

_YAML_SUFFIXES = frozenset({".yaml", ".yml"})


def load_employees(path: str | Path) -> list[Employee]:
    """Load employees from ``path``.

    Files ending in ``.yaml`` or ``.yml`` are parsed as YAML, anything
    else as JSON.

    Raises
    ------
    DataLoadError
        If the file cannot be read or does not hold a valid roster.
    """
    file_path = Path(path)
    try:
        text = file_path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise DataLoadError("file not found", str(path)) from None
    except OSError as exc:
        raise DataLoadError(f"cannot read file: {exc}", str(path)) from exc
    except UnicodeDecodeError as exc:
        raise DataLoadError(f"not valid UTF-8: {exc}", str(path)) from exc

    serializer = ReportSerializer(source=str(path))
    if file_path.suffix.lower() in _YAML_SUFFIXES:
        employees = serializer.from_yaml(text)
    else:
        employees = serializer.from_json(text)
    logger.debug("Loaded %d employee(s) from %s", len(employees), path)
    return employees
