"""CLI entry point for employee-pensions.

Invoked as::

    employee-pensions [OPTIONS] COMMAND [ARGS]...

or, during development::

    python -m pensions.cli.main

Commands
--------
all         Print every employee, sorted by salary and last name
enrollees   Print employees reaching plan eligibility next quarter
run         Print both reports
version     Show version information
"""
from __future__ import annotations

import logging
import sys
from collections.abc import Callable, Iterable
from datetime import date, datetime
from pathlib import Path
from typing import TYPE_CHECKING, Any

import click
import yaml
from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.syntax import Syntax
from rich.table import Table

if TYPE_CHECKING:
    from pensions.records.models import Employee

console = Console()
err_console = Console(stderr=True)

_BANNER = "=" * 71


def _setup_logging(level: int) -> None:
    """Route package logging through a Rich handler on stderr."""
    logger = logging.getLogger("pensions")
    if not any(isinstance(h, RichHandler) for h in logger.handlers):
        logger.addHandler(RichHandler(console=err_console, show_path=False))
    logger.setLevel(level)


def _load_or_exit(data: str | None) -> list["Employee"]:
    """Return the roster from ``data`` (or the built-in one), exiting on error."""
    from pensions.data import load_employees, load_initial_data
    from pensions.errors import DataLoadError

    if data is None:
        return load_initial_data()
    try:
        return load_employees(data)
    except DataLoadError as exc:
        err_console.print(f"[red]Error:[/red] {exc}")
        sys.exit(1)


def _render_or_exit(employees: Iterable["Employee"], output_format: str) -> str:
    """Serialize employees to JSON or YAML, exiting on error."""
    from pensions.records.serializer import ReportSerializer

    serializer = ReportSerializer()
    try:
        if output_format == "yaml":
            return serializer.to_yaml(employees)
        return serializer.to_json(employees, indent=2)
    except (TypeError, ValueError, yaml.YAMLError) as exc:
        err_console.print(f"[red]Error generating report:[/red] {exc}")
        sys.exit(1)


def _emit(text: str, output_format: str, output: str | None, plain: bool) -> None:
    """Write report text to ``output``, or print it to stdout."""
    if output:
        Path(output).write_text(text.rstrip("\n") + "\n", encoding="utf-8")
        console.print(f"[green]Report written to[/green] {output}")
    elif plain:
        click.echo(text)
    else:
        console.print(Syntax(text, output_format))


def _heading(title: str, plain: bool) -> None:
    if plain:
        click.echo(_BANNER)
        click.echo(title)
        click.echo(_BANNER)
    else:
        console.print(Panel(f"[bold]{title}[/bold]"))


def _line(text: str, plain: bool) -> None:
    if plain:
        click.echo(text)
    else:
        console.print(text, highlight=False)


def _to_date(value: datetime | None) -> date:
    return value.date() if value is not None else date.today()


def _report_options(func: Callable[..., Any]) -> Callable[..., Any]:
    """Attach the options shared by every report command."""
    func = click.option(
        "--plain",
        is_flag=True,
        default=False,
        help="Print raw text without syntax highlighting",
    )(func)
    func = click.option(
        "--output", "-o", default=None, help="Output file path (defaults to stdout)"
    )(func)
    func = click.option(
        "--format",
        "output_format",
        type=click.Choice(["json", "yaml"], case_sensitive=False),
        default="json",
        help="Report output format",
    )(func)
    func = click.option(
        "--data",
        type=click.Path(exists=False, dir_okay=False),
        default=None,
        help="JSON or YAML roster to report on instead of the built-in data",
    )(func)
    return func


_as_of_option = click.option(
    "--as-of",
    "as_of",
    type=click.DateTime(formats=["%Y-%m-%d"]),
    default=None,
    help="Reference date (YYYY-MM-DD); the report covers the quarter after it. "
    "Defaults to today.",
)


# ---------------------------------------------------------------------------
# CLI group
# ---------------------------------------------------------------------------


@click.group()
@click.version_option(package_name="employee-pensions")
@click.option("--verbose", "-v", is_flag=True, default=False, help="Enable debug logging")
def cli(verbose: bool) -> None:
    """Employee roster reports and pension enrollment forecasting."""
    if verbose:
        _setup_logging(logging.DEBUG)


# ---------------------------------------------------------------------------
# version command
# ---------------------------------------------------------------------------


@cli.command(name="version")
def version_command() -> None:
    """Show detailed version information."""
    from pensions import __version__
    from pensions.data import load_initial_data
    from pensions.records.models import QUALIFYING_YEARS

    roster = load_initial_data()
    enrolled = sum(1 for e in roster if e.is_enrolled)

    table = Table(title="employee-pensions", show_header=False, box=None)
    table.add_row("[bold]Version[/bold]", __version__)
    table.add_row("Qualifying service", f"{QUALIFYING_YEARS} years")
    table.add_row("Built-in roster", f"{len(roster)} employees, {enrolled} enrolled")
    table.add_row("Python", sys.version.split()[0])
    console.print(table)


# ---------------------------------------------------------------------------
# report commands
# ---------------------------------------------------------------------------


def _print_all_employees(
    employees: list["Employee"], output_format: str, output: str | None, plain: bool
) -> None:
    from pensions.reports import all_employees_report

    text = _render_or_exit(all_employees_report(employees), output_format)
    _emit(text, output_format, output, plain)


def _print_enrollees(
    employees: list["Employee"],
    as_of: date,
    output_format: str,
    output: str | None,
    plain: bool,
) -> None:
    from pensions.reports import quarterly_upcoming_enrollees

    report = quarterly_upcoming_enrollees(employees, as_of)
    _line(f"Current Date Used: {report.as_of.isoformat()}", plain)
    _line(f"Next Quarter Range: {report.quarter}", plain)
    _line("---", plain)
    text = _render_or_exit(report.entries, output_format)
    _emit(text, output_format, output, plain)


@cli.command(name="all")
@_report_options
def all_command(data: str | None, output_format: str, output: str | None, plain: bool) -> None:
    """Print all employees, by yearly salary (descending) then last name."""
    employees = _load_or_exit(data)
    _print_all_employees(employees, output_format, output, plain)


@cli.command(name="enrollees")
@_as_of_option
@_report_options
def enrollees_command(
    as_of: datetime | None,
    data: str | None,
    output_format: str,
    output: str | None,
    plain: bool,
) -> None:
    """Print employees who qualify for a pension plan next quarter.

    An employee qualifies when they are not yet enrolled and complete
    three years of service on or between the first and last day of the
    next calendar quarter.
    """
    employees = _load_or_exit(data)
    _print_enrollees(employees, _to_date(as_of), output_format, output, plain)


@cli.command(name="run")
@_as_of_option
@click.option(
    "--data",
    type=click.Path(exists=False, dir_okay=False),
    default=None,
    help="JSON or YAML roster to report on instead of the built-in data",
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["json", "yaml"], case_sensitive=False),
    default="json",
    help="Report output format",
)
@click.option("--plain", is_flag=True, default=False, help="Print raw text without syntax highlighting")
def run_command(as_of: datetime | None, data: str | None, output_format: str, plain: bool) -> None:
    """Print the all-employees report followed by the enrollees report."""
    employees = _load_or_exit(data)

    _heading(f"FEATURE 1: All Employees Report (Sorted, {output_format.upper()})", plain)
    _print_all_employees(employees, output_format, None, plain)

    _line("", plain)
    _heading(f"FEATURE 2: Quarterly Upcoming Enrollees Report (Sorted, {output_format.upper()})", plain)
    _print_enrollees(employees, _to_date(as_of), output_format, None, plain)


if __name__ == "__main__":
    cli()
