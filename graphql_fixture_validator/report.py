"""Output formatting and reporting."""

from dataclasses import dataclass, field
from typing import Any, Optional

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from . import utils
from .assets import AssetsReport

console = Console()


@dataclass
class ValidationSummary:
    """Summary of a fixture validation run."""

    fixture_path: str
    query_path: str
    schema_source: str
    report: AssetsReport
    export: Optional[str] = None
    target: Optional[str] = None
    input_query_variables: dict[str, Any] = field(default_factory=dict)


def _section(errors, ran: bool) -> dict:
    return {"ran": ran, "valid": ran and not errors, "errors": list(errors)}


def to_dict(summary: ValidationSummary) -> dict:
    """Machine-readable form of a summary."""
    report = summary.report
    input_result = report.input
    output_result = report.output
    data = {
        "fixture": summary.fixture_path,
        "query": summary.query_path,
        "schema": summary.schema_source,
        "export": summary.export,
        "target": summary.target,
        "inputQueryVariables": summary.input_query_variables,
        "valid": report.valid,
        "inputQuery": _section(report.query_errors, True),
        "fixtureInput": _section(input_result.errors if input_result else [], input_result is not None),
        "fixtureOutput": _section(output_result.errors if output_result else [], output_result is not None),
    }
    if input_result is not None:
        data["fixtureInput"]["aborted"] = input_result.aborted
    if output_result is not None:
        data["fixtureOutput"]["mutation"] = output_result.mutation_name
        data["fixtureOutput"]["resultParameterType"] = output_result.result_parameter_type
    return data


def emit(summary: ValidationSummary, fmt: str) -> None:
    """
    Output validation summary.

    Args:
        summary: Validation results
        fmt: Output format ("json" or "console")
    """
    if fmt == "json":
        print(utils.to_json(to_dict(summary)))
        return

    report = summary.report
    console.print("\n[bold cyan]Fixture Validation Summary[/bold cyan]\n")

    table = Table(show_header=False, box=None)
    table.add_column("Check", style="cyan")
    table.add_column("Result")

    table.add_row("Fixture", f"[dim]{summary.fixture_path}[/dim]")
    table.add_row("Query", f"[dim]{summary.query_path}[/dim]")
    table.add_row("Schema", f"[dim]{summary.schema_source}[/dim]")
    if summary.target:
        table.add_row("Target", f"[dim]{escape(summary.target)}[/dim]")
    if summary.export:
        table.add_row("Export", f"[dim]{escape(summary.export)}[/dim]")
    table.add_row("Input query", _status(not report.query_errors, len(report.query_errors)))
    if report.input is None:
        table.add_row("Fixture input", "[dim]skipped[/dim]")
    else:
        table.add_row("Fixture input", _status(report.input.valid, len(report.input.errors)))
    if report.output is None:
        table.add_row("Fixture output", "[dim]skipped (no mutation)[/dim]")
    else:
        table.add_row("Fixture output", _status(report.output.valid, len(report.output.errors)))

    console.print(table)

    _print_errors("Input query", report.query_errors)
    if report.input is not None:
        _print_errors("Fixture input", report.input.errors)
    if report.output is not None:
        _print_errors(f"Fixture output ({report.output.mutation_name})", report.output.errors)

    if report.valid:
        console.print("\n[green]✓ Fixture matches query[/green]")

    console.print()


def _status(valid: bool, count: int) -> str:
    if valid:
        return "[green]✓[/green] valid"
    return f"[red]✖[/red] {count} error(s)"


def _print_errors(title: str, errors) -> None:
    if not errors:
        return
    console.print(f"\n[bold cyan]{title}:[/bold cyan]\n")
    for message in errors:
        console.print(f"  [red]✖[/red] {escape(message)}")


def print_kv(title: str, data: dict) -> None:
    """
    Print key-value pairs (for schema pull, config init).

    Args:
        title: Section title
        data: Key-value data
    """
    console.print(f"\n[bold cyan]{title}[/bold cyan]\n")

    table = Table(show_header=False, box=None)
    table.add_column("Key", style="cyan")
    table.add_column("Value", style="yellow")

    for k, v in data.items():
        table.add_row(k, str(v))

    console.print(table)
    console.print()
