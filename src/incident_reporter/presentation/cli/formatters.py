"""Rich formatting utilities for the CLI.

Keeps all Rich rendering (tables, panels, syntax) in one module that
knows nothing about the validation or rendering logic.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.syntax import Syntax
from rich.table import Table

if TYPE_CHECKING:
    from incident_reporter.domain.models.validation import ValidationResult

console = Console()


# ---------------------------------------------------------------------------
# Success / error panels
# ---------------------------------------------------------------------------


def success_panel(message: str, title: str = "Incident Reporter") -> None:
    """Print a green success panel."""
    console.print(Panel(message, title=title, border_style="green"))


def error_message(message: str) -> None:
    """Print a red error message."""
    console.print(f"[bold red]❌ {escape(message)}[/]")


# ---------------------------------------------------------------------------
# JSON / config rendering
# ---------------------------------------------------------------------------


def json_panel(raw_json: str, title: str = "⚙️  Active Report Layout") -> None:
    """Render JSON inside a syntax-highlighted panel."""
    console.print(
        Panel(
            Syntax(raw_json, "json", theme="monokai", line_numbers=True),
            title=title,
            border_style="blue",
        )
    )


# ---------------------------------------------------------------------------
# Validation findings
# ---------------------------------------------------------------------------


def findings_table(result: ValidationResult, title: str = "📋 Validation Findings") -> None:
    """Print errors and warnings in one table plus a verdict panel."""
    if result.errors or result.warnings:
        table = Table(title=title, show_header=True, border_style="blue")
        table.add_column("", width=3)
        table.add_column("Section", style="cyan")
        table.add_column("Field", style="magenta")
        table.add_column("Message")

        for finding in result.errors:
            table.add_row("❌", finding.section, finding.field, f"[red]{finding.message}[/]")
        for finding in result.warnings:
            table.add_row("⚠️", finding.section, finding.field, f"[yellow]{finding.message}[/]")

        console.print(table)

    colour = "green" if result.valid else "red"
    status = "✅ VALID" if result.valid else "❌ INVALID"
    console.print(
        Panel(
            f"Result: [bold {colour}]{status}[/]\n"
            f"  Errors: {len(result.errors)}  |  Warnings: {len(result.warnings)}",
            title="📊 Summary",
            border_style=colour,
        )
    )


def fields_table(category: str, fields: list[str], known: bool) -> None:
    """Print the required field paths for a category."""
    table = Table(title=f"Required fields: {category}", show_header=True, border_style="blue")
    table.add_column("#", justify="right", width=3)
    table.add_column("Field", style="cyan")
    for number, path in enumerate(fields, start=1):
        table.add_row(str(number), path)
    console.print(table)
    if not known:
        console.print(
            f"[bold yellow]⚠️  Unknown category {category!r}:[/] only the base fields apply."
        )
