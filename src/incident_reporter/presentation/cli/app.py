"""Thin CLI wrapper: Typer commands that delegate to Use Cases.

All domain logic is accessed through the Container (bootstrap.py).
"""

from __future__ import annotations

import json
import logging
import shutil
from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.markup import escape

from incident_reporter.presentation.cli.formatters import (
    console,
    error_message,
    fields_table,
    findings_table,
    json_panel,
    success_panel,
)

app = typer.Typer(
    name="incident-report",
    help="📄 Incident investigation reports: validation and PDF export",
    rich_markup_mode="rich",
    no_args_is_help=True,
)

# Sub-app for layout config commands
config_app = typer.Typer(
    name="config",
    help="⚙️  Manage the report layout configuration",
    rich_markup_mode="rich",
    no_args_is_help=True,
)
app.add_typer(config_app, name="config")


@app.callback()
def main(
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Show debug logging")
    ] = False,
) -> None:
    """Incident reporter command-line interface."""
    if verbose:
        from rich.logging import RichHandler

        logging.basicConfig(
            level=logging.DEBUG,
            format="%(message)s",
            datefmt="[%X]",
            handlers=[RichHandler(rich_tracebacks=True, show_path=False)],
            force=True,
        )


def _read_payload(record_file: Path) -> object:
    """Read a JSON file or exit with a readable message."""
    if not record_file.exists():
        error_message(f"File not found: {record_file}")
        raise typer.Exit(code=1)
    try:
        return json.loads(record_file.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        error_message(f"{record_file} is not valid JSON: {e}")
        raise typer.Exit(code=1)


def _load_record(record_file: Path):
    """Parse an incident record; parsing failures are shown as findings."""
    from pydantic import ValidationError

    from incident_reporter.application.error_messages import payload_findings
    from incident_reporter.domain.models.incident import IncidentRecord

    payload = _read_payload(record_file)
    try:
        return IncidentRecord.model_validate(payload)
    except ValidationError as e:
        findings_table(payload_findings(e))
        raise typer.Exit(code=1)


# ---------------------------------------------------------------------------
# incident-report validate
# ---------------------------------------------------------------------------


@app.command()
def validate(
    record_file: Annotated[Path, typer.Argument(help="Incident record (.json)")],
    export: Annotated[
        bool, typer.Option("--export", help="Apply the export-profile rules too")
    ] = False,
    summary: Annotated[
        bool, typer.Option("--summary", help="Summary profile (skips investigation rules)")
    ] = False,
    signatures: Annotated[
        bool, typer.Option("--signatures", help="Require signatures")
    ] = False,
    photos: Annotated[bool, typer.Option("--photos", help="Require photo evidence")] = False,
) -> None:
    """Validate an incident record and list errors and warnings."""
    from incident_reporter.bootstrap import Container
    from incident_reporter.domain.models.export_options import ExportOptions

    record = _load_record(record_file)
    options = None
    if export or summary or signatures or photos:
        options = ExportOptions(
            summary_only=summary, include_signatures=signatures, include_photos=photos
        )

    result = Container().validate_incident().execute(record, options)
    findings_table(result)
    if not result.valid:
        raise typer.Exit(code=1)


# ---------------------------------------------------------------------------
# incident-report export
# ---------------------------------------------------------------------------


@app.command()
def export(
    record_file: Annotated[Path, typer.Argument(help="Incident record (.json)")],
    output: Annotated[
        Optional[Path],
        typer.Option("--output", "-o", help="Output PDF (default: generated report name)"),
    ] = None,
    summary: Annotated[
        bool, typer.Option("--summary", help="Export the summary report")
    ] = False,
    layout: Annotated[
        Optional[Path],
        typer.Option("--layout", "-l", help="Path to a custom layout JSON file"),
    ] = None,
    force: Annotated[
        bool, typer.Option("--force", help="Render a draft even if validation fails")
    ] = False,
) -> None:
    """Validate an incident record and export it as a PDF report."""
    from pydantic import ValidationError

    from incident_reporter.application.use_cases.generate_report import (
        generate_report_filename,
    )
    from incident_reporter.bootstrap import Container
    from incident_reporter.domain.errors import ConfigurationError
    from incident_reporter.domain.models.export_options import ExportOptions
    from incident_reporter.infrastructure.sinks.file_sink import FileSink

    record = _load_record(record_file)
    options = ExportOptions.defaults(summary_only=summary)

    try:
        container = Container(config_path=layout)
    except (FileNotFoundError, ConfigurationError, ValidationError) as e:
        error_message(str(e))
        raise typer.Exit(code=1)

    use_case = container.generate_report()
    sink = FileSink(output or Path(generate_report_filename(record, options)))
    if force:
        result = use_case.force_export(record, options, sink)
    else:
        result = use_case.execute(record, options, sink)

    if result.blocked:
        findings_table(result.validation)
        error_message("Export blocked by validation errors (use --force for a draft)")
        raise typer.Exit(code=1)
    if not result.success:
        error_message(result.error or "Report generation failed")
        raise typer.Exit(code=1)

    success_panel(
        f"✅ Report exported:\n"
        f"  📤 Output: [bold green]{sink.path}[/]\n"
        f"  📄 Pages: [cyan]{result.render.page_count}[/]  |  "
        f"Size: [cyan]{result.render.bytes_written}[/] bytes\n"
        f"  ⚠️  Warnings: {len(result.validation.warnings)}",
        title="📄 Incident Export",
    )


# ---------------------------------------------------------------------------
# incident-report required-fields
# ---------------------------------------------------------------------------


@app.command("required-fields")
def required_fields_cmd(
    category: Annotated[str, typer.Argument(help="Incident category, e.g. personal_injury")],
) -> None:
    """List the field paths required for a category."""
    from incident_reporter.domain.categories import get_profile
    from incident_reporter.validators.incident_validator import required_fields

    fields_table(category, required_fields(category), known=get_profile(category) is not None)


# ---------------------------------------------------------------------------
# incident-report config show / init / validate
# ---------------------------------------------------------------------------


@config_app.command("show")
def config_show(
    layout: Annotated[
        Optional[Path],
        typer.Option("--layout", "-l", help="Path to a custom layout JSON file"),
    ] = None,
) -> None:
    """Show the active report layout (formatted)."""
    from incident_reporter.infrastructure.config.json_config_provider import JsonConfigProvider

    cfg = JsonConfigProvider(layout).get_config()
    json_panel(cfg.model_dump_json(indent=2))


@config_app.command("init")
def config_init(
    output: Annotated[
        Path, typer.Option("--output", "-o", help="Destination file name")
    ] = Path("report_layout.json"),
) -> None:
    """Copy the bundled layout to the current directory for customisation."""
    from incident_reporter.config.loader import BUNDLED_LAYOUT_PATH

    if output.exists():
        console.print(f"[bold yellow]⚠️  File already exists:[/] {output}")
        if not typer.confirm("Overwrite it?"):
            raise typer.Abort()

    shutil.copy2(BUNDLED_LAYOUT_PATH, output)
    success_panel(
        f"✅ Layout copied to: [bold green]{output}[/]\n\n"
        "Edit this file and use it with [bold]--layout[/]:\n"
        f'  incident-report export record.json --layout "{output}"',
        title="⚙️  Config Init",
    )


@config_app.command("validate")
def config_validate(
    layout_file: Annotated[Path, typer.Argument(help="Layout JSON file to validate")],
) -> None:
    """Validate a report layout JSON file."""
    from pydantic import ValidationError

    from incident_reporter.config import load_config
    from incident_reporter.domain.errors import ConfigurationError

    if not layout_file.exists():
        error_message(f"File not found: {layout_file}")
        raise typer.Exit(code=1)

    try:
        cfg = load_config(layout_file)
    except (ConfigurationError, ValidationError) as e:
        console.print(f"[bold red]❌ Invalid layout:[/]\n\n{escape(str(e))}")
        raise typer.Exit(code=1)

    success_panel(
        f"✅ Layout is valid\n\n"
        f"  Page: [cyan]{cfg.page.name} ({cfg.page.width} x {cfg.page.height} pt)[/]\n"
        f"  Font: [cyan]{cfg.typography.family}[/]\n"
        f"  Content width: [cyan]{cfg.content_width:.2f} pt[/]",
        title="✅ Validation",
    )


if __name__ == "__main__":
    app()
