#!/usr/bin/env python3
"""
View Export - command line entry point.

Commands:
1. export  - Export the active (or chosen) view of a base snapshot to CSV/XLSX
2. inspect - List tables, views, fields and record counts of a snapshot

Usage:
    view-export export base.json --format xlsx
    view-export export base.json --strategy manual --table tbl1 --view viw2 -o out/
    view-export export base.json --format csv --filename "Q1 report"
    view-export inspect base.json
"""

from typing import Optional

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.table import Table as RichTable

from view_export.config.settings import settings
from view_export.core.exceptions import ViewExportException
from view_export.domain.entities import ExportRequest
from view_export.host.models import BaseSnapshot, load_snapshot
from view_export.host.selection import get_selection_provider
from view_export.pipeline.export_step import ExportContext, ExportStep
from view_export.utils.logger import get_logger, setup_logging

logger = get_logger("main")

app = typer.Typer(help="Export host table views to CSV or Excel")
console = Console()


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logs")
) -> None:
    """Configure logging for every command."""
    setup_logging(level="DEBUG" if verbose else settings.LOG_LEVEL, verbose=verbose)


def _load(snapshot_path: str) -> BaseSnapshot:
    try:
        return load_snapshot(snapshot_path)
    except FileNotFoundError:
        console.print(f"[red]✗ Snapshot not found: {snapshot_path}[/red]")
        raise typer.Exit(code=1)
    except ValidationError as e:
        console.print(f"[red]✗ Invalid snapshot {snapshot_path}: {e.error_count()} error(s)[/red]")
        raise typer.Exit(code=1)


# ============================================================================
# EXPORT
# ============================================================================

@app.command()
def export(
    snapshot: str = typer.Argument(..., help="Base snapshot JSON file"),
    fmt: str = typer.Option("xlsx", "--format", "-f", help="csv, xlsx (or excel)"),
    strategy: str = typer.Option(
        settings.EXPORT_SELECTION_STRATEGY, "--strategy", "-s",
        help="Selection strategy: cursor, manual, first"
    ),
    table: Optional[str] = typer.Option(None, "--table", "-t", help="Table ID"),
    view: Optional[str] = typer.Option(None, "--view", help="View ID"),
    filename: Optional[str] = typer.Option(None, "--filename", "-n", help="Custom file name"),
    sheet: Optional[str] = typer.Option(None, "--sheet", help="Worksheet name (xlsx)"),
    output_dir: Optional[str] = typer.Option(None, "--output-dir", "-o", help="Output directory"),
    allow_empty: bool = typer.Option(
        not settings.EXPORT_REQUIRE_RECORDS, "--allow-empty/--require-records",
        help="Allow header-only exports of empty views"
    ),
    no_fallback: bool = typer.Option(
        False, "--no-fallback", help="Cursor strategy: fail instead of using the first table/view"
    ),
) -> None:
    """
    Export a table view to CSV or Excel.

    Examples:
        view-export export base.json
        view-export export base.json -f csv -s manual -t tblTasks --view viwOpen
    """
    try:
        request = ExportRequest(
            format=fmt,
            filename=filename,
            sheet_name=sheet,
            require_rows=not allow_empty,
        )
        provider = get_selection_provider(
            strategy, table_id=table, view_id=view, fallback_to_first=not no_fallback
        )
    except ViewExportException as e:
        console.print(f"[red]✗ {e}[/red]")
        raise typer.Exit(code=1)

    base = _load(snapshot)
    step = ExportStep(provider, request)
    result = step.execute(ExportContext(snapshot=base, output_dir=output_dir))

    if not result.success:
        console.print(f"[red]✗ {result.error}[/red]")
        raise typer.Exit(code=1)

    meta = result.metadata
    console.print(f"[green]✓ {result.message}[/green]")
    console.print(f"  Table: [bold]{meta['table']}[/bold]")
    console.print(f"  View:  [bold]{meta['view']}[/bold]")
    console.print(f"  Saved: [cyan]{meta['path']}[/cyan] ({meta['size_bytes']} bytes)")


# ============================================================================
# INSPECT
# ============================================================================

@app.command()
def inspect(
    snapshot: str = typer.Argument(..., help="Base snapshot JSON file"),
) -> None:
    """
    Show tables, views and record counts of a snapshot.

    Example:
        view-export inspect base.json
    """
    base = _load(snapshot)

    table_view = RichTable(title=f"Base: {base.name or snapshot}")
    table_view.add_column("Table ID", style="dim")
    table_view.add_column("Table", style="cyan")
    table_view.add_column("View ID", style="dim")
    table_view.add_column("View", style="magenta")
    table_view.add_column("Fields", justify="right")
    table_view.add_column("Records", justify="right", style="green")

    for tbl in base.tables:
        if not tbl.views:
            table_view.add_row(tbl.id, tbl.name, "-", "-", str(len(tbl.fields)), str(len(tbl.records)))
            continue
        for vw in tbl.views:
            table_view.add_row(
                tbl.id,
                tbl.name,
                vw.id,
                vw.name,
                str(len(vw.visible_fields(tbl))),
                str(len(tbl.records)),
            )

    console.print(table_view)
    console.print(
        f"Cursor: table={base.active_table_id or '-'} view={base.active_view_id or '-'}"
    )


if __name__ == "__main__":
    app()
