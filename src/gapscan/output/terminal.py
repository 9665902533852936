"""Rich terminal helpers — verbose settings header and run summary (stderr)."""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from gapscan.output.formatter import OutputMode

if TYPE_CHECKING:
    from gapscan.config.resolver import ScanSettings
    from gapscan.scanner.models import ScanResult


def show_delimiter(value: str) -> str:
    """Printable form of a delimiter: TAB as ``\\t``, empty as ``''``."""
    if value == "":
        return "''"
    return value.replace("\t", "\\t")


def print_settings(console: Console, settings: "ScanSettings", source: str) -> None:
    """Print the resolved scan settings as a table."""
    table = Table(
        title="gapscan settings",
        title_style="bold",
        border_style="dim",
        show_header=False,
    )
    table.add_column("Setting", style="cyan")
    table.add_column("Value")

    table.add_row("input", escape(source))
    table.add_row("delimiter", escape(show_delimiter(settings.delimiter)))
    table.add_row("index", str(settings.index))
    table.add_row("format", settings.format.value)
    table.add_row("gap", f"{settings.relation.symbol} {settings.threshold}")
    table.add_row("comment", escape(repr(settings.comment)) if settings.comment else "(disabled)")
    table.add_row("allow invalid", "yes" if settings.allow_invalid else "no")
    if settings.mode is OutputMode.DIFF:
        table.add_row("mode", f"diff (output delimiter {escape(show_delimiter(settings.output_delimiter))})")
    else:
        table.add_row("mode", "filter")

    console.print(table)


def print_summary(console: Console, result: ScanResult) -> None:
    console.print()
    console.print(f"[dim]Lines read:[/dim]     {result.lines_read}")
    console.print(f"[dim]Records:[/dim]        {result.records}")
    console.print(f"[dim]Comments:[/dim]       {result.comments}")
    console.print(f"[dim]Skipped:[/dim]        {result.skipped}")
    console.print(f"[dim]Gaps:[/dim]           {result.gaps}")
    if result.output_closed:
        console.print("[dim]Output closed early by consumer.[/dim]")
    console.print(f"[dim]Duration:[/dim]       {result.scan_duration_ms:.0f}ms")
