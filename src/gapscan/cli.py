"""gapscan CLI — Typer application with scan and init commands."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape

from gapscan import __version__

app = typer.Typer(
    name="gapscan",
    help="Find (time) gaps between consecutive values in delimited text.",
    add_completion=False,
    no_args_is_help=True,
)

console = Console(stderr=True)


def _pick_relation(
    gt: Optional[str],
    ge: Optional[str],
    lt: Optional[str],
    le: Optional[str],
) -> Optional[tuple[str, str]]:
    """Return (relation, gap) for the one relation option given, if any."""
    given = [(name, gap) for name, gap in (("gt", gt), ("ge", ge), ("lt", lt), ("le", le)) if gap is not None]
    if len(given) > 1:
        names = ", ".join(f"--{name}" for name, _ in given)
        console.print(f"[bold red]Usage error:[/bold red] {names} are mutually exclusive")
        raise typer.Exit(code=2)
    return given[0] if given else None


# ── scan ──────────────────────────────────────────────────────────────────────


@app.command()
def scan(
    file: str = typer.Argument(..., help="Input file, or '-' for stdin"),
    config: Optional[str] = typer.Option(None, "--config", help="Path to .gapscan.toml"),
    delimiter: Optional[str] = typer.Option(None, "--delimiter", "-d", help="Input delimiter ('' = whole line, '\\t' = TAB)"),
    index: Optional[int] = typer.Option(None, "--index", "-i", help="1-based field index"),
    format: Optional[str] = typer.Option(None, "--format", "-f", help="uint | int | unix | unix_ms | rfc-3339"),
    gt: Optional[str] = typer.Option(None, "--gt", metavar="GAP", help="Report gaps greater than GAP (default relation)"),
    ge: Optional[str] = typer.Option(None, "--ge", metavar="GAP", help="Report gaps greater than or equal to GAP"),
    lt: Optional[str] = typer.Option(None, "--lt", metavar="GAP", help="Report gaps less than GAP"),
    le: Optional[str] = typer.Option(None, "--le", metavar="GAP", help="Report gaps less than or equal to GAP"),
    comment: Optional[str] = typer.Option(None, "--comment", "-c", help="Comment marker ('' disables)"),
    allow_invalid: bool = typer.Option(False, "--allow-invalid", "-a", help="Skip empty or invalid lines instead of halting"),
    allow_negative_gap: bool = typer.Option(False, "--allow-negative-gap", help="Accept negative time-based gaps"),
    diff: bool = typer.Option(False, "--diff", help="Diff mode: one line per gap with both values (default)"),
    filter: bool = typer.Option(False, "--filter", "-F", help="Filter mode: print both offending lines unchanged"),
    output_delimiter: Optional[str] = typer.Option(None, "--output-delimiter", "-o", help="Diff mode output delimiter (default: input delimiter)"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Print resolved settings before scanning"),
    summary: bool = typer.Option(False, "--summary", help="Print run counters after scanning"),
) -> None:
    """Scan FILE and report consecutive values whose difference crosses GAP."""
    from gapscan.config.loader import ConfigError, load_config
    from gapscan.config.resolver import resolve_settings
    from gapscan.lines.source import SourceError, open_source
    from gapscan.output.sink import LineSink
    from gapscan.output.terminal import print_settings
    from gapscan.scanner.engine import run
    from gapscan.values.threshold import GapSyntaxError

    if diff and filter:
        console.print("[bold red]Usage error:[/bold red] --diff and --filter are mutually exclusive")
        raise typer.Exit(code=2)
    relation = _pick_relation(gt, ge, lt, le)

    # --- Load config ---
    try:
        cfg = load_config(Path.cwd(), config)
    except ConfigError as exc:
        console.print(f"[bold red]Config error:[/bold red] {escape(str(exc))}", soft_wrap=True)
        raise typer.Exit(code=2) from exc

    # --- CLI overrides ---
    if delimiter is not None:
        cfg.input.delimiter = delimiter
    if index is not None:
        cfg.input.index = index
    if format is not None:
        cfg.input.format = format  # type: ignore[assignment]
    if comment is not None:
        cfg.input.comment = comment
    if allow_invalid:
        cfg.input.allow_invalid = True
    if relation is not None:
        cfg.gap.relation, cfg.gap.threshold = relation  # type: ignore[assignment]
    if allow_negative_gap:
        cfg.gap.allow_negative = True
    if filter:
        cfg.output.mode = "filter"
    elif diff:
        cfg.output.mode = "diff"
    if output_delimiter is not None:
        cfg.output.delimiter = output_delimiter
    if summary:
        cfg.output.show_summary = True

    try:
        settings = resolve_settings(cfg)
    except (ConfigError, GapSyntaxError) as exc:
        console.print(f"[bold red]Config error:[/bold red] {escape(str(exc))}", soft_wrap=True)
        raise typer.Exit(code=2) from exc

    if verbose:
        print_settings(console, settings, file)

    # --- Run scan ---
    try:
        with open_source(file) as lines:
            status = run(
                settings,
                lines,
                LineSink(sys.stdout),
                console=console,
                show_summary=cfg.output.show_summary,
            )
    except SourceError as exc:
        console.print(f"[bold red]Input error:[/bold red] {escape(str(exc))}", soft_wrap=True)
        raise typer.Exit(code=2) from exc

    raise typer.Exit(code=int(status))


# ── init ──────────────────────────────────────────────────────────────────────


@app.command()
def init() -> None:
    """Generate a starter .gapscan.toml in the current directory."""
    from gapscan.config.defaults import CONFIG_FILENAME, DEFAULT_TOML

    config_path = Path.cwd() / CONFIG_FILENAME

    if config_path.exists():
        console.print(f"[yellow]⚠[/yellow]  {CONFIG_FILENAME} already exists at {escape(str(config_path))}")
        raise typer.Exit(code=1)

    config_path.write_text(DEFAULT_TOML, encoding="utf-8")
    console.print(f"[green]✓[/green] Created {escape(str(config_path))}")


# ── version ───────────────────────────────────────────────────────────────────


def _version_callback(value: bool) -> None:
    if value:
        print(f"gapscan {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        False, "--version", "-V", callback=_version_callback,
        is_eager=True, help="Show version and exit",
    ),
) -> None:
    """gapscan — find gaps between consecutive values in delimited text."""
