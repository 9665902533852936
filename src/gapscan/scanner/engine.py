"""Line engine — drives classification, extraction, parsing and comparison.

The only state carried across lines is the previous valid Record. It is
replaced by each newer valid record and survives skipped comment, empty
or invalid lines, so gaps are still detected across interruptions.
"""

from __future__ import annotations

import time
from typing import TYPE_CHECKING, Iterable, Optional

from rich.console import Console
from rich.markup import escape

from gapscan.lines.classifier import classify
from gapscan.lines.fields import FieldError, extract_field
from gapscan.lines.models import LineKind, RawLine
from gapscan.lines.source import SourceError
from gapscan.output.formatter import build_formatter
from gapscan.output.sink import LineSink, OutputClosed
from gapscan.output.terminal import print_summary
from gapscan.scanner.comparator import compare
from gapscan.scanner.errors import EMPTY_LINE, FORMAT_ERROR, ExitStatus, LineError
from gapscan.scanner.models import Record, ScanResult
from gapscan.values.parser import ValueFormatError, parse_value

if TYPE_CHECKING:
    from gapscan.config.resolver import ScanSettings


def read_record(raw: RawLine, settings: "ScanSettings") -> Record:
    """Extract and parse the configured field of a candidate line.

    Raises LineError on a missing, empty or unparsable field.
    """
    try:
        field = extract_field(raw.text, settings.delimiter, settings.index)
    except FieldError as exc:
        raise LineError(raw.line_no, exc.kind, str(exc)) from exc

    try:
        value = parse_value(field, settings.format)
    except ValueFormatError as exc:
        raise LineError(
            raw.line_no,
            FORMAT_ERROR,
            f"could not be parsed as {settings.format.value}: {exc}",
            field=field,
        ) from exc

    return Record(line_no=raw.line_no, value=value, field=field, text=raw.text)


def scan(
    lines: Iterable[RawLine],
    settings: "ScanSettings",
    sink: LineSink,
) -> ScanResult:
    """Run one pass over *lines*, writing gap events to *sink*.

    Raises LineError on the first invalid line unless
    ``settings.allow_invalid`` is set. A closed output consumer ends the
    scan early and is reported through ``ScanResult.output_closed``.
    """
    start = time.perf_counter()
    result = ScanResult()
    formatter = build_formatter(settings.mode, sink, settings.output_delimiter)
    previous: Optional[Record] = None

    try:
        for raw in lines:
            result.lines_read += 1

            kind = classify(raw.text, settings.comment)
            if kind is LineKind.COMMENT:
                result.comments += 1
                continue

            try:
                if kind is LineKind.EMPTY:
                    raise LineError(raw.line_no, EMPTY_LINE, "line is empty")
                current = read_record(raw, settings)
            except LineError:
                if not settings.allow_invalid:
                    raise
                result.skipped += 1
                continue

            result.records += 1
            if previous is not None:
                event = compare(previous, current, settings.relation, settings.threshold)
                if event is not None:
                    result.gaps += 1
                    formatter.emit(event)
            previous = current

        sink.flush()
    except OutputClosed:
        result.output_closed = True

    result.scan_duration_ms = round((time.perf_counter() - start) * 1000, 2)
    return result


def run(
    settings: "ScanSettings",
    lines: Iterable[RawLine],
    sink: LineSink,
    *,
    console: Optional[Console] = None,
    show_summary: bool = False,
) -> ExitStatus:
    """Scan *lines* and map the outcome to an exit status.

    Fatal diagnostics go to *console* (stderr by default) as a single line.
    """
    console = console or Console(stderr=True)

    try:
        result = scan(lines, settings, sink)
    except LineError as exc:
        _flush_quietly(sink)
        console.print(f"[bold red]Error:[/bold red] {escape(exc.diagnostic())}", soft_wrap=True)
        return ExitStatus.DATA_ERROR
    except SourceError as exc:
        _flush_quietly(sink)
        console.print(f"[bold red]Input error:[/bold red] {escape(str(exc))}", soft_wrap=True)
        return ExitStatus.SETUP_ERROR
    except OSError as exc:
        console.print(f"[bold red]Output error:[/bold red] {escape(str(exc))}", soft_wrap=True)
        return ExitStatus.SETUP_ERROR

    if show_summary:
        print_summary(console, result)
    return ExitStatus.OK


def _flush_quietly(sink: LineSink) -> None:
    """Flush gaps reported before a halt; a closed consumer is ignored."""
    try:
        sink.flush()
    except OutputClosed:
        pass
