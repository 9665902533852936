"""Input line source — a named file, or stdin for ``-``."""

from __future__ import annotations

import io
import sys
from contextlib import contextmanager
from pathlib import Path
from typing import IO, Iterable, Iterator

from gapscan.lines.models import RawLine

STDIN_PATH = "-"


class SourceError(Exception):
    """Raised when the input cannot be opened or read."""


def _strip_terminator(line: str) -> str:
    """Remove a trailing LF / CRLF."""
    if line.endswith("\n"):
        line = line[:-1]
    if line.endswith("\r"):
        line = line[:-1]
    return line


def iter_lines(stream: Iterable[str]) -> Iterator[RawLine]:
    """Yield numbered RawLines from *stream*, dropping a leading BOM."""
    for line_no, line in enumerate(stream, start=1):
        text = _strip_terminator(line)
        if line_no == 1:
            text = text.lstrip("\ufeff")
        yield RawLine(line_no=line_no, text=text)


@contextmanager
def open_source(path: str) -> Iterator[Iterator[RawLine]]:
    """Open *path* (or stdin for ``-``) and yield a lazy RawLine iterator.

    Lines end at LF only; a lone CR stays part of the line text. Read
    failures while iterating surface as SourceError.
    """
    if path == STDIN_PATH:
        stdin = io.TextIOWrapper(sys.stdin.buffer, encoding="utf-8", errors="replace", newline="\n")
        try:
            yield _guarded(stdin, "<stdin>")
        finally:
            stdin.detach()
        return

    try:
        handle: IO[str] = open(Path(path), encoding="utf-8", errors="replace", newline="\n")
    except OSError as exc:
        raise SourceError(f"cannot open {path}: {exc.strerror or exc}") from exc
    with handle:
        yield _guarded(handle, path)


def _guarded(stream: IO[str], name: str) -> Iterator[RawLine]:
    try:
        yield from iter_lines(stream)
    except (OSError, UnicodeDecodeError) as exc:
        raise SourceError(f"failed reading {name}: {exc}") from exc
