"""Output sink — line writer that signals a closed downstream consumer.

A broken pipe (``gapscan scan big.csv | head``) is not an error: the
sink raises OutputClosed so the engine can stop cleanly, and points the
underlying file descriptor at the null device so interpreter shutdown
does not hit the same broken pipe while flushing.
"""

from __future__ import annotations

import errno
import os
from typing import TextIO


class OutputClosed(Exception):
    """The downstream consumer closed its end of the output."""


def _is_broken_pipe(exc: OSError) -> bool:
    return isinstance(exc, BrokenPipeError) or exc.errno in (errno.EPIPE, errno.EINVAL)


class LineSink:
    """Write newline-terminated lines to a text stream."""

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    def write_line(self, text: str) -> None:
        if self._closed:
            raise OutputClosed()
        try:
            self._stream.write(text + "\n")
        except OSError as exc:
            self._handle(exc)

    def flush(self) -> None:
        if self._closed:
            return
        try:
            self._stream.flush()
        except OSError as exc:
            self._handle(exc)

    def _handle(self, exc: OSError) -> None:
        if not _is_broken_pipe(exc):
            raise exc
        self._closed = True
        self._detach()
        raise OutputClosed() from exc

    def _detach(self) -> None:
        try:
            fd = self._stream.fileno()
        except (AttributeError, ValueError, OSError):
            return
        devnull = os.open(os.devnull, os.O_WRONLY)
        try:
            os.dup2(devnull, fd)
        finally:
            os.close(devnull)
