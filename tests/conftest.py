"""Shared test fixtures — sample inputs and settings factories."""

from __future__ import annotations

import io
import textwrap
from typing import Callable, List, Optional

import pytest

from gapscan.config.resolver import ScanSettings, resolve_settings
from gapscan.config.schema import GapScanConfig
from gapscan.lines.models import RawLine
from gapscan.lines.source import iter_lines


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    """Keep GAPSCAN_* variables from the developer's shell out of tests."""
    for name in (
        "GAPSCAN_DELIMITER",
        "GAPSCAN_INDEX",
        "GAPSCAN_FORMAT",
        "GAPSCAN_COMMENT",
        "GAPSCAN_ALLOW_INVALID",
        "GAPSCAN_MODE",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def olympics_csv() -> str:
    """Summer games by year, with two cancelled editions."""
    return textwrap.dedent("""\
        1,1924,X
        2,1928,Y
        3,1932,Z
        4,1936,W
        N/A,Cancelled
        N/A,Cancelled
        5,1948,V
    """)


@pytest.fixture
def hourly_rfc3339() -> str:
    """Hourly readings with a 3h hole and a duplicated stamp."""
    return textwrap.dedent("""\
        # sensor,time,reading
        s1,2024-03-01T00:00:00Z,10
        s1,2024-03-01T01:00:00Z,11
        s1,2024-03-01T04:00:00Z,12
        s1,2024-03-01T05:00:00+00:00,13
        s1,2024-03-01T05:00:00Z,13
        s1,2024-03-01T08:00:00+02:00,14
    """)


@pytest.fixture
def make_settings() -> Callable[..., ScanSettings]:
    """Factory building ScanSettings through the real resolver."""

    def _make(
        *,
        delimiter: str = ",",
        index: int = 1,
        format: str = "uint",
        relation: str = "gt",
        threshold: Optional[str] = None,
        comment: str = "#",
        allow_invalid: bool = False,
        allow_negative: bool = False,
        mode: str = "diff",
        output_delimiter: Optional[str] = None,
    ) -> ScanSettings:
        cfg = GapScanConfig()
        cfg.input.delimiter = delimiter
        cfg.input.index = index
        cfg.input.format = format  # type: ignore[assignment]
        cfg.input.comment = comment
        cfg.input.allow_invalid = allow_invalid
        cfg.gap.relation = relation  # type: ignore[assignment]
        cfg.gap.threshold = threshold
        cfg.gap.allow_negative = allow_negative
        cfg.output.mode = mode  # type: ignore[assignment]
        cfg.output.delimiter = output_delimiter
        return resolve_settings(cfg)

    return _make


@pytest.fixture
def to_lines() -> Callable[[str], List[RawLine]]:
    """Turn a text blob into numbered RawLines."""

    def _to_lines(text: str) -> List[RawLine]:
        return list(iter_lines(io.StringIO(text)))

    return _to_lines
