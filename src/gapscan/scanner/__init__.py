"""Scanner — comparator, line engine, error taxonomy."""

from gapscan.scanner.comparator import compare
from gapscan.scanner.engine import read_record, run, scan
from gapscan.scanner.errors import ExitStatus, LineError, abbreviate
from gapscan.scanner.models import GapEvent, Record, ScanResult

__all__ = [
    "ExitStatus",
    "GapEvent",
    "LineError",
    "Record",
    "ScanResult",
    "abbreviate",
    "compare",
    "read_record",
    "run",
    "scan",
]
