"""Load and merge configuration from .gapscan.toml and env vars.

Command-line overrides are applied on top by the CLI.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import Any, Dict, Optional

if sys.version_info >= (3, 11):
    import tomllib
else:
    try:
        import tomllib  # type: ignore[import-not-found]
    except ModuleNotFoundError:
        import tomli as tomllib  # type: ignore[no-redef]

from gapscan.config.defaults import CONFIG_FILENAME
from gapscan.config.schema import (
    FORMAT_NAMES,
    MODE_NAMES,
    GapConfig,
    GapScanConfig,
    InputConfig,
    OutputConfig,
)

_TRUTHY = ("1", "true", "yes")
_FALSY = ("0", "false", "no")


class ConfigError(Exception):
    """Raised when config is malformed, unreadable, or inconsistent."""


def find_config_file(base_dir: Path, override: Optional[str] = None) -> Optional[Path]:
    """Locate the config file. *override* takes precedence."""
    if override:
        p = Path(override)
        if not p.is_file():
            raise ConfigError(f"Config file not found: {override}")
        return p
    candidate = base_dir / CONFIG_FILENAME
    return candidate if candidate.is_file() else None


def _parse_toml(path: Path) -> Dict[str, Any]:
    try:
        with open(path, "rb") as f:
            return tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as exc:
        raise ConfigError(f"Failed to parse {path}: {exc}") from exc


def _merge_env_overrides(cfg: GapScanConfig) -> None:
    """Apply GAPSCAN_* environment variable overrides; invalid values are ignored."""
    if (val := os.environ.get("GAPSCAN_DELIMITER")) is not None:
        cfg.input.delimiter = val
    if val := os.environ.get("GAPSCAN_INDEX"):
        try:
            cfg.input.index = int(val)
        except ValueError:
            pass
    if val := os.environ.get("GAPSCAN_FORMAT"):
        if val in FORMAT_NAMES:
            cfg.input.format = val  # type: ignore[assignment]
    if (val := os.environ.get("GAPSCAN_COMMENT")) is not None:
        cfg.input.comment = val
    if val := os.environ.get("GAPSCAN_ALLOW_INVALID"):
        if val.lower() in _TRUTHY:
            cfg.input.allow_invalid = True
        elif val.lower() in _FALSY:
            cfg.input.allow_invalid = False
    if val := os.environ.get("GAPSCAN_MODE"):
        if val in MODE_NAMES:
            cfg.output.mode = val  # type: ignore[assignment]


def _build_section(data: Dict[str, Any], cls: type, section: str):
    """Build a dataclass from a TOML section dict, ignoring unknown keys."""
    import dataclasses

    raw = data.get(section, {})
    if not isinstance(raw, dict):
        raise ConfigError(f"[{section}] must be a table")
    valid_fields = {f.name for f in dataclasses.fields(cls)}
    filtered = {k: v for k, v in raw.items() if k in valid_fields}
    return cls(**filtered)


def load_config(
    base_dir: Path,
    config_override: Optional[str] = None,
) -> GapScanConfig:
    """Load and return a GapScanConfig (defaults < file < environment)."""
    config_path = find_config_file(base_dir, config_override)

    if config_path is None:
        cfg = GapScanConfig()
    else:
        raw = _parse_toml(config_path)
        cfg = GapScanConfig(
            version=str(raw.get("version", "1.0")),
            input=_build_section(raw, InputConfig, "input"),
            gap=_build_section(raw, GapConfig, "gap"),
            output=_build_section(raw, OutputConfig, "output"),
        )

    _merge_env_overrides(cfg)
    return cfg
