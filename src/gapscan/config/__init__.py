"""Configuration loading, schema, defaults, and resolution."""

from gapscan.config.loader import ConfigError, load_config
from gapscan.config.resolver import ScanSettings, resolve_settings
from gapscan.config.schema import GapScanConfig

__all__ = [
    "ConfigError",
    "GapScanConfig",
    "ScanSettings",
    "load_config",
    "resolve_settings",
]
