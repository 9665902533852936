"""gapscan — find gaps between consecutive values in delimited text."""

__version__ = "0.1.0"
