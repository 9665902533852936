"""Starter .gapscan.toml template."""

CONFIG_FILENAME = ".gapscan.toml"

DEFAULT_TOML = """\
# gapscan configuration
version = "1.0"

[input]
delimiter = ","           # "" = whole line is one field, "\\t" = TAB
index = 1                 # 1-based field index
format = "uint"           # uint | int | unix | unix_ms | rfc-3339
comment = "#"             # "" disables comment detection
allow_invalid = false     # skip empty / invalid lines instead of halting

[gap]
relation = "gt"           # gt | ge | lt | le
# threshold = "1"         # numeric formats: signed integer (default 1)
#                         # timestamp formats: integer + d/h/m/s (default "1h")
# allow_negative = false  # accept negative time-based thresholds

[output]
mode = "diff"             # diff | filter
# delimiter = ","         # diff mode only; defaults to the input delimiter
show_summary = false
"""
