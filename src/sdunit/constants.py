# topmark:header:start
#
#   project      : SdUnit
#   file         : constants.py
#   file_relpath : src/sdunit/constants.py
#   license      : MIT
#   copyright    : (c) 2025 SdUnit contributors
#
# topmark:header:end

"""SdUnit Constants."""

from __future__ import annotations

from importlib.metadata import version as get_version

SDUNIT_VERSION: str = get_version("sdunit")

# Suffixes recognized for description files.
TOML_SUFFIX: str = ".toml"
JSON_SUFFIX: str = ".json"

# Path argument meaning "read from STDIN" / "write to STDOUT".
STDIO_SENTINEL: str = "-"
