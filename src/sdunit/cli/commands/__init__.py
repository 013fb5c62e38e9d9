# topmark:header:start
#
#   project      : SdUnit
#   file         : __init__.py
#   file_relpath : src/sdunit/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 SdUnit contributors
#
# topmark:header:end

"""SdUnit CLI subcommands."""

from __future__ import annotations
