# topmark:header:start
#
#   project      : SdUnit
#   file         : __init__.py
#   file_relpath : src/sdunit/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 SdUnit contributors
#
# topmark:header:end

"""Click-based command-line interface for SdUnit."""

from __future__ import annotations
