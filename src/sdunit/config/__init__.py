# topmark:header:start
#
#   project      : SdUnit
#   file         : __init__.py
#   file_relpath : src/sdunit/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 SdUnit contributors
#
# topmark:header:end

"""Runtime configuration for SdUnit: logging setup and canonical key names."""

from __future__ import annotations
