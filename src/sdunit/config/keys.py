# topmark:header:start
#
#   project      : SdUnit
#   file         : keys.py
#   file_relpath : src/sdunit/config/keys.py
#   license      : MIT
#   copyright    : (c) 2025 SdUnit contributors
#
# topmark:header:end

"""Canonical section names and annotation tokens for unit files.

Section names are part of the external document format: they appear verbatim as
``[Unit]`` style headers in unit files and as top-level tables in TOML/JSON
descriptions. They are matched case-sensitively.

Notes:
    - Keep this module behavior-free; it is a pure namespace for constants so it
      can be imported from anywhere without causing cycles.
"""

from __future__ import annotations

from typing import Final


class SectionName:
    """Unit file section names, in the order they are emitted."""

    # Mandatory
    UNIT: Final[str] = "Unit"
    SERVICE: Final[str] = "Service"
    INSTALL: Final[str] = "Install"

    # Optional (socket activation)
    SOCKET: Final[str] = "Socket"


MANDATORY_SECTIONS: Final[tuple[str, ...]] = (
    SectionName.UNIT,
    SectionName.SERVICE,
    SectionName.INSTALL,
)

OPTIONAL_SECTIONS: Final[tuple[str, ...]] = (SectionName.SOCKET,)

# Annotation modifier marking a field as optional (emitted only when non-empty).
OMITEMPTY: Final[str] = "omitempty"
