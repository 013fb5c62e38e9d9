# topmark:header:start
#
#   project      : SdUnit
#   file         : __init__.py
#   file_relpath : src/sdunit/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 SdUnit contributors
#
# topmark:header:end

"""SdUnit package.

SdUnit converts typed service-manager unit records to and from the unit file
text format::

    from sdunit import Daemon, Install, Service, Unit, marshal, unmarshal

    text = marshal(
        Daemon(
            unit=Unit(description="Example agent", after="network-online.target"),
            service=Service(type="exec", exec_start="/usr/bin/example-agent"),
            install=Install(wanted_by="multi-user.target"),
        )
    )
    daemon = unmarshal(text)

It also exposes a small CLI (``sdunit``) for rendering and parsing unit files.
"""

from __future__ import annotations

from sdunit.core.errors import (
    DescriptionFormatError,
    DocumentParseError,
    MalformedSectionError,
    MarshalError,
    MissingSectionError,
    SdUnitError,
    SectionEncodeError,
    SectionError,
)
from sdunit.model import Daemon, Install, Service, Socket, Unit, marshal, unmarshal

__all__: list[str] = [
    "Daemon",
    "DescriptionFormatError",
    "DocumentParseError",
    "Install",
    "MalformedSectionError",
    "MarshalError",
    "MissingSectionError",
    "SdUnitError",
    "SectionEncodeError",
    "SectionError",
    "Service",
    "Socket",
    "Unit",
    "marshal",
    "unmarshal",
]
