# topmark:header:start
#
#   project      : SdUnit
#   file         : __init__.py
#   file_relpath : src/sdunit/io/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 SdUnit contributors
#
# topmark:header:end

"""File I/O for unit files and TOML/JSON descriptions.

A *description* is the mapping form of a `Daemon`: one table per section, keyed
by the directive names used in unit files. For example, in TOML::

    [Unit]
    Description = "Example agent"
    After = ["syslog.target", "network-online.target"]

    [Service]
    ExecStart = "/usr/bin/example-agent"

    [Install]
    WantedBy = "multi-user.target"

TOML is parsed and rendered with `tomlkit`; JSON with the standard library.
"""

from __future__ import annotations

from .description import (
    DescriptionFormat,
    dump_description,
    dumps_description,
    format_for_path,
    load_description,
    loads_description,
    normalize_value,
)
from .files import read_unit_file, write_unit_file

__all__: list[str] = [
    "DescriptionFormat",
    "dump_description",
    "dumps_description",
    "format_for_path",
    "load_description",
    "loads_description",
    "normalize_value",
    "read_unit_file",
    "write_unit_file",
]
