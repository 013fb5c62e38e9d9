# topmark:header:start
#
#   project      : SdUnit
#   file         : description.py
#   file_relpath : src/sdunit/io/description.py
#   license      : MIT
#   copyright    : (c) 2025 SdUnit contributors
#
# topmark:header:end

"""Load and dump daemon descriptions in TOML or JSON.

Description tables may use native TOML/JSON scalars for convenience; they are
rendered to unit file text before projection:

- booleans become ``yes`` / ``no``,
- integers and floats use ``str()``,
- arrays of scalars are joined with a single space (the systemd list convention).

Tables nested deeper than one level are passed through unchanged and rejected
by the record projection.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from enum import Enum
from typing import TYPE_CHECKING, Any, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from sdunit.config.logging import get_logger
from sdunit.constants import JSON_SUFFIX, TOML_SUFFIX
from sdunit.core.errors import DescriptionFormatError
from sdunit.model.daemon import Daemon

if TYPE_CHECKING:
    from pathlib import Path

    from sdunit.config.logging import SdUnitLogger

logger: SdUnitLogger = get_logger(__name__)


class DescriptionFormat(str, Enum):
    """Serialization format of a description.

    Attributes:
        TOML: A TOML document, one table per section.
        JSON: A JSON object, one member object per section.
    """

    TOML = "toml"
    JSON = "json"


def format_for_path(path: Path) -> DescriptionFormat:
    """Return the description format implied by the suffix of ``path``.

    Raises:
        DescriptionFormatError: If the suffix is neither ``.toml`` nor ``.json``.
    """
    suffix: str = path.suffix.lower()
    if suffix == TOML_SUFFIX:
        return DescriptionFormat.TOML
    if suffix == JSON_SUFFIX:
        return DescriptionFormat.JSON
    raise DescriptionFormatError(
        f"unsupported description file {path.name!r}: expected {TOML_SUFFIX} or {JSON_SUFFIX}"
    )


def normalize_value(value: object) -> object:
    """Render a TOML/JSON scalar (or array of scalars) as unit file text.

    Examples:
        >>> normalize_value(True)
        'yes'
        >>> normalize_value(["syslog.target", "network-online.target"])
        'syslog.target network-online.target'
        >>> normalize_value(65536)
        '65536'
    """
    if isinstance(value, bool):
        return "yes" if value else "no"
    if isinstance(value, (int, float)):
        return str(value)
    if isinstance(value, (list, tuple)):
        items: list[object] = [normalize_value(v) for v in cast("list[object]", value)]
        if all(isinstance(item, str) for item in items):
            return " ".join(cast("list[str]", items))
    return value


def _normalize_tables(data: Mapping[str, object]) -> dict[str, object]:
    out: dict[str, object] = {}
    for section, table in data.items():
        if isinstance(table, Mapping):
            entries: Mapping[str, object] = cast("Mapping[str, object]", table)
            out[section] = {key: normalize_value(value) for key, value in entries.items()}
        else:
            out[section] = table
    return out


def loads_description(text: str, fmt: DescriptionFormat, *, strict: bool = False) -> Daemon:
    """Decode a description document.

    Args:
        text (str): TOML or JSON text.
        fmt (DescriptionFormat): The format of ``text``.
        strict (bool): Reject keys outside a section's field table.

    Returns:
        Daemon: The described daemon.

    Raises:
        DescriptionFormatError: If the text cannot be parsed, or its top level is
            not a table.
        MissingSectionError: If a mandatory section is absent.
        MalformedSectionError: If a section cannot be projected into its record.
    """
    data_any: Any
    try:
        if fmt is DescriptionFormat.TOML:
            data_any = tomlkit.parse(text).unwrap()
        else:
            data_any = json.loads(text)
    except (TomlkitParseError, json.JSONDecodeError) as exc:
        raise DescriptionFormatError(f"unable to decode {fmt.value} description: {exc}") from exc

    if not isinstance(data_any, dict):
        raise DescriptionFormatError(
            f"{fmt.value} description must be a table of sections, got {type(data_any).__name__}"
        )
    data: dict[str, object] = _normalize_tables(cast("dict[str, object]", data_any))
    return Daemon.from_dict(data, strict=strict)


def load_description(path: Path, *, strict: bool = False) -> Daemon:
    """Read a ``.toml`` or ``.json`` description file.

    Raises:
        DescriptionFormatError: See `format_for_path` and `loads_description`.
        OSError: If the file cannot be read.
    """
    fmt: DescriptionFormat = format_for_path(path)
    text: str = path.read_text(encoding="utf-8")
    logger.debug("Loaded %s description from %s", fmt.value, path)
    return loads_description(text, fmt, strict=strict)


def dumps_description(daemon: Daemon, fmt: DescriptionFormat) -> str:
    """Encode ``daemon`` as a TOML or JSON description.

    Only the keys that would appear in the unit file are written.
    """
    data: dict[str, dict[str, str]] = daemon.to_dict()
    if fmt is DescriptionFormat.JSON:
        return json.dumps(data, indent=2) + "\n"
    # tomlkit is treated as untyped here.
    return cast("str", cast("Any", tomlkit).dumps(data))


def dump_description(daemon: Daemon, path: Path) -> Path:
    """Write ``daemon`` as a description file; the suffix of ``path`` selects the format."""
    fmt: DescriptionFormat = format_for_path(path)
    path.write_text(dumps_description(daemon, fmt), encoding="utf-8")
    logger.debug("Wrote %s description to %s", fmt.value, path)
    return path
