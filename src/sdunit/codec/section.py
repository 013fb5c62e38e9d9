# topmark:header:start
#
#   project      : SdUnit
#   file         : section.py
#   file_relpath : src/sdunit/codec/section.py
#   license      : MIT
#   copyright    : (c) 2025 SdUnit contributors
#
# topmark:header:end

"""Encode and decode single unit file sections.

Encoding renders one key/value mapping as a standalone section text::

    [Unit]
    Description = Example
    After = network.target

(with a trailing blank line). Decoding looks a section up by name in a parsed
`IniDocument` and projects its entries into a section record.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, TypeVar

from sdunit.codec.ini import WRITE_ERRORS, IniDocument
from sdunit.config.logging import get_logger
from sdunit.core.errors import MalformedSectionError, MissingSectionError, SectionEncodeError

if TYPE_CHECKING:
    from collections.abc import Mapping

    from sdunit.config.logging import SdUnitLogger
    from sdunit.model.sections import SectionRecord

logger: SdUnitLogger = get_logger(__name__)

R = TypeVar("R", bound="SectionRecord")


def encode_section(name: str, entries: Mapping[str, str]) -> str:
    """Render one section as text.

    Args:
        name (str): Section name, written as the ``[name]`` header.
        entries (Mapping[str, str]): Keys and values in emission order.

    Returns:
        str: Header line, one ``key = value`` line per entry, and a trailing blank line.

    Raises:
        SectionEncodeError: If the writer rejects the section name, a key or a value.
    """
    document = IniDocument.new()
    try:
        document.add_section(name)
        for key, value in entries.items():
            document.set(name, key, value)
    except WRITE_ERRORS as exc:
        logger.debug("Writer rejected [%s]: %s", name, exc)
        raise SectionEncodeError(name, exc) from exc

    text: str = document.render()
    logger.trace("Encoded [%s] with %d key(s)", name, len(entries))
    return text


def encode_record(record: SectionRecord) -> str:
    """Render a section record as text. See `encode_section`."""
    return encode_section(record.SECTION, record.to_mapping())


def read_section(document: IniDocument, name: str, *, required: bool) -> dict[str, str] | None:
    """Return the entries of section ``name``.

    Args:
        document (IniDocument): The parsed document.
        name (str): Section name (case-sensitive).
        required (bool): Whether the section must be present.

    Returns:
        dict[str, str] | None: The entries, or None for an absent optional section.

    Raises:
        MissingSectionError: If ``required`` and the section is absent.
    """
    entries: dict[str, str] | None = document.section(name)
    if entries is None and required:
        raise MissingSectionError(name)
    return entries


def decode_section(
    document: IniDocument,
    record_type: type[R],
    *,
    required: bool,
    strict: bool = False,
) -> R | None:
    """Decode the section of ``record_type`` from a parsed document.

    Args:
        document (IniDocument): The parsed document.
        record_type (type[R]): Section record class; its ``SECTION`` names the section.
        required (bool): Whether the section must be present.
        strict (bool): Reject keys outside the record's field table.

    Returns:
        R | None: A new record, or None for an absent optional section.

    Raises:
        MissingSectionError: If ``required`` and the section is absent.
        MalformedSectionError: If the entries cannot be projected into ``record_type``.
    """
    name: str = record_type.SECTION
    entries: dict[str, str] | None = read_section(document, name, required=required)
    if entries is None:
        logger.debug("Optional [%s] section absent", name)
        return None
    try:
        record: R = record_type.from_mapping(entries, strict=strict)
    except (TypeError, ValueError) as exc:
        raise MalformedSectionError(name, exc) from exc
    logger.trace("Decoded [%s] with %d key(s)", name, len(entries))
    return record
