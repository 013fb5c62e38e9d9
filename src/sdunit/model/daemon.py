# topmark:header:start
#
#   project      : SdUnit
#   file         : daemon.py
#   file_relpath : src/sdunit/model/daemon.py
#   license      : MIT
#   copyright    : (c) 2025 SdUnit contributors
#
# topmark:header:end

"""The `Daemon` record: a complete service unit file.

A daemon is composed of three mandatory sections (`Unit`, `Service`,
`Install`) and an optional `Socket` section. It converts to and from:

- the unit file text (`Daemon.to_text` / `Daemon.from_text`, or the module-level
  `marshal` / `unmarshal`), and
- a plain mapping of section name to key/value table (`Daemon.to_dict` /
  `Daemon.from_dict`), used for TOML/JSON descriptions.

Error policy:
    - Encoding collects the failures of every section and raises them together
      as one `MarshalError`; no text is returned.
    - Decoding fails fast, in the fixed order parse, ``Unit``, ``Service``,
      ``Install``, ``Socket``.

An optional ``[Socket]`` section that is absent, or present without entries,
decodes to ``socket=None``.

See also:
    - https://www.freedesktop.org/software/systemd/man/latest/systemd.service.html
    - https://www.freedesktop.org/software/systemd/man/latest/systemd.socket.html
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING, TypeVar

from sdunit.codec.ini import parse_document
from sdunit.codec.section import decode_section, encode_record
from sdunit.config.keys import MANDATORY_SECTIONS, OPTIONAL_SECTIONS
from sdunit.config.logging import get_logger
from sdunit.core.errors import (
    MalformedSectionError,
    MarshalError,
    MissingSectionError,
    SectionEncodeError,
)
from sdunit.model.sections import Install, SectionRecord, Service, Socket, Unit

if TYPE_CHECKING:
    from sdunit.codec.ini import IniDocument
    from sdunit.config.logging import SdUnitLogger

logger: SdUnitLogger = get_logger(__name__)

R = TypeVar("R", bound=SectionRecord)


@dataclass(frozen=True, slots=True)
class Daemon:
    """A complete service unit.

    Attributes:
        unit (Unit): The mandatory ``[Unit]`` section.
        service (Service): The mandatory ``[Service]`` section.
        install (Install): The mandatory ``[Install]`` section.
        socket (Socket | None): The optional ``[Socket]`` section.
    """

    unit: Unit
    service: Service
    install: Install
    socket: Socket | None = None

    def sections(self) -> tuple[SectionRecord, ...]:
        """Return the section records in emission order (``Socket`` last, if present)."""
        records: tuple[SectionRecord, ...] = (self.unit, self.service, self.install)
        if self.socket is not None:
            records += (self.socket,)
        return records

    # --- text form ---

    def to_text(self) -> str:
        """Render the daemon as unit file text.

        Returns:
            str: The document, stripped of surrounding whitespace.

        Raises:
            MarshalError: If one or more sections fail to encode; carries every
                section failure.
        """
        chunks: list[str] = []
        failures: list[SectionEncodeError] = []
        for record in self.sections():
            try:
                chunks.append(encode_record(record))
            except SectionEncodeError as exc:
                failures.append(exc)

        if failures:
            logger.debug("%d section(s) failed to encode", len(failures))
            raise MarshalError(failures)

        return "".join(chunks).strip()

    @classmethod
    def from_text(cls, text: str, *, strict: bool = False) -> Daemon:
        """Parse unit file text into a daemon.

        Args:
            text (str): The unit file contents.
            strict (bool): Reject keys outside a section's field table instead of
                dropping them.

        Returns:
            Daemon: The decoded daemon.

        Raises:
            DocumentParseError: If the text is not a valid INI document.
            MissingSectionError: If ``Unit``, ``Service`` or ``Install`` is absent.
            MalformedSectionError: If a section cannot be projected into its record.
        """
        document: IniDocument = parse_document(text)
        _warn_unknown_sections(document.section_names())

        unit: Unit = _required_section(document, Unit, strict=strict)
        service: Service = _required_section(document, Service, strict=strict)
        install: Install = _required_section(document, Install, strict=strict)

        socket: Socket | None = None
        if document.section(Socket.SECTION):
            socket = decode_section(document, Socket, required=False, strict=strict)

        return cls(unit=unit, service=service, install=install, socket=socket)

    # --- mapping form ---

    def to_dict(self) -> dict[str, dict[str, str]]:
        """Return the projected sections keyed by section name.

        Optional empty fields are omitted exactly as in the text form; the
        ``Socket`` table is present only when the daemon has a socket.
        """
        return {record.SECTION: record.to_mapping() for record in self.sections()}

    @classmethod
    def from_dict(cls, data: Mapping[str, object], *, strict: bool = False) -> Daemon:
        """Build a daemon from a mapping of section name to key/value table.

        Args:
            data (Mapping[str, object]): E.g. ``{"Unit": {"Description": "..."}, ...}``.
            strict (bool): Reject keys outside a section's field table.

        Returns:
            Daemon: The decoded daemon.

        Raises:
            MissingSectionError: If a mandatory section is absent.
            MalformedSectionError: If a section is not a table, or holds an unknown
                key (strict) or a non-string value.
        """
        _warn_unknown_sections(list(data))

        unit: Unit = _section_from_dict(data, Unit, strict=strict)
        service: Service = _section_from_dict(data, Service, strict=strict)
        install: Install = _section_from_dict(data, Install, strict=strict)

        socket: Socket | None = None
        if data.get(Socket.SECTION):
            socket = _section_from_dict(data, Socket, strict=strict)

        return cls(unit=unit, service=service, install=install, socket=socket)


def _required_section(document: IniDocument, record_type: type[R], *, strict: bool) -> R:
    record: R | None = decode_section(document, record_type, required=True, strict=strict)
    if record is None:  # pragma: no cover - decode_section raises for required sections
        raise MissingSectionError(record_type.SECTION)
    return record


def _section_from_dict(data: Mapping[str, object], record_type: type[R], *, strict: bool = False) -> R:
    name: str = record_type.SECTION
    if name not in data:
        raise MissingSectionError(name)
    table: object = data[name]
    if not isinstance(table, Mapping):
        raise MalformedSectionError(name, f"expected a table, got {type(table).__name__}")
    try:
        return record_type.from_mapping(table, strict=strict)
    except (TypeError, ValueError) as exc:
        raise MalformedSectionError(name, exc) from exc


def _warn_unknown_sections(names: list[str]) -> None:
    known: tuple[str, ...] = MANDATORY_SECTIONS + OPTIONAL_SECTIONS
    for name in names:
        if name not in known:
            logger.warning("Ignoring unsupported [%s] section", name)


def marshal(daemon: Daemon) -> str:
    """Render ``daemon`` as unit file text. See `Daemon.to_text`."""
    return daemon.to_text()


def unmarshal(text: str, *, strict: bool = False) -> Daemon:
    """Parse unit file text into a `Daemon`. See `Daemon.from_text`."""
    return Daemon.from_text(text, strict=strict)
