# topmark:header:start
#
#   project      : SdUnit
#   file         : ini.py
#   file_relpath : src/sdunit/codec/ini.py
#   license      : MIT
#   copyright    : (c) 2025 SdUnit contributors
#
# topmark:header:end

"""INI document adapter over ``configparser``.

SdUnit depends on the INI layer through two operations only: parse text into
named sections of key/value pairs, and render named sections back into text.
`IniDocument` exposes exactly that, configured for unit files:

- section names and keys keep their case (``optionxform = str``),
- ``=`` is the only key/value delimiter,
- interpolation is disabled (``%`` is literal),
- ``#`` and ``;`` start comment lines,
- a key repeated within a section keeps its last value,
- there is no implicit defaults section: ``[DEFAULT]`` is an ordinary section.

Rendered lines are normalized to ``key = value`` with exactly one space around
``=`` and no trailing whitespace.
"""

from __future__ import annotations

import configparser
import io
from typing import TYPE_CHECKING, Final

from sdunit.config.logging import get_logger
from sdunit.core.errors import DocumentParseError

if TYPE_CHECKING:
    from sdunit.config.logging import SdUnitLogger

logger: SdUnitLogger = get_logger(__name__)

DELIMITER: Final[str] = "="

# Errors the writer may raise while building a document.
WRITE_ERRORS: Final[tuple[type[Exception], ...]] = (configparser.Error, TypeError, ValueError)


def _new_parser() -> configparser.ConfigParser:
    parser = configparser.ConfigParser(
        delimiters=(DELIMITER,),
        interpolation=None,
        strict=False,
        # No header can name an empty section, so there are no shared defaults.
        default_section="",
    )
    parser.optionxform = str  # type: ignore[assignment,method-assign]
    return parser


def normalize_line(line: str) -> str:
    """Normalize whitespace around the first ``=`` of a key/value line.

    Section headers, blank lines and continuation lines (leading whitespace) are
    only stripped of trailing whitespace.

    Examples:
        >>> normalize_line("After   =  network.target ")
        'After = network.target'
        >>> normalize_line("ExecStart = ")
        'ExecStart ='
    """
    if not line or line[0].isspace() or line.startswith("["):
        return line.rstrip()
    key, sep, value = line.partition(DELIMITER)
    if not sep:
        return line.rstrip()
    return f"{key.strip()} {DELIMITER} {value.strip()}".rstrip()


class IniDocument:
    """An ordered collection of named sections of key/value pairs."""

    _parser: configparser.ConfigParser

    def __init__(self, parser: configparser.ConfigParser | None = None) -> None:
        self._parser = parser if parser is not None else _new_parser()

    @classmethod
    def new(cls) -> IniDocument:
        """Return an empty document."""
        return cls()

    def section_names(self) -> list[str]:
        """Return the section names in document order."""
        return self._parser.sections()

    def has_section(self, name: str) -> bool:
        """True if the document has a section called ``name`` (case-sensitive)."""
        return self._parser.has_section(name)

    def section(self, name: str) -> dict[str, str] | None:
        """Return the entries of section ``name``, or None if it is absent."""
        if not self._parser.has_section(name):
            return None
        return {
            key: self._parser.get(name, key, raw=True) for key in self._parser.options(name)
        }

    def add_section(self, name: str) -> None:
        """Append a new, empty section.

        Raises:
            configparser.DuplicateSectionError: If the section already exists.
            ValueError: If ``name`` is empty.
            TypeError: If ``name`` is not a string.
        """
        self._parser.add_section(name)

    def set(self, section: str, key: str, value: str) -> None:
        """Set ``key`` to ``value`` in an existing section.

        Raises:
            configparser.NoSectionError: If the section does not exist.
            TypeError: If ``key`` or ``value`` is not a string.
        """
        self._parser.set(section, key, value)

    def render(self) -> str:
        """Render the document as text.

        Every section is a header line, its ``key = value`` lines and one
        trailing blank line.
        """
        buffer = io.StringIO()
        self._parser.write(buffer, space_around_delimiters=True)
        lines: list[str] = buffer.getvalue().split("\n")
        # The writer terminates every line, so the last element is empty.
        return "".join(f"{normalize_line(line)}\n" for line in lines[:-1])


def parse_document(text: str) -> IniDocument:
    """Parse ``text`` into an `IniDocument`.

    Args:
        text (str): The unit file contents.

    Returns:
        IniDocument: The parsed document.

    Raises:
        DocumentParseError: If the parser rejects the text (e.g. a key line
            before the first section header).
    """
    parser: configparser.ConfigParser = _new_parser()
    try:
        parser.read_string(text)
    except configparser.Error as exc:
        raise DocumentParseError(f"unable to parse unit document: {exc}") from exc
    logger.debug("Parsed unit document with sections: %s", ", ".join(parser.sections()))
    return IniDocument(parser)
