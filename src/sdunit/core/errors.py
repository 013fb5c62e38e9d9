# topmark:header:start
#
#   project      : SdUnit
#   file         : errors.py
#   file_relpath : src/sdunit/core/errors.py
#   license      : MIT
#   copyright    : (c) 2025 SdUnit contributors
#
# topmark:header:end

"""Exceptions raised by the SdUnit library.

All library errors derive from `SdUnitError`. Section-level errors carry the name
of the offending section in ``.section``; wrapped causes are chained with
``raise ... from exc`` so ``__cause__`` holds the underlying parser/writer error.

Policy:
    - Decoding fails fast: the first missing or malformed section is raised.
    - Encoding aggregates: every failing section is collected into one
      `MarshalError`.
"""

from __future__ import annotations

from collections.abc import Sequence


class SdUnitError(Exception):
    """Base class for all SdUnit errors."""


class SectionError(SdUnitError):
    """An error attached to a single named section.

    Attributes:
        section (str): The section name as it appears in the document (e.g. ``"Service"``).
    """

    section: str

    def __init__(self, section: str, message: str) -> None:
        super().__init__(message)
        self.section = section


class MissingSectionError(SectionError):
    """A mandatory section is absent from the document."""

    def __init__(self, section: str) -> None:
        super().__init__(section, f"missing required [{section}] section")


class MalformedSectionError(SectionError):
    """A section is present but its entries cannot be projected into its record type."""

    def __init__(self, section: str, reason: object) -> None:
        super().__init__(section, f"unable to decode [{section}] section: {reason}")


class SectionEncodeError(SectionError):
    """The INI writer rejected a section while rendering it."""

    def __init__(self, section: str, reason: object) -> None:
        super().__init__(section, f"unable to encode [{section}] section: {reason}")


class DocumentParseError(SdUnitError):
    """The text could not be parsed as an INI-style document."""


class DescriptionFormatError(SdUnitError):
    """A description file has an unsupported suffix or cannot be decoded."""


class MarshalError(SdUnitError):
    """One or more sections failed to encode.

    The message lists every member error on its own line, so a caller sees all
    structural problems of a record in one pass.

    Attributes:
        errors (tuple[SectionEncodeError, ...]): The collected section failures, in
            emission order.
    """

    errors: tuple[SectionEncodeError, ...]

    def __init__(self, errors: Sequence[SectionEncodeError]) -> None:
        self.errors = tuple(errors)
        super().__init__("\n".join(str(e) for e in self.errors))

    @property
    def sections(self) -> tuple[str, ...]:
        """Names of the sections that failed to encode."""
        return tuple(e.section for e in self.errors)
