# topmark:header:start
#
#   project      : SdUnit
#   file         : __init__.py
#   file_relpath : src/sdunit/codec/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 SdUnit contributors
#
# topmark:header:end

"""Text codec for unit files.

- `sdunit.codec.ini` wraps the INI parser/writer (``configparser``) behind a
  small document API.
- `sdunit.codec.section` encodes one section record to text and decodes one
  named section of a parsed document back into a record.
"""

from __future__ import annotations

from .ini import IniDocument, parse_document
from .section import decode_section, encode_record, encode_section, read_section

__all__: list[str] = [
    "IniDocument",
    "decode_section",
    "encode_record",
    "encode_section",
    "parse_document",
    "read_section",
]
