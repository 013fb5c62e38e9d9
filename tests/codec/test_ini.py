# topmark:header:start
#
#   project      : SdUnit
#   file         : test_ini.py
#   file_relpath : tests/codec/test_ini.py
#   license      : MIT
#   copyright    : (c) 2025 SdUnit contributors
#
# topmark:header:end

"""Tests for the `configparser`-backed INI document adapter."""

from __future__ import annotations

import configparser

import pytest

from sdunit.codec.ini import IniDocument, normalize_line, parse_document
from sdunit.core.errors import DocumentParseError
from tests.conftest import parametrize


@parametrize(
    "line, expected",
    [
        ("After   =  network.target ", "After = network.target"),
        ("ExecStart = ", "ExecStart ="),
        ("Environment = A=1", "Environment = A=1"),
        ("[Unit]  ", "[Unit]"),
        ("", ""),
        ("\tcontinued value ", "\tcontinued value"),
        ("no delimiter  ", "no delimiter"),
    ],
)
def test_normalize_line(line: str, expected: str) -> None:
    """Key lines get exactly one space around the first ``=``."""
    assert normalize_line(line) == expected


def test_parse_document_keeps_case_and_order() -> None:
    """Section and key names keep their case; sections keep document order."""
    doc: IniDocument = parse_document("[Service]\nExecStart=/bin/true\n[Unit]\nDescription=x\n")
    assert doc.section_names() == ["Service", "Unit"]
    assert doc.section("Service") == {"ExecStart": "/bin/true"}
    assert doc.has_section("Unit")
    assert not doc.has_section("unit")
    assert doc.section("Install") is None


def test_parse_document_disables_interpolation() -> None:
    """Percent specifiers are literal (systemd uses ``%i``, ``%n``...)."""
    doc: IniDocument = parse_document("[Service]\nExecStart = /usr/bin/agent --instance %i\n")
    assert doc.section("Service") == {"ExecStart": "/usr/bin/agent --instance %i"}


def test_parse_document_only_splits_on_equals() -> None:
    """A colon is part of the value, not a delimiter."""
    doc: IniDocument = parse_document("[Socket]\nListenStream = 127.0.0.1:80\n")
    assert doc.section("Socket") == {"ListenStream": "127.0.0.1:80"}


def test_parse_document_wraps_parser_errors() -> None:
    """Parser errors surface as DocumentParseError with the cause chained."""
    with pytest.raises(DocumentParseError) as excinfo:
        parse_document("Orphan = 1\n")
    assert isinstance(excinfo.value.__cause__, configparser.MissingSectionHeaderError)


def test_render_normalizes_lines() -> None:
    """Rendering writes headers, ``key = value`` lines and a blank line per section."""
    doc: IniDocument = IniDocument.new()
    doc.add_section("Unit")
    doc.set("Unit", "Description", "Example")
    doc.set("Unit", "Wants", "")
    doc.add_section("Install")
    assert doc.render() == "[Unit]\nDescription = Example\nWants =\n\n[Install]\n\n"


def test_add_section_rejects_empty_name() -> None:
    """A section needs a name."""
    doc: IniDocument = IniDocument.new()
    with pytest.raises(ValueError):
        doc.add_section("")


def test_default_is_an_ordinary_section() -> None:
    """``[DEFAULT]`` entries stay in their own section and are not shared."""
    doc: IniDocument = parse_document("[DEFAULT]\nDescription = shared\n[Unit]\n")
    assert doc.section_names() == ["DEFAULT", "Unit"]
    assert doc.section("DEFAULT") == {"Description": "shared"}
    assert doc.section("Unit") == {}
