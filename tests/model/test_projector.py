# topmark:header:start
#
#   project      : SdUnit
#   file         : test_projector.py
#   file_relpath : tests/model/test_projector.py
#   license      : MIT
#   copyright    : (c) 2025 SdUnit contributors
#
# topmark:header:end

"""Tests for the record <-> key/value projection."""

from __future__ import annotations

import logging

import pytest

from sdunit.model.fields import FieldDescriptor
from sdunit.model.projector import project, project_record, record_from_mapping
from sdunit.model.sections import Service, Socket, Unit


def test_project_includes_required_and_present_optional() -> None:
    """Required keys always appear; optional keys only when set."""
    descriptors: list[FieldDescriptor] = [
        FieldDescriptor(key="Description", name="description", optional=False, value=None),
        FieldDescriptor(key="Wants", name="wants", optional=True, value=None),
        FieldDescriptor(key="After", name="after", optional=True, value="network.target"),
    ]
    assert project(descriptors) == {"Description": "", "After": "network.target"}


def test_project_record_keeps_table_order() -> None:
    """Keys come out in field table order, not in constructor order."""
    unit = Unit(after="b.target", wants="a.target", description="Example")
    assert list(project_record(unit)) == ["Description", "Wants", "After"]


def test_project_record_of_empty_service_has_exec_start_only() -> None:
    """An empty record still exports its required keys."""
    assert project_record(Service()) == {"ExecStart": ""}


def test_record_from_mapping_builds_record() -> None:
    """Entries are matched to attributes through the emitted key."""
    socket: Socket = record_from_mapping(
        Socket, {"ListenStream": "0.0.0.0:80", "ListenFIFO": "/run/fifo"}
    )
    assert socket == Socket(listen_stream="0.0.0.0:80", listen_fifo="/run/fifo")


def test_record_from_mapping_drops_unknown_keys(caplog: pytest.LogCaptureFixture) -> None:
    """Unknown keys are ignored with a warning by default."""
    with caplog.at_level(logging.WARNING):
        unit: Unit = record_from_mapping(Unit, {"Description": "x", "Bogus": "y"})
    assert unit == Unit(description="x")
    assert "Bogus" in caplog.text


def test_record_from_mapping_strict_rejects_unknown_keys() -> None:
    """In strict mode an unknown key raises ValueError."""
    with pytest.raises(ValueError, match="unknown key 'Bogus'"):
        record_from_mapping(Unit, {"Description": "x", "Bogus": "y"}, strict=True)


def test_record_from_mapping_rejects_non_string_values() -> None:
    """Values must be strings."""
    with pytest.raises(TypeError, match="ExecStart"):
        record_from_mapping(Service, {"ExecStart": 42})


def test_record_from_mapping_is_case_sensitive() -> None:
    """Keys are matched exactly; ``description`` is not ``Description``."""
    with pytest.raises(ValueError, match="unknown key 'description'"):
        record_from_mapping(Unit, {"description": "x"}, strict=True)
