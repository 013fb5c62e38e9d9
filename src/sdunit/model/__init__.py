# topmark:header:start
#
#   project      : SdUnit
#   file         : __init__.py
#   file_relpath : src/sdunit/model/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 SdUnit contributors
#
# topmark:header:end

"""Typed records of a service unit and their key/value projection."""

from __future__ import annotations

from .daemon import Daemon, marshal, unmarshal
from .fields import FieldDescriptor, FieldSpec, field_descriptors, parse_annotation, present
from .projector import project, project_record, record_from_mapping
from .sections import SECTION_TYPES, Install, SectionRecord, Service, Socket, Unit

__all__: list[str] = [
    "SECTION_TYPES",
    "Daemon",
    "FieldDescriptor",
    "FieldSpec",
    "Install",
    "SectionRecord",
    "Service",
    "Socket",
    "Unit",
    "field_descriptors",
    "marshal",
    "parse_annotation",
    "present",
    "project",
    "project_record",
    "record_from_mapping",
    "unmarshal",
]
