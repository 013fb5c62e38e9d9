# topmark:header:start
#
#   project      : SdUnit
#   file         : projector.py
#   file_relpath : src/sdunit/model/projector.py
#   license      : MIT
#   copyright    : (c) 2025 SdUnit contributors
#
# topmark:header:end

"""Projection between section records and flat key/value mappings.

Two directions:
    - `project` turns field descriptors into the mapping written for a section:
      required keys always, optional keys only when their value is present.
    - `record_from_mapping` builds a record from the entries of a section read
      back from a document (or a description table).

Both preserve the field table order, so rendered output is reproducible.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import TYPE_CHECKING, TypeVar

from sdunit.config.logging import get_logger
from sdunit.model.fields import field_descriptors

if TYPE_CHECKING:
    from sdunit.config.logging import SdUnitLogger
    from sdunit.model.fields import FieldDescriptor, HasFieldTable

logger: SdUnitLogger = get_logger(__name__)

R = TypeVar("R", bound="HasFieldTable")


def project(descriptors: Iterable[FieldDescriptor]) -> dict[str, str]:
    """Return the key/value pairs to emit for one section.

    Args:
        descriptors (Iterable[FieldDescriptor]): Descriptors in emission order.

    Returns:
        dict[str, str]: Insertion-ordered mapping of emitted key to value. Required
            fields with an absent value map to ``""``.
    """
    exports: dict[str, str] = {}
    for d in descriptors:
        if d.optional and d.value is None:
            continue
        exports[d.key] = d.value if d.value is not None else ""
    return exports


def project_record(record: HasFieldTable) -> dict[str, str]:
    """Shortcut for ``project(field_descriptors(record))``."""
    return project(field_descriptors(record))


def record_from_mapping(
    record_type: type[R],
    entries: Mapping[str, object],
    *,
    strict: bool = False,
) -> R:
    """Build a record of ``record_type`` from emitted-key entries.

    Args:
        record_type (type[R]): The section record class.
        entries (Mapping[str, object]): Emitted key to value, e.g. ``{"ExecStart": "/bin/true"}``.
        strict (bool): If True, a key outside the field table is an error; otherwise
            it is dropped with a warning.

    Returns:
        R: A new record instance; fields without an entry keep their default.

    Raises:
        ValueError: If ``strict`` and an entry has no matching field.
        TypeError: If a value is not a string.
    """
    by_key: dict[str, str] = {spec.key: spec.name for spec in record_type.FIELDS}
    kwargs: dict[str, str] = {}
    for key, value in entries.items():
        name: str | None = by_key.get(key)
        if name is None:
            if strict:
                raise ValueError(f"unknown key {key!r}")
            logger.warning("[%s] ignoring unknown key %r", record_type.SECTION, key)
            continue
        if not isinstance(value, str):
            raise TypeError(f"value of {key!r} must be a string, not {type(value).__name__}")
        kwargs[name] = value
    return record_type(**kwargs)
