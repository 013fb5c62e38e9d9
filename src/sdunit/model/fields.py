# topmark:header:start
#
#   project      : SdUnit
#   file         : fields.py
#   file_relpath : src/sdunit/model/fields.py
#   license      : MIT
#   copyright    : (c) 2025 SdUnit contributors
#
# topmark:header:end

"""Field tables and field descriptor extraction.

Every section record declares an explicit, ordered field table: one
`FieldSpec` per exported attribute, built once per record type from an
annotation string such as ``"Description"`` or ``"Documentation,omitempty"``.

The table is the single source of truth for:
    - the key emitted in the unit file (first comma-separated token),
    - whether the field is optional (an ``omitempty`` modifier),
    - which attribute of the record holds the value.

`field_descriptors` combines a record's static table with its runtime values
into `FieldDescriptor` triples consumed by the section projector.

Absent values:
    An optional string is *absent* when it is ``None`` or the empty string. The
    convention lives in `present` only, so the mapping rules never test for
    emptiness themselves.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, ClassVar, Protocol

from sdunit.config.keys import OMITEMPTY
from sdunit.config.logging import get_logger

if TYPE_CHECKING:
    from sdunit.config.logging import SdUnitLogger

logger: SdUnitLogger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class FieldSpec:
    """Static description of one exported record attribute.

    Attributes:
        name (str): Python attribute name on the record (e.g. ``"exec_start"``).
        key (str): Key emitted in the unit file (e.g. ``"ExecStart"``).
        optional (bool): True if the key is omitted when the value is absent.
    """

    name: str
    key: str
    optional: bool

    @property
    def required(self) -> bool:
        """True if the key is always emitted, even with an empty value."""
        return not self.optional


@dataclass(frozen=True, slots=True)
class FieldDescriptor:
    """A field's emitted key, optionality and current value.

    Descriptors are derived on demand and never stored.

    Attributes:
        key (str): Key emitted in the unit file.
        name (str): Source attribute name on the record.
        optional (bool): Whether the key may be omitted.
        value (str | None): Current value, or None when absent.
    """

    key: str
    name: str
    optional: bool
    value: str | None


class HasFieldTable(Protocol):
    """Structural type of a section record: a section name plus its field table."""

    SECTION: ClassVar[str]
    FIELDS: ClassVar[tuple[FieldSpec, ...]]


def present(value: object) -> bool:
    """Return True if an optional string value counts as set.

    Both ``None`` and ``""`` are absent.
    """
    return value is not None and value != ""


def parse_annotation(tag: str) -> tuple[str, bool]:
    """Split a field annotation into its emitted key and optionality.

    The key is the first comma-separated token, trimmed. The field is optional
    iff any *subsequent* token equals ``omitempty`` (case-insensitive, trimmed).

    Args:
        tag (str): Annotation string, e.g. ``"Wants,omitempty"``.

    Returns:
        tuple[str, bool]: ``(key, optional)``.

    Examples:
        >>> parse_annotation("Description")
        ('Description', False)
        >>> parse_annotation(" Wants , OmitEmpty ")
        ('Wants', True)
    """
    partials: list[str] = [p.strip() for p in tag.split(",")]
    optional: bool = any(p.lower() == OMITEMPTY for p in partials[1:])
    return partials[0], optional


def field_table(*entries: tuple[str, str]) -> tuple[FieldSpec, ...]:
    """Build an ordered field table from ``(attribute_name, annotation)`` pairs.

    Args:
        *entries (tuple[str, str]): Attribute name and annotation, in emission order.

    Returns:
        tuple[FieldSpec, ...]: The field table.

    Raises:
        ValueError: If an annotation yields an empty key, or a key or attribute
            name appears twice.
    """
    specs: list[FieldSpec] = []
    seen_keys: set[str] = set()
    seen_names: set[str] = set()
    for name, tag in entries:
        key, optional = parse_annotation(tag)
        if not key:
            raise ValueError(f"Empty key in annotation {tag!r} for field {name!r}")
        if key in seen_keys:
            raise ValueError(f"Duplicate key {key!r} (field {name!r})")
        if name in seen_names:
            raise ValueError(f"Duplicate field name {name!r}")
        seen_keys.add(key)
        seen_names.add(name)
        specs.append(FieldSpec(name=name, key=key, optional=optional))
    return tuple(specs)


def field_descriptors(record: HasFieldTable) -> tuple[FieldDescriptor, ...]:
    """Return one descriptor per entry of the record's field table, in table order.

    Attributes of the record that have no table entry produce no descriptor.

    Args:
        record (HasFieldTable): A section record instance.

    Returns:
        tuple[FieldDescriptor, ...]: The descriptors.
    """
    descriptors: list[FieldDescriptor] = []
    for spec in type(record).FIELDS:
        raw: object = getattr(record, spec.name)
        descriptors.append(
            FieldDescriptor(
                key=spec.key,
                name=spec.name,
                optional=spec.optional,
                # Non-string values pass through so the writer can reject them.
                value=raw if present(raw) else None,  # type: ignore[arg-type]
            )
        )
    logger.trace("[%s] %d field descriptor(s)", record.SECTION, len(descriptors))
    return tuple(descriptors)
