# topmark:header:start
#
#   project      : SdUnit
#   file         : strategies_sdunit.py
#   file_relpath : tests/strategies_sdunit.py
#   license      : MIT
#   copyright    : (c) 2025 SdUnit contributors
#
# topmark:header:end

"""Hypothesis strategies for generating section records and daemons.

Generated values are what a unit file line can carry unchanged: a single line,
non-blank, without surrounding whitespace. Values that the INI layer would trim
or fold are outside the round-trip contract and are not generated.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeVar

from hypothesis import strategies as st

from sdunit.model import Daemon, Install, SectionRecord, Service, Socket, Unit

Draw = Callable[[st.SearchStrategy[Any]], Any]

R = TypeVar("R", bound=SectionRecord)

# Surrogates, control characters and every kind of separator/whitespace.
EXCLUDED_CATEGORIES: tuple[str, ...] = ("Cs", "Cc", "Cn", "Co", "Zs", "Zl", "Zp")

s_word: st.SearchStrategy[str] = st.text(
    alphabet=st.characters(exclude_categories=EXCLUDED_CATEGORIES),  # type: ignore[arg-type]
    min_size=1,
    max_size=12,
)

# Words joined by single spaces, e.g. "syslog.target network-online.target".
s_value: st.SearchStrategy[str] = st.lists(s_word, min_size=1, max_size=4).map(" ".join)


@st.composite
def s_record(draw: Draw, record_type: type[R], *, min_optional: int = 0) -> R:
    """Draw a record with every required field set and a random subset of optional ones.

    Args:
        draw (Draw): Hypothesis draw function.
        record_type (type[R]): The section record class.
        min_optional (int): Minimum number of optional fields to populate.

    Returns:
        R: The generated record.
    """
    optional_names: list[str] = [spec.name for spec in record_type.FIELDS if spec.optional]
    chosen: list[str] = draw(
        st.lists(
            st.sampled_from(optional_names),
            min_size=min_optional,
            max_size=min(8, len(optional_names)),
            unique=True,
        )
    )
    kwargs: dict[str, str] = {}
    for spec in record_type.FIELDS:
        if spec.required:
            kwargs[spec.name] = draw(s_value)
        elif spec.name in chosen:
            kwargs[spec.name] = draw(s_value)
    return record_type(**kwargs)


@st.composite
def s_daemon(draw: Draw, *, with_socket: bool | None = None) -> Daemon:
    """Draw a `Daemon`.

    Args:
        draw (Draw): Hypothesis draw function.
        with_socket (bool | None): Force the ``Socket`` section on or off; random if None.

    Returns:
        Daemon: The generated daemon. A generated ``Socket`` always has at least one
            populated field.
    """
    has_socket: bool = draw(st.booleans()) if with_socket is None else with_socket
    return Daemon(
        unit=draw(s_record(Unit)),
        service=draw(s_record(Service)),
        install=draw(s_record(Install)),
        socket=draw(s_record(Socket, min_optional=1)) if has_socket else None,
    )
