# topmark:header:start
#
#   project      : SdUnit
#   file         : files.py
#   file_relpath : src/sdunit/io/files.py
#   license      : MIT
#   copyright    : (c) 2025 SdUnit contributors
#
# topmark:header:end

"""Read and write unit files on disk (UTF-8)."""

from __future__ import annotations

from typing import TYPE_CHECKING

from sdunit.config.logging import get_logger
from sdunit.model.daemon import Daemon

if TYPE_CHECKING:
    from pathlib import Path

    from sdunit.config.logging import SdUnitLogger

logger: SdUnitLogger = get_logger(__name__)


def read_unit_file(path: Path, *, strict: bool = False) -> Daemon:
    """Read and decode a unit file.

    Args:
        path (Path): Path to e.g. ``example-agent.service``.
        strict (bool): Reject keys outside a section's field table.

    Returns:
        Daemon: The decoded daemon.

    Raises:
        OSError: If the file cannot be read.
        SdUnitError: If the contents cannot be decoded.
    """
    text: str = path.read_text(encoding="utf-8")
    logger.debug("Read %d byte(s) from %s", len(text), path)
    return Daemon.from_text(text, strict=strict)


def write_unit_file(daemon: Daemon, path: Path) -> Path:
    """Encode ``daemon`` and write it to ``path`` with a final newline.

    Nothing is written if encoding fails.

    Raises:
        MarshalError: If one or more sections fail to encode.
        OSError: If the file cannot be written.
    """
    text: str = daemon.to_text()
    path.write_text(f"{text}\n", encoding="utf-8")
    logger.info("Wrote unit file %s", path)
    return path
