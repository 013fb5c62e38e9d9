# topmark:header:start
#
#   project      : SdUnit
#   file         : __main__.py
#   file_relpath : src/sdunit/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 SdUnit contributors
#
# topmark:header:end

"""Module entry point for running SdUnit via ``python -m sdunit``.

Delegates to :func:`sdunit.cli.main.cli`, the single CLI entry point.

Examples:
    Render a description::

        python -m sdunit render agent.toml -o agent.service
"""

from __future__ import annotations

from sdunit.cli.main import cli

if __name__ == "__main__":
    cli()
