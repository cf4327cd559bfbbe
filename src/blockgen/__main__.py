# topmark:header:start
#
#   project      : BlockGen
#   file         : __main__.py
#   file_relpath : src/blockgen/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 BlockGen contributors
#
# topmark:header:end

"""Module entry point for running BlockGen via ``python -m blockgen``.

Examples:
    Render a directive script::

        python -m blockgen render program.toml
"""

from __future__ import annotations

from blockgen.cli.main import cli

if __name__ == "__main__":
    cli()
