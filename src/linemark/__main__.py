# topmark:header:start
#
#   project      : LineMark
#   file         : __main__.py
#   file_relpath : src/linemark/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running LineMark via ``python -m linemark``.

Examples:
    Keep error lines, drop debug noise::

        tail -f app.log | python -m linemark fc:error n:debug
"""

from __future__ import annotations

from linemark.cli.main import cli

if __name__ == "__main__":
    cli()
