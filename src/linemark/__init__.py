# topmark:header:start
#
#   project      : LineMark
#   file         : __init__.py
#   file_relpath : src/linemark/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""LineMark package.

LineMark is a streaming line filter and highlighter. It reads text line by
line, runs every line through an ordered pipeline of commands (filter,
exclude, substitute, time-range select, highlight) and writes out the
surviving, annotated lines.
"""

from __future__ import annotations
