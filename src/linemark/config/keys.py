# topmark:header:start
#
#   project      : LineMark
#   file         : keys.py
#   file_relpath : src/linemark/config/keys.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Canonical TOML section and key names for LineMark configuration.

These constants define the external configuration schema as it appears in
``linemark.toml`` and in ``[tool.linemark]`` inside ``pyproject.toml``.
Renaming or removing a key is a breaking change.
"""

from __future__ import annotations

from typing import Final


class Toml:
    """TOML section names and keys used by LineMark configuration."""

    # [highlight]
    SECTION_HIGHLIGHT: Final[str] = "highlight"

    KEY_PALETTE: Final[str] = "palette"

    # [time_range]
    SECTION_TIME_RANGE: Final[str] = "time_range"

    KEY_SCOPE: Final[str] = "scope"
