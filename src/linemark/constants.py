# topmark:header:start
#
#   project      : LineMark
#   file         : constants.py
#   file_relpath : src/linemark/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""LineMark Constants."""

from __future__ import annotations

from importlib.metadata import version as get_version

LINEMARK_VERSION: str = get_version("linemark")

LOG_LEVEL_ENV_VAR: str = "LINEMARK_LOG_LEVEL"

# pyproject.toml carries the configuration in its `[tool.linemark]` table
PYPROJECT_TOML_NAME: str = "pyproject.toml"
PYPROJECT_TOOL_KEY: str = "linemark"
