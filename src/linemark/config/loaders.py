# topmark:header:start
#
#   project      : LineMark
#   file         : loaders.py
#   file_relpath : src/linemark/config/loaders.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Load TOML configuration sources.

LineMark reads an explicit configuration file: either a ``linemark.toml``-style
document or a ``pyproject.toml`` carrying a ``[tool.linemark]`` table.
Parsing is done with `tomlkit` and returned as plain `dict` structures.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from linemark.config.logging import get_logger
from linemark.constants import PYPROJECT_TOML_NAME, PYPROJECT_TOOL_KEY

if TYPE_CHECKING:
    from pathlib import Path

    from linemark.config.logging import LinemarkLogger

TomlTable = dict[str, Any]

logger: LinemarkLogger = get_logger(__name__)


class ConfigLoadError(Exception):
    """A configuration file could not be read or parsed.

    Attributes:
        path (Path): The offending file.
    """

    def __init__(self, path: Path, message: str) -> None:
        super().__init__(f"{path}: {message}")
        self.path = path


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a TOML file from the filesystem.

    Args:
        path (Path): Path to a TOML document.

    Returns:
        TomlTable: The parsed TOML content.

    Raises:
        ConfigLoadError: If the file cannot be read or is not valid TOML.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
    except OSError as e:
        logger.error("Error loading TOML from %s: %s", path, e)
        raise ConfigLoadError(path, f"cannot read file: {e}") from e
    except TomlkitParseError as e:
        logger.error("Error decoding TOML from %s: %s", path, e)
        raise ConfigLoadError(path, f"invalid TOML: {e}") from e
    data_any: Any = doc.unwrap()
    return cast("TomlTable", data_any) if isinstance(data_any, dict) else {}


def load_config_table(path: Path) -> TomlTable:
    """Return the LineMark configuration table stored in ``path``.

    For ``pyproject.toml`` the ``[tool.linemark]`` table is extracted; any other
    file is used as a whole.

    Raises:
        ConfigLoadError: If the file cannot be loaded, or a ``pyproject.toml`` lacks
            the ``[tool.linemark]`` table.
    """
    data: TomlTable = load_toml_dict(path)
    if path.name != PYPROJECT_TOML_NAME:
        return data

    tool_any: Any = data.get("tool", {})
    section: Any = tool_any.get(PYPROJECT_TOOL_KEY) if isinstance(tool_any, dict) else None
    if not isinstance(section, dict) or not section:
        raise ConfigLoadError(path, f"[tool.{PYPROJECT_TOOL_KEY}] section missing or malformed")
    return cast("TomlTable", section)
