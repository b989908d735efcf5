# topmark:header:start
#
#   project      : LineMark
#   file         : model.py
#   file_relpath : src/linemark/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration model and merge policy.

This module defines:
    - `Config`: an immutable runtime snapshot handed to pipeline construction.
    - `MutableConfig`: a mutable builder used while layering defaults, a TOML
      file and CLI overrides; it is frozen into `Config` and can be thawed back.

Precedence (lowest to highest): runtime defaults → config file → CLI options.
A value of ``None`` on a `MutableConfig` means "inherit".
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from linemark.config.keys import Toml
from linemark.config.loaders import load_config_table
from linemark.config.logging import get_logger
from linemark.core.scope import TimeRangeScope
from linemark.rendering.palette import DEFAULT_PALETTE, HighlightColor, palette_from_names

if TYPE_CHECKING:
    from pathlib import Path

    from linemark.config.loaders import TomlTable
    from linemark.config.logging import LinemarkLogger

logger: LinemarkLogger = get_logger(__name__)


class ConfigValueError(ValueError):
    """A configuration value has the wrong type or an unknown value.

    Attributes:
        key (str): Dotted key of the offending value (e.g. ``highlight.palette``).
    """

    def __init__(self, key: str, message: str) -> None:
        super().__init__(f"{key}: {message}")
        self.key = key


# ------------------ Immutable runtime config ------------------


@dataclass(frozen=True, slots=True)
class Config:
    """Immutable runtime configuration for LineMark.

    Attributes:
        palette (tuple[HighlightColor, ...]): Colors handed out to highlighting
            stages, in allocation order.
        time_range_scope (TimeRangeScope): Union scope for time-range stages.
        config_files (tuple[Path, ...]): Config files that contributed values.
    """

    palette: tuple[HighlightColor, ...] = DEFAULT_PALETTE
    time_range_scope: TimeRangeScope = TimeRangeScope.CONTIGUOUS
    config_files: tuple[Path, ...] = ()

    def thaw(self) -> MutableConfig:
        """Return a mutable copy of this snapshot."""
        return MutableConfig(
            palette=list(self.palette),
            time_range_scope=self.time_range_scope,
            config_files=list(self.config_files),
        )


# -------------------------- Mutable builder --------------------------


def _parse_palette(value: Any) -> list[HighlightColor]:
    key = f"{Toml.SECTION_HIGHLIGHT}.{Toml.KEY_PALETTE}"
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise ConfigValueError(key, "expected a list of color names")
    try:
        return list(palette_from_names(value))
    except ValueError as e:
        raise ConfigValueError(key, str(e)) from e


def parse_time_range_scope(value: Any, *, key: str) -> TimeRangeScope:
    """Convert a config or CLI value into a `TimeRangeScope`.

    Raises:
        ConfigValueError: If ``value`` is not one of the scope names.
    """
    if isinstance(value, TimeRangeScope):
        return value
    allowed: str = ", ".join(s.value for s in TimeRangeScope)
    if not isinstance(value, str):
        raise ConfigValueError(key, f"expected a string (one of: {allowed})")
    try:
        return TimeRangeScope(value.strip().lower())
    except ValueError as e:
        raise ConfigValueError(key, f"unknown scope {value!r} (expected one of: {allowed})") from e


@dataclass
class MutableConfig:
    """Mutable configuration used while layering config sources.

    Attributes:
        palette (list[HighlightColor] | None): Highlight palette, or None to inherit.
        time_range_scope (TimeRangeScope | None): Union scope, or None to inherit.
        config_files (list[Path]): Config files merged into this draft.
    """

    palette: list[HighlightColor] | None = None
    time_range_scope: TimeRangeScope | None = None
    config_files: list[Path] = field(default_factory=lambda: [])

    @classmethod
    def from_defaults(cls) -> MutableConfig:
        """Return a draft holding LineMark's runtime defaults."""
        return cls(palette=list(DEFAULT_PALETTE), time_range_scope=TimeRangeScope.CONTIGUOUS)

    @classmethod
    def from_toml_dict(cls, table: TomlTable) -> MutableConfig:
        """Build a draft from a parsed configuration table.

        Unknown sections and keys are ignored with a warning.

        Raises:
            ConfigValueError: If a known key holds an invalid value.
        """
        draft = cls()
        for section, known in (
            (Toml.SECTION_HIGHLIGHT, {Toml.KEY_PALETTE}),
            (Toml.SECTION_TIME_RANGE, {Toml.KEY_SCOPE}),
        ):
            sub: Any = table.get(section, {})
            if not isinstance(sub, dict):
                raise ConfigValueError(section, "expected a table")
            for key in sub:
                if key not in known:
                    logger.warning("Ignoring unknown config key %s.%s", section, key)

        highlight: dict[str, Any] = table.get(Toml.SECTION_HIGHLIGHT, {})
        if Toml.KEY_PALETTE in highlight:
            draft.palette = _parse_palette(highlight[Toml.KEY_PALETTE])

        time_range: dict[str, Any] = table.get(Toml.SECTION_TIME_RANGE, {})
        if Toml.KEY_SCOPE in time_range:
            draft.time_range_scope = parse_time_range_scope(
                time_range[Toml.KEY_SCOPE],
                key=f"{Toml.SECTION_TIME_RANGE}.{Toml.KEY_SCOPE}",
            )

        for section in table:
            if section not in (Toml.SECTION_HIGHLIGHT, Toml.SECTION_TIME_RANGE):
                logger.warning("Ignoring unknown config section [%s]", section)
        return draft

    @classmethod
    def from_toml_file(cls, path: Path) -> MutableConfig:
        """Load a draft from ``linemark.toml`` or ``[tool.linemark]`` in ``pyproject.toml``.

        Raises:
            ConfigLoadError: If the file cannot be read or parsed.
            ConfigValueError: If a value is invalid.
        """
        logger.debug("Creating MutableConfig from TOML config: %s", path)
        draft: MutableConfig = cls.from_toml_dict(load_config_table(path))
        draft.config_files = [path]
        return draft

    def merge_with(self, other: MutableConfig) -> MutableConfig:
        """Overlay ``other`` on top of this draft; ``None`` values in ``other`` inherit.

        Returns:
            MutableConfig: ``self``, for chaining.
        """
        if other.palette is not None:
            self.palette = list(other.palette)
        if other.time_range_scope is not None:
            self.time_range_scope = other.time_range_scope
        self.config_files.extend(other.config_files)
        return self

    def freeze(self) -> Config:
        """Freeze this draft into an immutable `Config`, filling unset values with defaults."""
        return Config(
            palette=tuple(self.palette) if self.palette else DEFAULT_PALETTE,
            time_range_scope=self.time_range_scope or TimeRangeScope.CONTIGUOUS,
            config_files=tuple(self.config_files),
        )


def load_config(
    config_file: Path | None = None,
    *,
    time_range_scope: str | TimeRangeScope | None = None,
) -> Config:
    """Resolve the effective configuration: defaults → ``config_file`` → CLI overrides.

    Args:
        config_file (Path | None): Optional TOML file to merge over the defaults.
        time_range_scope (str | TimeRangeScope | None): CLI override for the union scope.

    Returns:
        Config: The frozen configuration.

    Raises:
        ConfigLoadError: If ``config_file`` cannot be read or parsed.
        ConfigValueError: If a value is invalid.
    """
    draft: MutableConfig = MutableConfig.from_defaults()
    if config_file is not None:
        draft.merge_with(MutableConfig.from_toml_file(config_file))
    if time_range_scope is not None:
        draft.time_range_scope = parse_time_range_scope(
            time_range_scope, key="--time-range-scope"
        )
    config: Config = draft.freeze()
    logger.debug("Effective config: %s", config)
    return config
