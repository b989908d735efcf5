# topmark:header:start
#
#   project      : LineMark
#   file         : __init__.py
#   file_relpath : src/linemark/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration layer: TOML loading, layered merge and logging setup."""

from __future__ import annotations

from linemark.config.loaders import ConfigLoadError
from linemark.config.model import Config, ConfigValueError, MutableConfig, load_config

__all__ = [
    "Config",
    "ConfigLoadError",
    "ConfigValueError",
    "MutableConfig",
    "load_config",
]
