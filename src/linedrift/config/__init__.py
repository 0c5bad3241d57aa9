"""Configuration loading, schema, validation and defaults."""

from linedrift.config.loader import load_config
from linedrift.config.schema import LineDriftConfig
from linedrift.config.settings import build_settings, parse_threshold, resolve_context
from linedrift.errors import ConfigError

__all__ = [
    "ConfigError",
    "LineDriftConfig",
    "build_settings",
    "load_config",
    "parse_threshold",
    "resolve_context",
]
