"""Load and merge configuration from .linedrift.toml and env vars."""

from __future__ import annotations

import dataclasses
import logging
import os
import sys
from pathlib import Path
from typing import Any, Dict, Optional

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

from linedrift.config.schema import (
    OUTPUT_FORMATS,
    ContextConfig,
    DetectConfig,
    ExtractConfig,
    LineDriftConfig,
    OutputConfig,
)
from linedrift.errors import ConfigError

log = logging.getLogger(__name__)

CONFIG_FILENAME = ".linedrift.toml"


def find_config_file(root: Path, override: Optional[str] = None) -> Optional[Path]:
    """Locate the config file. *override* takes precedence."""
    if override:
        p = Path(override)
        if not p.is_file():
            raise ConfigError(f"Config file not found: {override}")
        return p
    candidate = root / CONFIG_FILENAME
    return candidate if candidate.is_file() else None


def _parse_toml(path: Path) -> Dict[str, Any]:
    try:
        with open(path, "rb") as f:
            return tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as exc:
        raise ConfigError(f"Failed to parse {path}: {exc}") from exc


def _env_int(name: str) -> Optional[int]:
    val = os.environ.get(name)
    if val is None:
        return None
    try:
        n = int(val)
    except ValueError:
        log.warning("ignoring %s=%r: not an integer", name, val)
        return None
    if n < 0:
        log.warning("ignoring %s=%r: negative", name, val)
        return None
    return n


def _merge_env_overrides(cfg: LineDriftConfig) -> None:
    """Apply LINEDRIFT_* environment variable overrides."""
    if val := os.environ.get("LINEDRIFT_THRESHOLD"):
        cfg.detect.threshold = val
    if val := os.environ.get("LINEDRIFT_FORMAT"):
        if val in OUTPUT_FORMATS:
            cfg.output.format = val  # type: ignore[assignment]
    if val := os.environ.get("LINEDRIFT_PROFILE"):
        cfg.profile = val
    if (n := _env_int("LINEDRIFT_CONTEXT")) is not None:
        cfg.context.context = n
    if (n := _env_int("LINEDRIFT_BEFORE")) is not None:
        cfg.context.before = n
    if (n := _env_int("LINEDRIFT_AFTER")) is not None:
        cfg.context.after = n


def _build_section(data: Dict[str, Any], cls: type, section: str):
    """Build a dataclass from a TOML section dict, ignoring unknown keys."""
    table = data.get(section, {})
    if not isinstance(table, dict):
        raise ConfigError(f"[{section}] must be a table")
    valid_fields = {f.name for f in dataclasses.fields(cls)}
    filtered = {k: v for k, v in table.items() if k in valid_fields}
    return cls(**filtered)


def load_config(
    root: Path,
    config_override: Optional[str] = None,
) -> LineDriftConfig:
    """Load and return a LineDriftConfig (not yet validated)."""
    config_path = find_config_file(root, config_override)

    if config_path is None:
        cfg = LineDriftConfig()
    else:
        log.debug("loading config from %s", config_path)
        raw = _parse_toml(config_path)
        cfg = LineDriftConfig(
            version=str(raw.get("version", "1.0")),
            profile=raw.get("profile"),
            detect=_build_section(raw, DetectConfig, "detect"),
            extract=_build_section(raw, ExtractConfig, "extract"),
            context=_build_section(raw, ContextConfig, "context"),
            output=_build_section(raw, OutputConfig, "output"),
        )
        if cfg.output.format not in OUTPUT_FORMATS:
            raise ConfigError(f"Invalid output format in {config_path}: {cfg.output.format}")

    _merge_env_overrides(cfg)
    return cfg
