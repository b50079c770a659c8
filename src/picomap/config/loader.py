"""Load and merge configuration from .picomap.toml and env vars."""

from __future__ import annotations

import dataclasses
import os
import sys
from pathlib import Path
from typing import Any, Dict, Optional

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

from picomap.config.schema import (
    OUTPUT_FORMATS,
    SMOOTHING_MODES,
    OutputConfig,
    PicomapConfig,
    RenderConfig,
)

CONFIG_FILENAME = ".picomap.toml"


class ConfigError(Exception):
    """Raised when config is malformed or unreadable."""


def find_config_file(base_dir: Path, override: Optional[str] = None) -> Optional[Path]:
    """Locate the config file. *override* takes precedence."""
    if override:
        p = Path(override)
        if not p.is_file():
            raise ConfigError(f"Config file not found: {override}")
        return p
    candidate = base_dir / CONFIG_FILENAME
    return candidate if candidate.is_file() else None


def _parse_toml(path: Path) -> Dict[str, Any]:
    try:
        with open(path, "rb") as f:
            return tomllib.load(f)
    except Exception as exc:
        raise ConfigError(f"Failed to parse {path}: {exc}") from exc


def _build_section(data: Dict[str, Any], cls: type, section: str):
    """Build a dataclass from a TOML section dict, ignoring unknown keys."""
    raw = data.get(section, {})
    if not isinstance(raw, dict):
        raise ConfigError(f"[{section}] must be a table")
    valid_fields = {f.name for f in dataclasses.fields(cls)}
    filtered = {k: v for k, v in raw.items() if k in valid_fields}
    return cls(**filtered)


def _validate(cfg: PicomapConfig) -> None:
    if cfg.render.smoothing not in SMOOTHING_MODES:
        raise ConfigError(
            f"render.smoothing must be one of {', '.join(SMOOTHING_MODES)}, "
            f"got {cfg.render.smoothing!r}"
        )
    if cfg.output.format not in OUTPUT_FORMATS:
        raise ConfigError(
            f"output.format must be one of {', '.join(OUTPUT_FORMATS)}, "
            f"got {cfg.output.format!r}"
        )
    if not isinstance(cfg.output.show_summary, bool):
        raise ConfigError(
            f"output.show_summary must be true or false, "
            f"got {cfg.output.show_summary!r}"
        )


def _merge_env_overrides(cfg: PicomapConfig) -> None:
    """Apply PICOMAP_* environment variable overrides."""
    if val := os.environ.get("PICOMAP_SMOOTHING"):
        if val in SMOOTHING_MODES:
            cfg.render.smoothing = val  # type: ignore[assignment]
    if val := os.environ.get("PICOMAP_FORMAT"):
        if val in OUTPUT_FORMATS:
            cfg.output.format = val  # type: ignore[assignment]


def load_config(
    base_dir: Path,
    config_override: Optional[str] = None,
) -> PicomapConfig:
    """Load, validate, and return a PicomapConfig."""
    config_path = find_config_file(base_dir, config_override)

    if config_path is None:
        cfg = PicomapConfig()
    else:
        raw = _parse_toml(config_path)
        cfg = PicomapConfig(
            version=str(raw.get("version", "1.0")),
            render=_build_section(raw, RenderConfig, "render"),
            output=_build_section(raw, OutputConfig, "output"),
        )
        _validate(cfg)

    _merge_env_overrides(cfg)
    return cfg
