"""
Engine configuration.

Values come from three layers, later layers winning:

1. Built-in defaults on ``EngineConfig``
2. The ``[engine]`` table of a ``vibesmith.toml`` file
3. ``VIBESMITH_*`` environment variables

Usage:
    from vibesmith.core.config import load_config

    config = load_config()          # ./vibesmith.toml if present
    config = load_config(path)      # explicit file, must exist
"""

from __future__ import annotations

import logging
import os
import tomllib
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any

from vibesmith.core.errors import ConfigError

logger = logging.getLogger(__name__)

CONFIG_FILENAME = "vibesmith.toml"

# Environment variable names
ENV_VIBE = "VIBESMITH_VIBE"
ENV_CHAOS = "VIBESMITH_CHAOS"
ENV_SEED = "VIBESMITH_SEED"
ENV_LOG_LEVEL = "VIBESMITH_LOG_LEVEL"
ENV_INCLUDE_FONTS = "VIBESMITH_INCLUDE_FONTS"

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}
_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


@dataclass(frozen=True)
class EngineConfig:
    """Defaults applied when a build request leaves a choice open."""

    vibe: str | None = None  # Overrides the industry vibe when set
    chaos: float | None = None  # Overrides the vibe chaos when set
    include_fonts: bool = True
    log_level: str = "WARNING"
    seed: int | None = None  # Seed for reproducible DNA generation


def _parse_chaos(value: Any, source: str) -> float:
    try:
        chaos = float(value)
    except (TypeError, ValueError) as e:
        raise ConfigError(f"chaos must be a number, got {value!r}", context=source) from e
    if not 0.0 <= chaos <= 1.0:
        raise ConfigError(f"chaos must be within [0, 1], got {chaos}", context=source)
    return chaos


def _parse_seed(value: Any, source: str) -> int:
    try:
        return int(value)
    except (TypeError, ValueError) as e:
        raise ConfigError(f"seed must be an integer, got {value!r}", context=source) from e


def _parse_log_level(value: Any, source: str) -> str:
    level = str(value).upper().strip()
    if level not in _LOG_LEVELS:
        raise ConfigError(f"unknown log level {value!r}", context=source)
    return level


def _parse_bool(value: Any, source: str) -> bool:
    if isinstance(value, bool):
        return value
    text = str(value).lower().strip()
    if text in _TRUE_VALUES:
        return True
    if text in _FALSE_VALUES:
        return False
    raise ConfigError(f"expected a boolean, got {value!r}", context=source)


def _from_table(config: EngineConfig, table: dict[str, Any], source: str) -> EngineConfig:
    updates: dict[str, Any] = {}
    if "vibe" in table:
        updates["vibe"] = str(table["vibe"]).lower()
    if "chaos" in table:
        updates["chaos"] = _parse_chaos(table["chaos"], source)
    if "include_fonts" in table:
        updates["include_fonts"] = _parse_bool(table["include_fonts"], source)
    if "log_level" in table:
        updates["log_level"] = _parse_log_level(table["log_level"], source)
    if "seed" in table:
        updates["seed"] = _parse_seed(table["seed"], source)
    return replace(config, **updates)


def _from_environment(config: EngineConfig, environ: dict[str, str]) -> EngineConfig:
    table: dict[str, Any] = {}
    if value := environ.get(ENV_VIBE, "").strip():
        table["vibe"] = value.lower()
    if value := environ.get(ENV_CHAOS, "").strip():
        table["chaos"] = value
    if value := environ.get(ENV_SEED, "").strip():
        table["seed"] = value
    if value := environ.get(ENV_LOG_LEVEL, "").strip():
        table["log_level"] = value
    if value := environ.get(ENV_INCLUDE_FONTS, "").strip():
        table["include_fonts"] = value
    return _from_table(config, table, "environment")


def load_config(path: Path | None = None, environ: dict[str, str] | None = None) -> EngineConfig:
    """Load engine configuration from file and environment.

    Args:
        path: Explicit config file. When omitted, ``vibesmith.toml`` in the
            current directory is used if it exists.
        environ: Environment mapping (defaults to ``os.environ``).

    Raises:
        ConfigError: If an explicit file is missing, the TOML is malformed,
            or a value is out of range.
    """
    config = EngineConfig()

    if path is None:
        candidate = Path.cwd() / CONFIG_FILENAME
        path = candidate if candidate.exists() else None
    elif not path.exists():
        raise ConfigError(f"config file not found: {path}")

    if path is not None:
        try:
            data = tomllib.loads(path.read_text(encoding="utf-8"))
        except tomllib.TOMLDecodeError as e:
            raise ConfigError(str(e), context=str(path)) from e
        config = _from_table(config, data.get("engine", {}), str(path))
        logger.debug("Loaded engine config from %s", path)

    return _from_environment(config, dict(os.environ) if environ is None else environ)
