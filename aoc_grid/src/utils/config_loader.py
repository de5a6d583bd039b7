"""Loads YAML/JSON configuration files and global grid settings."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional

import yaml


def load_config(path: str) -> Dict[str, Any]:
    """Load a YAML or JSON configuration file."""
    path_p = Path(path)
    with open(path_p, "r", encoding="utf-8") as f:
        if path_p.suffix in {".yaml", ".yml"}:
            return yaml.safe_load(f) or {}
        if path_p.suffix == ".json":
            return json.load(f)
        raise ValueError("Unsupported config format")


def load_grid_config(path: Optional[Path] = None) -> Dict[str, Any]:
    """Return the package grid configuration."""
    if path is None:
        path = Path(__file__).resolve().parents[2] / "configs" / "grid_config.yaml"
    if path.exists():
        return load_config(str(path))
    return {}


GRID_CONFIG: Dict[str, Any] = load_grid_config()
_LOGGING_CONF = GRID_CONFIG.get("logging", {}) or {}
LOG_LEVEL: str = str(_LOGGING_CONF.get("level", "WARNING")).upper()
LOG_FILE: Optional[str] = _LOGGING_CONF.get("file")
_RENDER_CONF = GRID_CONFIG.get("render", {}) or {}
RENDER_SEPARATOR: str = str(_RENDER_CONF.get("separator", ""))


def set_log_level(value: str) -> None:
    """Override the logging level of existing and newly configured package loggers."""
    global LOG_LEVEL
    LOG_LEVEL = value.upper()
    GRID_CONFIG.setdefault("logging", {})["level"] = LOG_LEVEL
    level = getattr(logging, LOG_LEVEL, logging.WARNING)
    for name, existing in list(logging.Logger.manager.loggerDict.items()):
        if name.startswith("aoc_grid") and isinstance(existing, logging.Logger):
            existing.setLevel(level)


def set_log_file(value: Optional[str]) -> None:
    """Route newly configured loggers to ``value`` in addition to stderr."""
    global LOG_FILE
    LOG_FILE = value
    GRID_CONFIG.setdefault("logging", {})["file"] = value


def set_render_separator(value: str) -> None:
    """Override the default cell separator used by ``Grid2D.render``."""
    global RENDER_SEPARATOR
    RENDER_SEPARATOR = value
    GRID_CONFIG.setdefault("render", {})["separator"] = value
