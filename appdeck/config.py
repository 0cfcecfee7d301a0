#===============================================================================
#  Desktop_Applications_Deck | config.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-10-19
#  Last Update : 2026-10-19
#
#  Summary
#  -------
#  Load the plugin config (applications.json). Anything missing or invalid
#  falls back to defaults; a broken config never stops the plugin.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

import json
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any, Dict, Optional

from .constants import CONFIG_FILE_NAME, DEFAULT_MAX_ENTRIES
from .errors import ConfigError
from .log_setup import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class PluginConfig:
    desktop_actions: bool = False
    max_entries: int = DEFAULT_MAX_ENTRIES
    terminal: Optional[str] = None
    ignore_prefix: str = ""


def default_config() -> PluginConfig:
    return PluginConfig()


def read_config_file(path: Path) -> Dict[str, Any]:
    """Read the raw JSON object from disk.

    Raises:
        ConfigError: missing/unreadable file, invalid JSON, or a non-object top level.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"cannot read config: {e}", path=str(path)) from e

    try:
        data = json.loads(text) if text.strip() else {}
    except json.JSONDecodeError as e:
        raise ConfigError(f"invalid JSON: {e}", path=str(path)) from e

    if not isinstance(data, dict):
        raise ConfigError("top-level value must be an object", path=str(path))
    return data


def _coerce(data: Dict[str, Any], path: Path) -> PluginConfig:
    """Overlay known keys onto the defaults; wrongly typed values keep their default."""
    cfg = default_config()

    v = data.get("desktop_actions")
    if isinstance(v, bool):
        cfg = replace(cfg, desktop_actions=v)
    elif v is not None:
        logger.warning("Ignoring non-boolean desktop_actions", path=str(path))

    v = data.get("max_entries")
    if isinstance(v, int) and not isinstance(v, bool) and v >= 0:
        cfg = replace(cfg, max_entries=v)
    elif v is not None:
        logger.warning("Ignoring invalid max_entries", path=str(path))

    v = data.get("terminal")
    if isinstance(v, str) and v.strip():
        cfg = replace(cfg, terminal=v.strip())
    elif v is not None:
        logger.warning("Ignoring invalid terminal", path=str(path))

    v = data.get("ignore_prefix")
    if isinstance(v, str):
        cfg = replace(cfg, ignore_prefix=v)
    elif v is not None:
        logger.warning("Ignoring non-string ignore_prefix", path=str(path))

    unknown = sorted(set(data) - {"desktop_actions", "max_entries", "terminal", "ignore_prefix"})
    if unknown:
        logger.warning("Unknown config keys ignored", path=str(path), keys=unknown)

    return cfg


def load_config(config_dir: Path) -> PluginConfig:
    """Load <config_dir>/applications.json (or create defaults)."""
    path = Path(config_dir) / CONFIG_FILE_NAME
    try:
        data = read_config_file(path)
    except ConfigError as e:
        logger.warning("Error loading applications config, using defaults: %s", e)
        return default_config()
    return _coerce(data, path)
