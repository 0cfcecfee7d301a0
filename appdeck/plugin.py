#===============================================================================
#  Desktop_Applications_Deck | plugin.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-10-19
#  Last Update : 2026-10-19
#
#  Summary
#  -------
#  The surface a launcher host talks to: initialize once, then query and
#  select against the same state. Nothing here raises on bad input or a bad
#  environment; the worst case is an empty result list.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Sequence, Union

from .catalog import build_catalog
from .config import PluginConfig, load_config
from .constants import APP_ICON, APP_TITLE
from .launcher import dispatch
from .models import Catalog, HandleResult, PluginInfo, RankedResult
from .ranker import rank


@dataclass(frozen=True)
class PluginState:
    """Session state; built by initialize() and passed to every call."""
    config: PluginConfig
    catalog: Catalog


def initialize(
    config_dir: Union[str, Path],
    locations: Optional[Sequence[Path]] = None,
) -> PluginState:
    config = load_config(Path(config_dir))
    build = build_catalog(locations, desktop_actions=config.desktop_actions)
    return PluginState(config=config, catalog=build.catalog)


def query(text: str, state: PluginState) -> List[RankedResult]:
    return rank(
        text,
        state.catalog,
        max_entries=state.config.max_entries,
        ignore_prefix=state.config.ignore_prefix,
    )


def select(chosen: Union[RankedResult, int], state: PluginState) -> HandleResult:
    """Launch the chosen result. Always tells the host to close."""
    entry_id = chosen.id if isinstance(chosen, RankedResult) else chosen
    dispatch(entry_id, state.catalog, terminal=state.config.terminal)
    return HandleResult.close()


def metadata() -> PluginInfo:
    return PluginInfo(name=APP_TITLE, icon=APP_ICON)
