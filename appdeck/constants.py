#===============================================================================
#  Desktop_Applications_Deck | constants.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-10-19
#  Last Update : 2026-10-19
#
#  Summary
#  -------
#  Central place for plugin identity, file naming conventions and ranking knobs.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

APP_TITLE = "Applications"
APP_ICON = "application-x-executable"
CONFIG_FILE_NAME = "applications.json"
DESKTOP_SUFFIX = ".desktop"

# --- Config defaults ---
DEFAULT_MAX_ENTRIES = 5

# Tried in order when no terminal is configured; first one that spawns wins.
SENSIBLE_TERMINALS = ("alacritty", "foot", "kitty", "wezterm", "wterm")

# --- Ranking weights (per matched field) ---
NAME_WEIGHT = 150
DESCRIPTION_WEIGHT = 50
EXEC_WEIGHT = 25
KEYWORD_WEIGHT = 1
