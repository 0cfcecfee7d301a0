#===============================================================================
#  Desktop_Applications_Deck | errors.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-10-19
#  Last Update : 2026-10-19
#
#  Summary
#  -------
#  Exception types. Config and descriptor errors are caught and downgraded by
#  their callers; UnknownEntryError is a caller bug and is allowed to escape.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

from typing import Optional


class AppDeckError(Exception):
    """Base exception for this project."""


class ConfigError(AppDeckError):
    """Raised when the plugin config file cannot be read or is invalid."""

    def __init__(self, message: str, *, path: Optional[str] = None):
        super().__init__(f"{path}: {message}" if path else message)
        self.path = path


class DesktopEntryError(AppDeckError):
    """Raised when a .desktop file is unreadable or malformed."""

    def __init__(self, message: str, *, path: Optional[str] = None):
        super().__init__(f"{path}: {message}" if path else message)
        self.path = path


class UnknownEntryError(AppDeckError, LookupError):
    """An id was selected that never came out of a ranking on this catalog."""

    def __init__(self, entry_id: int):
        super().__init__(f"No catalog entry with id {entry_id}")
        self.entry_id = entry_id
