#===============================================================================
#  Desktop_Applications_Deck | fs_discovery.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-10-19
#  Last Update : 2026-10-19
#
#  Summary
#  -------
#  Filesystem discovery of .desktop files across the XDG application dirs.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

import os
from pathlib import Path
from typing import List, Mapping, Optional, Tuple

from .constants import DESKTOP_SUFFIX
from .log_setup import get_logger

logger = get_logger(__name__)


def safe_key(p: Path) -> str:
    """Stable key for a directory, derived from absolute normalized path."""
    try:
        return str(p.resolve())
    except OSError:
        return str(p.absolute())


def source_locations(environ: Optional[Mapping[str, str]] = None) -> List[Path]:
    """Return the application dirs in priority order (user dir first).

    Resolution order:
      1) $XDG_DATA_HOME/applications (default ~/.local/share/applications)
      2) <dir>/applications for each dir in $XDG_DATA_DIRS
         (default /usr/local/share:/usr/share)

    Repeated dirs keep only their first (highest priority) position.
    """
    env = os.environ if environ is None else environ

    data_home = env.get("XDG_DATA_HOME") or str(Path(env.get("HOME") or Path.home()) / ".local" / "share")
    data_dirs = env.get("XDG_DATA_DIRS") or "/usr/local/share:/usr/share"

    candidates = [Path(data_home) / "applications"]
    candidates += [Path(d) / "applications" for d in data_dirs.split(":") if d.strip()]

    out: List[Path] = []
    seen = set()
    for c in candidates:
        key = safe_key(c)
        if key in seen:
            continue
        seen.add(key)
        out.append(c)
    return out


def desktop_file_id(location: Path, path: Path) -> str:
    """Desktop file ID: path relative to the location with '/' replaced by '-'."""
    return "-".join(path.relative_to(location).parts)


def scan_location(location: Path) -> List[Tuple[str, Path]]:
    """List (file_id, path) for every .desktop file under one location.

    Sorted by path so repeated scans see files in the same order. Unreadable
    subdirectories are logged and skipped.

    Raises:
        OSError: the location itself exists but cannot be listed.
    """
    if not location.is_dir():
        return []

    found: List[Tuple[str, Path]] = []

    def on_error(err: OSError) -> None:
        if err.filename == str(location):
            raise err
        logger.warning("Skipping unreadable directory %s: %s", err.filename, err.strerror)

    walker = os.walk(location, onerror=on_error)
    for dirpath, dirnames, filenames in walker:
        dirnames.sort()
        for fname in sorted(filenames):
            if not fname.endswith(DESKTOP_SUFFIX):
                continue
            p = Path(dirpath) / fname
            found.append((desktop_file_id(location, p), p))

    found.sort(key=lambda item: item[1])
    return found
