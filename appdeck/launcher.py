#===============================================================================
#  Desktop_Applications_Deck | launcher.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-10-19
#  Last Update : 2026-10-19
#
#  Summary
#  -------
#  Launches a catalog entry as a detached process, either through `sh -c` or
#  inside a terminal emulator. Spawn failures are logged, never raised.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

import os
import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Sequence

from .constants import SENSIBLE_TERMINALS
from .log_setup import get_logger
from .models import Catalog, Entry

logger = get_logger(__name__)


@dataclass(frozen=True)
class SpawnResult:
    argv: List[str]
    ok: bool
    error: Optional[str] = None


def resolve_working_dir(entry: Entry) -> Path:
    """The entry's Path= if it currently exists, else our cwd right now.

    If our own cwd is gone too, fall back to the home directory.
    """
    if entry.working_dir is not None and entry.working_dir.is_dir():
        return entry.working_dir
    try:
        return Path(os.getcwd())
    except OSError as e:
        logger.warning("Current directory is unavailable, using home: %s", e)
        return Path(os.path.expanduser("~"))


def spawn(argv: List[str], cwd: Path) -> SpawnResult:
    """Start `argv` detached. Does not wait and does not capture output."""
    try:
        subprocess.Popen(argv, cwd=str(cwd), start_new_session=True)
    except (OSError, ValueError, subprocess.SubprocessError) as e:
        # ValueError: argv holds a NUL byte
        return SpawnResult(argv=argv, ok=False, error=str(e))
    return SpawnResult(argv=argv, ok=True)


def launch_entry(
    entry: Entry,
    terminal: Optional[str] = None,
    fallback_terminals: Sequence[str] = SENSIBLE_TERMINALS,
) -> List[SpawnResult]:
    """Launch an entry and return every spawn attempt made.

    modes:
      - terminal entry, terminal configured: one attempt, no retry
      - terminal entry, nothing configured : fallback list in order, stop at first success
      - plain entry                        : sh -c <exec>
    """
    cwd = resolve_working_dir(entry)
    attempts: List[SpawnResult] = []

    if entry.terminal:
        if terminal:
            res = spawn([terminal, "-e", entry.exec], cwd)
            attempts.append(res)
            if not res.ok:
                logger.warning("Error running desktop entry %r in %s: %s", entry.name, terminal, res.error)
            return attempts

        for term in fallback_terminals:
            res = spawn([term, "-e", entry.exec], cwd)
            attempts.append(res)
            if res.ok:
                return attempts
        logger.warning(
            "No terminal emulator could be started for %r",
            entry.name,
            tried=list(fallback_terminals),
        )
        return attempts

    res = spawn(["sh", "-c", entry.exec], cwd)
    attempts.append(res)
    if not res.ok:
        logger.warning("Error running desktop entry %r: %s", entry.name, res.error)
    return attempts


def dispatch(
    entry_id: int,
    catalog: Catalog,
    terminal: Optional[str] = None,
) -> List[SpawnResult]:
    """Look up `entry_id` and launch it.

    Raises:
        UnknownEntryError: `entry_id` is not in `catalog` (caller bug).
    """
    entry = catalog.get(entry_id)
    attempts = launch_entry(entry, terminal=terminal)
    launched = next((a for a in attempts if a.ok), None)
    if launched is not None:
        logger.info("Launched %r", entry.name, argv=launched.argv)
    return attempts
