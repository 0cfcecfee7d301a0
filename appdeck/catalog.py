#===============================================================================
#  Desktop_Applications_Deck | catalog.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-10-19
#  Last Update : 2026-10-19
#
#  Summary
#  -------
#  Build the session catalog: scan locations in priority order, parse, drop
#  duplicates (first seen wins) and number the survivors.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

from dataclasses import replace
from pathlib import Path
from typing import Iterable, List, Optional, Sequence, Set, Tuple

from .desktop_entry import locale_keys, parse_desktop_file
from .errors import DesktopEntryError
from .fs_discovery import scan_location, source_locations
from .log_setup import get_logger
from .models import Catalog, CatalogBuild, Entry

logger = get_logger(__name__)


def identity(entry: Entry) -> Tuple[str, str]:
    """Dedup key: case-folded name plus whitespace-collapsed command."""
    return (" ".join(entry.name.split()).casefold(), " ".join(entry.exec.split()))


def dedupe(candidates: Iterable[Entry]) -> Catalog:
    """Keep the first entry per identity and assign ids in acceptance order.

    Candidates must arrive in priority order; later duplicates are dropped.
    """
    seen: Set[Tuple[str, str]] = set()
    kept: List[Entry] = []
    for entry in candidates:
        key = identity(entry)
        if key in seen:
            continue
        seen.add(key)
        kept.append(replace(entry, id=len(kept)))
    return Catalog(tuple(kept))


def collect_candidates(
    locations: Sequence[Path],
    *,
    desktop_actions: bool = False,
    locales: Sequence[str] = (),
) -> Tuple[List[Entry], List[Tuple[str, str]]]:
    """Parse every descriptor under `locations`, in priority order.

    A desktop file ID seen in a higher-priority location shadows the same ID
    further down, even when the winning file yields no entries (Hidden=true).
    """
    candidates: List[Entry] = []
    skipped: List[Tuple[str, str]] = []
    seen_ids: Set[str] = set()

    for offset, location in enumerate(locations):
        try:
            files = scan_location(location)
        except OSError as e:
            logger.warning("Skipping unreadable location %s: %s", location, e)
            skipped.append((str(location), str(e)))
            continue

        for file_id, path in files:
            if file_id in seen_ids:
                continue
            seen_ids.add(file_id)
            try:
                parsed = parse_desktop_file(
                    path,
                    offset=offset,
                    desktop_actions=desktop_actions,
                    locales=locales,
                )
            except DesktopEntryError as e:
                logger.warning("Skipping desktop entry: %s", e)
                skipped.append((str(path), str(e)))
                continue
            candidates.extend(parsed)

    return candidates, skipped


def build_catalog(
    locations: Optional[Sequence[Path]] = None,
    *,
    desktop_actions: bool = False,
    locales: Optional[Sequence[str]] = None,
) -> CatalogBuild:
    """Build the immutable catalog. Never raises; worst case it is empty."""
    if locations is None:
        locations = source_locations()
    if locales is None:
        locales = locale_keys()

    candidates, skipped = collect_candidates(
        list(locations), desktop_actions=desktop_actions, locales=locales
    )
    catalog = dedupe(candidates)

    logger.info(
        "Desktop entries loaded",
        locations=len(locations),
        candidates=len(candidates),
        entries=len(catalog),
        skipped=len(skipped),
    )
    return CatalogBuild(catalog=catalog, skipped=tuple(skipped))
