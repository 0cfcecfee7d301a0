#===============================================================================
#  Desktop_Applications_Deck | models.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-10-19
#  Last Update : 2026-10-19
#
#  Summary
#  -------
#  Shared data models used across the catalog, ranker and launcher.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, FrozenSet, Iterator, Optional, Tuple

from .errors import UnknownEntryError


@dataclass(frozen=True)
class Entry:
    """One launchable application or desktop action."""
    name: str                            # display title
    exec: str                            # shell command line, field codes removed
    description: Optional[str] = None
    icon: str = ""
    keywords: FrozenSet[str] = frozenset()
    terminal: bool = False
    working_dir: Optional[Path] = None
    offset: int = 0                      # index of the source location (0 = highest priority)
    id: int = -1                         # assigned when retained into the catalog
    desktop_file: Optional[Path] = None
    action: Optional[str] = None         # "[Desktop Action <key>]" key; None for the base entry

    @property
    def is_action(self) -> bool:
        return self.action is not None


class Catalog:
    """Ordered, read-only sequence of retained entries.

    Built once per session by :func:`appdeck.catalog.build_catalog`.
    """

    __slots__ = ("_entries", "_by_id")

    def __init__(self, entries: Tuple[Entry, ...] = ()):
        self._entries = tuple(entries)
        self._by_id: Dict[int, Entry] = {e.id: e for e in self._entries}

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[Entry]:
        return iter(self._entries)

    def __getitem__(self, index: int) -> Entry:
        return self._entries[index]

    @property
    def entries(self) -> Tuple[Entry, ...]:
        return self._entries

    def get(self, entry_id: int) -> Entry:
        try:
            return self._by_id[entry_id]
        except KeyError:
            raise UnknownEntryError(entry_id) from None


@dataclass(frozen=True)
class RankedResult:
    title: str
    description: Optional[str]
    icon: str
    id: int


@dataclass(frozen=True)
class HandleResult:
    """What the host should do after a selection."""
    kind: str               # "close" | "copy"
    text: str = ""

    @classmethod
    def close(cls) -> "HandleResult":
        return cls(kind="close")


@dataclass(frozen=True)
class PluginInfo:
    name: str
    icon: str


@dataclass(frozen=True)
class CatalogBuild:
    """Result of a catalog build: the catalog plus everything that was skipped."""
    catalog: Catalog
    skipped: Tuple[Tuple[str, str], ...] = field(default_factory=tuple)   # (path, reason)
