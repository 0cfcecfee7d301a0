#===============================================================================
#  Desktop_Applications_Deck | ranker.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-10-19
#  Last Update : 2026-10-19
#
#  Summary
#  -------
#  Score catalog entries against a query and return the best few.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

from typing import List, Tuple

from .constants import (
    DEFAULT_MAX_ENTRIES,
    DESCRIPTION_WEIGHT,
    EXEC_WEIGHT,
    KEYWORD_WEIGHT,
    NAME_WEIGHT,
)
from .fuzzy import fuzzy_match
from .log_setup import get_logger
from .models import Catalog, Entry, RankedResult

logger = get_logger(__name__)


def _field_score(text: str, query: str) -> int:
    return fuzzy_match(text, query) or 0


def score_entry(entry: Entry, query: str) -> int:
    """Weighted sum of per-field matches minus the entry's source offset."""
    name_score = _field_score(entry.name, query)
    description_score = _field_score(entry.description, query) if entry.description else 0
    exec_score = _field_score(entry.exec, query)
    keyword_score = sum(_field_score(k, query) for k in sorted(entry.keywords))

    return (
        NAME_WEIGHT * name_score
        + DESCRIPTION_WEIGHT * description_score
        + EXEC_WEIGHT * exec_score
        + KEYWORD_WEIGHT * keyword_score
        - entry.offset
    )


def rank(
    query: str,
    catalog: Catalog,
    max_entries: int = DEFAULT_MAX_ENTRIES,
    ignore_prefix: str = "",
) -> List[RankedResult]:
    """Return up to `max_entries` results with a strictly positive score.

    Highest score first; equal scores keep catalog order. A query starting
    with a non-empty `ignore_prefix` yields nothing.
    """
    if ignore_prefix and query.startswith(ignore_prefix):
        return []

    scored: List[Tuple[Entry, int]] = []
    for entry in catalog:
        score = score_entry(entry, query)
        if score > 0:
            scored.append((entry, score))

    # sorted() is stable, so ties stay in catalog order
    scored = sorted(scored, key=lambda item: item[1], reverse=True)[:max_entries]

    logger.debug("Ranked query", query=query, matches=len(scored))
    return [
        RankedResult(title=e.name, description=e.description, icon=e.icon, id=e.id)
        for e, _score in scored
    ]
