#===============================================================================
#  Desktop_Applications_Deck | fuzzy.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-10-19
#  Last Update : 2026-10-19
#
#  Summary
#  -------
#  Smart-case subsequence fuzzy matcher (fzf/skim style scoring).
#
#  Every pattern character must appear in the text, in order. The best
#  alignment is found with a two-row dynamic program:
#    - each matched char scores SCORE_MATCH
#    - chars at word starts / camelCase humps / digits get a bonus
#    - the first pattern char's bonus counts double
#    - runs of adjacent matches earn BONUS_CONSECUTIVE per char
#    - gaps cost SCORE_GAP_START, then SCORE_GAP_EXTENSION per extra char
#  The text start counts as whitespace, so prefix matches get the top bonus.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

from typing import List, Optional, Sequence

SCORE_MATCH = 16
SCORE_GAP_START = -3
SCORE_GAP_EXTENSION = -1

BONUS_BOUNDARY = SCORE_MATCH // 2
BONUS_BOUNDARY_WHITE = BONUS_BOUNDARY + 2
BONUS_BOUNDARY_DELIMITER = BONUS_BOUNDARY + 1
BONUS_NON_WORD = SCORE_MATCH // 2
BONUS_CAMEL123 = BONUS_BOUNDARY - 1
BONUS_CONSECUTIVE = -(SCORE_GAP_START + SCORE_GAP_EXTENSION)
BONUS_FIRST_CHAR_MULTIPLIER = 2

# char classes; everything >= _LOWER is a word char
_WHITE, _NON_WORD, _DELIMITER, _LOWER, _UPPER, _NUMBER = range(6)
_DELIMITER_CHARS = set("/,:;|-_.=")

_UNREACHABLE = -(1 << 30)


def _char_class(ch: str) -> int:
    if ch.isspace():
        return _WHITE
    if ch in _DELIMITER_CHARS:
        return _DELIMITER
    if ch.isdigit():
        return _NUMBER
    if ch.isupper():
        return _UPPER
    if ch.isalpha():
        return _LOWER
    return _NON_WORD


def _bonus_for(prev: int, cur: int) -> int:
    if cur >= _LOWER:
        if prev == _WHITE:
            return BONUS_BOUNDARY_WHITE
        if prev == _DELIMITER:
            return BONUS_BOUNDARY_DELIMITER
        if prev == _NON_WORD:
            return BONUS_BOUNDARY
    if (prev == _LOWER and cur == _UPPER) or (prev != _NUMBER and cur == _NUMBER):
        return BONUS_CAMEL123
    if cur == _WHITE:
        return BONUS_BOUNDARY_WHITE
    if cur in (_NON_WORD, _DELIMITER):
        return BONUS_NON_WORD
    return 0


def position_bonuses(text: str) -> List[int]:
    out: List[int] = []
    prev = _WHITE
    for ch in text:
        cur = _char_class(ch)
        out.append(_bonus_for(prev, cur))
        prev = cur
    return out


def is_case_sensitive(pattern: str) -> bool:
    """Smart case: any uppercase char in the pattern turns case sensitivity on."""
    return any(ch.isupper() for ch in pattern)


def _is_subsequence(pattern: Sequence[str], text: Sequence[str]) -> bool:
    i = 0
    for ch in text:
        if i < len(pattern) and ch == pattern[i]:
            i += 1
    return i == len(pattern)


def fuzzy_match(text: str, pattern: str) -> Optional[int]:
    """Score `pattern` against `text`.

    Returns None when `pattern` is not a subsequence of `text`, otherwise a
    non-negative score. An empty pattern matches anything with score 0.
    """
    if not pattern:
        return 0

    if is_case_sensitive(pattern):
        t: List[str] = list(text)
        p: List[str] = list(pattern)
    else:
        t = [ch.lower() for ch in text]
        p = [ch.lower() for ch in pattern]

    n, m = len(p), len(t)
    if n > m or not _is_subsequence(p, t):
        return None

    bonus = position_bonuses(text)

    row = [_UNREACHABLE] * m
    for j in range(m):
        if t[j] == p[0]:
            row[j] = SCORE_MATCH + bonus[j] * BONUS_FIRST_CHAR_MULTIPLIER

    for i in range(1, n):
        prev_row = row
        row = [_UNREACHABLE] * m
        gap = _UNREACHABLE
        for j in range(1, m):
            # best predecessor ending at j-2 or earlier, paying for the gap
            if j >= 2:
                gap = max(gap + SCORE_GAP_EXTENSION, prev_row[j - 2] + SCORE_GAP_START)
            if t[j] != p[i]:
                continue
            best = gap
            if prev_row[j - 1] > _UNREACHABLE:
                best = max(best, prev_row[j - 1] + BONUS_CONSECUTIVE)
            if best <= _UNREACHABLE // 2:
                continue
            row[j] = best + SCORE_MATCH + bonus[j]

    score = max(row)
    return max(score, 0)
