#===============================================================================
#  Desktop_Applications_Deck | desktop_entry.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-10-19
#  Last Update : 2026-10-19
#
#  Summary
#  -------
#  Parse one freedesktop .desktop file into candidate entries: the application
#  itself plus (optionally) one entry per [Desktop Action ...] group.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

import configparser
import os
import re
from pathlib import Path
from typing import List, Mapping, Optional, Sequence

from .errors import DesktopEntryError
from .models import Entry

MAIN_GROUP = "Desktop Entry"
ACTION_GROUP_PREFIX = "Desktop Action "

_FIELD_CODE_RE = re.compile(r"(\s*)%(.)")
_DROPPED_FIELD_CODES = set("fFuUdDnNickvm")
_ESCAPES = {"s": " ", "n": "\n", "t": "\t", "r": "\r", "\\": "\\", ";": ";"}


def _unescape(value: str) -> str:
    out: List[str] = []
    i = 0
    while i < len(value):
        ch = value[i]
        if ch == "\\" and i + 1 < len(value) and value[i + 1] in _ESCAPES:
            out.append(_ESCAPES[value[i + 1]])
            i += 2
            continue
        out.append(ch)
        i += 1
    return "".join(out)


def strip_field_codes(exec_line: str) -> str:
    """Remove %f/%U/... field codes and turn %% into %.

    A code standing alone as an argument is dropped together with the space
    before it; everything else in the command line is kept as written.
    """
    def repl(m: re.Match) -> str:
        space, code = m.group(1), m.group(2)
        if code == "%":
            return space + "%"
        if code not in _DROPPED_FIELD_CODES:
            return m.group(0)
        starts_arg = bool(space) or m.start() == 0
        ends_arg = m.end() == len(exec_line) or exec_line[m.end()].isspace()
        return "" if starts_arg and ends_arg else space

    return _FIELD_CODE_RE.sub(repl, exec_line).strip()


def _is_true(value: Optional[str]) -> bool:
    return (value or "").strip().lower() in ("true", "1")


def _split_list(value: Optional[str]) -> List[str]:
    # ';' separated, with "\;" as a literal semicolon
    if not value:
        return []
    parts = re.split(r"(?<!\\);", value)
    return [_unescape(p).strip() for p in parts if p.strip()]


def locale_keys(environ: Optional[Mapping[str, str]] = None) -> List[str]:
    """Locale suffixes to try for localized keys, most specific first.

    "de_DE.UTF-8@euro" -> ["de_DE@euro", "de_DE", "de@euro", "de"]
    """
    env = os.environ if environ is None else environ
    raw = ""
    for var in ("LC_ALL", "LC_MESSAGES", "LANG"):
        raw = env.get(var, "")
        if raw:
            break
    if not raw or raw in ("C", "POSIX") or raw.startswith("C."):
        return []

    modifier = ""
    if "@" in raw:
        raw, modifier = raw.split("@", 1)
    raw = raw.split(".", 1)[0]
    lang, _, country = raw.partition("_")

    keys: List[str] = []
    if country and modifier:
        keys.append(f"{lang}_{country}@{modifier}")
    if country:
        keys.append(f"{lang}_{country}")
    if modifier:
        keys.append(f"{lang}@{modifier}")
    keys.append(lang)
    return keys


def _localized(section: Mapping[str, str], key: str, locales: Sequence[str]) -> Optional[str]:
    for loc in locales:
        v = section.get(f"{key}[{loc}]")
        if v is not None and v.strip():
            return _unescape(v.strip())
    v = section.get(key)
    if v is None or not v.strip():
        return None
    return _unescape(v.strip())


def _read(path: Path) -> configparser.ConfigParser:
    cp = configparser.ConfigParser(interpolation=None, strict=False, delimiters=("=",))
    cp.optionxform = str  # keys are case-sensitive in desktop files
    try:
        with open(path, encoding="utf-8", errors="replace") as f:
            cp.read_file(f, source=str(path))
    except OSError as e:
        raise DesktopEntryError(f"unreadable: {e}", path=str(path)) from e
    except configparser.Error as e:
        raise DesktopEntryError(f"malformed: {e}", path=str(path)) from e
    return cp


def parse_desktop_file(
    path: Path,
    *,
    offset: int = 0,
    desktop_actions: bool = False,
    locales: Sequence[str] = (),
) -> List[Entry]:
    """Parse a .desktop file into zero or more entries.

    NoDisplay/Hidden applications, non-Application types and groups without
    a Name or Exec produce nothing.

    Raises:
        DesktopEntryError: unreadable file, bad syntax, or no [Desktop Entry] group.
    """
    cp = _read(path)
    if MAIN_GROUP not in cp:
        raise DesktopEntryError(f"missing [{MAIN_GROUP}] group", path=str(path))

    main = cp[MAIN_GROUP]
    if main.get("Type", "Application").strip() != "Application":
        return []
    if _is_true(main.get("NoDisplay")) or _is_true(main.get("Hidden")):
        return []

    name = _localized(main, "Name", locales)
    exec_line = strip_field_codes(_unescape(main.get("Exec", "")))
    if not name or not exec_line:
        return []

    description = _localized(main, "Comment", locales) or _localized(main, "GenericName", locales)
    icon = _localized(main, "Icon", locales) or ""
    keywords = frozenset(_split_list(_localized(main, "Keywords", locales)))
    working = (main.get("Path") or "").strip()

    base = Entry(
        name=name,
        exec=exec_line,
        description=description,
        icon=icon,
        keywords=keywords,
        terminal=_is_true(main.get("Terminal")),
        working_dir=Path(working) if working else None,
        offset=offset,
        desktop_file=path,
    )
    entries = [base]

    if not desktop_actions:
        return entries

    for action in _split_list(main.get("Actions")):
        group = f"{ACTION_GROUP_PREFIX}{action}"
        if group not in cp:
            continue
        section = cp[group]
        action_name = _localized(section, "Name", locales)
        action_exec = strip_field_codes(_unescape(section.get("Exec", "")))
        if not action_name or not action_exec:
            continue
        entries.append(
            Entry(
                name=action_name,
                exec=action_exec,
                description=base.name,
                icon=_localized(section, "Icon", locales) or base.icon,
                keywords=base.keywords,
                terminal=base.terminal,
                working_dir=base.working_dir,
                offset=offset,
                desktop_file=path,
                action=action,
            )
        )

    return entries
