#===============================================================================
#  Desktop_Applications_Deck | cli.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-10-19
#  Last Update : 2026-10-19
#
#  Summary
#  -------
#  Command line entry. Headless modes (--list, --query [--launch]) print
#  results; with neither it opens the search window.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

import argparse
import json
import os
import sys
from dataclasses import asdict
from pathlib import Path
from typing import List, Optional

from .log_setup import configure_logging
from .plugin import PluginState, initialize, query, select


def default_config_dir() -> Path:
    base = os.environ.get("XDG_CONFIG_HOME") or str(Path.home() / ".config")
    return Path(base) / "appdeck"


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="appdeck", description="Search and launch desktop applications")
    p.add_argument("--config-dir", default=None, help="Directory holding applications.json")
    p.add_argument("--log-level", default="WARNING", help="Logging level")
    p.add_argument("--query", default=None, help="Print ranked results for this query")
    p.add_argument("--launch", action="store_true", help="With --query: launch the top result")
    p.add_argument("--list", action="store_true", help="Print every catalog entry")
    return p


def _print_catalog(state: PluginState) -> None:
    for entry in state.catalog:
        print(json.dumps({
            "id": entry.id,
            "name": entry.name,
            "exec": entry.exec,
            "offset": entry.offset,
            "action": entry.action,
        }, ensure_ascii=False))


def run_gui(state: PluginState) -> int:
    from PySide6.QtWidgets import QApplication

    from .main_window import MainWindow

    app = QApplication(sys.argv)
    w = MainWindow(state)
    w.resize(640, 420)
    w.show()
    return app.exec()


def main(argv: Optional[List[str]] = None) -> int:
    args = _build_parser().parse_args(argv)
    configure_logging(level=args.log_level)

    config_dir = Path(args.config_dir) if args.config_dir else default_config_dir()
    state = initialize(config_dir)

    if args.list:
        _print_catalog(state)
        return 0

    if args.query is None:
        return run_gui(state)

    results = query(args.query, state)
    for res in results:
        print(json.dumps(asdict(res), ensure_ascii=False))

    if args.launch and results:
        select(results[0], state)
    return 0
