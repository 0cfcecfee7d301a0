#===============================================================================
#  Desktop_Applications_Deck  |  Desktop Application Search & Launcher
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-10-19
#  Last Update : 2026-10-19
#
#  Summary
#  -------
#  Indexes the freedesktop .desktop files installed for this user and the
#  system, ranks them against what you type and launches the chosen one as a
#  detached process.
#  Supports:
#    - User dirs outranking system dirs ($XDG_DATA_HOME, $XDG_DATA_DIRS)
#    - Optional desktop actions ("New Private Window", ...) as extra results
#    - Terminal applications (configured terminal or a fallback list)
#    - Headless --query/--list modes, or a small PySide6 search window
#
#  Config
#  ------
#    ~/.config/appdeck/applications.json
#      {"desktop_actions": false, "max_entries": 5,
#       "terminal": null, "ignore_prefix": ""}
#
#  Copyright & License Notes
#  -------------------------
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#
#  This source code is provided "AS IS", without warranty of any kind, express
#  or implied, including but not limited to the warranties of merchantability,
#  fitness for a particular purpose, and noninfringement.
#
#  Permission Notice (Personal/Internal Use)
#  -----------------------------------------
#  You may use, copy, and modify this software for personal or internal use.
#  Redistribution or public release should include this header and credit the
#  author. If you plan to open-source this project, consider replacing this
#  section with an OSI-approved license (e.g., MIT) for clarity.
#
#  Third-Party Components
#  ----------------------
#  This project may use third-party libraries (e.g., PySide6) which are
#  licensed separately by their respective authors. Ensure compliance with
#  their license terms when distributing this software.
#===============================================================================

import sys

from appdeck.cli import main


if __name__ == "__main__":
    sys.exit(main())
