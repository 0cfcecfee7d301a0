#===============================================================================
#  Desktop_Applications_Deck | main_window.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-10-19
#  Last Update : 2026-10-19
#
#  Summary
#  -------
#  Minimal search window hosting the applications plugin:
#    - type to rank installed applications
#    - Up/Down to move, Enter or double-click to launch
#    - Escape closes; a launch always closes the window
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

from PySide6.QtCore import Qt, QSize
from PySide6.QtGui import QIcon
from PySide6.QtWidgets import (
    QLabel,
    QLineEdit,
    QListWidget,
    QListWidgetItem,
    QMainWindow,
    QVBoxLayout,
    QWidget,
)

from .models import RankedResult
from .plugin import PluginState, metadata, query, select

ICON_SIZE = QSize(32, 32)
WINDOW_BG = "#101010"
RESULT_ROLE = Qt.UserRole


class SearchLine(QLineEdit):
    """Line edit that forwards Up/Down to the result list."""

    def __init__(self, results: QListWidget, parent=None):
        super().__init__(parent)
        self.results = results

    def keyPressEvent(self, event):
        if event.key() in (Qt.Key_Up, Qt.Key_Down) and self.results.count():
            step = -1 if event.key() == Qt.Key_Up else 1
            row = max(0, min(self.results.count() - 1, self.results.currentRow() + step))
            self.results.setCurrentRow(row)
            return
        super().keyPressEvent(event)


class MainWindow(QMainWindow):
    def __init__(self, state: PluginState):
        super().__init__()
        self.state = state
        info = metadata()
        self.setWindowTitle(info.name)
        self.setWindowIcon(QIcon.fromTheme(info.icon))

        self.setStyleSheet(f"""
        QMainWindow {{ background: {WINDOW_BG}; }}
        QLabel {{ color: rgba(255,255,255,0.7); }}
        QLineEdit {{
            color: white;
            background: #1a1a1a;
            border: 1px solid #2a2a2a;
            padding: 8px 10px;
            font-size: 16px;
        }}
        QListWidget {{ color: white; background: #141414; border: none; }}
        QListWidget::item:selected {{ background: #0078D7; }}
        """)

        root = QWidget()
        self.setCentralWidget(root)
        layout = QVBoxLayout(root)
        layout.setContentsMargins(14, 14, 14, 14)
        layout.setSpacing(10)

        self.results = QListWidget()
        self.results.setIconSize(ICON_SIZE)
        self.results.setSelectionMode(QListWidget.SingleSelection)
        self.results.itemActivated.connect(self.launch_item)

        self.search = SearchLine(self.results)
        self.search.setPlaceholderText("Search applications")
        self.search.textChanged.connect(self.refresh)
        self.search.returnPressed.connect(self.launch_current)

        self.status = QLabel(f"{len(state.catalog)} applications indexed")

        layout.addWidget(self.search)
        layout.addWidget(self.results)
        layout.addWidget(self.status)

        self.search.setFocus()

    def keyPressEvent(self, event):
        if event.key() == Qt.Key_Escape:
            self.close()
            return
        super().keyPressEvent(event)

    # ----------------------------
    # Results
    # ----------------------------
    def refresh(self, text: str):
        self.results.clear()
        if not text.strip():
            return
        for res in query(text, self.state):
            self.results.addItem(self._item_for(res))
        if self.results.count():
            self.results.setCurrentRow(0)

    def _item_for(self, res: RankedResult) -> QListWidgetItem:
        label = res.title if not res.description else f"{res.title}\n{res.description}"
        item = QListWidgetItem(QIcon.fromTheme(res.icon), label)
        item.setData(RESULT_ROLE, res.id)
        return item

    def launch_current(self):
        item = self.results.currentItem()
        if item is not None:
            self.launch_item(item)

    def launch_item(self, item: QListWidgetItem):
        outcome = select(int(item.data(RESULT_ROLE)), self.state)
        if outcome.kind == "close":
            self.close()
