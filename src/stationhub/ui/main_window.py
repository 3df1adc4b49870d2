"""Main application window for the StationHub templates client."""

from __future__ import annotations

from typing import Optional

from PySide6.QtWidgets import QMainWindow, QTabWidget, QWidget

from .hoto_panel import HotoPanel
from .ohca_panel import OhcaPanel
from .ui_prefs import UIPrefs


class MainWindow(QMainWindow):
    """One tab per template."""

    def __init__(self, prefs: Optional[UIPrefs] = None, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self.setWindowTitle("StationHub Templates")
        self.resize(560, 860)

        self._prefs = prefs or UIPrefs()
        self.tabs = QTabWidget(self)
        self.hoto_panel = HotoPanel(self._prefs)
        self.ohca_panel = OhcaPanel(self._prefs)
        self.tabs.addTab(self.hoto_panel, "Daily Drugs HOTO")
        self.tabs.addTab(self.ohca_panel, "OHCA Report")
        self.setCentralWidget(self.tabs)

    def closeEvent(self, event) -> None:  # noqa: N802 (Qt override)
        self._prefs.sync()
        super().closeEvent(event)
