"""OHCA report form."""

from __future__ import annotations

import logging
from typing import Optional

from PySide6.QtCore import Slot
from PySide6.QtWidgets import (
    QLabel,
    QLineEdit,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from stationhub.report.model import OhcaReport
from stationhub.report.ohca import SHAREPOINT_LINE, build_ohca_text

from .ui_prefs import UIPrefs
from .widgets import SegmentedToggle, copy_to_clipboard, monospace_editor, section_label

LOGGER = logging.getLogger(__name__)

PREF_CALL_SIGN = "ohca/callsign"
PREF_RANK = "ohca/rank"
PREF_NAME = "ohca/name"
PREF_CODE_REVIEW = "ohca/codeReview"
PREF_KEYS = (PREF_CALL_SIGN, PREF_RANK, PREF_NAME, PREF_CODE_REVIEW)


class OhcaPanel(QWidget):
    """Format the cardiac arrest report text."""

    def __init__(self, prefs: Optional[UIPrefs] = None, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self._prefs = prefs or UIPrefs()
        self._loading = True
        self._build_ui()
        self._load_prefs()
        self._loading = False
        self.refresh_output()

    def _build_ui(self) -> None:
        layout = QVBoxLayout(self)
        layout.setContentsMargins(16, 16, 16, 16)
        layout.setSpacing(10)

        self.incident_edit = self._add_line_edit(layout, "Incident No.", "e.g. 20250211/0781")
        self.call_sign_edit = self._add_line_edit(layout, "Call Sign", "e.g. A441D", PREF_CALL_SIGN)
        self.rank_edit = self._add_line_edit(layout, "Rank", "e.g. WO1, CPL, SGT", PREF_RANK)
        self.name_edit = self._add_line_edit(layout, "Name", "e.g. Lavitz", PREF_NAME)

        layout.addWidget(section_label("Code Review"))
        self.code_review_toggle = SegmentedToggle([("done", "✅ Done"), ("not_done", "❌ Not Done")])
        self.code_review_toggle.changed.connect(self._on_code_review_changed)
        layout.addWidget(self.code_review_toggle)

        self.sharepoint_label = QLabel(f"{SHAREPOINT_LINE}  (fixed)")
        self.sharepoint_label.setStyleSheet("color: #6B7280;")
        layout.addWidget(self.sharepoint_label)

        layout.addWidget(section_label("Output"))
        self.output_view = monospace_editor(read_only=True)
        self.output_view.setObjectName("OhcaOutput")
        layout.addWidget(self.output_view, stretch=1)

        self.copy_button = QPushButton("Copy")
        self.copy_button.clicked.connect(self._on_copy)
        layout.addWidget(self.copy_button)

        self.clear_button = QPushButton("Clear")
        self.clear_button.clicked.connect(self.clear_inputs)
        layout.addWidget(self.clear_button)

    def _add_line_edit(
        self,
        layout: QVBoxLayout,
        title: str,
        placeholder: str,
        pref_key: Optional[str] = None,
    ) -> QLineEdit:
        layout.addWidget(section_label(title))
        edit = QLineEdit()
        edit.setPlaceholderText(placeholder)
        edit.textChanged.connect(lambda text, key=pref_key: self._on_text_changed(key, text))
        layout.addWidget(edit)
        return edit

    def _load_prefs(self) -> None:
        self.call_sign_edit.setText(self._prefs.get_str(PREF_CALL_SIGN, ""))
        self.rank_edit.setText(self._prefs.get_str(PREF_RANK, ""))
        self.name_edit.setText(self._prefs.get_str(PREF_NAME, ""))
        review = self._prefs.get_str(PREF_CODE_REVIEW, "not_done")
        self.code_review_toggle.set_value(review if review in ("done", "not_done") else "not_done")

    def report(self) -> OhcaReport:
        return OhcaReport(
            incident_number=self.incident_edit.text(),
            call_sign=self.call_sign_edit.text(),
            rank=self.rank_edit.text(),
            name=self.name_edit.text(),
            code_review="done" if self.code_review_toggle.value() == "done" else "not_done",
        )

    def output_text(self) -> str:
        return self.output_view.toPlainText()

    @Slot()
    def refresh_output(self) -> None:
        if self._loading:
            return
        self.output_view.setPlainText(build_ohca_text(self.report()))

    @Slot()
    def clear_inputs(self) -> None:
        self._loading = True
        self.incident_edit.clear()
        self.call_sign_edit.clear()
        self.rank_edit.clear()
        self.name_edit.clear()
        self.code_review_toggle.set_value("not_done")
        self._loading = False
        for key in PREF_KEYS:
            self._prefs.remove(key)
        self.refresh_output()

    def _on_text_changed(self, pref_key: Optional[str], text: str) -> None:
        if self._loading:
            return
        if pref_key:
            self._prefs.set(pref_key, text)
        self.refresh_output()

    def _on_code_review_changed(self, value: str) -> None:
        if self._loading:
            return
        self._prefs.set(PREF_CODE_REVIEW, value)
        self.refresh_output()

    def _on_copy(self) -> None:
        if not copy_to_clipboard(self.output_text(), self.copy_button):
            LOGGER.warning("Clipboard unavailable; OHCA output not copied")
