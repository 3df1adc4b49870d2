"""Daily Drugs HOTO form: inputs on top, live output below."""

from __future__ import annotations

import logging
from typing import Optional

from PySide6.QtCore import QDate, Slot
from PySide6.QtWidgets import (
    QDateEdit,
    QHBoxLayout,
    QLineEdit,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from stationhub.dates import default_hoto_date, parse_iso_date
from stationhub.hoto.builder import Duty, HotoMode, build_output
from stationhub.hoto.document import parse_hoto

from .ui_prefs import UIPrefs
from .widgets import SegmentedToggle, copy_to_clipboard, monospace_editor, section_label

LOGGER = logging.getLogger(__name__)

PREF_MODE = "drug/mode"
PREF_DATE = "drug/date"
PREF_DUTY = "drug/duty"
PREF_CALL_SIGN = "drug/callsign"
PREF_DRUGS_USED = "drug/drugsUsed"


class HotoPanel(QWidget):
    """Create or update the Daily Drugs HOTO message."""

    def __init__(self, prefs: Optional[UIPrefs] = None, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self._prefs = prefs or UIPrefs()
        self._loading = True
        self._last_call_sign = ""
        self._build_ui()
        self._load_prefs()
        self._loading = False
        self.refresh_output()

    # --- UI assembly -----------------------------------------------------------------

    def _build_ui(self) -> None:
        layout = QVBoxLayout(self)
        layout.setContentsMargins(16, 16, 16, 16)
        layout.setSpacing(10)

        layout.addWidget(section_label("Mode"))
        self.mode_toggle = SegmentedToggle(
            [(HotoMode.CREATE.value, "Create"), (HotoMode.UPDATE.value, "Update existing")]
        )
        self.mode_toggle.changed.connect(self._on_mode_changed)
        layout.addWidget(self.mode_toggle)

        date_row = QHBoxLayout()
        date_row.setSpacing(12)
        date_column = QVBoxLayout()
        date_column.addWidget(section_label("Date"))
        self.date_edit = QDateEdit()
        self.date_edit.setCalendarPopup(True)
        self.date_edit.setDisplayFormat("dd/MM/yyyy")
        self.date_edit.dateChanged.connect(self._on_date_changed)
        date_column.addWidget(self.date_edit)
        date_row.addLayout(date_column, stretch=1)

        duty_column = QVBoxLayout()
        duty_column.addWidget(section_label("Duty"))
        self.duty_toggle = SegmentedToggle([(Duty.DD.value, "DD"), (Duty.ND.value, "ND")])
        self.duty_toggle.changed.connect(self._on_duty_changed)
        duty_column.addWidget(self.duty_toggle)
        date_row.addLayout(duty_column)
        layout.addLayout(date_row)

        layout.addWidget(section_label("Call Sign"))
        self.call_sign_edit = QLineEdit()
        self.call_sign_edit.setPlaceholderText("e.g. A441D")
        self.call_sign_edit.textChanged.connect(self._on_call_sign_changed)
        layout.addWidget(self.call_sign_edit)

        layout.addWidget(section_label("Drugs Used (one per line)"))
        self.drugs_edit = monospace_editor("Morphine x2\nMidazolam x1")
        self.drugs_edit.textChanged.connect(self._on_drugs_changed)
        layout.addWidget(self.drugs_edit, stretch=1)

        self.existing_label = section_label("Existing HOTO text")
        layout.addWidget(self.existing_label)
        self.existing_edit = monospace_editor("Paste the current HOTO message here…")
        self.existing_edit.textChanged.connect(self._on_existing_changed)
        layout.addWidget(self.existing_edit, stretch=2)

        layout.addWidget(section_label("Output"))
        self.output_view = monospace_editor(read_only=True)
        self.output_view.setObjectName("HotoOutput")
        layout.addWidget(self.output_view, stretch=2)

        self.copy_button = QPushButton("Copy")
        self.copy_button.clicked.connect(self._on_copy)
        layout.addWidget(self.copy_button)

        self.clear_button = QPushButton("Clear drugs && existing text")
        self.clear_button.clicked.connect(self.clear_inputs)
        layout.addWidget(self.clear_button)

    def _load_prefs(self) -> None:
        mode = self._prefs.get_str(PREF_MODE, HotoMode.CREATE.value)
        if mode not in (HotoMode.CREATE.value, HotoMode.UPDATE.value):
            mode = HotoMode.CREATE.value
        self.mode_toggle.set_value(mode)
        self._apply_mode_visibility(mode)

        stored_date = parse_iso_date(self._prefs.get_str(PREF_DATE, ""))
        start = stored_date or default_hoto_date()
        self.date_edit.setDate(QDate(start.year, start.month, start.day))

        duty = self._prefs.get_str(PREF_DUTY, Duty.DD.value)
        self.duty_toggle.set_value(duty if duty in (Duty.DD.value, Duty.ND.value) else Duty.DD.value)

        self.call_sign_edit.setText(self._prefs.get_str(PREF_CALL_SIGN, ""))
        self.drugs_edit.setPlainText(self._prefs.get_str(PREF_DRUGS_USED, ""))

    # --- Output ----------------------------------------------------------------------

    def date_iso(self) -> str:
        return self.date_edit.date().toString("yyyy-MM-dd")

    def output_text(self) -> str:
        return self.output_view.toPlainText()

    @Slot()
    def refresh_output(self) -> None:
        if self._loading:
            return
        text = build_output(
            self.mode_toggle.value(),
            self.date_iso(),
            self.duty_toggle.value(),
            self.call_sign_edit.text(),
            self.drugs_edit.toPlainText(),
            self.existing_edit.toPlainText(),
            previous_call_sign=self._last_call_sign,
        )
        self.output_view.setPlainText(text)

    @Slot()
    def clear_inputs(self) -> None:
        self.drugs_edit.clear()
        self.existing_edit.clear()
        self._last_call_sign = ""
        self._prefs.remove(PREF_DRUGS_USED)

    # --- Event handlers --------------------------------------------------------------

    def _on_mode_changed(self, mode: str) -> None:
        self._apply_mode_visibility(mode)
        self._remember(PREF_MODE, mode)

    def _apply_mode_visibility(self, mode: str) -> None:
        is_update = mode == HotoMode.UPDATE.value
        self.existing_label.setVisible(is_update)
        self.existing_edit.setVisible(is_update)

    def _on_date_changed(self, _value: QDate) -> None:
        self._remember(PREF_DATE, self.date_iso())

    def _on_duty_changed(self, duty: str) -> None:
        self._remember(PREF_DUTY, duty)

    def _on_call_sign_changed(self, text: str) -> None:
        self._note_call_sign(text)
        self._remember(PREF_CALL_SIGN, text)

    def _on_existing_changed(self) -> None:
        self._note_call_sign(self.call_sign_edit.text())
        self.refresh_output()

    def _note_call_sign(self, text: str) -> None:
        """Remember ``text`` when the pasted message has a block for it.

        Clearing the call sign later drops that block. Partial values typed
        on the way to or from a full call sign match no block and are ignored.
        """

        call_sign = text.strip()
        if not call_sign:
            return
        document = parse_hoto(self.existing_edit.toPlainText())
        if document is not None and document.find_block(call_sign) is not None:
            self._last_call_sign = call_sign

    def _on_drugs_changed(self) -> None:
        self._remember(PREF_DRUGS_USED, self.drugs_edit.toPlainText())

    def _remember(self, key: str, value: str) -> None:
        if self._loading:
            return
        self._prefs.set(key, value)
        self.refresh_output()

    def _on_copy(self) -> None:
        if not copy_to_clipboard(self.output_text(), self.copy_button):
            LOGGER.warning("Clipboard unavailable; HOTO output not copied")
