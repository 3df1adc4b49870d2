"""Small widgets shared by the template panels."""

from __future__ import annotations

from typing import Iterable, Optional, Tuple

from PySide6.QtCore import QTimer, Signal
from PySide6.QtGui import QFontDatabase, QGuiApplication
from PySide6.QtWidgets import (
    QButtonGroup,
    QHBoxLayout,
    QLabel,
    QPlainTextEdit,
    QPushButton,
    QWidget,
)

COPIED_RESET_MS = 2000
COPY_FAILED_TEXT = "Copy failed. Please copy manually."


class SegmentedToggle(QWidget):
    """Row of mutually exclusive buttons, one per ``(value, label)`` option."""

    changed = Signal(str)

    def __init__(self, options: Iterable[Tuple[str, str]], parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        layout = QHBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(6)

        self._group = QButtonGroup(self)
        self._group.setExclusive(True)
        self._buttons: dict[str, QPushButton] = {}
        for value, label in options:
            button = QPushButton(label)
            button.setCheckable(True)
            button.setObjectName(f"Toggle_{value}")
            button.clicked.connect(lambda _checked=False, v=value: self._on_clicked(v))
            self._group.addButton(button)
            self._buttons[value] = button
            layout.addWidget(button, stretch=1)
        self._value = ""

    def value(self) -> str:
        return self._value

    def button(self, value: str) -> QPushButton:
        return self._buttons[value]

    def set_value(self, value: str) -> None:
        if value not in self._buttons:
            return
        self._buttons[value].setChecked(True)
        if value != self._value:
            self._value = value
            self.changed.emit(value)

    def _on_clicked(self, value: str) -> None:
        self.set_value(value)


def section_label(text: str) -> QLabel:
    label = QLabel(text.upper())
    label.setStyleSheet("font-size: 11px; font-weight: 600; color: #6B7280;")
    return label


def monospace_editor(placeholder: str = "", *, read_only: bool = False) -> QPlainTextEdit:
    editor = QPlainTextEdit()
    editor.setPlaceholderText(placeholder)
    editor.setReadOnly(read_only)
    editor.setFont(QFontDatabase.systemFont(QFontDatabase.SystemFont.FixedFont))
    return editor


def copy_to_clipboard(
    text: str,
    button: Optional[QPushButton] = None,
    *,
    idle_text: str = "Copy",
) -> bool:
    """Put ``text`` on the clipboard and flash the outcome on ``button`` when given."""

    clipboard = QGuiApplication.clipboard()
    if clipboard is None:
        _flash(button, COPY_FAILED_TEXT, idle_text)
        return False
    clipboard.setText(text)
    _flash(button, "Copied!", idle_text)
    return True


def _flash(button: Optional[QPushButton], text: str, idle_text: str) -> None:
    if button is None:
        return
    button.setText(text)
    QTimer.singleShot(COPIED_RESET_MS, button, lambda: button.setText(idle_text))
