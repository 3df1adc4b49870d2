from __future__ import annotations

from typing import Optional

from PySide6 import QtCore


class UIPrefs:
    """Thin wrapper around QSettings for template field persistence."""

    def __init__(
        self,
        org: str = "StationHub",
        app: str = "StationHubTemplates",
        *,
        settings: Optional[QtCore.QSettings] = None,
    ) -> None:
        self._settings = settings if settings is not None else QtCore.QSettings(org, app)

    def get(self, key: str, default=None, *, type=None):
        if type is not None:
            value = self._settings.value(key, default, type=type)
        else:
            value = self._settings.value(key, default)
        return default if value is None else value

    def get_str(self, key: str, default: str = "") -> str:
        value = self.get(key, default)
        return value if isinstance(value, str) else str(value)

    def set(self, key: str, value) -> None:
        self._settings.setValue(key, value)

    def remove(self, key: str) -> None:
        self._settings.remove(key)

    def contains(self, key: str) -> bool:
        return self._settings.contains(key)

    def sync(self) -> None:
        self._settings.sync()
