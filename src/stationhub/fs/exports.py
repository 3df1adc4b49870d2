"""Helpers for writing template output to disk."""

from __future__ import annotations

import errno
import logging
from pathlib import Path

from stationhub.logs.rotating import app_support_dir

_LOGGER = logging.getLogger(__name__)


def exports_dir() -> Path:
    """Return the default Exports directory, creating it if needed."""
    path = app_support_dir() / "Exports"
    path.mkdir(parents=True, exist_ok=True)
    return path


def safe_write_text(path: Path, text: str) -> Path:
    """Persist ``text`` to ``path``, falling back to Exports on permission errors."""
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
        return path
    except OSError as exc:
        if exc.errno not in (errno.EPERM, errno.EACCES):
            raise
        fallback_path = exports_dir() / path.name
        _LOGGER.warning(
            "safe_write_text fallback (errno=%s) original=%s fallback=%s",
            exc.errno,
            path,
            fallback_path,
        )
        fallback_path.write_text(text, encoding="utf-8")
        return fallback_path


__all__ = ["exports_dir", "safe_write_text"]
