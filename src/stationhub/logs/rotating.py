from __future__ import annotations

import logging
import logging.handlers
import os
from pathlib import Path


def app_support_dir() -> Path:
    """Return the StationHub support directory (``STATIONHUB_HOME`` wins)."""

    override = os.environ.get("STATIONHUB_HOME")
    base = Path(override).expanduser() if override else Path.home() / ".stationhub"
    base.mkdir(parents=True, exist_ok=True)
    return base


def log_path() -> Path:
    log_dir = app_support_dir() / "logs"
    log_dir.mkdir(parents=True, exist_ok=True)
    return log_dir / "stationhub.log"


def get_logger(name: str = "stationhub") -> logging.Logger:
    logger = logging.getLogger(name)
    if logger.handlers:
        return logger
    logger.setLevel(logging.INFO)
    handler = logging.handlers.RotatingFileHandler(
        log_path(), maxBytes=1_500_000, backupCount=5, encoding="utf-8"
    )
    formatter = logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")
    handler.setFormatter(formatter)
    logger.addHandler(handler)
    return logger
