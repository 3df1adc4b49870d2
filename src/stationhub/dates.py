"""Date helpers shared by the templates and their hosts."""

from __future__ import annotations

import os
from datetime import date, datetime
from typing import Optional


def format_ddmmyyyy(value: date) -> str:
    """Return ``value`` formatted as ``DD/MM/YYYY``."""

    return f"{value.day:02d}/{value.month:02d}/{value.year:04d}"


def parse_iso_date(raw: Optional[str]) -> Optional[date]:
    """Return the date for a ``YYYY-MM-DD`` string, or ``None`` when it is not one."""

    if not raw:
        return None
    try:
        return datetime.strptime(raw.strip(), "%Y-%m-%d").date()
    except ValueError:
        return None


def dev_override_date() -> date | None:
    """Return a developer-specified date via STATIONHUB_DEV_DATE (YYYY-MM-DD)."""

    return parse_iso_date(os.environ.get("STATIONHUB_DEV_DATE"))


def default_hoto_date() -> date:
    """Date a new HOTO starts on: the dev override, else today."""

    return dev_override_date() or date.today()
