"""Line grammar for Daily Drugs HOTO messages.

Every structural decision the parser makes goes through :func:`classify_line`
so the handful of line shapes the HOTO layout relies on live in one place::

    DAILY DRUGS HOTO          HEADER
    11/02/2025 DD             (duty line, OTHER)
    *A441D*                   MARKER
    Drugs used:               OTHER
    - Morphine x2             DRUG
    Drug totals:              TOTALS_HEADING
    Morphine: 5               TOTAL
"""

from __future__ import annotations

import re
from enum import Enum
from typing import Optional, Sequence

HEADER_MARKER = "DAILY DRUGS HOTO"


class LineKind(str, Enum):
    """Shape of a single HOTO line."""

    BLANK = "blank"
    HEADER = "header"
    MARKER = "marker"
    TOTALS_HEADING = "totals_heading"
    TOTAL = "total"
    DRUG = "drug"
    OTHER = "other"


MARKER_RE = re.compile(r"^\*[A-Za-z0-9]+\*$")
TOTAL_RE = re.compile(r"^(?P<drug>[A-Za-z ]+):\s*(?P<count>\d+|-)\s*$")
TOTALS_HEADING_RE = re.compile(r"^[A-Za-z ]*\btotals?:$", re.IGNORECASE)
DRUG_LINE_RE = re.compile(r"^-\s+(?P<name>.+?)\s+x(?P<count>\d+)$", re.IGNORECASE)
USAGE_RE = re.compile(r"^(?P<name>.+?)\s+x(?P<count>\d+)$", re.IGNORECASE)


def classify_line(line: str) -> LineKind:
    """Return the :class:`LineKind` for ``line`` (surrounding whitespace ignored)."""

    stripped = line.strip()
    if not stripped:
        return LineKind.BLANK
    if HEADER_MARKER in line:
        return LineKind.HEADER
    if MARKER_RE.match(stripped):
        return LineKind.MARKER
    if TOTALS_HEADING_RE.match(stripped):
        return LineKind.TOTALS_HEADING
    if TOTAL_RE.match(stripped):
        return LineKind.TOTAL
    if DRUG_LINE_RE.match(stripped):
        return LineKind.DRUG
    return LineKind.OTHER


def is_marker(line: str) -> bool:
    return classify_line(line) is LineKind.MARKER


def marker_call_sign(line: str) -> str:
    """Return the call sign carried by a ``*TOKEN*`` marker line."""

    return line.strip().replace("*", "").strip()


def starts_totals_section(lines: Sequence[str], index: int, *, in_block: bool) -> bool:
    """Return ``True`` when ``lines[index]`` opens the totals section.

    Before the first block, a totals heading or totals-shaped line only opens
    it when no ``*CS*`` marker follows; otherwise it is preamble text such as
    ``Crew: 2``. Inside a block a heading always opens it, and a totals-shaped
    line only counts when the line right after it is blank or totals-shaped as
    well. A final totals-shaped line with nothing after it stays with the block.
    """

    kind = classify_line(lines[index])
    if kind not in (LineKind.TOTALS_HEADING, LineKind.TOTAL):
        return False
    if not in_block:
        return not any(classify_line(line) is LineKind.MARKER for line in lines[index + 1 :])
    if kind is LineKind.TOTALS_HEADING:
        return True
    if index + 1 >= len(lines):
        return False
    return classify_line(lines[index + 1]) in (LineKind.BLANK, LineKind.TOTAL)


def split_lines(text: Optional[str]) -> list[str]:
    """Split ``text`` on newlines, accepting ``\\r\\n`` and bare ``\\r`` endings."""

    if not text:
        return []
    return text.replace("\r\n", "\n").replace("\r", "\n").split("\n")


__all__ = [
    "HEADER_MARKER",
    "LineKind",
    "MARKER_RE",
    "TOTAL_RE",
    "TOTALS_HEADING_RE",
    "DRUG_LINE_RE",
    "USAGE_RE",
    "classify_line",
    "is_marker",
    "marker_call_sign",
    "starts_totals_section",
    "split_lines",
]
