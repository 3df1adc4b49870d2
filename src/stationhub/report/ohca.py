"""Text formatter for OHCA (cardiac arrest) reports."""

from __future__ import annotations

from typing import Iterable, List

from .model import OhcaReport

CODE_REVIEW_DONE = "CodeReview: ✅"
CODE_REVIEW_NOT_DONE = "CodeReview: ❌"
SHAREPOINT_LINE = "Sharepoint: ❌"


def build_ohca_text(report: OhcaReport) -> str:
    """Return the four-line OHCA report for ``report``.

    Line one carries the incident number and call sign, line two the rank and
    name; blank fields are left out rather than leaving stray spaces. The
    Sharepoint line is always unticked because uploads happen later.
    """

    lines: List[str] = [
        _join_present([report.incident_number, report.call_sign]),
        _join_present([report.rank, report.name]),
        CODE_REVIEW_DONE if report.code_review_done else CODE_REVIEW_NOT_DONE,
        SHAREPOINT_LINE,
    ]
    return "\n".join(lines)


def _join_present(values: Iterable[str]) -> str:
    return " ".join(value.strip() for value in values if value and value.strip())


__all__ = ["build_ohca_text", "CODE_REVIEW_DONE", "CODE_REVIEW_NOT_DONE", "SHAREPOINT_LINE"]
