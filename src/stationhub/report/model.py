"""Report data structures for the OHCA template."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

CodeReviewState = Literal["done", "not_done"]


@dataclass(slots=True)
class OhcaReport:
    """Fields an operator fills in for an out-of-hospital cardiac arrest report."""

    incident_number: str = ""
    call_sign: str = ""
    rank: str = ""
    name: str = ""
    code_review: CodeReviewState = "not_done"

    @property
    def code_review_done(self) -> bool:
        return self.code_review == "done"


__all__ = ["OhcaReport", "CodeReviewState"]
