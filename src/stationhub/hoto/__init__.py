"""Daily Drugs HOTO text engine."""

from __future__ import annotations

from .builder import Duty, HotoMode, HotoResult, build_output, build_result, format_date, render_hoto
from .document import CallSignBlock, ParsedHoto, TotalEntry, parse_hoto
from .drugs import DrugEntry, parse_drugs, parse_drugs_from_block
from .lines import LineKind, classify_line
from .merge import build_drug_block, merge_blocks, recalc_totals

__all__ = [
    "CallSignBlock",
    "DrugEntry",
    "Duty",
    "HotoMode",
    "HotoResult",
    "LineKind",
    "ParsedHoto",
    "TotalEntry",
    "build_drug_block",
    "build_output",
    "build_result",
    "classify_line",
    "format_date",
    "merge_blocks",
    "parse_drugs",
    "parse_drugs_from_block",
    "parse_hoto",
    "recalc_totals",
    "render_hoto",
]
