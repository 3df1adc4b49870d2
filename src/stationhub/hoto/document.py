"""Decomposition of an existing Daily Drugs HOTO message."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Tuple

from .drugs import drug_key
from .lines import (
    TOTAL_RE,
    LineKind,
    classify_line,
    marker_call_sign,
    split_lines,
    starts_totals_section,
)

LOGGER = logging.getLogger(__name__)

SENTINEL = "-"


@dataclass(frozen=True, slots=True)
class CallSignBlock:
    """Lines belonging to one call sign, starting with its ``*CS*`` marker."""

    call_sign: str
    lines: Tuple[str, ...] = field(default_factory=tuple)

    @property
    def key(self) -> str:
        return self.call_sign.strip().lower()


@dataclass(frozen=True, slots=True)
class TotalEntry:
    """Running total for one drug; ``count`` is digits or ``"-"`` (not tallied)."""

    drug: str
    count: str = SENTINEL

    @property
    def key(self) -> str:
        return drug_key(self.drug)

    @property
    def is_tallied(self) -> bool:
        if self.count == SENTINEL:
            return False
        try:
            int(self.count)
        except ValueError:
            return False
        return True

    def as_line(self) -> str:
        return f"{self.drug}: {self.count}"


@dataclass(frozen=True, slots=True)
class ParsedHoto:
    """Sections of a HOTO message in document order."""

    header_line: str = ""
    duty_line: str = ""
    preamble_lines: Tuple[str, ...] = field(default_factory=tuple)
    blocks: Tuple[CallSignBlock, ...] = field(default_factory=tuple)
    totals_heading: str = ""
    totals: Tuple[TotalEntry, ...] = field(default_factory=tuple)
    trailing_lines: Tuple[str, ...] = field(default_factory=tuple)

    def find_block(self, call_sign: str) -> Optional[CallSignBlock]:
        key = call_sign.strip().lower()
        if not key:
            return None
        for block in self.blocks:
            if block.key == key:
                return block
        return None


class _State(Enum):
    PREAMBLE = "preamble"
    BLOCKS = "blocks"
    TOTALS = "totals"


def parse_hoto(text: Optional[str]) -> Optional[ParsedHoto]:
    """Split ``text`` into header, duty line, call-sign blocks and totals.

    Returns ``None`` for empty or whitespace-only input. Anything the layout
    does not explain degrades instead of failing: a missing header leaves
    ``header_line``/``duty_line`` empty, unrecognised lines before the first
    block land in ``preamble_lines`` and lines after the totals start are
    kept in ``trailing_lines``.
    """

    if not text or not text.strip():
        return None

    lines = split_lines(text)
    header_line, duty_line, cursor = _locate_header(lines)

    preamble: List[str] = []
    blocks: List[CallSignBlock] = []
    totals: List[TotalEntry] = []
    trailing: List[str] = []
    totals_heading = ""

    state = _State.PREAMBLE
    call_sign = ""
    block_lines: List[str] = []

    def close_block() -> None:
        if state is _State.BLOCKS:
            blocks.append(CallSignBlock(call_sign, tuple(_strip_blank_edges(block_lines, leading=False))))

    for index in range(cursor, len(lines)):
        line = lines[index]
        kind = classify_line(line)

        if state is not _State.TOTALS:
            if kind is LineKind.MARKER:
                close_block()
                state = _State.BLOCKS
                call_sign = marker_call_sign(line)
                block_lines = [line]
                continue
            if starts_totals_section(lines, index, in_block=state is _State.BLOCKS):
                close_block()
                state = _State.TOTALS
            elif state is _State.PREAMBLE:
                preamble.append(line)
                continue
            else:
                block_lines.append(line)
                continue

        match = TOTAL_RE.match(line.strip()) if kind is LineKind.TOTAL else None
        if match:
            totals.append(TotalEntry(match.group("drug").strip(), match.group("count").strip()))
        elif kind is LineKind.TOTALS_HEADING and not totals_heading and not totals and not trailing:
            totals_heading = line
        elif kind is LineKind.BLANK and not totals and not trailing:
            continue
        else:
            trailing.append(line)

    close_block()

    parsed = ParsedHoto(
        header_line=header_line,
        duty_line=duty_line,
        preamble_lines=tuple(_strip_blank_edges(preamble)),
        blocks=tuple(blocks),
        totals_heading=totals_heading,
        totals=tuple(totals),
        trailing_lines=tuple(trailing),
    )
    LOGGER.debug(
        "Parsed HOTO header=%s blocks=%d totals=%d trailing=%d",
        bool(header_line),
        len(parsed.blocks),
        len(parsed.totals),
        len(parsed.trailing_lines),
    )
    return parsed


def _locate_header(lines: List[str]) -> tuple[str, str, int]:
    """Return ``(header_line, duty_line, first_unconsumed_index)``."""

    for index, line in enumerate(lines):
        if classify_line(line) is not LineKind.HEADER:
            continue
        for follow in range(index + 1, len(lines)):
            kind = classify_line(lines[follow])
            if kind is LineKind.BLANK:
                continue
            if kind in (LineKind.MARKER, LineKind.TOTALS_HEADING, LineKind.TOTAL, LineKind.HEADER):
                break
            return line, lines[follow].strip(), follow + 1
        return line, "", index + 1
    return "", "", 0


def _strip_blank_edges(lines: List[str], *, leading: bool = True) -> List[str]:
    start = 0
    end = len(lines)
    if leading:
        while start < end and not lines[start].strip():
            start += 1
    while end > start and not lines[end - 1].strip():
        end -= 1
    return lines[start:end]


__all__ = ["SENTINEL", "CallSignBlock", "TotalEntry", "ParsedHoto", "parse_hoto"]
