"""Create or update a Daily Drugs HOTO message from the template inputs."""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from datetime import date
from enum import Enum
from typing import List, Union

from stationhub.dates import format_ddmmyyyy, parse_iso_date

from .document import SENTINEL, CallSignBlock, ParsedHoto, TotalEntry, parse_hoto
from .drugs import parse_drugs
from .lines import HEADER_MARKER
from .merge import MergeAction, build_drug_block, merge_blocks, recalc_totals

LOGGER = logging.getLogger(__name__)

TOTALS_HEADING = "Drug totals:"


class HotoMode(str, Enum):
    CREATE = "create"
    UPDATE = "update"


class Duty(str, Enum):
    """Day duty or night duty."""

    DD = "DD"
    ND = "ND"


@dataclass(frozen=True, slots=True)
class HotoResult:
    """Rendered message plus what happened while producing it."""

    text: str
    document: ParsedHoto
    mode: HotoMode
    action: MergeAction

    @property
    def untallied(self) -> int:
        return sum(1 for total in self.document.totals if not total.is_tallied)


def format_date(value: Union[str, date, None]) -> str:
    """Render an ISO ``YYYY-MM-DD`` date as ``DD/MM/YYYY``.

    Anything that is not a valid ISO date is returned unchanged.
    """

    if value is None:
        return ""
    if isinstance(value, date):
        return format_ddmmyyyy(value)
    if not value:
        return ""
    parsed = parse_iso_date(value)
    if parsed is None:
        return value
    return format_ddmmyyyy(parsed)


def render_hoto(document: ParsedHoto) -> str:
    """Serialise ``document`` back into HOTO text (trailing whitespace trimmed)."""

    out: List[str] = []
    if document.header_line:
        out.append(document.header_line)
    if document.duty_line:
        out.append(document.duty_line)
    if document.preamble_lines:
        if out:
            out.append("")
        out.extend(document.preamble_lines)
    if out:
        out.append("")

    for block in document.blocks:
        out.extend(block.lines)
        out.append("")

    if document.totals_heading:
        out.append(document.totals_heading)
    out.extend(total.as_line() for total in document.totals)
    out.extend(document.trailing_lines)

    return "\n".join(out).rstrip()


def build_result(
    mode: Union[HotoMode, str],
    date_iso: Union[str, date, None],
    duty: Union[Duty, str],
    call_sign: str,
    drugs_text: str,
    existing_text: str = "",
    *,
    previous_call_sign: str = "",
) -> HotoResult:
    """Like :func:`build_output` but also returns the merged document."""

    resolved_mode = _coerce_mode(mode)
    drugs = parse_drugs(drugs_text)
    call_sign = (call_sign or "").strip()

    parsed = None
    if resolved_mode is HotoMode.UPDATE:
        parsed = parse_hoto(existing_text)

    if parsed is None:
        blocks = (CallSignBlock(call_sign, tuple(build_drug_block(call_sign, drugs))),) if call_sign else ()
        document = ParsedHoto(
            header_line=HEADER_MARKER,
            duty_line=f"{format_date(date_iso)} {_duty_value(duty)}",
            blocks=blocks,
            totals_heading=TOTALS_HEADING if drugs else "",
            totals=tuple(TotalEntry(entry.name, SENTINEL) for entry in drugs),
        )
        LOGGER.debug("HOTO create call_sign=%r drugs=%d", call_sign, len(drugs))
        return HotoResult(
            text=render_hoto(document),
            document=document,
            mode=HotoMode.CREATE,
            action="append" if call_sign else "unchanged",
        )

    merge = merge_blocks(parsed.blocks, call_sign, drugs, previous_call_sign=previous_call_sign)
    totals = recalc_totals(parsed.totals, merge.previous_drugs, drugs)

    heading = parsed.totals_heading
    if not heading and not parsed.totals and totals:
        heading = TOTALS_HEADING

    document = replace(parsed, blocks=merge.blocks, totals=tuple(totals), totals_heading=heading)
    LOGGER.debug(
        "HOTO update call_sign=%r action=%s blocks=%d totals=%d",
        call_sign,
        merge.action,
        len(document.blocks),
        len(document.totals),
    )
    return HotoResult(
        text=render_hoto(document),
        document=document,
        mode=HotoMode.UPDATE,
        action=merge.action,
    )


def build_output(
    mode: Union[HotoMode, str],
    date_iso: Union[str, date, None],
    duty: Union[Duty, str],
    call_sign: str,
    drugs_text: str,
    existing_text: str = "",
    *,
    previous_call_sign: str = "",
) -> str:
    """Return the HOTO message for the template inputs.

    ``create`` mode (or ``update`` with no usable existing text) writes a
    fresh message. ``update`` mode merges ``call_sign``'s usage into
    ``existing_text``, keeping its header, duty line, other blocks and
    trailing text, and moves the running totals by the change in usage.

    Both modes go through :func:`render_hoto`, so trailing whitespace is
    trimmed in create mode too and a fresh message never ends in a blank line.
    """

    return build_result(
        mode,
        date_iso,
        duty,
        call_sign,
        drugs_text,
        existing_text,
        previous_call_sign=previous_call_sign,
    ).text


def _coerce_mode(mode: Union[HotoMode, str, None]) -> HotoMode:
    if isinstance(mode, HotoMode):
        return mode
    try:
        return HotoMode(str(mode or "").strip().lower())
    except ValueError:
        return HotoMode.CREATE


def _duty_value(duty: Union[Duty, str, None]) -> str:
    if isinstance(duty, Duty):
        return duty.value
    return str(duty or "").strip()


__all__ = [
    "Duty",
    "HotoMode",
    "HotoResult",
    "TOTALS_HEADING",
    "build_output",
    "build_result",
    "format_date",
    "render_hoto",
]
