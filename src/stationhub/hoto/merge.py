"""Merging a call sign's drug usage into a parsed HOTO message."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import List, Literal, Optional, Sequence, Tuple

from .document import SENTINEL, CallSignBlock, TotalEntry
from .drugs import DrugEntry, first_by_key, parse_drugs_from_block

MergeAction = Literal["replace", "remove", "append", "unchanged"]

DRUGS_USED_LINE = "Drugs used:"
NIL_LINE = "- Nil"


def build_drug_block(call_sign: str, drugs: Sequence[DrugEntry]) -> List[str]:
    """Return the canonical block lines for ``call_sign``."""

    lines = [f"*{call_sign}*", DRUGS_USED_LINE]
    if drugs:
        lines.extend(entry.as_block_line() for entry in drugs)
    else:
        lines.append(NIL_LINE)
    return lines


@dataclass(frozen=True, slots=True)
class BlockMerge:
    """Outcome of merging one call sign into the block list."""

    blocks: Tuple[CallSignBlock, ...]
    action: MergeAction
    previous: Optional[CallSignBlock] = None
    previous_drugs: Tuple[DrugEntry, ...] = field(default_factory=tuple)


def merge_blocks(
    blocks: Sequence[CallSignBlock],
    call_sign: str,
    drugs: Sequence[DrugEntry],
    *,
    previous_call_sign: str = "",
) -> BlockMerge:
    """Replace, remove or append the block for ``call_sign``.

    The match is case-insensitive. When ``call_sign`` is empty the block for
    ``previous_call_sign`` (the call sign the operator cleared) is removed.
    The input sequence is never modified.
    """

    call_sign = call_sign.strip()
    lookup = (call_sign or previous_call_sign).strip().lower()
    current = tuple(blocks)

    index = next((i for i, block in enumerate(current) if lookup and block.key == lookup), None)
    if index is None:
        if not call_sign:
            return BlockMerge(blocks=current, action="unchanged")
        fresh = CallSignBlock(call_sign, tuple(build_drug_block(call_sign, drugs)))
        return BlockMerge(blocks=current + (fresh,), action="append")

    previous = current[index]
    previous_drugs = tuple(parse_drugs_from_block(previous.lines))
    if call_sign:
        fresh = CallSignBlock(call_sign, tuple(build_drug_block(call_sign, drugs)))
        merged = current[:index] + (fresh,) + current[index + 1 :]
        action: MergeAction = "replace"
    else:
        merged = current[:index] + current[index + 1 :]
        action = "remove"
    return BlockMerge(
        blocks=merged,
        action=action,
        previous=previous,
        previous_drugs=previous_drugs,
    )


def recalc_totals(
    existing_totals: Sequence[TotalEntry],
    old_drugs: Sequence[DrugEntry],
    new_drugs: Sequence[DrugEntry],
) -> List[TotalEntry]:
    """Apply the change between ``old_drugs`` and ``new_drugs`` to the totals.

    Tallied totals move by ``new - old`` and never drop below zero. Totals
    marked ``-`` stay untallied. Drugs with no total yet are appended as
    ``-`` so somebody counts them by hand.
    """

    old_by_key = first_by_key(old_drugs)
    new_by_key = first_by_key(new_drugs)
    keys = list(dict.fromkeys([entry.key for entry in old_drugs] + [entry.key for entry in new_drugs]))

    result = list(existing_totals)
    for key in keys:
        old = old_by_key.get(key)
        new = new_by_key.get(key)
        old_count = old.count if old else 0
        new_count = new.count if new else 0

        index = next((i for i, total in enumerate(result) if total.key == key), None)
        if index is None:
            display = new.name if new else old.name if old else key
            result.append(TotalEntry(display, SENTINEL))
            continue

        existing = result[index]
        if not existing.is_tallied:
            continue
        updated = max(0, int(existing.count) - old_count + new_count)
        result[index] = replace(existing, count=str(updated))

    return result


__all__ = [
    "BlockMerge",
    "DRUGS_USED_LINE",
    "MergeAction",
    "NIL_LINE",
    "build_drug_block",
    "merge_blocks",
    "recalc_totals",
]
