"""Drug usage entries parsed from free text and from existing HOTO blocks."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Optional

from .lines import DRUG_LINE_RE, USAGE_RE, split_lines


def drug_key(name: str) -> str:
    """Normalised lookup key used for case-insensitive drug matching."""

    return name.strip().lower()


@dataclass(frozen=True, slots=True)
class DrugEntry:
    """One drug and how many units a call sign used."""

    name: str
    count: int = 0

    @property
    def key(self) -> str:
        return drug_key(self.name)

    def as_block_line(self) -> str:
        return f"- {self.name} x{self.count}"


def parse_drugs(text: Optional[str]) -> List[DrugEntry]:
    """Parse one-drug-per-line usage text such as ``"Morphine x2"``.

    Lines that do not end in ``x<digits>`` are kept as zero-count entries
    named after the whole line, so a typo never drops a drug from the report.
    """

    entries: List[DrugEntry] = []
    for raw in split_lines(text):
        line = raw.strip()
        if not line:
            continue
        match = USAGE_RE.match(line)
        if match:
            entries.append(DrugEntry(match.group("name").strip(), int(match.group("count"))))
        else:
            entries.append(DrugEntry(line, 0))
    return entries


def parse_drugs_from_block(lines: Iterable[str]) -> List[DrugEntry]:
    """Recover ``- <name> x<count>`` entries from a call-sign block."""

    entries: List[DrugEntry] = []
    for line in lines:
        match = DRUG_LINE_RE.match(line.strip())
        if match:
            entries.append(DrugEntry(match.group("name").strip(), int(match.group("count"))))
    return entries


def first_by_key(entries: Iterable[DrugEntry]) -> dict[str, DrugEntry]:
    """Map each drug key to its first entry; later duplicates are ignored."""

    result: dict[str, DrugEntry] = {}
    for entry in entries:
        result.setdefault(entry.key, entry)
    return result


__all__ = ["DrugEntry", "drug_key", "first_by_key", "parse_drugs", "parse_drugs_from_block"]
