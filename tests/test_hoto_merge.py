"""Block merge and totals reconciliation tests."""

from __future__ import annotations

import unittest

from stationhub.hoto.document import CallSignBlock, TotalEntry
from stationhub.hoto.drugs import DrugEntry
from stationhub.hoto.merge import build_drug_block, merge_blocks, recalc_totals


def _block(call_sign: str, *drug_lines: str) -> CallSignBlock:
    return CallSignBlock(call_sign, (f"*{call_sign}*", "Drugs used:", *drug_lines))


class BuildDrugBlockTests(unittest.TestCase):
    def test_lists_each_drug(self) -> None:
        lines = build_drug_block("A441D", [DrugEntry("Morphine", 2), DrugEntry("Saline", 0)])
        self.assertEqual(lines, ["*A441D*", "Drugs used:", "- Morphine x2", "- Saline x0"])

    def test_empty_usage_is_nil(self) -> None:
        self.assertEqual(build_drug_block("A442D", []), ["*A442D*", "Drugs used:", "- Nil"])


class RecalcTotalsTests(unittest.TestCase):
    def test_delta_is_applied_to_running_total(self) -> None:
        result = recalc_totals(
            [TotalEntry("Morphine", "5")],
            [DrugEntry("Morphine", 2)],
            [DrugEntry("Morphine", 4)],
        )
        self.assertEqual(result, [TotalEntry("Morphine", "7")])

    def test_negative_total_clamps_to_zero(self) -> None:
        result = recalc_totals(
            [TotalEntry("Morphine", "1")],
            [DrugEntry("Morphine", 5)],
            [DrugEntry("Morphine", 0)],
        )
        self.assertEqual(result, [TotalEntry("Morphine", "0")])

    def test_untallied_total_is_never_computed(self) -> None:
        result = recalc_totals(
            [TotalEntry("Morphine", "-")],
            [DrugEntry("Morphine", 1)],
            [DrugEntry("Morphine", 9)],
        )
        self.assertEqual(result, [TotalEntry("Morphine", "-")])

    def test_unparseable_total_is_left_alone(self) -> None:
        result = recalc_totals([TotalEntry("Morphine", "lots")], [], [DrugEntry("Morphine", 2)])
        self.assertEqual(result, [TotalEntry("Morphine", "lots")])

    def test_new_drugs_append_untallied_in_first_seen_order(self) -> None:
        result = recalc_totals(
            [TotalEntry("Morphine", "5"), TotalEntry("Midazolam", "3")],
            [DrugEntry("Fentanyl", 1)],
            [DrugEntry("KETAMINE", 1), DrugEntry("Morphine", 1)],
        )
        self.assertEqual(
            result,
            [
                TotalEntry("Morphine", "6"),
                TotalEntry("Midazolam", "3"),
                TotalEntry("Fentanyl", "-"),
                TotalEntry("KETAMINE", "-"),
            ],
        )

    def test_matching_ignores_case_and_keeps_existing_display(self) -> None:
        result = recalc_totals([TotalEntry("morphine", "5")], [], [DrugEntry("MORPHINE", 1)])
        self.assertEqual(result, [TotalEntry("morphine", "6")])

    def test_first_duplicate_usage_wins(self) -> None:
        result = recalc_totals(
            [TotalEntry("Morphine", "5")],
            [],
            [DrugEntry("Morphine", 1), DrugEntry("morphine", 2)],
        )
        self.assertEqual(result, [TotalEntry("Morphine", "6")])

    def test_removed_usage_is_subtracted(self) -> None:
        result = recalc_totals([TotalEntry("Midazolam", "3")], [DrugEntry("Midazolam", 1)], [])
        self.assertEqual(result, [TotalEntry("Midazolam", "2")])

    def test_input_sequence_is_not_modified(self) -> None:
        existing = [TotalEntry("Morphine", "5")]
        recalc_totals(existing, [], [DrugEntry("Morphine", 2), DrugEntry("Saline", 1)])
        self.assertEqual(existing, [TotalEntry("Morphine", "5")])


class MergeBlocksTests(unittest.TestCase):
    def setUp(self) -> None:
        self.blocks = [
            _block("A441D", "- Morphine x2"),
            _block("A442D", "- Nil"),
            _block("A443D", "- Ketamine x1"),
        ]

    def test_replace_keeps_position_and_ignores_case(self) -> None:
        merge = merge_blocks(self.blocks, "a442d", [DrugEntry("Fentanyl", 1)])
        self.assertEqual(merge.action, "replace")
        self.assertEqual([block.call_sign for block in merge.blocks], ["A441D", "a442d", "A443D"])
        self.assertEqual(merge.blocks[1].lines, ("*a442d*", "Drugs used:", "- Fentanyl x1"))
        self.assertEqual(merge.previous, self.blocks[1])
        self.assertEqual(merge.previous_drugs, ())

    def test_replace_recovers_previous_usage(self) -> None:
        merge = merge_blocks(self.blocks, "A441D", [])
        self.assertEqual(merge.previous_drugs, (DrugEntry("Morphine", 2),))
        self.assertEqual(merge.blocks[0].lines, ("*A441D*", "Drugs used:", "- Nil"))

    def test_unknown_call_sign_appends(self) -> None:
        merge = merge_blocks(self.blocks, " A999D ", [DrugEntry("Morphine", 1)])
        self.assertEqual(merge.action, "append")
        self.assertEqual(merge.blocks[-1], _block("A999D", "- Morphine x1"))
        self.assertIsNone(merge.previous)

    def test_cleared_call_sign_removes_previous_block(self) -> None:
        merge = merge_blocks(self.blocks, "", [], previous_call_sign="A443D")
        self.assertEqual(merge.action, "remove")
        self.assertEqual([block.call_sign for block in merge.blocks], ["A441D", "A442D"])
        self.assertEqual(merge.previous_drugs, (DrugEntry("Ketamine", 1),))

    def test_empty_call_sign_without_previous_is_unchanged(self) -> None:
        merge = merge_blocks(self.blocks, "", [DrugEntry("Morphine", 1)])
        self.assertEqual(merge.action, "unchanged")
        self.assertEqual(list(merge.blocks), self.blocks)

    def test_input_list_is_not_modified(self) -> None:
        before = list(self.blocks)
        merge_blocks(self.blocks, "A441D", [DrugEntry("Morphine", 3)])
        merge_blocks(self.blocks, "A999D", [])
        self.assertEqual(self.blocks, before)


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
