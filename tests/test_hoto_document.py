"""HOTO document parser tests."""

from __future__ import annotations

import unittest

from stationhub.hoto.builder import render_hoto
from stationhub.hoto.document import CallSignBlock, TotalEntry, parse_hoto

from hoto_samples import CREATED, EXISTING, UNHEADED_TOTALS


class ParseHotoTests(unittest.TestCase):
    def test_empty_text_has_nothing_to_merge(self) -> None:
        self.assertIsNone(parse_hoto(""))
        self.assertIsNone(parse_hoto("  \n\t\n"))
        self.assertIsNone(parse_hoto(None))

    def test_full_message_sections(self) -> None:
        parsed = parse_hoto(EXISTING)
        assert parsed is not None
        self.assertEqual(parsed.header_line, "DAILY DRUGS HOTO")
        self.assertEqual(parsed.duty_line, "10/02/2025 ND")
        self.assertEqual(parsed.preamble_lines, ())
        self.assertEqual(
            parsed.blocks,
            (
                CallSignBlock("A441D", ("*A441D*", "Drugs used:", "- Morphine x2", "- Midazolam x1")),
                CallSignBlock("A442D", ("*A442D*", "Drugs used:", "- Nil")),
            ),
        )
        self.assertEqual(parsed.totals_heading, "Drug totals:")
        self.assertEqual(
            parsed.totals,
            (TotalEntry("Morphine", "5"), TotalEntry("Midazolam", "3"), TotalEntry("Adrenaline", "-")),
        )
        self.assertEqual(parsed.trailing_lines, ("", "Checked by SGT Tan"))

    def test_render_reproduces_parsed_messages(self) -> None:
        for text in (EXISTING, CREATED, UNHEADED_TOTALS):
            with self.subTest(text=text.splitlines()[3]):
                parsed = parse_hoto(text)
                assert parsed is not None
                self.assertEqual(render_hoto(parsed), text)

    def test_totals_without_heading_use_lookahead(self) -> None:
        parsed = parse_hoto(UNHEADED_TOTALS)
        assert parsed is not None
        self.assertEqual(
            parsed.blocks[0].lines,
            ("*A441D*", "Drugs used:", "- Morphine x2", "Fluids: 2", "Note about fluids"),
        )
        self.assertEqual(parsed.totals_heading, "")
        self.assertEqual(parsed.totals, (TotalEntry("Morphine", "5"), TotalEntry("Midazolam", "1")))

    def test_lone_final_total_stays_in_block(self) -> None:
        parsed = parse_hoto("DAILY DRUGS HOTO\n11/02/2025 DD\n\n*A441D*\n- Morphine x2\n\nMorphine: 5")
        assert parsed is not None
        self.assertEqual(parsed.blocks[0].lines, ("*A441D*", "- Morphine x2", "", "Morphine: 5"))
        self.assertEqual(parsed.totals, ())

    def test_missing_header_scans_from_top(self) -> None:
        parsed = parse_hoto("*A1*\nDrugs used:\n- Nil")
        assert parsed is not None
        self.assertEqual(parsed.header_line, "")
        self.assertEqual(parsed.duty_line, "")
        self.assertEqual([block.call_sign for block in parsed.blocks], ["A1"])

    def test_missing_duty_line(self) -> None:
        parsed = parse_hoto("DAILY DRUGS HOTO\n\n*A441D*\nDrugs used:\n- Nil")
        assert parsed is not None
        self.assertEqual(parsed.duty_line, "")
        self.assertEqual(len(parsed.blocks), 1)

    def test_lines_above_header_are_dropped(self) -> None:
        parsed = parse_hoto("Forwarded message\nDAILY DRUGS HOTO\n11/02/2025 DD\n\n*A441D*\n- Nil")
        assert parsed is not None
        self.assertEqual(parsed.header_line, "DAILY DRUGS HOTO")
        self.assertEqual(parsed.preamble_lines, ())

    def test_totals_without_blocks_are_kept(self) -> None:
        parsed = parse_hoto("DAILY DRUGS HOTO\n11/02/2025 DD\n\nMorphine: 3")
        assert parsed is not None
        self.assertEqual(parsed.blocks, ())
        self.assertEqual(parsed.totals, (TotalEntry("Morphine", "3"),))

    def test_free_text_before_first_block_is_preamble(self) -> None:
        parsed = parse_hoto("DAILY DRUGS HOTO\n11/02/2025 DD\nKit checked 0800\n\n*A441D*\n- Nil")
        assert parsed is not None
        self.assertEqual(parsed.preamble_lines, ("Kit checked 0800",))
        self.assertEqual(
            render_hoto(parsed),
            "DAILY DRUGS HOTO\n11/02/2025 DD\n\nKit checked 0800\n\n*A441D*\n- Nil",
        )

    def test_blank_lines_between_heading_and_totals_are_dropped(self) -> None:
        parsed = parse_hoto("DAILY DRUGS HOTO\n11/02/2025 DD\n\nDrug totals:\n\nMorphine: 3")
        assert parsed is not None
        self.assertEqual(parsed.totals_heading, "Drug totals:")
        self.assertEqual(parsed.totals, (TotalEntry("Morphine", "3"),))
        self.assertEqual(parsed.trailing_lines, ())

    def test_markers_after_totals_are_trailing_text(self) -> None:
        parsed = parse_hoto("DAILY DRUGS HOTO\n11/02/2025 DD\n\n*A1*\n- Nil\n\nDrug totals:\nMorphine: 3\n*A9*")
        assert parsed is not None
        self.assertEqual([block.call_sign for block in parsed.blocks], ["A1"])
        self.assertEqual(parsed.trailing_lines, ("*A9*",))

    def test_totals_shaped_preamble_does_not_hide_blocks(self) -> None:
        text = "DAILY DRUGS HOTO\n10/02/2025 ND\nCrew: 2\n\n*A441D*\nDrugs used:\n- Morphine x2\n\nDrug totals:\nMorphine: 5"
        parsed = parse_hoto(text)
        assert parsed is not None
        self.assertEqual(parsed.preamble_lines, ("Crew: 2",))
        self.assertEqual([block.call_sign for block in parsed.blocks], ["A441D"])
        self.assertEqual(parsed.totals_heading, "Drug totals:")
        self.assertEqual(parsed.totals, (TotalEntry("Morphine", "5"),))
        self.assertEqual(parsed.trailing_lines, ())

    def test_crlf_message(self) -> None:
        parsed = parse_hoto(CREATED.replace("\n", "\r\n"))
        assert parsed is not None
        self.assertEqual(parsed.blocks[0].lines, ("*A441D*", "Drugs used:", "- Morphine x2"))
        self.assertEqual(parsed.totals, (TotalEntry("Morphine", "-"),))

    def test_find_block_is_case_insensitive(self) -> None:
        parsed = parse_hoto(EXISTING)
        assert parsed is not None
        block = parsed.find_block("a442d")
        assert block is not None
        self.assertEqual(block.call_sign, "A442D")
        self.assertIsNone(parsed.find_block(""))


class TotalEntryTests(unittest.TestCase):
    def test_tallied_only_for_integers(self) -> None:
        self.assertTrue(TotalEntry("Morphine", "5").is_tallied)
        self.assertFalse(TotalEntry("Morphine", "-").is_tallied)
        self.assertFalse(TotalEntry("Morphine", "lots").is_tallied)

    def test_line_format(self) -> None:
        self.assertEqual(TotalEntry("Morphine", "5").as_line(), "Morphine: 5")


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
