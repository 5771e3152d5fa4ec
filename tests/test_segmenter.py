"""Tests for langpack.processing.segmenter ([@operator: args] markup)."""
from __future__ import annotations

import unittest

from langpack.core.models import ActionKind, TextAction, TextSegment
from langpack.processing.segmenter import MarkupFormatError, RichTextSegmenter, segment


class SegmentTests(unittest.TestCase):
    def test_command_marker_between_plain_text(self) -> None:
        self.assertEqual(
            segment("hi [@command: /spawn: click here] bye"),
            [
                TextSegment("hi "),
                TextSegment("click here", TextAction(ActionKind.RUN_COMMAND, "/spawn")),
                TextSegment(" bye"),
            ],
        )

    def test_plain_text_is_single_segment(self) -> None:
        self.assertEqual(segment("just text [with] brackets"), [TextSegment("just text [with] brackets")])

    def test_empty_input(self) -> None:
        self.assertEqual(segment(""), [])

    def test_marker_only(self) -> None:
        self.assertEqual(
            segment("[@command:/help:Help]"),
            [TextSegment("Help", TextAction(ActionKind.RUN_COMMAND, "/help"))],
        )

    def test_adjacent_markers(self) -> None:
        segs = segment("[@command: /a: A][@command: /b: B]")
        self.assertEqual([s.text for s in segs], ["A", "B"])
        self.assertEqual([s.action.payload for s in segs], ["/a", "/b"])

    def test_operator_is_case_insensitive(self) -> None:
        segs = segment("[@ COMMAND : /x: X]")
        self.assertEqual(segs[0].action, TextAction(ActionKind.RUN_COMMAND, "/x"))

    def test_hover_runs_command(self) -> None:
        segs = segment("[@hover: Shows info: info]")
        self.assertEqual(segs, [TextSegment("info", TextAction(ActionKind.RUN_COMMAND, "Shows info"))])

    def test_segmenter_instance_matches_module_function(self) -> None:
        text = "a [@command: /b: c] d"
        self.assertEqual(RichTextSegmenter().segment(text), segment(text))

    def test_to_dict(self) -> None:
        seg = TextSegment("go", TextAction(ActionKind.RUN_COMMAND, "/go"))
        self.assertEqual(seg.to_dict(), {"text": "go", "action": {"kind": "run_command", "payload": "/go"}})
        self.assertEqual(TextSegment("x").to_dict(), {"text": "x"})


class MalformedMarkupTests(unittest.TestCase):
    def test_unknown_operator(self) -> None:
        with self.assertRaises(MarkupFormatError):
            segment("[@bogus: a]")

    def test_wrong_arity(self) -> None:
        for text in ("[@command: /only]", "[@command: a: b: c]", "[@hover: tip]"):
            with self.subTest(text=text):
                with self.assertRaises(MarkupFormatError):
                    segment(text)

    def test_missing_operator_separator(self) -> None:
        with self.assertRaises(MarkupFormatError):
            segment("text [@command] more")

    def test_unterminated_marker(self) -> None:
        with self.assertRaises(MarkupFormatError):
            segment("ok [@command: /a: never closed")

    def test_nested_marker(self) -> None:
        with self.assertRaises(MarkupFormatError):
            segment("[@command: [@command: /a: b]: c]")

    def test_error_is_a_value_error(self) -> None:
        self.assertTrue(issubclass(MarkupFormatError, ValueError))


if __name__ == "__main__":
    unittest.main()
