"""Tests for the JSONC comment stripper (state machine + driver)."""
from __future__ import annotations

import itertools
import json
import unittest

from jsonprettifier.processing.comment_stripper import ScanState, Step, step, strip_comments


SAMPLES_WITHOUT_QUOTED_COMMENTS = [
    "",
    "{}",
    '{"key": "value"} // comment',
    "// header\n{\n  \"a\": 1, // one\n  /* two\n     lines */ \"b\": 2\n}\n",
    '{"url": "https://example.com/*path*/"}',
    "[1, /* a */ 2, /* b */ 3]",
    "{\"a\": 1 /* unterminated",
    "1 / 2 */ 3",
    "trailing /",
]

# Every string of length 0..5 over the characters that drive the scanner.
GENERATED_QUOTE_FREE = [
    "".join(chars)
    for size in range(6)
    for chars in itertools.product(("/", "*", "\n", "a"), repeat=size)
]

PROPERTY_CORPUS = SAMPLES_WITHOUT_QUOTED_COMMENTS + GENERATED_QUOTE_FREE


# --------------------------------------------------------------------------- #
#  1. Transition function                                                     #
# --------------------------------------------------------------------------- #
class StepTests(unittest.TestCase):
    def test_plain_char_is_emitted(self) -> None:
        self.assertEqual(step(ScanState.DEFAULT, False, "a", "b"), Step(ScanState.DEFAULT, False, "a", False))

    def test_double_slash_enters_line_comment(self) -> None:
        self.assertEqual(
            step(ScanState.DEFAULT, False, "/", "/"),
            Step(ScanState.SINGLE_LINE_COMMENT, False, "", True),
        )

    def test_slash_star_enters_block_comment(self) -> None:
        self.assertEqual(
            step(ScanState.DEFAULT, False, "/", "*"),
            Step(ScanState.BLOCK_COMMENT, False, "", True),
        )

    def test_lone_slash_is_emitted(self) -> None:
        self.assertEqual(step(ScanState.DEFAULT, False, "/", "x").emit, "/")
        self.assertEqual(step(ScanState.DEFAULT, False, "/", "").emit, "/")

    def test_newline_closes_line_comment_and_is_kept(self) -> None:
        self.assertEqual(
            step(ScanState.SINGLE_LINE_COMMENT, False, "\n", "x"),
            Step(ScanState.DEFAULT, False, "\n", False),
        )

    def test_line_comment_discards(self) -> None:
        self.assertEqual(
            step(ScanState.SINGLE_LINE_COMMENT, False, "x", "y"),
            Step(ScanState.SINGLE_LINE_COMMENT, False, "", False),
        )

    def test_star_slash_closes_block_comment(self) -> None:
        self.assertEqual(
            step(ScanState.BLOCK_COMMENT, False, "*", "/"),
            Step(ScanState.DEFAULT, False, "", True),
        )

    def test_star_alone_stays_in_block_comment(self) -> None:
        self.assertEqual(
            step(ScanState.BLOCK_COMMENT, False, "*", "x"),
            Step(ScanState.BLOCK_COMMENT, False, "", False),
        )

    def test_inside_quotes_everything_is_emitted(self) -> None:
        self.assertEqual(
            step(ScanState.DEFAULT, True, "/", "/"),
            Step(ScanState.DEFAULT, True, "/", False),
        )

    def test_quote_toggles_before_state_dispatch(self) -> None:
        # Opening quote inside a comment is emitted, state untouched.
        self.assertEqual(
            step(ScanState.BLOCK_COMMENT, False, '"', "x"),
            Step(ScanState.BLOCK_COMMENT, True, '"', False),
        )
        # Closing quote goes through the state machine.
        self.assertEqual(
            step(ScanState.DEFAULT, True, '"', ","),
            Step(ScanState.DEFAULT, False, '"', False),
        )
        self.assertEqual(
            step(ScanState.SINGLE_LINE_COMMENT, True, '"', "x"),
            Step(ScanState.SINGLE_LINE_COMMENT, False, "", False),
        )


# --------------------------------------------------------------------------- #
#  2. Stripping behaviour                                                     #
# --------------------------------------------------------------------------- #
class StripCommentsTests(unittest.TestCase):
    def test_identity_without_comment_markers(self) -> None:
        text = "[1, 2, 3]\n{ }\n a / b * c */ d\t\r\n"
        self.assertEqual(strip_comments(text), text)

    def test_empty_input(self) -> None:
        self.assertEqual(strip_comments(""), "")

    def test_comment_marker_in_string_is_kept(self) -> None:
        text = '{"note": "// not a comment"}'
        self.assertEqual(strip_comments(text), text)

    def test_block_marker_in_string_is_kept(self) -> None:
        text = '{"pattern": "/* pattern */"}'
        self.assertEqual(strip_comments(text), text)

    def test_trailing_line_comment(self) -> None:
        text = '{"x": "a // not comment", "y": 1} // trailing'
        self.assertEqual(strip_comments(text), '{"x": "a // not comment", "y": 1} ')

    def test_inline_block_comment(self) -> None:
        self.assertEqual(strip_comments('{/* c */"a":1,"b":[2,3]}'), '{"a":1,"b":[2,3]}')

    def test_multiline_block_comment_drops_its_newlines(self) -> None:
        text = '{\n  /* one\n     two */\n  "a": 1\n}'
        self.assertEqual(strip_comments(text), '{\n  \n  "a": 1\n}')

    def test_line_comment_keeps_newline(self) -> None:
        self.assertEqual(strip_comments("a // x\nb"), "a \nb")

    def test_line_comment_drops_carriage_return(self) -> None:
        self.assertEqual(strip_comments("a // x\r\nb"), "a \nb")

    def test_comment_at_end_without_newline(self) -> None:
        self.assertEqual(strip_comments("1 // end"), "1 ")

    def test_unterminated_block_comment(self) -> None:
        self.assertEqual(strip_comments('{"a":1 /* oops'), '{"a":1 ')

    def test_trailing_slash_is_emitted(self) -> None:
        self.assertEqual(strip_comments("1/"), "1/")

    def test_block_comments_do_not_nest(self) -> None:
        self.assertEqual(strip_comments("/* a /* b */ c */"), " c */")

    def test_line_marker_inside_block_comment_is_ignored(self) -> None:
        self.assertEqual(strip_comments("1 /* // */ 2\n"), "1  2\n")

    def test_escaped_quote_desynchronizes_string_tracking(self) -> None:
        # \" toggles the quote flag like any other quote.
        self.assertEqual(strip_comments('"a\\"b // c"\n'), '"a\\"b "\n')

    def test_quote_inside_comment_is_emitted(self) -> None:
        self.assertEqual(strip_comments('// say "hi"\n1'), '"hi\n1')

    def test_result_parses_as_json(self) -> None:
        text = """{
    // Project settings
    "project": {
        "name": "test", /* inline */
        "type": "python"
    },
    /* Multi-line
       comment block */
    "features": ["a", "b"] // trailing
}"""
        parsed = json.loads(strip_comments(text))
        self.assertEqual(parsed, {"project": {"name": "test", "type": "python"}, "features": ["a", "b"]})


# --------------------------------------------------------------------------- #
#  3. Properties                                                              #
# --------------------------------------------------------------------------- #
def test_newline_count_never_grows():
    for text in PROPERTY_CORPUS:
        assert strip_comments(text).count("\n") <= text.count("\n")


def test_line_comment_newlines_are_preserved():
    text = "1, // a\n2, // b\n3 // c\n"
    assert strip_comments(text).count("\n") == 3


def test_stripping_is_idempotent():
    for text in PROPERTY_CORPUS:
        once = strip_comments(text)
        assert strip_comments(once) == once


def test_output_is_subsequence_of_input():
    for text in PROPERTY_CORPUS:
        out = iter(text)
        assert all(ch in out for ch in strip_comments(text))


def test_generated_corpus_size():
    assert len(GENERATED_QUOTE_FREE) == sum(4 ** n for n in range(6))


def test_identity_when_no_comment_opener():
    checked = 0
    for text in GENERATED_QUOTE_FREE:
        if "//" not in text and "/*" not in text:
            assert strip_comments(text) == text
            checked += 1
    assert checked > 0


def test_no_state_leaks_between_calls():
    assert strip_comments("/* open") == ""
    assert strip_comments("1") == "1"
    assert strip_comments('"open') == '"open'
    assert strip_comments("// x\n2") == "\n2"
