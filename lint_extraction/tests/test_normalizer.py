"""
Unit tests for normalizer.py
"""

import unittest

from lint_extraction.normalizer import normalize_description


class TestNormalizeDescription(unittest.TestCase):
    """Test description un-escaping and continuation joining."""

    def test_plain_text_unchanged(self):
        self.assertEqual(normalize_description("single line"), "single line")

    def test_empty(self):
        self.assertEqual(normalize_description(""), "")

    def test_escaped_quote(self):
        self.assertEqual(
            normalize_description(r'use \"foo\" instead'),
            'use "foo" instead',
        )

    def test_line_continuation_joined(self):
        raw = "really long \\\n     text"
        self.assertEqual(normalize_description(raw), "really long text")

    def test_continuation_consumes_only_following_whitespace(self):
        raw = "abc\\\n   def"
        self.assertEqual(normalize_description(raw), "abcdef")

    def test_escaped_quote_before_newline(self):
        # The backslash belongs to the quote escape, not a continuation
        raw = 'ends with \\"\n  next'
        self.assertEqual(normalize_description(raw), 'ends with "\n  next')

    def test_quote_and_continuation_together(self):
        raw = 'checks for \\"x\\" \\\n    in `match` arms'
        result = normalize_description(raw)
        self.assertEqual(result, 'checks for "x" in `match` arms')
        self.assertNotIn('\\"', result)
        self.assertNotIn("\\\n", result)

    def test_idempotent(self):
        raw = 'checks for \\"x\\" \\\n    in `match` arms'
        once = normalize_description(raw)
        self.assertEqual(normalize_description(once), once)

    def test_escaped_backslash_before_quote_unescapes_one_pair(self):
        # Only the `\"` pair is rewritten; a preceding `\\` is left alone,
        # so a second pass would unescape again.
        raw = 'a\\\\\\"b'
        once = normalize_description(raw)
        self.assertEqual(once, 'a\\\\"b')
        self.assertEqual(normalize_description(once), 'a\\"b')

    def test_markup_retained(self):
        raw = "`assert!()` will be more flexible with RFC 2011"
        self.assertEqual(normalize_description(raw), raw)


if __name__ == "__main__":
    unittest.main()
