"""
Unit tests for repository.py
"""

import unittest

from lint_extraction.models import LintRecord
from lint_extraction.repository import (
    LintRepository,
    group_by_category,
    is_usable,
    usable_lints,
)


def _lint(name, group, deprecation=None):
    return LintRecord.create(name, group, "abc", deprecation, "module_name")


class TestUsableLints(unittest.TestCase):
    """Test filtering of deprecated and internal lints."""

    def test_usable_lints(self):
        lints = [
            _lint("should_assert_eq", "Deprecated", "Reason"),
            _lint("should_assert_eq2", "Not Deprecated"),
            _lint("should_assert_eq2", "internal"),
            _lint("should_assert_eq2", "internal_style"),
        ]
        expected = [_lint("should_assert_eq2", "Not Deprecated")]
        self.assertEqual(list(usable_lints(iter(lints))), expected)

    def test_order_preserved(self):
        lints = [_lint("b", "style"), _lint("a", "internal"), _lint("c", "perf")]
        self.assertEqual([r.name for r in usable_lints(lints)], ["b", "c"])

    def test_deprecation_excluded_regardless_of_group(self):
        self.assertFalse(is_usable(_lint("x", "style", "gone")))

    def test_prefix_only_at_start(self):
        self.assertTrue(is_usable(_lint("x", "not_internal")))

    def test_empty(self):
        self.assertEqual(list(usable_lints([])), [])


class TestGroupByCategory(unittest.TestCase):
    """Test grouping records by group label."""

    def test_by_lint_group(self):
        lints = [
            _lint("should_assert_eq", "group1"),
            _lint("should_assert_eq2", "group2"),
            _lint("incorrect_match", "group1"),
        ]
        expected = {
            "group1": [_lint("should_assert_eq", "group1"), _lint("incorrect_match", "group1")],
            "group2": [_lint("should_assert_eq2", "group2")],
        }
        self.assertEqual(group_by_category(lints), expected)

    def test_empty(self):
        self.assertEqual(group_by_category([]), {})

    def test_duplicates_retained(self):
        lints = [_lint("dup", "style"), _lint("dup", "style")]
        self.assertEqual(len(group_by_category(lints)["style"]), 2)

    def test_returns_plain_dict(self):
        result = group_by_category([_lint("a", "style")])
        self.assertIs(type(result), dict)
        self.assertNotIn("missing", result)


class TestLintRepository(unittest.TestCase):
    """Test the repository views."""

    def setUp(self):
        self.repo = LintRepository([
            _lint("ptr_arg", "style"),
            _lint("old", "Deprecated", "gone"),
            _lint("author", "internal"),
            _lint("doc_markdown", "pedantic"),
        ])

    def test_len_and_iter(self):
        self.assertEqual(len(self.repo), 4)
        self.assertEqual(self.repo.names(), ["ptr_arg", "old", "author", "doc_markdown"])
        self.assertEqual([r.name for r in self.repo], self.repo.names())

    def test_usable(self):
        self.assertEqual([r.name for r in self.repo.usable()], ["ptr_arg", "doc_markdown"])

    def test_deprecated(self):
        self.assertEqual([r.name for r in self.repo.deprecated()], ["old"])

    def test_by_group(self):
        groups = self.repo.by_group()
        self.assertEqual(set(groups), {"style", "Deprecated", "internal", "pedantic"})
        self.assertEqual(set(self.repo.by_group(usable_only=True)), {"style", "pedantic"})

    def test_to_dict_list(self):
        rows = self.repo.to_dict_list(usable_only=True)
        self.assertEqual([row["name"] for row in rows], ["ptr_arg", "doc_markdown"])
        self.assertIsNone(rows[0]["deprecation_reason"])

    def test_empty_repository(self):
        repo = LintRepository()
        self.assertEqual(len(repo), 0)
        self.assertEqual(repo.by_group(), {})

    def test_equality(self):
        self.assertEqual(self.repo, LintRepository(list(self.repo)))


class TestLintRecord(unittest.TestCase):
    """Test record construction."""

    def test_case_folding(self):
        self.assertEqual(_lint("PTR_ARG", "style").name, "ptr_arg")

    def test_immutable(self):
        record = _lint("a", "style")
        with self.assertRaises(AttributeError):
            record.name = "b"

    def test_structural_equality(self):
        self.assertEqual(_lint("a", "style"), _lint("A", "style"))
        self.assertNotEqual(_lint("a", "style"), _lint("a", "perf"))

    def test_docs_url(self):
        self.assertTrue(_lint("ptr_arg", "style").docs_url.endswith("index.html#ptr_arg"))

    def test_is_deprecated(self):
        self.assertTrue(_lint("a", "Deprecated", "why").is_deprecated)
        self.assertFalse(_lint("a", "style").is_deprecated)


if __name__ == "__main__":
    unittest.main()
