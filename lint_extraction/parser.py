"""
Pattern-based extraction of lint declarations from source text.

Two declaration forms are recognized:

    declare_clippy_lint! {
        pub PTR_ARG,
        style,
        "description"
    }

    declare_deprecated_lint! {
        pub SHOULD_ASSERT_EQ,
        "reason"
    }

Either ``{}`` or ``()`` may delimit the body. Anything that does not match
these shapes exactly is not a declaration and is skipped without comment.
"""

from itertools import chain
from typing import Iterator

from lint_extraction.config import (
    ACTIVE_DECLARATION_RE,
    DEPRECATED_DECLARATION_RE,
    DEPRECATED_GROUP,
)
from lint_extraction.models import LintRecord


def iter_active_declarations(content: str, module: str) -> Iterator[LintRecord]:
    """Yield records for ``declare_clippy_lint!`` invocations in textual order."""
    for match in ACTIVE_DECLARATION_RE.finditer(content):
        yield LintRecord.create(
            name=match.group("name"),
            group=match.group("cat"),
            description=match.group("desc"),
            deprecation_reason=None,
            module=module,
        )


def iter_deprecated_declarations(content: str, module: str) -> Iterator[LintRecord]:
    """Yield records for ``declare_deprecated_lint!`` invocations in textual order.

    The reason string doubles as the description.
    """
    for match in DEPRECATED_DECLARATION_RE.finditer(content):
        yield LintRecord.create(
            name=match.group("name"),
            group=DEPRECATED_GROUP,
            description=match.group("desc"),
            deprecation_reason=match.group("desc"),
            module=module,
        )


def parse_contents(content: str, module: str) -> Iterator[LintRecord]:
    """Extract every lint declared in one file's text.

    Active declarations come first in the order they appear, followed by
    deprecated declarations in the order they appear. Duplicate names are
    preserved.

    Args:
        content: Full text of a source file.
        module: Module identifier recorded on each record.

    Returns:
        Lazy iterator over the extracted records.

    Example:
        >>> records = list(parse_contents(source_text, "methods"))
        >>> [r.name for r in records]
        ['ptr_arg', 'doc_markdown', 'should_assert_eq']
    """
    return chain(
        iter_active_declarations(content, module),
        iter_deprecated_declarations(content, module),
    )
