"""Description text normalization."""

from lint_extraction.config import ESCAPED_QUOTE, LINE_CONTINUATION_RE


def normalize_description(raw: str) -> str:
    """Turn a captured string literal body into display text.

    Escaped quotes are un-escaped first, then source-level line
    continuations (a backslash, the newline, and any indentation after it)
    are removed so wrapped text reads as a single line. Nothing else is
    touched; backticks and markup pass through verbatim.

    Args:
        raw: Text captured between the quotes of a declaration.

    Returns:
        Normalized description text.
    """
    return LINE_CONTINUATION_RE.sub("", raw.replace(ESCAPED_QUOTE, '"'))
