"""
Configuration constants for lint declaration extraction.

Defines the declaration patterns, the source file extension, and the
default scan root. Environment variables are loaded from a .env file at
module import time via python-dotenv.
"""

import os
import re

from dotenv import load_dotenv

# ---------------------------------------------------------------------------
# Load .env file (idempotent; does nothing if already loaded or missing)
# ---------------------------------------------------------------------------
load_dotenv()

# ---------------------------------------------------------------------------
# Source tree configuration
# ---------------------------------------------------------------------------
DEFAULT_SOURCE_DIR: str = os.getenv("LINT_SOURCE_DIR", "../clippy_lints/src")
SOURCE_EXTENSION: str = os.getenv("LINT_SOURCE_EXTENSION", ".rs")

# ---------------------------------------------------------------------------
# Group labels
# ---------------------------------------------------------------------------
DEPRECATED_GROUP: str = "Deprecated"
INTERNAL_GROUP_PREFIX: str = "internal"

DOCS_LINK: str = "https://rust-lang-nursery.github.io/rust-clippy/master/index.html"

# ---------------------------------------------------------------------------
# Declaration patterns
#
# The description body alternates single characters with escape pairs so the
# two branches never overlap; this keeps unterminated strings from backtracking
# exponentially.
# ---------------------------------------------------------------------------
_DESCRIPTION = r'"(?P<desc>(?:[^"\\]|\\.)*)"'

ACTIVE_DECLARATION_RE = re.compile(
    r"""
    declare_clippy_lint!\s*[{(]\s*
    pub\s+(?P<name>[A-Z_][A-Z_0-9]*)\s*,\s*
    (?P<cat>[a-z_]+)\s*,\s*
    """ + _DESCRIPTION + r"""\s*[})]
    """,
    re.VERBOSE | re.DOTALL,
)

DEPRECATED_DECLARATION_RE = re.compile(
    r"""
    declare_deprecated_lint!\s*[{(]\s*
    pub\s+(?P<name>[A-Z_][A-Z_0-9]*)\s*,\s*
    """ + _DESCRIPTION + r"""\s*[})]
    """,
    re.VERBOSE | re.DOTALL,
)

# Backslash-newline plus the indentation that follows it
LINE_CONTINUATION_RE = re.compile(r"\\\n\s*")

ESCAPED_QUOTE: str = '\\"'
