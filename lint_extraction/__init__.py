"""
Lint Extraction Engine

Regex-based extractor for lint declarations embedded as macro invocations
in a source tree. Produces LintRecord objects and grouping/filtering views.
"""

from lint_extraction.models import LintRecord
from lint_extraction.normalizer import normalize_description
from lint_extraction.parser import parse_contents
from lint_extraction.repository import (
    LintRepository,
    group_by_category,
    is_usable,
    usable_lints,
)
from lint_extraction.extractor import (
    FileSource,
    LocalFileSource,
    ScanStats,
    discover_lint_files,
    extract_directory,
    extract_to_dict_list,
    gather_all,
    gather_from_file,
    iter_gather_all,
)

__all__ = [
    # Data models
    "LintRecord",
    "ScanStats",
    # Low-level parsing
    "normalize_description",
    "parse_contents",
    # Filtering and grouping
    "LintRepository",
    "group_by_category",
    "is_usable",
    "usable_lints",
    # High-level orchestration
    "FileSource",
    "LocalFileSource",
    "discover_lint_files",
    "extract_directory",
    "extract_to_dict_list",
    "gather_all",
    "gather_from_file",
    "iter_gather_all",
]
