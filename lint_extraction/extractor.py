"""
High-level orchestrator for lint extraction.

This module provides the entry points for extracting lint declarations from
single files or entire source trees. File access goes through a
``FileSource`` so traversal and reads can be swapped out in tests.
"""

import concurrent.futures
import logging
import os
from contextlib import closing
from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List, Optional, Protocol

from lint_extraction.config import DEFAULT_SOURCE_DIR, SOURCE_EXTENSION
from lint_extraction.models import LintRecord
from lint_extraction.parser import parse_contents
from lint_extraction.repository import LintRepository

logger = logging.getLogger(__name__)

# Errors that make a single file unreadable without invalidating the scan
FILE_READ_ERRORS = (OSError, UnicodeDecodeError)


class FileSource(Protocol):
    """Recursive file enumeration and full-text reads."""

    def list_files(self, root: str, extension: str) -> List[str]:
        ...

    def read_text(self, path: str) -> str:
        ...


class LocalFileSource:
    """FileSource backed by the local filesystem."""

    def list_files(self, root: str, extension: str) -> List[str]:
        return discover_lint_files(root, extension)

    def read_text(self, path: str) -> str:
        with open(path, "r", encoding="utf-8") as f:
            return f.read()


class ScanStats:
    """Statistics for a scan operation."""

    def __init__(self):
        self.files_processed = 0
        self.files_skipped = 0
        self.lints_extracted = 0
        self.deprecated_extracted = 0

    def record(self, records: List[LintRecord]) -> None:
        self.files_processed += 1
        self.lints_extracted += len(records)
        self.deprecated_extracted += sum(1 for r in records if r.is_deprecated)

    def to_dict(self) -> Dict[str, int]:
        """Convert stats to dictionary."""
        return {
            "files_processed": self.files_processed,
            "files_skipped": self.files_skipped,
            "lints_extracted": self.lints_extracted,
            "deprecated_extracted": self.deprecated_extracted,
        }

    def __str__(self) -> str:
        return (
            f"ScanStats(processed={self.files_processed}, "
            f"skipped={self.files_skipped}, lints={self.lints_extracted}, "
            f"deprecated={self.deprecated_extracted})"
        )


@dataclass
class _FileResult:
    path: str
    records: List[LintRecord] = field(default_factory=list)
    error: Optional[BaseException] = None


def module_name_for(file_path: str) -> str:
    """Module identifier for a file: its base name without the extension."""
    return os.path.splitext(os.path.basename(file_path))[0]


def discover_lint_files(directory: str, extension: str = SOURCE_EXTENSION) -> List[str]:
    """Recursively discover all source files with ``extension`` under a directory.

    Args:
        directory: Root directory to search.
        extension: File extension to keep, including the leading dot.

    Returns:
        Sorted list of absolute paths. The order is the traversal order used
        for every scan.

    Raises:
        FileNotFoundError: If the directory does not exist.
        OSError: If the directory exists but cannot be listed. Unlistable
            subdirectories are skipped with a warning instead.

    Example:
        >>> files = discover_lint_files("../clippy_lints/src")
        >>> files[0].endswith(".rs")
        True
    """
    directory = os.path.abspath(directory)
    if not os.path.isdir(directory):
        raise FileNotFoundError(f"Directory not found: {directory}")

    logger.info("Discovering %s files in %s", extension, directory)

    def _on_walk_error(err: OSError) -> None:
        if err.filename is None or os.path.abspath(err.filename) == directory:
            raise err
        logger.warning("Skipping unreadable directory %s: %s", err.filename, err)

    found = []
    for root, _dirs, files in os.walk(directory, onerror=_on_walk_error):
        for name in files:
            if os.path.splitext(name)[1] == extension:
                found.append(os.path.join(root, name))

    logger.info("Found %d %s files", len(found), extension)
    return sorted(found)


def gather_from_file(
    file_path: str,
    source: Optional[FileSource] = None,
) -> List[LintRecord]:
    """Extract all lints declared in a single file.

    Args:
        file_path: Path to the source file.
        source: File access backend. Defaults to the local filesystem.

    Returns:
        Records in extraction order (active first, then deprecated).

    Raises:
        OSError: If the file cannot be read.
        UnicodeDecodeError: If the file is not valid UTF-8.
    """
    source = source or LocalFileSource()
    content = source.read_text(file_path)
    records = list(parse_contents(content, module_name_for(file_path)))
    logger.debug("Extracted %d lints from %s", len(records), file_path)
    return records


def _scan_one(file_path: str, source: FileSource) -> _FileResult:
    try:
        return _FileResult(path=file_path, records=gather_from_file(file_path, source))
    except FILE_READ_ERRORS as e:
        return _FileResult(path=file_path, error=e)


def _iter_results(
    file_paths: List[str],
    source: FileSource,
    max_workers: int,
) -> Iterator[_FileResult]:
    if max_workers <= 1 or len(file_paths) <= 1:
        for file_path in file_paths:
            yield _scan_one(file_path, source)
        return

    # Executor.map yields in submission order, so the traversal order holds.
    with concurrent.futures.ThreadPoolExecutor(max_workers=max_workers) as executor:
        yield from executor.map(lambda p: _scan_one(p, source), file_paths)


def _iter_scanned_records(
    file_paths: List[str],
    source: FileSource,
    stats: ScanStats,
    max_workers: int = 1,
    strict_reads: bool = False,
) -> Iterator[LintRecord]:
    """Yield records file by file, skipping (or raising on) unreadable files.

    ``stats`` is updated as each file is consumed.
    """
    with closing(_iter_results(file_paths, source, max_workers)) as results:
        for result in results:
            if result.error is not None:
                stats.files_skipped += 1
                if strict_reads:
                    raise result.error
                logger.warning("Skipping unreadable file %s: %s", result.path, result.error)
                continue
            stats.record(result.records)
            yield from result.records


def extract_directory(
    directory: str = DEFAULT_SOURCE_DIR,
    extension: str = SOURCE_EXTENSION,
    source: Optional[FileSource] = None,
    max_workers: int = 1,
    strict_reads: bool = False,
) -> tuple[List[LintRecord], ScanStats]:
    """Extract lints from every matching file in a directory tree.

    Files that cannot be read are skipped and counted; the scan carries on.

    Args:
        directory: Root directory to scan.
        extension: Source file extension, including the leading dot.
        source: File access backend. Defaults to the local filesystem.
        max_workers: Number of threads reading and parsing files. Values of
            1 or less scan sequentially. Output order is the same either way.
        strict_reads: If True, re-raise the first per-file read error
            instead of skipping the file.

    Returns:
        A tuple of (records, stats) where:
        - records: All extracted records, file by file in traversal order
        - stats: ScanStats with processing statistics

    Raises:
        FileNotFoundError: If the root directory does not exist.
        OSError: If the root directory cannot be listed.
    """
    source = source or LocalFileSource()
    stats = ScanStats()

    file_paths = source.list_files(directory, extension)
    if not file_paths:
        logger.warning("No %s files found in %s", extension, directory)
        return [], stats

    logger.info("Processing %d files from %s", len(file_paths), directory)

    all_records = list(
        _iter_scanned_records(
            file_paths,
            source,
            stats,
            max_workers=max_workers,
            strict_reads=strict_reads,
        )
    )

    logger.info("Scan complete: %s", stats)
    return all_records, stats


def iter_gather_all(
    directory: str = DEFAULT_SOURCE_DIR,
    extension: str = SOURCE_EXTENSION,
    source: Optional[FileSource] = None,
    max_workers: int = 1,
    strict_reads: bool = False,
    stats: Optional[ScanStats] = None,
) -> Iterator[LintRecord]:
    """Stream records from a directory tree one file at a time.

    The root is checked eagerly, so a missing or unlistable directory
    raises here rather than on first iteration. Unreadable files are
    handled as in ``extract_directory``; pass ``stats`` to collect counts
    while the stream is consumed.

    Raises:
        FileNotFoundError: If the root directory does not exist.
        OSError: If the root directory cannot be listed.
    """
    source = source or LocalFileSource()
    file_paths = source.list_files(directory, extension)
    return _iter_scanned_records(
        file_paths,
        source,
        stats if stats is not None else ScanStats(),
        max_workers=max_workers,
        strict_reads=strict_reads,
    )


def gather_all(
    directory: str = DEFAULT_SOURCE_DIR,
    extension: str = SOURCE_EXTENSION,
    source: Optional[FileSource] = None,
    max_workers: int = 1,
) -> LintRepository:
    """Scan a directory tree and collect everything into a LintRepository."""
    records, _stats = extract_directory(
        directory,
        extension=extension,
        source=source,
        max_workers=max_workers,
    )
    return LintRepository(records)


def extract_to_dict_list(
    directory: str = DEFAULT_SOURCE_DIR,
    extension: str = SOURCE_EXTENSION,
    usable_only: bool = False,
) -> List[Dict[str, Any]]:
    """Extract lints and return them as a list of dictionaries.

    Args:
        directory: Root directory to scan.
        extension: Source file extension.
        usable_only: Drop deprecated and internal lints.

    Returns:
        List of record dictionaries ready for JSON serialization.
    """
    return gather_all(directory, extension).to_dict_list(usable_only=usable_only)
