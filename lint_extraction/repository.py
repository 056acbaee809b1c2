"""
In-memory collection of extracted lints with filtering and grouping views.
"""

from collections import defaultdict
from typing import Dict, Iterable, Iterator, List, Optional, Tuple, Any

from lint_extraction.config import INTERNAL_GROUP_PREFIX
from lint_extraction.models import LintRecord


def is_usable(record: LintRecord) -> bool:
    """True for lints that are neither deprecated nor internal-only."""
    return record.deprecation_reason is None and not record.group.startswith(
        INTERNAL_GROUP_PREFIX
    )


def usable_lints(records: Iterable[LintRecord]) -> Iterator[LintRecord]:
    """Lazily filter out deprecated and internal lints, preserving order."""
    return (record for record in records if is_usable(record))


def group_by_category(records: Iterable[LintRecord]) -> Dict[str, List[LintRecord]]:
    """Group records by their group label.

    Records keep their relative input order inside each bucket. Duplicates
    are retained.

    Args:
        records: Records to group.

    Returns:
        Mapping of group label to the records carrying that label. Empty if
        there are no records.
    """
    groups: Dict[str, List[LintRecord]] = defaultdict(list)
    for record in records:
        groups[record.group].append(record)
    return dict(groups)


class LintRepository:
    """Ordered, read-only collection of lints produced by one scan."""

    def __init__(self, records: Optional[Iterable[LintRecord]] = None):
        self._records: Tuple[LintRecord, ...] = tuple(records or ())

    @property
    def records(self) -> Tuple[LintRecord, ...]:
        return self._records

    def usable(self) -> List[LintRecord]:
        """Records that are neither deprecated nor internal."""
        return list(usable_lints(self._records))

    def deprecated(self) -> List[LintRecord]:
        return [record for record in self._records if record.is_deprecated]

    def by_group(self, usable_only: bool = False) -> Dict[str, List[LintRecord]]:
        """Group records by label, optionally restricted to usable ones."""
        source = usable_lints(self._records) if usable_only else self._records
        return group_by_category(source)

    def names(self) -> List[str]:
        return [record.name for record in self._records]

    def to_dict_list(self, usable_only: bool = False) -> List[Dict[str, Any]]:
        source = usable_lints(self._records) if usable_only else self._records
        return [record.to_dict() for record in source]

    def __iter__(self) -> Iterator[LintRecord]:
        return iter(self._records)

    def __len__(self) -> int:
        return len(self._records)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LintRepository):
            return NotImplemented
        return self._records == other._records

    def __repr__(self) -> str:
        return f"LintRepository(records={len(self._records)})"
