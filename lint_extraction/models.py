"""
Data models for extracted lint declarations.
"""

from dataclasses import dataclass, asdict
from typing import Optional, Dict, Any

from lint_extraction.config import DOCS_LINK
from lint_extraction.normalizer import normalize_description


@dataclass(frozen=True)
class LintRecord:
    """Represents a single lint declared in a source file.

    Attributes:
        name: Lint name, lowercased (e.g., ptr_arg)
        group: Category label as declared (e.g., style), or "Deprecated"
        description: Normalized one-line description
        deprecation_reason: Reason text for deprecated lints, otherwise None
        module: Base name of the declaring file without extension
    """

    name: str
    group: str
    description: str
    deprecation_reason: Optional[str]
    module: str

    @classmethod
    def create(
        cls,
        name: str,
        group: str,
        description: str,
        deprecation_reason: Optional[str],
        module: str,
    ) -> "LintRecord":
        """Build a record from raw captured text.

        The name is lowercased; the description and any deprecation reason
        are normalized.

        Args:
            name: Lint name as written in the declaration.
            group: Category label.
            description: Raw description text from the string literal.
            deprecation_reason: Reason for deprecated lints, or None.
            module: Module identifier of the declaring file.

        Returns:
            A new LintRecord.
        """
        return cls(
            name=name.lower(),
            group=group,
            description=normalize_description(description),
            deprecation_reason=(
                normalize_description(deprecation_reason)
                if deprecation_reason is not None
                else None
            ),
            module=module,
        )

    @property
    def is_deprecated(self) -> bool:
        return self.deprecation_reason is not None

    @property
    def docs_url(self) -> str:
        """Link to the lint's entry in the published lint list."""
        return f"{DOCS_LINK}#{self.name}"

    def to_dict(self) -> Dict[str, Any]:
        """Convert the record to a dictionary suitable for JSON serialization.

        Returns:
            Dictionary representation of the record.
        """
        return asdict(self)
