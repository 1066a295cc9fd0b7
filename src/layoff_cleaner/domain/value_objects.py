"""
Value Objects for Domain Layer.

Value objects are immutable objects that describe characteristics of a
cleaning run but have no conceptual identity.
"""

from __future__ import annotations

import re
from datetime import date, datetime
from typing import Any, Dict, List, Mapping, Optional

from pydantic import BaseModel, Field


# =============================================================================
# Type Aliases for improved readability
# =============================================================================

# A raw source row keyed by column name
RawRow = Mapping[str, Any]

# Removal reasons: row handle -> reason string
RemovalReasonsDict = Dict[int, str]


class StageOutcome(BaseModel):
    """What a single stage did to the working collection."""

    removed_handles: List[int] = Field(
        default_factory=list, description="Handles removed by the stage"
    )
    modified_handles: List[int] = Field(
        default_factory=list, description="Handles whose fields were rewritten"
    )
    removal_reasons: RemovalReasonsDict = Field(
        default_factory=dict, description="Handle -> removal reason"
    )

    model_config = {"frozen": True}

    @property
    def removed_count(self) -> int:
        return len(self.removed_handles)

    @property
    def modified_count(self) -> int:
        return len(self.modified_handles)


class DatePattern(BaseModel):
    """A recognized textual date representation."""

    pattern: str = Field(..., description="Regex the whole value must match")
    format: str = Field(..., description="strptime format applied on match")

    model_config = {"frozen": True}

    def parse(self, value: str) -> Optional[date]:
        """
        Parse value if it matches this pattern.

        The regex is only a syntactic filter. Range checks (month <= 12,
        day valid for the month) are left to date construction.

        Returns:
            Parsed date, or None if the value does not match or is not a
            real calendar date
        """
        if re.fullmatch(self.pattern, value, flags=re.ASCII) is None:
            return None
        try:
            return datetime.strptime(value, self.format).date()
        except ValueError:
            return None


class DiagnosticsReport(BaseModel):
    """Read-only verification figures for a cleaned collection."""

    record_count: int = Field(ge=0)
    duplicate_groups: int = Field(ge=0)
    distinct_industries: List[str] = Field(default_factory=list)
    companies_missing_industry: List[str] = Field(default_factory=list)

    model_config = {"frozen": True}

    @property
    def is_clean(self) -> bool:
        """No duplicates left and every company carries an industry."""
        return self.duplicate_groups == 0 and not self.companies_missing_industry
