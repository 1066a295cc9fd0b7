"""
Core Domain Entities.

This module defines the fundamental entities of the layoff cleaning domain.
A LayoffRecord is created once per raw row at load time and then rewritten
in place by the cleaning stages until it is handed to the sink.
"""

from __future__ import annotations

from datetime import date, datetime
from enum import Enum
from typing import Any, Dict, List, Mapping, Optional, Tuple, Union

from pydantic import BaseModel, Field

from layoff_cleaner.domain.value_objects import DiagnosticsReport

# Column names of the raw dataset, in source order.
RAW_COLUMNS: Tuple[str, ...] = (
    "company",
    "location",
    "industry",
    "total_laid_off",
    "percentage_laid_off",
    "date",
    "stage",
    "country",
    "funds_raised_millions",
)

_TEXT_COLUMNS = ("company", "location", "industry", "stage", "country")
_NUMERIC_COLUMNS = ("total_laid_off", "percentage_laid_off", "funds_raised_millions")


class PipelineState(str, Enum):
    """Linear lifecycle of a cleaning run."""

    LOADED = "LOADED"
    DEDUPLICATED = "DEDUPLICATED"
    TEXT_NORMALIZED = "TEXT_NORMALIZED"
    DATE_PARSED = "DATE_PARSED"
    NULLS_CANONICALIZED = "NULLS_CANONICALIZED"
    INDUSTRY_BACKFILLED = "INDUSTRY_BACKFILLED"
    PRUNED = "PRUNED"


class DateColumnType(str, Enum):
    """Declared type of the date column for a whole collection."""

    TEXT = "TEXT"
    DATE = "DATE"


class LayoffRecord(BaseModel):
    """A single layoff event row."""

    handle: int = Field(..., ge=1, description="Pipeline-local row handle")
    company: Optional[str] = None
    location: Optional[str] = None
    industry: Optional[str] = None
    total_laid_off: Optional[Union[int, str]] = None
    percentage_laid_off: Optional[Union[float, str]] = None
    date_text: Optional[str] = Field(
        default=None, description="Raw date text, cleared when the column becomes DATE"
    )
    event_date: Optional[date] = Field(
        default=None, description="Structured date, set when the column becomes DATE"
    )
    stage: Optional[str] = None
    country: Optional[str] = None
    funds_raised_millions: Optional[Union[float, str]] = None

    @classmethod
    def from_raw(cls, row: Mapping[str, Any], handle: int) -> "LayoffRecord":
        """
        Build a record from a raw source row.

        Missing columns load as absent, unknown columns are ignored. Every
        present value is loaded as text; magnitudes become numbers only in
        the null canonicalizer.

        Args:
            row: Raw row keyed by source column name
            handle: Row handle assigned by the working collection

        Returns:
            New LayoffRecord holding copies of the raw values
        """
        values: Dict[str, Any] = {"handle": handle}
        for column in _TEXT_COLUMNS + _NUMERIC_COLUMNS:
            values[column] = _as_text(row.get(column))

        raw_date = row.get("date")
        if isinstance(raw_date, datetime):
            raw_date = raw_date.date().isoformat()
        elif isinstance(raw_date, date):
            raw_date = raw_date.isoformat()
        values["date_text"] = _as_text(raw_date)

        return cls(**values)

    @property
    def date_value(self) -> Union[str, date, None]:
        """The date field in its current form (text before parsing)."""
        if self.event_date is not None:
            return self.event_date
        return self.date_text

    def natural_key(self) -> Tuple[Any, ...]:
        """Nine-attribute identity used for duplicate detection."""
        return (
            self.company,
            self.location,
            self.industry,
            self.total_laid_off,
            self.percentage_laid_off,
            self.date_value,
            self.stage,
            self.country,
            self.funds_raised_millions,
        )

    def to_row(self) -> Dict[str, Any]:
        """Sink row keyed by source column name (handle excluded)."""
        return dict(zip(RAW_COLUMNS, self.natural_key()))


def _as_text(value: Any) -> Optional[str]:
    if value is None or isinstance(value, str):
        return value
    return str(value)


class StageResult(BaseModel):
    """Result of a single stage for the audit trail."""

    stage_name: str
    input_count: int
    output_count: int
    modified_count: int = 0
    duration_seconds: float
    removal_reasons: Dict[int, str] = Field(
        default_factory=dict, description="Row handle -> removal reason"
    )

    @property
    def removed_count(self) -> int:
        return self.input_count - self.output_count


class CleaningResult(BaseModel):
    """Complete result of a cleaning run."""

    run_id: str
    input_count: int
    records: List[LayoffRecord] = Field(default_factory=list)
    audit_trail: List[StageResult] = Field(default_factory=list)
    diagnostics: Optional[DiagnosticsReport] = None
    final_state: PipelineState
    metadata: Dict[str, Any] = Field(default_factory=dict)

    @property
    def output_count(self) -> int:
        return len(self.records)

    @property
    def reduction_ratio(self) -> float:
        """Share of input rows removed (0.0 = none, 1.0 = all)."""
        if self.input_count == 0:
            return 0.0
        return 1.0 - (self.output_count / self.input_count)

    def rows(self) -> List[Dict[str, Any]]:
        """Cleaned rows as handed to the sink."""
        return [record.to_row() for record in self.records]
