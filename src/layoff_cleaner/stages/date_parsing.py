"""
Date Parser Implementation.

Converts the textual date column into structured dates.

Recognized representations (configurable, tried in order):
    - M/D/YYYY with 1-2 digit month and day, e.g. "11/9/2022"
    - YYYY-MM-DD, e.g. "2022-11-09"

Anything else, including "NULL" and calendar-invalid values such as
"13/40/2020", becomes absent. There is no fallback heuristic.

The column type changes for the whole collection in one step, after every
value has been converted, so no record is left holding unconverted text.
"""

from __future__ import annotations

import logging
from datetime import date
from typing import Dict, List, Optional, Sequence

from layoff_cleaner.domain.entities import DateColumnType, PipelineState
from layoff_cleaner.domain.value_objects import DatePattern, StageOutcome
from layoff_cleaner.pipeline.working_collection import DATE_STAGE_NAME, WorkingCollection

logger = logging.getLogger(__name__)

DEFAULT_DATE_PATTERNS = (
    DatePattern(pattern=r"^\d{1,2}/\d{1,2}/\d{4}$", format="%m/%d/%Y"),
    DatePattern(pattern=r"^\d{4}-\d{2}-\d{2}$", format="%Y-%m-%d"),
)


class DateParser:
    """Convert the date column from text to structured dates."""

    state = PipelineState.DATE_PARSED

    def __init__(self, patterns: Optional[Sequence[DatePattern]] = None) -> None:
        """
        Initialize with the recognized date patterns.

        Args:
            patterns: Patterns tried in order (defaults to M/D/YYYY and ISO)
        """
        self.patterns = list(patterns) if patterns is not None else list(DEFAULT_DATE_PATTERNS)

    @property
    def name(self) -> str:
        """Unique name of this stage."""
        return DATE_STAGE_NAME

    def parse(self, value: Optional[str]) -> Optional[date]:
        """
        Parse a textual date.

        Args:
            value: Raw date text or None

        Returns:
            The date for the first matching pattern, None otherwise. Never raises.
        """
        if value is None:
            return None
        for pattern in self.patterns:
            parsed = pattern.parse(value)
            if parsed is not None:
                return parsed
        return None

    def apply(self, collection: WorkingCollection) -> StageOutcome:
        """
        Convert every record's date and switch the column type.

        A collection whose date column is already DATE is left unchanged.

        Raises:
            SchemaTransitionFailure: If the column change cannot be applied
        """
        if collection.date_column is DateColumnType.DATE:
            return StageOutcome()

        converted: Dict[int, Optional[date]] = {}
        modified: List[int] = []
        unparsable = 0

        for record in collection:
            converted[record.handle] = self.parse(record.date_text)
            if record.date_text is not None:
                modified.append(record.handle)
                if converted[record.handle] is None:
                    unparsable += 1
                    logger.debug(
                        f"Unparsable date {record.date_text!r} on handle {record.handle}"
                    )

        collection.transition_date_column(converted)

        if unparsable:
            logger.info(f"{unparsable} date values could not be parsed and are now absent")
        return StageOutcome(modified_handles=modified)
