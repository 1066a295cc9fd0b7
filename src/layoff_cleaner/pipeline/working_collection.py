"""
Working Collection - Mutable Copy of the Raw Rows.

The WorkingCollection holds every record of a cleaning run, keyed by row
handle in load order. It is owned by one pipeline run and never aliases the
raw source rows.

Design Notes:
    - Handles come from a monotonically increasing counter and are never
      reused, even after removal
    - Removal preserves the relative order of survivors
    - The date column changes from TEXT to DATE once, for all records
"""

from __future__ import annotations

import logging
from datetime import date
from typing import Any, Dict, Iterable, Iterator, List, Mapping, Optional

from layoff_cleaner.domain.entities import DateColumnType, LayoffRecord, PipelineState
from layoff_cleaner.domain.errors import SchemaTransitionFailure

logger = logging.getLogger(__name__)

DATE_STAGE_NAME = "date_parser"


class WorkingCollection:
    """Ordered, handle-addressable collection of LayoffRecords."""

    def __init__(self) -> None:
        self._records: Dict[int, LayoffRecord] = {}
        self._next_handle = 1
        self._date_column = DateColumnType.TEXT
        self._state: Optional[PipelineState] = None

    def append(self, row: Mapping[str, Any]) -> int:
        """
        Copy a raw row into the collection under a fresh handle.

        Args:
            row: Raw row keyed by source column name

        Returns:
            The handle assigned to the new record
        """
        handle = self._next_handle
        self._next_handle += 1
        record = LayoffRecord.from_raw(row, handle)
        if self._date_column is DateColumnType.DATE:
            # Late rows must follow the already-transitioned column type.
            record.date_text = None
        self._records[handle] = record
        return handle

    @property
    def records(self) -> List[LayoffRecord]:
        """Records in load order."""
        return list(self._records.values())

    @property
    def handles(self) -> List[int]:
        """Handles in load order."""
        return list(self._records.keys())

    def get(self, handle: int) -> Optional[LayoffRecord]:
        """Get record by handle."""
        return self._records.get(handle)

    def remove(self, handles: Iterable[int]) -> List[int]:
        """
        Remove records by handle.

        Unknown or already-removed handles are ignored.

        Returns:
            Handles actually removed, in the order given
        """
        removed: List[int] = []
        for handle in handles:
            if self._records.pop(handle, None) is not None:
                removed.append(handle)
        if removed:
            logger.debug(f"Removed {len(removed)} records, {len(self)} remain")
        return removed

    @property
    def date_column(self) -> DateColumnType:
        """Declared type of the date column."""
        return self._date_column

    def transition_date_column(self, converted: Mapping[int, Optional[date]]) -> None:
        """
        Switch the date column from TEXT to DATE for every record at once.

        Args:
            converted: Structured date (or None) for each current handle

        Raises:
            SchemaTransitionFailure: If the column already transitioned or
                the conversions do not cover exactly the current records.
                Nothing is mutated in that case.
        """
        if self._date_column is DateColumnType.DATE:
            raise SchemaTransitionFailure(
                "date column already converted", stage=DATE_STAGE_NAME
            )

        missing = [h for h in self._records if h not in converted]
        if missing:
            raise SchemaTransitionFailure(
                f"{len(missing)} records have no converted date",
                stage=DATE_STAGE_NAME,
                handle=missing[0],
            )
        unknown = [h for h in converted if h not in self._records]
        if unknown:
            raise SchemaTransitionFailure(
                f"{len(unknown)} converted dates refer to unknown records",
                stage=DATE_STAGE_NAME,
                handle=unknown[0],
            )

        for handle, record in self._records.items():
            record.event_date = converted[handle]
            record.date_text = None
        self._date_column = DateColumnType.DATE

    @property
    def state(self) -> Optional[PipelineState]:
        """Most recent pipeline state reached, None before loading."""
        return self._state

    def advance(self, state: PipelineState) -> None:
        """Record that a pipeline state has been reached."""
        self._state = state

    def __iter__(self) -> Iterator[LayoffRecord]:
        return iter(self.records)

    def __len__(self) -> int:
        """Number of records in the collection."""
        return len(self._records)

    def __repr__(self) -> str:
        return (
            f"WorkingCollection(records={len(self._records)}, "
            f"date_column={self._date_column.value}, "
            f"state={self._state.value if self._state else None})"
        )
