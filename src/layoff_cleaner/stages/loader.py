"""
Record Loader.

Copies raw rows into a fresh WorkingCollection, one record per row, in
source order. The source rows are only read.
"""

from __future__ import annotations

import logging
from typing import Iterable

from layoff_cleaner.domain.entities import PipelineState
from layoff_cleaner.domain.value_objects import RawRow
from layoff_cleaner.pipeline.working_collection import WorkingCollection

logger = logging.getLogger(__name__)


class RecordLoader:
    """Builds the working collection from raw rows."""

    state = PipelineState.LOADED

    @property
    def name(self) -> str:
        """Unique name of this stage."""
        return "loader"

    def load(self, rows: Iterable[RawRow]) -> WorkingCollection:
        """
        Copy raw rows into a new working collection.

        Args:
            rows: Raw rows keyed by source column name

        Returns:
            WorkingCollection with a fresh handle per row
        """
        collection = WorkingCollection()
        for row in rows:
            collection.append(row)
        collection.advance(self.state)
        logger.debug(f"Loaded {len(collection)} records")
        return collection
