"""
Unrecoverable-Row Pruner Implementation.

Removes records that carry neither total_laid_off nor percentage_laid_off.
Removal is final for the run.
"""

from __future__ import annotations

import logging
from typing import Dict, List

from layoff_cleaner.domain.entities import LayoffRecord, PipelineState
from layoff_cleaner.domain.value_objects import StageOutcome
from layoff_cleaner.pipeline.working_collection import WorkingCollection

logger = logging.getLogger(__name__)

PRUNE_REASON = "total_laid_off and percentage_laid_off both absent"


def is_unrecoverable(record: LayoffRecord) -> bool:
    return record.total_laid_off is None and record.percentage_laid_off is None


class UnrecoverableRowPruner:
    """Drop rows with no layoff magnitude."""

    state = PipelineState.PRUNED

    @property
    def name(self) -> str:
        """Unique name of this stage."""
        return "unrecoverable_row_pruner"

    def apply(self, collection: WorkingCollection) -> StageOutcome:
        doomed: List[int] = [r.handle for r in collection if is_unrecoverable(r)]
        removed = collection.remove(doomed)
        reasons: Dict[int, str] = {h: PRUNE_REASON for h in removed}

        if removed:
            logger.info(f"Pruned {len(removed)} records without layoff magnitude")
        return StageOutcome(removed_handles=removed, removal_reasons=reasons)
