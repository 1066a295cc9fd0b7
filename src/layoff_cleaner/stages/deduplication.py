"""
Deduplicator Implementation.

Removes exact duplicates by natural key (all nine source attributes).

Within a group of records sharing a natural key, records are ranked by load
order and only the first-ranked record is kept. Absent values in the same
position group together; an absent value never matches a present one, so
"" and "NULL" stay distinct from absent at this point of the run.

Ranks are computed on a snapshot of the collection and only the handles
ranked in that snapshot are discarded.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Tuple

from layoff_cleaner.domain.entities import PipelineState
from layoff_cleaner.domain.value_objects import StageOutcome
from layoff_cleaner.pipeline.working_collection import WorkingCollection

logger = logging.getLogger(__name__)

NaturalKeyGroups = Dict[Tuple[Any, ...], List[int]]


class Deduplicator:
    """Keep the earliest-loaded record of every natural-key group."""

    state = PipelineState.DEDUPLICATED

    @property
    def name(self) -> str:
        """Unique name of this stage."""
        return "deduplicator"

    def group(self, collection: WorkingCollection) -> NaturalKeyGroups:
        """
        Partition the collection by natural key.

        Returns:
            Natural key -> handles in load order
        """
        groups: NaturalKeyGroups = {}
        for record in collection:
            groups.setdefault(record.natural_key(), []).append(record.handle)
        return groups

    def rank(self, collection: WorkingCollection) -> Dict[int, int]:
        """
        Assign each record its 1-based rank within its natural-key group.

        Returns:
            Handle -> rank (1 for the record that survives)
        """
        ranks: Dict[int, int] = {}
        for handles in self.group(collection).values():
            for position, handle in enumerate(handles, start=1):
                ranks[handle] = position
        return ranks

    def apply(self, collection: WorkingCollection) -> StageOutcome:
        """
        Discard every record ranked after the first in its group.

        Args:
            collection: Working collection, modified in place

        Returns:
            StageOutcome listing the discarded handles
        """
        ranks = self.rank(collection)
        keys = {h: collection.get(h).natural_key() for h in ranks}
        survivors = {keys[h]: h for h, rank in ranks.items() if rank == 1}

        discard: List[int] = []
        reasons: Dict[int, str] = {}
        for handle, rank in ranks.items():
            if rank > 1:
                discard.append(handle)
                reasons[handle] = f"duplicate of handle {survivors[keys[handle]]}"

        removed = collection.remove(discard)
        if removed:
            logger.info(f"Discarded {len(removed)} duplicate records")

        return StageOutcome(
            removed_handles=removed,
            removal_reasons={h: reasons[h] for h in removed},
        )
