"""
Industry Backfiller Implementation.

Fills an absent industry from another record of the same company.

The model assumes one industry per company. When a company's records carry
different industries, the first one in collection order is used for every
backfill of that company. Absent company never matches absent company.
"""

from __future__ import annotations

import logging
from typing import Dict, Iterable, List

from layoff_cleaner.domain.entities import LayoffRecord, PipelineState
from layoff_cleaner.domain.value_objects import StageOutcome
from layoff_cleaner.pipeline.working_collection import WorkingCollection

logger = logging.getLogger(__name__)


def build_company_industries(records: Iterable[LayoffRecord]) -> Dict[str, str]:
    """
    Choose a representative industry per company.

    Args:
        records: Records in collection order

    Returns:
        Company -> first known industry for that company
    """
    chosen: Dict[str, str] = {}
    for record in records:
        if record.company is None or record.industry is None:
            continue
        current = chosen.setdefault(record.company, record.industry)
        if current != record.industry:
            logger.debug(
                f"Company {record.company!r} has conflicting industries "
                f"{current!r} and {record.industry!r}, keeping {current!r}"
            )
    return chosen


class IndustryBackfiller:
    """Propagate known industries to same-company records missing one."""

    state = PipelineState.INDUSTRY_BACKFILLED

    @property
    def name(self) -> str:
        """Unique name of this stage."""
        return "industry_backfiller"

    def apply(self, collection: WorkingCollection) -> StageOutcome:
        records = collection.records
        industries = build_company_industries(records)
        modified: List[int] = []

        for record in records:
            if record.industry is not None or record.company is None:
                continue
            industry = industries.get(record.company)
            if industry is None:
                continue
            record.industry = industry
            modified.append(record.handle)

        if modified:
            logger.info(f"Backfilled industry on {len(modified)} records")
        return StageOutcome(modified_handles=modified)
