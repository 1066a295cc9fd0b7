"""
Stages Package - Cleaning Stage Implementations.

Each stage takes the working collection produced by the previous one,
rewrites or removes records in place and reports a StageOutcome.

Stages (run in this order):
    - RecordLoader: Copies raw rows into the working collection
    - Deduplicator: Keeps the first record of each natural-key group
    - TextNormalizer: Trims company/country, collapses Crypto industries
    - DateParser: Text dates to structured dates, unparsable to absent
    - NullCanonicalizer: Sentinel strings to absent, magnitudes to numbers
    - IndustryBackfiller: Same-company industry propagation
    - UnrecoverableRowPruner: Drops rows with no layoff magnitude

Every stage except the loader is idempotent on its own output.
"""

from __future__ import annotations

from typing import List, Optional

from layoff_cleaner.config.models import CleaningConfig
from layoff_cleaner.stages.date_parsing import DateParser
from layoff_cleaner.stages.deduplication import Deduplicator
from layoff_cleaner.stages.industry_backfill import IndustryBackfiller
from layoff_cleaner.stages.loader import RecordLoader
from layoff_cleaner.stages.null_canonicalization import NullCanonicalizer
from layoff_cleaner.stages.pruning import UnrecoverableRowPruner
from layoff_cleaner.stages.text_normalization import TextNormalizer

__all__ = [
    "RecordLoader",
    "Deduplicator",
    "TextNormalizer",
    "DateParser",
    "NullCanonicalizer",
    "IndustryBackfiller",
    "UnrecoverableRowPruner",
    "create_default_stages",
]


def create_default_stages(config: Optional[CleaningConfig] = None) -> List:
    """
    Factory function for stages 2-7 in pipeline order.

    Args:
        config: Cleaning configuration (defaults applied when omitted)

    Returns:
        Ordered list of stage instances
    """
    config = config or CleaningConfig()
    return [
        Deduplicator(),
        TextNormalizer(),
        DateParser(config.compiled_date_patterns()),
        NullCanonicalizer(config.null_sentinels, config.nullable_fields),
        IndustryBackfiller(),
        UnrecoverableRowPruner(),
    ]
