"""
Post-Run Diagnostics.

Read-only queries used to verify a cleaned collection:
    - Remaining duplicate groups (expected: zero)
    - Distinct industry values
    - Companies that still have an absent industry (ideally none)

These never modify records and are not pipeline stages.
"""

from __future__ import annotations

from collections import Counter
from typing import Iterable, List, Sequence

from layoff_cleaner.domain.entities import LayoffRecord
from layoff_cleaner.domain.value_objects import DiagnosticsReport


def count_duplicate_groups(records: Iterable[LayoffRecord]) -> int:
    """Number of natural keys shared by more than one record."""
    counts = Counter(record.natural_key() for record in records)
    return sum(1 for count in counts.values() if count > 1)


def distinct_industries(records: Iterable[LayoffRecord]) -> List[str]:
    """Sorted distinct industries, absent excluded."""
    return sorted({r.industry for r in records if r.industry is not None})


def companies_missing_industry(records: Iterable[LayoffRecord]) -> List[str]:
    """Sorted companies with at least one absent-industry record."""
    return sorted(
        {r.company for r in records if r.industry is None and r.company is not None}
    )


def build_diagnostics(records: Sequence[LayoffRecord]) -> DiagnosticsReport:
    """
    Run every diagnostic query over a collection.

    Args:
        records: Records to inspect

    Returns:
        DiagnosticsReport with all figures
    """
    return DiagnosticsReport(
        record_count=len(records),
        duplicate_groups=count_duplicate_groups(records),
        distinct_industries=distinct_industries(records),
        companies_missing_industry=companies_missing_industry(records),
    )
