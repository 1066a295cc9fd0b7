"""
Observability Package - Post-Run Verification.

Components:
    - build_diagnostics: Duplicate groups, industries, missing industries
"""

from layoff_cleaner.observability.diagnostics import (
    build_diagnostics,
    companies_missing_industry,
    count_duplicate_groups,
    distinct_industries,
)

__all__ = [
    "build_diagnostics",
    "companies_missing_industry",
    "count_duplicate_groups",
    "distinct_industries",
]
