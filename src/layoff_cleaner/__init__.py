"""
Layoff Cleaner - Batch Cleaning Pipeline for Corporate Layoff Data.

Turns a raw, dirty layoffs dataset into a cleaned, analysis-ready copy.
The run is deterministic and repeatable: the same raw rows always produce
the same cleaned rows.

Stages:
    1. Loader: copy raw rows into a working collection
    2. Deduplicator: drop exact duplicates (first loaded wins)
    3. Text Normalizer: trim company/country, collapse Crypto industries
    4. Date Parser: M/D/YYYY or ISO text to dates, anything else absent
    5. Null Canonicalizer: "" and "null" to absent, magnitudes to numbers
    6. Industry Backfiller: same-company industry propagation
    7. Pruner: drop rows with neither total nor percentage laid off

Main Components:
    - domain: Records, results and errors
    - stages: The seven cleaning stages
    - pipeline: Orchestration and the working collection
    - adapters: In-memory, CSV and SQL stores, console audit logger
    - config: Configuration models and YAML loader
    - observability: Post-run diagnostics

Example:
    >>> from layoff_cleaner import clean_layoffs
    >>> result = clean_layoffs(raw_rows)
    >>> print(f"{result.input_count} -> {result.output_count} records")

"""

import logging

__version__ = "0.1.0"

from layoff_cleaner.config.models import CleaningConfig  # noqa: E402
from layoff_cleaner.domain.entities import CleaningResult, LayoffRecord  # noqa: E402
from layoff_cleaner.pipeline.cleaning_pipeline import (  # noqa: E402
    CleaningPipeline,
    clean_layoffs,
    create_pipeline,
)


def configure_logging(
    level: int = logging.INFO,
    format: str = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
) -> None:
    """
    Configure logging for Layoff Cleaner.

    Call this at application startup to see log messages.
    By default, only WARNING and above are visible.

    Args:
        level: Logging level (default: INFO)
        format: Log message format

    Example:
        >>> import layoff_cleaner
        >>> layoff_cleaner.configure_logging(logging.DEBUG)
    """
    logging.basicConfig(
        level=level,
        format=format,
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    logging.getLogger("layoff_cleaner").setLevel(level)


__all__ = [
    "CleaningConfig",
    "CleaningPipeline",
    "CleaningResult",
    "LayoffRecord",
    "clean_layoffs",
    "configure_logging",
    "create_pipeline",
]
