"""
Pytest Configuration and Shared Fixtures.

This module contains fixtures available to all tests.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Callable, Dict, List

import pytest

from layoff_cleaner.adapters.console_logger import ConsoleAuditLogger
from layoff_cleaner.config.models import CleaningConfig
from tests.fixtures.builders import raw_row

RawRowFactory = Callable[..., Dict[str, Any]]


@pytest.fixture
def make_row() -> RawRowFactory:
    """Factory for raw rows."""
    return raw_row


@pytest.fixture
def fixtures_dir() -> Path:
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def sample_config_path(fixtures_dir: Path) -> Path:
    """Path to sample configuration file."""
    return fixtures_dir / "sample_config.yaml"


@pytest.fixture
def sample_csv_path(fixtures_dir: Path) -> Path:
    """Path to the small dirty raw export."""
    return fixtures_dir / "layoffs_sample.csv"


@pytest.fixture
def default_config() -> CleaningConfig:
    """Create default cleaning configuration."""
    return CleaningConfig()


@pytest.fixture
def console_logger() -> ConsoleAuditLogger:
    """Create console logger for testing."""
    return ConsoleAuditLogger(verbose=False)


@pytest.fixture
def dirty_rows() -> List[Dict[str, Any]]:
    """Raw rows exercising every stage."""
    return [
        raw_row(
            company=" Meta ",
            location="SF Bay Area",
            industry="Crypto/Web3",
            total_laid_off="1000",
            percentage_laid_off="",
            date="11/9/2022",
            stage="Post-IPO",
            country="USA.",
            funds_raised_millions="26000",
        ),
        # Exact duplicate pair
        raw_row(company="Atlassian", industry="Other", date="3/6/2023"),
        raw_row(company="Atlassian", industry="Other", date="3/6/2023"),
        # Backfill: one known, one missing
        raw_row(company="Airbnb", industry="", date="3/3/2023"),
        raw_row(company="Airbnb", industry="Travel", date="5/5/2020"),
        # Never backfillable
        raw_row(company="Zeta", industry="NULL", total_laid_off="5"),
        # Unrecoverable
        raw_row(
            company="Ghost",
            total_laid_off="NULL",
            percentage_laid_off="",
            date="not a date",
        ),
    ]
