"""
Configuration Models - Pydantic Models for Type-Safe Config.

All configuration is validated at load time using Pydantic.
"""

from __future__ import annotations

import logging
import re
from typing import List, Optional

from pydantic import BaseModel, Field, field_validator

from layoff_cleaner.domain.entities import RAW_COLUMNS
from layoff_cleaner.domain.value_objects import DatePattern


class DatePatternConfig(BaseModel):
    """One recognized date representation."""

    pattern: str
    format: str

    @field_validator("pattern")
    @classmethod
    def _check_regex(cls, value: str) -> str:
        try:
            re.compile(value)
        except re.error as e:
            raise ValueError(f"invalid date regex {value!r}: {e}") from e
        return value

    def to_pattern(self) -> DatePattern:
        return DatePattern(pattern=self.pattern, format=self.format)


def _default_date_patterns() -> List[DatePatternConfig]:
    return [
        DatePatternConfig(pattern=r"^\d{1,2}/\d{1,2}/\d{4}$", format="%m/%d/%Y"),
        DatePatternConfig(pattern=r"^\d{4}-\d{2}-\d{2}$", format="%Y-%m-%d"),
    ]


class StorageConfig(BaseModel):
    """Where the raw rows come from and where the cleaned rows go."""

    url: Optional[str] = Field(default=None, description="SQLAlchemy database URL")
    source_table: str = Field(default="layoffs", min_length=1)
    destination_table: str = Field(default="layoffs_cleaned", min_length=1)


class LoggingConfig(BaseModel):
    """Logging settings applied by the command line entry point."""

    level: str = Field(default="INFO")
    verbose_audit: bool = False

    @field_validator("level")
    @classmethod
    def _check_level(cls, value: str) -> str:
        level = value.upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"unknown log level: {value}")
        return level

    @property
    def numeric_level(self) -> int:
        return getattr(logging, self.level)


class CleaningConfig(BaseModel):
    """Root configuration object."""

    version: str = "1.0"
    date_patterns: List[DatePatternConfig] = Field(
        default_factory=_default_date_patterns,
    )
    null_sentinels: List[str] = Field(default_factory=lambda: ["", "null"])
    nullable_fields: List[str] = Field(
        default_factory=lambda: [
            "company",
            "industry",
            "total_laid_off",
            "percentage_laid_off",
            "date",
            "country",
            "funds_raised_millions",
        ]
    )
    storage: StorageConfig = Field(default_factory=StorageConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    run_diagnostics: bool = True

    @field_validator("nullable_fields")
    @classmethod
    def _check_known_columns(cls, value: List[str]) -> List[str]:
        unknown = [name for name in value if name not in RAW_COLUMNS]
        if unknown:
            raise ValueError(f"unknown columns in nullable_fields: {unknown}")
        return value

    def compiled_date_patterns(self) -> List[DatePattern]:
        """Date patterns in the order they are tried."""
        return [p.to_pattern() for p in self.date_patterns]
