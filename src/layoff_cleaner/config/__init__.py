"""
Configuration Package - Models and Loaders.

Configuration Structure:
    - CleaningConfig: Root configuration object
    - DatePatternConfig: A recognized date regex + strptime format
    - StorageConfig: Database URL and source/destination table names
    - LoggingConfig: Log level and audit verbosity

Only the recognized date patterns and the null sentinels change what the
pipeline does; everything else selects where data is read and written.
"""

from layoff_cleaner.config.loader import ConfigLoader, load_config
from layoff_cleaner.config.models import (
    CleaningConfig,
    DatePatternConfig,
    LoggingConfig,
    StorageConfig,
)

__all__ = [
    "ConfigLoader",
    "load_config",
    "CleaningConfig",
    "DatePatternConfig",
    "LoggingConfig",
    "StorageConfig",
]
