"""
Adapters Package - Infrastructure Implementations.

Concrete sources, sinks and loggers plugged into the cleaning pipeline,
following the Ports & Adapters pattern.

Sources / Sinks:
    - InMemoryLayoffSource / InMemoryLayoffSink: Plain Python lists
    - CsvLayoffSource / CsvLayoffSink: CSV files
    - SqlLayoffStore: Any SQLAlchemy database, also a unit of work

Loggers:
    - ConsoleAuditLogger: Simple console output
"""

from layoff_cleaner.adapters.console_logger import ConsoleAuditLogger
from layoff_cleaner.adapters.csv_sink import CsvLayoffSink
from layoff_cleaner.adapters.csv_source import CsvLayoffSource
from layoff_cleaner.adapters.memory_store import InMemoryLayoffSink, InMemoryLayoffSource
from layoff_cleaner.adapters.sql_store import SqlLayoffStore

__all__ = [
    "ConsoleAuditLogger",
    "CsvLayoffSink",
    "CsvLayoffSource",
    "InMemoryLayoffSink",
    "InMemoryLayoffSource",
    "SqlLayoffStore",
]
