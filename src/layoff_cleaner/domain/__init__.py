"""
Domain Layer - Core Entities, Value Objects and Errors.

This package contains the core domain model for the layoff cleaner.
All entities here are pure Python with no infrastructure dependencies
(except Pydantic for validation).

Entities:
    - LayoffRecord: One layoff event row, mutated in place by the stages
    - PipelineState: Linear lifecycle of a cleaning run
    - CleaningResult: Complete result of a cleaning run

Value Objects:
    - StageOutcome: What a single stage removed or rewrote
    - DatePattern: A recognized textual date representation
    - DiagnosticsReport: Post-run verification figures
"""

from layoff_cleaner.domain.entities import (
    RAW_COLUMNS,
    CleaningResult,
    DateColumnType,
    LayoffRecord,
    PipelineState,
    StageResult,
)
from layoff_cleaner.domain.errors import (
    CleaningError,
    ConfigurationError,
    SchemaTransitionFailure,
    SinkUnavailable,
    SourceUnavailable,
    StageFailure,
)
from layoff_cleaner.domain.value_objects import (
    DatePattern,
    DiagnosticsReport,
    StageOutcome,
)

__all__ = [
    "RAW_COLUMNS",
    "CleaningResult",
    "DateColumnType",
    "LayoffRecord",
    "PipelineState",
    "StageResult",
    "CleaningError",
    "ConfigurationError",
    "SchemaTransitionFailure",
    "SinkUnavailable",
    "SourceUnavailable",
    "StageFailure",
    "DatePattern",
    "DiagnosticsReport",
    "StageOutcome",
]
