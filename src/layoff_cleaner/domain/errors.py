"""
Cleaning Errors.

Fatal error kinds of a cleaning run. Each error carries the stage name and,
where one applies, the row handle involved. Unparsable dates are not errors:
the date parser resolves them to absent.
"""

from __future__ import annotations

from typing import Optional


class CleaningError(Exception):
    """Base class for all fatal cleaning errors."""

    def __init__(
        self,
        message: str,
        stage: Optional[str] = None,
        handle: Optional[int] = None,
    ) -> None:
        self.message = message
        self.stage = stage
        self.handle = handle
        super().__init__(self._format())

    def _format(self) -> str:
        parts = []
        if self.stage:
            parts.append(f"stage={self.stage}")
        if self.handle is not None:
            parts.append(f"handle={self.handle}")
        if not parts:
            return self.message
        return f"[{' '.join(parts)}] {self.message}"


class SourceUnavailable(CleaningError):
    """Raised when the raw source cannot be read. Nothing has been mutated."""


class SchemaTransitionFailure(CleaningError):
    """Raised when the text to date column change cannot be applied uniformly."""


class StageFailure(CleaningError):
    """Raised when a stage fails unexpectedly. The run halts."""


class SinkUnavailable(CleaningError):
    """Raised when the cleaned collection cannot be written."""


class ConfigurationError(CleaningError):
    """Raised when a run cannot be assembled from the given settings."""
