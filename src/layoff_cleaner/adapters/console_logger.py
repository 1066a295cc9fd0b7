"""
Console Audit Logger.

A simple audit logger that prints the run's audit trail to the console.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, List, Optional


class ConsoleAuditLogger:
    """Simple console-based audit logger."""

    def __init__(self, verbose: bool = True) -> None:
        """
        Initialize console logger.

        Args:
            verbose: If True, log every event. If False, only stage summaries
                and anomalies.
        """
        self._verbose = verbose
        self._run_id: Optional[str] = None
        self.anomalies: List[str] = []

    def set_run_id(self, run_id: str) -> None:
        """Set run ID for subsequent log entries."""
        self._run_id = run_id

    def log_stage_start(self, stage_name: str, input_count: int) -> None:
        """Log the start of a stage."""
        if self._verbose:
            self._log("INFO", f"Starting {stage_name} with {input_count} records")

    def log_stage_end(
        self,
        stage_name: str,
        output_count: int,
        duration_seconds: float,
        modified_count: int = 0,
    ) -> None:
        """Log the end of a stage."""
        if self._verbose:
            self._log(
                "INFO",
                f"Completed {stage_name}: {output_count} records, "
                f"{modified_count} rewritten ({duration_seconds:.3f}s)",
            )

    def log_record_removed(self, handle: int, stage_name: str, reason: str) -> None:
        """Log that a record was removed."""
        if self._verbose:
            self._log("DEBUG", f"handle {handle} removed by {stage_name}: {reason}")

    def log_anomaly(
        self,
        message: str,
        severity: str,
        context: Optional[Dict[str, Any]] = None,
    ) -> None:
        """Log an anomaly or warning."""
        self.anomalies.append(message)
        self._log(severity, f"ANOMALY: {message}")

    def _log(self, level: str, message: str) -> None:
        timestamp = datetime.now().strftime("%H:%M:%S")
        run_id = self._run_id[:8] if self._run_id else "--------"
        print(f"[{timestamp}] [{run_id}] [{level:5}] {message}")
