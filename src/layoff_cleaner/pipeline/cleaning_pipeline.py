"""
Cleaning Pipeline - Main Orchestrator.

The CleaningPipeline reads the raw rows once, runs every stage in order over
one working collection and hands the result to the sink. When a unit of work
is supplied the whole run executes inside it, so a failure anywhere leaves
neither a partial destination nor a changed source behind.
"""

from __future__ import annotations

import logging
import time
import uuid
from contextlib import nullcontext
from datetime import datetime
from typing import (
    Any,
    ContextManager,
    Dict,
    Iterable,
    List,
    Optional,
    Protocol,
    Sequence,
)

from layoff_cleaner import __version__
from layoff_cleaner.adapters.console_logger import ConsoleAuditLogger
from layoff_cleaner.adapters.memory_store import InMemoryLayoffSink, InMemoryLayoffSource
from layoff_cleaner.config.models import CleaningConfig
from layoff_cleaner.domain.entities import CleaningResult, PipelineState, StageResult
from layoff_cleaner.domain.errors import (
    CleaningError,
    SinkUnavailable,
    SourceUnavailable,
    StageFailure,
)
from layoff_cleaner.domain.value_objects import DiagnosticsReport, RawRow, StageOutcome
from layoff_cleaner.observability.diagnostics import build_diagnostics
from layoff_cleaner.pipeline.working_collection import WorkingCollection
from layoff_cleaner.stages import create_default_stages
from layoff_cleaner.stages.loader import RecordLoader

logger = logging.getLogger(__name__)


class LayoffSourceProtocol(Protocol):
    """Protocol for the read-only raw layoffs source."""

    def read_raw(self) -> Iterable[RawRow]:
        ...


class LayoffSinkProtocol(Protocol):
    """Protocol for the cleaned layoffs destination."""

    def write_cleaned(self, destination: str, rows: List[Dict[str, Any]]) -> None:
        ...


class UnitOfWorkProtocol(Protocol):
    """Protocol for stores that can wrap a run in one transaction."""

    def begin(self) -> ContextManager[Any]:
        ...


class CleaningStageProtocol(Protocol):
    """Protocol for cleaning stages."""

    state: PipelineState

    @property
    def name(self) -> str:
        ...

    def apply(self, collection: WorkingCollection) -> StageOutcome:
        ...


class AuditLoggerProtocol(Protocol):
    """Protocol for audit loggers."""

    def set_run_id(self, run_id: str) -> None:
        ...

    def log_stage_start(self, stage_name: str, input_count: int) -> None:
        ...

    def log_stage_end(
        self,
        stage_name: str,
        output_count: int,
        duration_seconds: float,
        modified_count: int = 0,
    ) -> None:
        ...

    def log_record_removed(self, handle: int, stage_name: str, reason: str) -> None:
        ...

    def log_anomaly(
        self, message: str, severity: str, context: Optional[Dict] = None
    ) -> None:
        ...


class CleaningPipeline:
    """Main orchestrator for the cleaning workflow."""

    def __init__(
        self,
        source: LayoffSourceProtocol,
        sink: LayoffSinkProtocol,
        stages: Sequence[CleaningStageProtocol],
        config: CleaningConfig,
        audit_logger: AuditLoggerProtocol,
        unit_of_work: Optional[UnitOfWorkProtocol] = None,
    ) -> None:
        """
        Initialize pipeline with all dependencies.

        Args:
            source: Raw layoffs source, read once per run
            sink: Destination for the cleaned rows
            stages: Ordered stages run after loading
            config: Cleaning configuration
            audit_logger: For the audit trail
            unit_of_work: Transaction spanning read, stages and write (optional)
        """
        self.source = source
        self.sink = sink
        self.stages = list(stages)
        self.config = config
        self.audit_logger = audit_logger
        self.unit_of_work = unit_of_work
        self.loader = RecordLoader()

    def run(self) -> CleaningResult:
        """
        Execute the cleaning workflow.

        Returns:
            CleaningResult with the cleaned records and audit trail

        Raises:
            SourceUnavailable: If the raw rows cannot be read
            SchemaTransitionFailure: If the date column cannot be converted
            StageFailure: If any other stage fails
            SinkUnavailable: If the cleaned rows cannot be written
        """
        start_time = time.perf_counter()
        run_id = str(uuid.uuid4())
        self.audit_logger.set_run_id(run_id)
        logger.info(f"Cleaning run {run_id} started")

        transaction = self.unit_of_work.begin() if self.unit_of_work else nullcontext()
        with transaction:
            collection, audit_trail, input_count = self._load()

            for stage in self.stages:
                audit_trail.append(self._execute_stage(stage, collection))

            diagnostics = None
            if self.config.run_diagnostics:
                diagnostics = build_diagnostics(collection.records)
                self._report_diagnostics(diagnostics)

            self._write(collection)

        total_duration = time.perf_counter() - start_time
        logger.info(
            f"Cleaning run {run_id} finished: {input_count} -> {len(collection)} "
            f"records in {total_duration:.3f}s"
        )

        return CleaningResult(
            run_id=run_id,
            input_count=input_count,
            records=collection.records,
            audit_trail=audit_trail,
            diagnostics=diagnostics,
            final_state=collection.state,
            metadata=self._build_metadata(run_id, total_duration),
        )

    def _load(self) -> tuple[WorkingCollection, List[StageResult], int]:
        """Read the source once and build the working collection."""
        load_start = time.perf_counter()
        self.audit_logger.log_stage_start(self.loader.name, 0)

        try:
            rows = list(self.source.read_raw())
        except CleaningError:
            raise
        except Exception as e:
            logger.error(f"Reading raw layoffs failed: {e}")
            raise SourceUnavailable(
                f"raw layoffs could not be read: {e}", stage=self.loader.name
            ) from e

        try:
            collection = self.loader.load(rows)
        except CleaningError:
            raise
        except Exception as e:
            logger.error(f"Loading raw layoffs failed: {e}")
            raise StageFailure(
                f"{type(e).__name__}: {e}", stage=self.loader.name
            ) from e
        duration = time.perf_counter() - load_start
        self.audit_logger.log_stage_end(self.loader.name, len(collection), duration)

        stage_result = StageResult(
            stage_name=self.loader.name,
            input_count=len(rows),
            output_count=len(collection),
            duration_seconds=duration,
        )
        return collection, [stage_result], len(rows)

    def _execute_stage(
        self,
        stage: CleaningStageProtocol,
        collection: WorkingCollection,
    ) -> StageResult:
        """Execute a single stage."""
        stage_start = time.perf_counter()
        input_count = len(collection)
        self.audit_logger.log_stage_start(stage.name, input_count)

        try:
            outcome = stage.apply(collection)
        except CleaningError as e:
            if e.stage is not None:
                raise
            raise type(e)(e.message, stage=stage.name, handle=e.handle) from e
        except Exception as e:
            logger.error(f"Stage {stage.name} failed: {e}")
            raise StageFailure(f"{type(e).__name__}: {e}", stage=stage.name) from e

        stage_duration = time.perf_counter() - stage_start

        for handle, reason in outcome.removal_reasons.items():
            self.audit_logger.log_record_removed(handle, stage.name, reason)

        self.audit_logger.log_stage_end(
            stage.name, len(collection), stage_duration, outcome.modified_count
        )
        collection.advance(stage.state)

        return StageResult(
            stage_name=stage.name,
            input_count=input_count,
            output_count=len(collection),
            modified_count=outcome.modified_count,
            duration_seconds=stage_duration,
            removal_reasons=outcome.removal_reasons,
        )

    def _report_diagnostics(self, diagnostics: DiagnosticsReport) -> None:
        if diagnostics.duplicate_groups:
            self.audit_logger.log_anomaly(
                f"{diagnostics.duplicate_groups} duplicate groups remain",
                severity="ERROR",
            )
        if diagnostics.companies_missing_industry:
            self.audit_logger.log_anomaly(
                f"{len(diagnostics.companies_missing_industry)} companies "
                "have no known industry",
                severity="WARNING",
                context={"companies": diagnostics.companies_missing_industry},
            )

    def _write(self, collection: WorkingCollection) -> None:
        destination = self.config.storage.destination_table
        rows = [record.to_row() for record in collection]
        try:
            self.sink.write_cleaned(destination, rows)
        except CleaningError:
            raise
        except Exception as e:
            logger.error(f"Writing {destination} failed: {e}")
            raise SinkUnavailable(
                f"cleaned layoffs could not be written to {destination}: {e}",
                stage="sink",
            ) from e

    def _build_metadata(self, run_id: str, duration: float) -> dict:
        """Build result metadata."""
        return {
            "run_id": run_id,
            "timestamp": datetime.now().isoformat(),
            "duration_seconds": duration,
            "destination": self.config.storage.destination_table,
            "version": __version__,
        }


def create_pipeline(
    source: LayoffSourceProtocol,
    sink: LayoffSinkProtocol,
    config: Optional[CleaningConfig] = None,
    audit_logger: Optional[AuditLoggerProtocol] = None,
    unit_of_work: Optional[UnitOfWorkProtocol] = None,
) -> CleaningPipeline:
    """
    Wire a pipeline with the default stages.

    Args:
        source: Raw layoffs source
        sink: Cleaned layoffs destination
        config: Cleaning configuration (defaults when omitted)
        audit_logger: Audit logger (quiet console logger when omitted)
        unit_of_work: Optional transaction provider

    Returns:
        Ready-to-run CleaningPipeline
    """
    config = config or CleaningConfig()
    return CleaningPipeline(
        source=source,
        sink=sink,
        stages=create_default_stages(config),
        config=config,
        audit_logger=audit_logger or ConsoleAuditLogger(verbose=False),
        unit_of_work=unit_of_work,
    )


def clean_layoffs(
    rows: Iterable[RawRow],
    config: Optional[CleaningConfig] = None,
) -> CleaningResult:
    """
    Clean rows that are already in memory.

    Args:
        rows: Raw rows keyed by column name (not modified)
        config: Cleaning configuration (defaults when omitted)

    Returns:
        CleaningResult with the cleaned records
    """
    pipeline = create_pipeline(
        source=InMemoryLayoffSource(rows),
        sink=InMemoryLayoffSink(),
        config=config,
    )
    return pipeline.run()
