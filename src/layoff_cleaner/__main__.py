"""
Command line entry point.

Examples:
    python -m layoff_cleaner --db-url sqlite:///layoffs.db
    python -m layoff_cleaner --csv layoffs.csv --output out/
    python -m layoff_cleaner --config config/default.yaml --csv layoffs.csv \
        --db-url postgresql+psycopg://user@host/warehouse
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Any, Dict, List, Optional

from pydantic import ValidationError

from layoff_cleaner import configure_logging
from layoff_cleaner.adapters.console_logger import ConsoleAuditLogger
from layoff_cleaner.adapters.csv_sink import CsvLayoffSink
from layoff_cleaner.adapters.csv_source import CsvLayoffSource
from layoff_cleaner.adapters.sql_store import SqlLayoffStore
from layoff_cleaner.config.loader import ConfigLoader
from layoff_cleaner.config.models import CleaningConfig
from layoff_cleaner.domain.entities import CleaningResult
from layoff_cleaner.domain.errors import CleaningError, ConfigurationError
from layoff_cleaner.pipeline.cleaning_pipeline import CleaningPipeline, create_pipeline

logger = logging.getLogger("layoff_cleaner")

EXIT_OK = 0
EXIT_RUN_FAILED = 1
EXIT_BAD_CONFIG = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="layoff_cleaner",
        description="Clean a raw layoffs dataset into an analysis-ready copy",
    )
    parser.add_argument("--config", help="YAML configuration file")
    parser.add_argument("--db-url", help="SQLAlchemy URL of the database")
    parser.add_argument("--csv", help="Read raw rows from this CSV file")
    parser.add_argument("--output", help="Write the cleaned CSV into this directory")
    parser.add_argument("--source-table", help="Raw layoffs table name")
    parser.add_argument("--destination-table", help="Cleaned layoffs table name")
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Override the configured log level",
    )
    parser.add_argument(
        "--verbose", action="store_true", help="Print every audit event"
    )
    return parser


def load_settings(args: argparse.Namespace) -> CleaningConfig:
    """Merge the config file (if any) with command line overrides."""
    overrides: Dict[str, Any] = {}
    storage: Dict[str, Any] = {}
    if args.db_url:
        storage["url"] = args.db_url
    if args.source_table:
        storage["source_table"] = args.source_table
    if args.destination_table:
        storage["destination_table"] = args.destination_table
    if storage:
        overrides["storage"] = storage
    if args.log_level:
        overrides["logging"] = {"level": args.log_level}

    return ConfigLoader().load(args.config, overrides)


def assemble_pipeline(args: argparse.Namespace, config: CleaningConfig) -> CleaningPipeline:
    """Pick source, sink and unit of work from the arguments."""
    store: Optional[SqlLayoffStore] = None
    if config.storage.url:
        store = SqlLayoffStore(
            url=config.storage.url, source_table=config.storage.source_table
        )

    if args.csv:
        source = CsvLayoffSource(args.csv)
    elif store is not None:
        source = store
    else:
        raise ConfigurationError("no source: pass --csv or --db-url")

    if args.output:
        sink = CsvLayoffSink(args.output)
    elif store is not None:
        sink = store
    else:
        raise ConfigurationError("no destination: pass --output or --db-url")

    return create_pipeline(
        source=source,
        sink=sink,
        config=config,
        audit_logger=ConsoleAuditLogger(
            verbose=args.verbose or config.logging.verbose_audit
        ),
        unit_of_work=store,
    )


def format_summary(result: CleaningResult) -> List[str]:
    lines = [f"Run {result.run_id}: {result.input_count} -> {result.output_count} records"]
    for stage in result.audit_trail:
        lines.append(
            f"  {stage.stage_name:<26} {stage.output_count:>7} kept "
            f"{stage.removed_count:>6} removed {stage.modified_count:>6} rewritten"
        )
    if result.diagnostics is not None:
        d = result.diagnostics
        lines.append(f"  duplicate groups left:      {d.duplicate_groups}")
        lines.append(f"  distinct industries:        {len(d.distinct_industries)}")
        lines.append(
            f"  companies missing industry: {len(d.companies_missing_industry)}"
        )
    return lines


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        config = load_settings(args)
    except (OSError, ValidationError) as e:
        print(f"Invalid configuration: {e}", file=sys.stderr)
        return EXIT_BAD_CONFIG

    configure_logging(config.logging.numeric_level)

    try:
        pipeline = assemble_pipeline(args, config)
    except ConfigurationError as e:
        print(f"Invalid configuration: {e}", file=sys.stderr)
        return EXIT_BAD_CONFIG

    try:
        result = pipeline.run()
    except CleaningError as e:
        logger.error(f"Cleaning run failed: {e}")
        return EXIT_RUN_FAILED

    for line in format_summary(result):
        print(line)
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
