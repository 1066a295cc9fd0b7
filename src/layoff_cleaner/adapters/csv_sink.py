"""
CSV Layoff Sink.

Writes the cleaned rows to <directory>/<destination>.csv. The file is
written next to its final name and moved into place only when complete;
a failed write removes the partial file and leaves any previous output as
it was.
"""

from __future__ import annotations

import csv
import logging
import os
from pathlib import Path
from typing import Any, Dict, List, Union

from layoff_cleaner.domain.entities import RAW_COLUMNS

logger = logging.getLogger(__name__)


class CsvLayoffSink:
    """Cleaned layoffs written as CSV files."""

    def __init__(self, directory: Union[str, Path], encoding: str = "utf-8") -> None:
        self.directory = Path(directory)
        self.encoding = encoding

    def path_for(self, destination: str) -> Path:
        return self.directory / f"{destination}.csv"

    def write_cleaned(self, destination: str, rows: List[Dict[str, Any]]) -> None:
        target = self.path_for(destination)
        partial = target.with_suffix(".csv.partial")
        self.directory.mkdir(parents=True, exist_ok=True)

        try:
            with open(partial, "w", newline="", encoding=self.encoding) as f:
                writer = csv.DictWriter(f, fieldnames=list(RAW_COLUMNS))
                writer.writeheader()
                for row in rows:
                    writer.writerow(
                        {k: ("" if v is None else _format(v)) for k, v in row.items()}
                    )
            os.replace(partial, target)
        except BaseException:
            partial.unlink(missing_ok=True)
            raise
        logger.info(f"Wrote {len(rows)} cleaned rows to {target}")


def _format(value: Any) -> str:
    if hasattr(value, "isoformat"):
        return value.isoformat()
    return str(value)
