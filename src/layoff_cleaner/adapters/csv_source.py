"""
CSV Layoff Source.

Reads the raw layoffs export (header row with the nine column names).
Every value is returned as text; empty cells stay empty strings so the
null canonicalizer sees them as sentinels.
"""

from __future__ import annotations

import csv
import logging
from pathlib import Path
from typing import Dict, List, Union

logger = logging.getLogger(__name__)


class CsvLayoffSource:
    """Raw layoffs read from a CSV file."""

    def __init__(self, path: Union[str, Path], encoding: str = "utf-8") -> None:
        self.path = Path(path)
        self.encoding = encoding

    def read_raw(self) -> List[Dict[str, str]]:
        """
        Read every row of the CSV file.

        Raises:
            OSError: If the file cannot be opened
        """
        with open(self.path, newline="", encoding=self.encoding) as f:
            reader = csv.DictReader(f)
            rows = [dict(row) for row in reader]
        logger.info(f"Read {len(rows)} raw rows from {self.path}")
        return rows
