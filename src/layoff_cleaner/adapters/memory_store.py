"""
In-Memory Layoff Store.

Source and sink backed by plain Python lists, for tests and for cleaning
rows that are already in memory.
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, List, Mapping


class InMemoryLayoffSource:
    """Read-only raw rows held in memory."""

    def __init__(self, rows: Iterable[Mapping[str, Any]]) -> None:
        """
        Initialize with raw rows.

        Args:
            rows: Raw rows keyed by column name (copied)
        """
        self._rows = [dict(row) for row in rows]

    def read_raw(self) -> List[Dict[str, Any]]:
        """Return fresh copies of the raw rows."""
        return [dict(row) for row in self._rows]

    def __len__(self) -> int:
        return len(self._rows)


class InMemoryLayoffSink:
    """Named destinations held in memory."""

    def __init__(self) -> None:
        self.tables: Dict[str, List[Dict[str, Any]]] = {}

    def write_cleaned(self, destination: str, rows: List[Dict[str, Any]]) -> None:
        """Replace (or create) the named destination."""
        self.tables[destination] = [dict(row) for row in rows]
