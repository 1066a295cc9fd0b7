"""
SQL Layoff Store.

Reads the raw layoffs table and writes the cleaned table through SQLAlchemy
Core, so any database SQLAlchemy supports can host the data.

Design Notes:
    - begin() opens one transaction that read_raw() and write_cleaned()
      reuse, so a pipeline run is all-or-nothing
    - The destination table is dropped and recreated on every write
    - SQLite gets explicit BEGIN handling so that DDL is part of the
      transaction as well
    - Databases without transactional DDL (MySQL, Oracle) commit implicitly
      on DROP/CREATE TABLE, so there a failed write can leave the
      destination replaced or missing; PostgreSQL and SQLite roll it back
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Any, Dict, Iterator, List, Optional

from sqlalchemy import (
    Column,
    Date,
    Float,
    Integer,
    MetaData,
    Table,
    Text,
    column,
    create_engine,
    event,
    insert,
    select,
    table,
)
from sqlalchemy.engine import Connection, Engine

from layoff_cleaner.domain.entities import RAW_COLUMNS

logger = logging.getLogger(__name__)


def raw_layoffs_table(name: str, metadata: MetaData) -> Table:
    """Raw layoffs table: every column stored as text."""
    return Table(name, metadata, *[Column(c, Text) for c in RAW_COLUMNS])


def cleaned_layoffs_table(name: str, metadata: MetaData) -> Table:
    """Cleaned layoffs table with typed columns."""
    return Table(
        name,
        metadata,
        Column("company", Text),
        Column("location", Text),
        Column("industry", Text),
        Column("total_laid_off", Integer),
        Column("percentage_laid_off", Float),
        Column("date", Date),
        Column("stage", Text),
        Column("country", Text),
        Column("funds_raised_millions", Float),
    )


def _sqlite_on_connect(dbapi_connection: Any, connection_record: Any) -> None:
    dbapi_connection.isolation_level = None


def _sqlite_on_begin(conn: Connection) -> None:
    conn.exec_driver_sql("BEGIN")


def _enable_sqlite_transactional_ddl(engine: Engine) -> None:
    # pysqlite does not BEGIN before DDL on its own. Registered once per
    # engine: a second "begin" listener would emit BEGIN twice.
    if not event.contains(engine, "connect", _sqlite_on_connect):
        event.listen(engine, "connect", _sqlite_on_connect)
    if not event.contains(engine, "begin", _sqlite_on_begin):
        event.listen(engine, "begin", _sqlite_on_begin)


class SqlLayoffStore:
    """
    Database-backed raw source and cleaned sink.

    Usage:
        store = SqlLayoffStore(url="sqlite:///layoffs.db")
        pipeline = create_pipeline(store, store, unit_of_work=store)
    """

    def __init__(
        self,
        url: Optional[str] = None,
        engine: Optional[Engine] = None,
        source_table: str = "layoffs",
    ) -> None:
        """
        Initialize SQL store.

        Args:
            url: SQLAlchemy database URL (ignored when engine is given)
            engine: Existing engine to use
            source_table: Name of the raw layoffs table
        """
        if engine is None and url is None:
            raise ValueError("SqlLayoffStore needs a url or an engine")
        self.engine = engine if engine is not None else create_engine(url)
        self.source_table = source_table
        self._connection: Optional[Connection] = None

        if self.engine.dialect.name == "sqlite":
            _enable_sqlite_transactional_ddl(self.engine)

        logger.info(
            f"SqlLayoffStore initialized (dialect={self.engine.dialect.name}, "
            f"source_table={source_table})"
        )

    @contextmanager
    def begin(self) -> Iterator[Connection]:
        """
        Open a transaction shared by subsequent reads and writes.

        Commits when the block exits normally, rolls back on any exception.
        """
        if self._connection is not None:
            raise RuntimeError("a transaction is already open on this store")
        with self.engine.begin() as conn:
            self._connection = conn
            try:
                yield conn
            finally:
                self._connection = None

    @contextmanager
    def _connect(self) -> Iterator[Connection]:
        if self._connection is not None:
            yield self._connection
        else:
            with self.engine.begin() as conn:
                yield conn

    def read_raw(self) -> List[Dict[str, Any]]:
        """
        Read the nine raw columns of the source table.

        Raises:
            SQLAlchemyError: If the table or a column is missing
        """
        query = select(*[column(name) for name in RAW_COLUMNS]).select_from(
            table(self.source_table)
        )
        with self._connect() as conn:
            rows = [dict(row._mapping) for row in conn.execute(query)]
        logger.info(f"Read {len(rows)} raw rows from {self.source_table}")
        return rows

    def write_cleaned(self, destination: str, rows: List[Dict[str, Any]]) -> None:
        """Replace (or create) the destination table with the cleaned rows."""
        target = cleaned_layoffs_table(destination, MetaData())
        with self._connect() as conn:
            target.drop(conn, checkfirst=True)
            target.create(conn)
            if rows:
                conn.execute(insert(target), rows)
        logger.info(f"Wrote {len(rows)} cleaned rows to {destination}")

    def read_table(self, name: str) -> List[Dict[str, Any]]:
        """Read a cleaned table back with typed values."""
        target = cleaned_layoffs_table(name, MetaData())
        with self._connect() as conn:
            return [dict(row._mapping) for row in conn.execute(select(target))]

    def dispose(self) -> None:
        """Close pooled connections."""
        self.engine.dispose()
