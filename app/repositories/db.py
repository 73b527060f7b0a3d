"""DuckDB connection management."""

import threading
from pathlib import Path

import duckdb
from loguru import logger

from app.models import ALL_DDL
from settings import DB_PATH

_local = threading.local()


def db_exists(path: str = DB_PATH) -> bool:
    """Check if database file exists."""
    return path == ":memory:" or Path(path).exists()


def init_tables(conn: duckdb.DuckDBPyConnection) -> None:
    """Create sequences, tables and indexes (idempotent - uses IF NOT EXISTS)."""
    for ddl in ALL_DDL:
        conn.execute(ddl)
    logger.debug("DB tables initialized")


def connect(path: str = DB_PATH) -> duckdb.DuckDBPyConnection:
    """Open a new connection with the schema in place."""
    if not db_exists(path):
        logger.warning("DB not found: {}. Creating empty DB.", path)
    conn = duckdb.connect(path)
    init_tables(conn)
    return conn


def get_db() -> duckdb.DuckDBPyConnection:
    """Get thread-local connection."""
    if getattr(_local, "conn", None) is None:
        _local.conn = connect(DB_PATH)
        logger.debug("DB connected: {}", DB_PATH)
    return _local.conn


def close_db() -> None:
    """Close thread-local connection."""
    if getattr(_local, "conn", None) is not None:
        _local.conn.close()
        _local.conn = None
        logger.debug("DB connection closed")
