"""
db/connection.py
----------------
Manages the PostgreSQL connection pool.
Uses psycopg2's SimpleConnectionPool for efficient connection reuse.

A ConnectionProvider is constructed once by the application and passed
to every repository; it exposes a single `execute(sql, params)` operation.
"""

from typing import Any, Optional, Sequence

import psycopg2
from psycopg2 import pool, extras

import config
from utils.logger import get_logger

logger = get_logger(__name__)


class ConnectionProvider:
    """Owns a psycopg2 connection pool and runs one statement per call."""

    def __init__(self, dsn: str, min_conn: int = 1, max_conn: int = 5):
        """
        Initialize the database connection pool.

        Args:
            dsn: PostgreSQL connection string.
            min_conn: Minimum number of connections to keep open.
            max_conn: Maximum number of connections allowed.

        Raises:
            psycopg2.OperationalError: If the database is unreachable.
        """
        try:
            self._pool: Optional[pool.SimpleConnectionPool] = pool.SimpleConnectionPool(
                min_conn, max_conn, dsn
            )
            logger.info("Database connection pool initialized successfully.")
        except psycopg2.OperationalError as e:
            logger.error(f"Failed to initialize database pool: {e}")
            raise

    @classmethod
    def from_config(cls) -> "ConnectionProvider":
        """Build a provider from the settings in config.py."""
        return cls(config.DATABASE_URL, config.DB_POOL_MIN, config.DB_POOL_MAX)

    def execute(self, sql: str, params: Sequence[Any] = ()) -> list[dict]:
        """
        Run one statement and return its rows.

        Args:
            sql: SQL text with `%s` positional placeholders.
            params: Values for the placeholders, in order.

        Returns:
            The rows as dicts keyed by column name; an empty list when the
            statement produces no result set.

        Raises:
            RuntimeError: If the provider has been closed.
            psycopg2.Error: Whatever the driver raises, unchanged.
        """
        if self._pool is None:
            raise RuntimeError("Connection provider is closed.")
        conn = self._pool.getconn()
        try:
            with conn.cursor(cursor_factory=extras.RealDictCursor) as cur:
                cur.execute(sql, list(params) if params else None)
                rows = [dict(r) for r in cur.fetchall()] if cur.description else []
            conn.commit()
            return rows
        except Exception as e:
            conn.rollback()
            logger.error(f"Statement failed: {e}")
            raise
        finally:
            self._pool.putconn(conn)

    def close(self) -> None:
        """Close all connections in the pool."""
        if self._pool is not None:
            self._pool.closeall()
            self._pool = None
            logger.info("Database connection pool closed.")

    def __enter__(self) -> "ConnectionProvider":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
