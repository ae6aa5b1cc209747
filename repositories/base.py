"""
repositories/base.py
--------------------
Shared plumbing for repositories: run one statement through the injected
ConnectionProvider and turn driver errors into Failure results.
"""

from typing import Any, Callable, Optional, Sequence, TypeVar

import psycopg2

from db.connection import ConnectionProvider
from utils.logger import get_logger
from utils.result import NotFound, Result, Success, failure_from

logger = get_logger(__name__)

T = TypeVar("T")


class BaseRepository:
    """Base class holding the connection provider."""

    def __init__(self, provider: ConnectionProvider):
        self.provider = provider

    def _fetch_all(
        self, action: str, sql: str, params: Sequence[Any], convert: Callable[[dict], T]
    ) -> Result:
        """
        Run a query expected to return any number of rows.

        Returns:
            Success(list of converted rows) or Failure.
        """
        try:
            rows = self.provider.execute(sql, params)
        except psycopg2.Error as e:
            logger.error(f"Failed to {action}: {e}")
            return failure_from(f"Failed to {action}", e)
        return Success([convert(r) for r in rows])

    def _fetch_one(
        self,
        action: str,
        sql: str,
        params: Sequence[Any],
        convert: Callable[[dict], T],
        missing: Optional[str] = None,
    ) -> Result:
        """
        Run a query expected to return at most one row.

        Args:
            missing: Name used in NotFound when no row comes back. When None,
                an empty result is a Failure (e.g. an INSERT ... RETURNING
                that returned nothing).
        """
        result = self._fetch_all(action, sql, params, convert)
        if not result.ok:
            return result
        if result.value:
            return Success(result.value[0])
        if missing is not None:
            return NotFound(missing)
        logger.error(f"Failed to {action}: statement returned no row")
        return failure_from(f"Failed to {action}", LookupError("statement returned no row"))
