"""
db/query_builder.py
-------------------
Incremental SELECT composition with positional parameters.

Each bound value is appended to `params` and replaced in the SQL text by a
`%s` placeholder, so placeholder N always refers to params[N - 1].
The builder tracks which predicate chain is open (none, WHERE or HAVING)
and picks the `WHERE` / `HAVING` / `AND` keyword from that state.
"""

from enum import Enum
from typing import Any


class ClauseState(Enum):
    """Which predicate chain the next condition would extend."""
    NONE = "none"
    WHERE_OPEN = "where"
    HAVING_OPEN = "having"


class QueryBuilder:
    """
    Build a SELECT statement clause by clause.

    Clauses must be added in SQL order: WHERE predicates, GROUP BY,
    HAVING predicates, ORDER BY, LIMIT. Adding them out of order raises
    ValueError instead of producing invalid SQL.

    Example:
        qb = QueryBuilder("SELECT * FROM properties")
        qb.where("city LIKE", "%Van%")
        qb.group_by("properties.id")
        qb.having("cost_per_night <", 20000)
        sql, params = qb.build()
    """

    def __init__(self, base_sql: str):
        self._parts: list[str] = [base_sql.strip()]
        self.params: list[Any] = []
        self.state = ClauseState.NONE
        self._grouped = False
        self._finished = False

    def _bind(self, value: Any) -> str:
        self.params.append(value)
        return "%s"

    def _check_open(self) -> None:
        if self._finished:
            raise ValueError("No predicates may follow ORDER BY or LIMIT.")

    def where(self, condition: str, value: Any) -> "QueryBuilder":
        """Add `<condition> %s` to the WHERE chain."""
        self._check_open()
        if self._grouped:
            raise ValueError("WHERE predicates must come before GROUP BY.")
        keyword = "AND" if self.state is ClauseState.WHERE_OPEN else "WHERE"
        self._parts.append(f"{keyword} {condition} {self._bind(value)}")
        self.state = ClauseState.WHERE_OPEN
        return self

    def group_by(self, columns: str) -> "QueryBuilder":
        self._check_open()
        if self._grouped:
            raise ValueError("GROUP BY already added.")
        self._parts.append(f"GROUP BY {columns}")
        self._grouped = True
        self.state = ClauseState.NONE
        return self

    def having(self, condition: str, value: Any) -> "QueryBuilder":
        """Add `<condition> %s` to the HAVING chain."""
        self._check_open()
        if not self._grouped:
            raise ValueError("HAVING predicates require GROUP BY.")
        keyword = "AND" if self.state is ClauseState.HAVING_OPEN else "HAVING"
        self._parts.append(f"{keyword} {condition} {self._bind(value)}")
        self.state = ClauseState.HAVING_OPEN
        return self

    def order_by(self, columns: str) -> "QueryBuilder":
        self._check_open()
        self._parts.append(f"ORDER BY {columns}")
        self.state = ClauseState.NONE
        self._finished = True
        return self

    def limit(self, count: int) -> "QueryBuilder":
        if any(p.startswith("LIMIT ") for p in self._parts):
            raise ValueError("LIMIT already added.")
        self._parts.append(f"LIMIT {self._bind(count)}")
        self.state = ClauseState.NONE
        self._finished = True
        return self

    def build(self) -> tuple[str, list[Any]]:
        """Return the SQL text and a copy of its parameter list."""
        return "\n".join(self._parts) + ";", list(self.params)
