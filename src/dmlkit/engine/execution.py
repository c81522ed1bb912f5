"""Execution helpers for running built SQL."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Optional, Protocol, Sequence, Union, runtime_checkable

from sqlalchemy.engine import Connection, Engine
from sqlalchemy.exc import SQLAlchemyError

from ..utils.exceptions import ExecutionError

logger = logging.getLogger(__name__)


@runtime_checkable
class Executor(Protocol):
    """Anything that can run one SQL statement with positional parameters.

    DB-API connections and cursors (``sqlite3.Connection`` for instance)
    satisfy this protocol as they are.
    """

    def execute(self, sql: str, params: Sequence[Any]) -> Any:
        ...


@dataclass
class QueryResult:
    rowcount: Optional[int]
    lastrowid: Optional[int] = None


class SQLAlchemyExecutor:
    """Runs builder output on a caller-owned SQLAlchemy engine or connection.

    Statements go through ``exec_driver_sql`` so the positional placeholders
    emitted by the builders reach the DB-API driver unchanged. Pick the
    builder's processor to match the driver's paramstyle (``qmark`` for
    sqlite3, ``format`` for psycopg2 and PyMySQL).

    With an :class:`~sqlalchemy.engine.Engine` every call runs in its own
    ``begin()`` block and commits on success. With a
    :class:`~sqlalchemy.engine.Connection` the call joins whatever transaction
    the caller has open on it and commits nothing.
    """

    def __init__(self, bind: Union[Engine, Connection]):
        if not isinstance(bind, (Engine, Connection)):
            raise TypeError(
                "bind must be a SQLAlchemy Engine or Connection instance. "
                f"Got: {type(bind).__name__}"
            )
        self._bind = bind

    @property
    def bind(self) -> Union[Engine, Connection]:
        return self._bind

    def execute(self, sql: str, params: Sequence[Any] = ()) -> QueryResult:
        """Execute a DML statement with positional parameters.

        Args:
            sql: The SQL statement to execute
            params: Positional parameters, aligned with the statement's placeholders

        Returns:
            QueryResult with the affected row count and, where the driver
            reports one, the last inserted row id

        Raises:
            ExecutionError: If SQL execution fails
        """
        logger.debug("Executing statement: %s", sql[:200] if len(sql) > 200 else sql)
        try:
            if isinstance(self._bind, Connection):
                result = self._run(self._bind, sql, params)
            else:
                with self._bind.begin() as conn:
                    result = self._run(conn, sql, params)
        except SQLAlchemyError as exc:
            logger.error("SQL execution failed: %s", exc, exc_info=True)
            raise ExecutionError(
                f"Failed to execute statement: {exc}",
                context={"sql": sql, "params": list(params)},
            ) from exc
        logger.debug("Statement affected %s rows", result.rowcount)
        return result

    @staticmethod
    def _run(conn: Connection, sql: str, params: Sequence[Any]) -> QueryResult:
        cursor = conn.exec_driver_sql(sql, tuple(params))
        return QueryResult(rowcount=cursor.rowcount, lastrowid=cursor.lastrowid)
