"""Single-row INSERT / UPDATE / DELETE builder."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, List, Optional, Tuple

from ..config import get_config
from ..engine.execution import Executor
from ..sql.builders import comma_separated, where_clause
from ..sql.processors import BuilderProcessor
from ..utils.exceptions import EmptyStatementError
from .kinds import DMLType, KindLike, resolve_kind

logger = logging.getLogger(__name__)


@dataclass
class Field:
    name: str
    value: Any


class Builder:
    """Builds one DML statement for ``table`` and the matching parameter list.

    Fields are kept in the order they were added, duplicates included, and
    that order drives both the SQL text and :meth:`output_params`. The WHERE
    fragment always uses ``?`` as its marker. The builder rewrites the markers
    with its processor when rendering.

    Example:
        >>> b = Builder("user").add("name", "Ann").add("age", 31)
        >>> b.where("id = ?", 7).output(DMLType.UPDATE)
        'UPDATE user SET name=?, age=? WHERE id = ?'
        >>> b.output_params(DMLType.UPDATE)
        ['Ann', 31, 7]
    """

    def __init__(
        self,
        table: str,
        processor: Optional[BuilderProcessor] = None,
        *,
        allow_empty_where: Optional[bool] = None,
    ):
        """Create a builder.

        Args:
            table: Target table name, emitted verbatim
            processor: Placeholder processor. Defaults to a fresh one for the
                configured paramstyle (``?`` unless configured otherwise).
            allow_empty_where: Whether UPDATE/DELETE may render without a
                WHERE clause. Defaults to the configured value (False).
        """
        config = get_config()
        self._table = table
        self._fields: List[Field] = []
        self._where = ""
        self._where_args: List[Any] = []
        self.processor = processor if processor is not None else config.make_processor()
        self._allow_empty_where = (
            config.allow_empty_where if allow_empty_where is None else allow_empty_where
        )

    @property
    def table(self) -> str:
        return self._table

    @property
    def fields(self) -> List[Field]:
        return list(self._fields)

    @property
    def allow_empty_where(self) -> bool:
        """If False, UPDATE and DELETE without a WHERE fragment render as ``""``."""
        return self._allow_empty_where

    @allow_empty_where.setter
    def allow_empty_where(self, value: bool) -> None:
        self._allow_empty_where = bool(value)

    def add(self, name: str, value: Any) -> "Builder":
        """Append a field and its value."""
        self._fields.append(Field(name, value))
        return self

    def where(self, fragment: str, *args: Any) -> "Builder":
        """Set the WHERE fragment and its arguments, replacing any previous ones.

        Args:
            fragment: Condition text using ``?`` for every parameter, whatever
                the processor. Markers inside quoted literals are left alone.
            *args: One value per marker, in order
        """
        self._where = fragment
        self._where_args = list(args)
        return self

    def clear(self) -> "Builder":
        """Drop all fields and the WHERE fragment."""
        self._fields = []
        self._where = ""
        self._where_args = []
        return self

    def output(self, kind: KindLike) -> str:
        """Render the SQL for ``kind``.

        Returns ``""`` for an unrecognized kind, and for UPDATE/DELETE without
        a WHERE fragment unless :attr:`allow_empty_where` is set.
        """
        dml = resolve_kind(kind)
        if dml is None:
            logger.debug("Unknown statement kind %r for table %s", kind, self._table)
            return ""
        if dml in (DMLType.UPDATE, DMLType.DELETE):
            if not self._allow_empty_where and not self._where:
                logger.debug(
                    "Refusing to render %s on %s without WHERE", dml.name, self._table
                )
                return ""

        if dml is DMLType.INSERT:
            sql = self._build_insert()
        elif dml is DMLType.UPDATE:
            sql = self._build_update()
        else:
            sql = self._build_delete()
        logger.debug("Built statement: %s", sql)
        return sql

    def output_params(self, kind: KindLike) -> List[Any]:
        """Return the parameters matching :meth:`output` for ``kind``.

        INSERT yields the field values, UPDATE the field values followed by the
        WHERE arguments, DELETE only the WHERE arguments. An unrecognized kind
        yields an empty list.
        """
        dml = resolve_kind(kind)
        if dml is None:
            return []
        params: List[Any] = []
        if dml is not DMLType.DELETE:
            params.extend(f.value for f in self._fields)
        if dml is not DMLType.INSERT:
            params.extend(self._where_args)
        return params

    def output_all(self, kind: KindLike) -> Tuple[str, List[Any]]:
        return self.output(kind), self.output_params(kind)

    def execute(self, executor: Executor, kind: KindLike) -> Any:
        """Run the statement for ``kind`` on ``executor``.

        Args:
            executor: Object with ``execute(sql, params)``, such as a DB-API
                connection or :class:`~dmlkit.engine.execution.SQLAlchemyExecutor`
            kind: Statement kind to render

        Returns:
            Whatever ``executor.execute`` returns

        Raises:
            EmptyStatementError: If the statement renders empty (no WHERE while
                the guard is on, or an unrecognized kind)
        """
        sql, params = self.output_all(kind)
        if not sql:
            dml = resolve_kind(kind)
            if dml is None:
                message = f"Unknown statement kind {kind!r}"
            else:
                message = f"{dml.name} on '{self._table}' has no WHERE clause"
            raise EmptyStatementError(message, context={"table": self._table})
        return executor.execute(sql, params)

    def execute_tx(self, transaction: Executor, kind: KindLike) -> Any:
        """Run the statement on a transaction-scoped executor.

        Same contract as :meth:`execute`; the builder neither begins nor ends
        the transaction.
        """
        return self.execute(transaction, kind)

    def _build_insert(self) -> str:
        names = comma_separated(f.name for f in self._fields)
        self.processor.begin_params()
        placeholders = comma_separated(self.processor.next_param(f.name) for f in self._fields)
        return f"INSERT INTO {self._table} ({names}) VALUES ({placeholders})"

    def _build_update(self) -> str:
        self.processor.begin_params()
        assignments = comma_separated(
            f"{f.name}={self.processor.next_param(f.name)}" for f in self._fields
        )
        return f"UPDATE {self._table} SET {assignments}{where_clause(self._where, self.processor)}"

    def _build_delete(self) -> str:
        self.processor.begin_params()
        return f"DELETE FROM {self._table}{where_clause(self._where, self.processor)}"

    def __repr__(self) -> str:
        return (
            f"Builder(table={self._table!r}, fields={len(self._fields)}, "
            f"where={self._where!r}, processor={self.processor!r})"
        )
