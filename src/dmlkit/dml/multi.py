"""Multi-row INSERT builder."""

from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence, Tuple

from ..config import get_config
from ..engine.execution import Executor
from ..sql.builders import comma_separated
from ..sql.processors import BuilderProcessor

logger = logging.getLogger(__name__)


class RowData:
    """Values for one row of a :class:`MultiBuilder`, keyed by field name."""

    def __init__(self) -> None:
        self.values: Dict[str, Any] = {}

    def add(self, name: str, value: Any) -> "RowData":
        """Set one field's value, overwriting any earlier one."""
        self.values[name] = value
        return self

    def __repr__(self) -> str:
        return f"RowData({self.values!r})"


class MultiBuilder:
    """Builds a single INSERT carrying many rows over a fixed column list.

    Each row renders one placeholder per column, in column order, whatever
    the row actually set. Columns a row never set are sent as ``None``.
    """

    def __init__(
        self,
        table: str,
        fields: Sequence[str],
        processor: Optional[BuilderProcessor] = None,
    ):
        self._table = table
        self._fields = list(fields)
        self.processor = processor if processor is not None else get_config().make_processor()
        self._rows: List[RowData] = []

    @property
    def table(self) -> str:
        return self._table

    @property
    def fields(self) -> List[str]:
        return list(self._fields)

    def has_data(self) -> bool:
        return len(self._rows) > 0

    def data_len(self) -> int:
        return len(self._rows)

    def __len__(self) -> int:
        return len(self._rows)

    def create_data(self) -> RowData:
        """Append a new empty row and return it for filling in.

        The row is part of the builder right away; later ``add`` calls on it
        show up in the next :meth:`output`.
        """
        row = RowData()
        self._rows.append(row)
        return row

    def add_rows(self, rows: Iterable[Mapping[str, Any]]) -> "MultiBuilder":
        """Append one row per mapping."""
        for values in rows:
            row = self.create_data()
            for name, value in values.items():
                row.add(name, value)
        return self

    def clear_data(self) -> None:
        self._rows = []

    def output(self) -> Tuple[str, List[Any]]:
        """Render the INSERT and its flattened parameter list.

        Placeholders are numbered continuously across rows. Parameters follow
        the same order: row by row, and within a row by column.

        Returns:
            ``(sql, params)``. With no rows the VALUES list is empty and
            ``params`` is ``[]``.
        """
        params: List[Any] = []
        tuples: List[str] = []
        self.processor.begin_params()
        for row in self._rows:
            placeholders = []
            for name in self._fields:
                placeholders.append(self.processor.next_param(name))
                params.append(row.values.get(name))
            tuples.append(f"({comma_separated(placeholders)})")
        sql = (
            f"INSERT INTO {self._table} ({comma_separated(self._fields)}) "
            f"VALUES {comma_separated(tuples)}"
        )
        logger.debug("Built %d-row statement: %s", len(self._rows), sql[:200])
        return sql, params

    def execute(self, executor: Executor) -> Any:
        """Run the INSERT on ``executor``.

        Returns:
            Whatever ``executor.execute`` returns, or ``None`` without calling
            it when there are no rows
        """
        if not self._rows:
            logger.debug("No rows to insert into %s", self._table)
            return None
        sql, params = self.output()
        return executor.execute(sql, params)

    def execute_tx(self, transaction: Executor) -> Any:
        return self.execute(transaction)

    def __repr__(self) -> str:
        return (
            f"MultiBuilder(table={self._table!r}, fields={self._fields!r}, "
            f"rows={len(self._rows)}, processor={self.processor!r})"
        )
