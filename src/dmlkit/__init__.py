"""Public dmlkit API."""

from __future__ import annotations

from .config import BuilderConfig, create_config, get_config, set_config
from .dml.builder import Builder, Field
from .dml.kinds import DMLType
from .dml.multi import MultiBuilder, RowData
from .engine.execution import Executor, QueryResult, SQLAlchemyExecutor
from .sql.processors import (
    BuilderProcessor,
    DefaultProcessor,
    FormatProcessor,
    NumericProcessor,
    get_processor,
)
from .utils.exceptions import (
    DmlkitError,
    EmptyStatementError,
    ExecutionError,
    ValidationError,
)

__version__ = "0.1.0"

INSERT = DMLType.INSERT
UPDATE = DMLType.UPDATE
DELETE = DMLType.DELETE

__all__ = [
    "Builder",
    "BuilderConfig",
    "BuilderProcessor",
    "DELETE",
    "DMLType",
    "DefaultProcessor",
    "DmlkitError",
    "EmptyStatementError",
    "ExecutionError",
    "Executor",
    "Field",
    "FormatProcessor",
    "INSERT",
    "MultiBuilder",
    "NumericProcessor",
    "QueryResult",
    "RowData",
    "SQLAlchemyExecutor",
    "UPDATE",
    "ValidationError",
    "__version__",
    "create_config",
    "get_config",
    "get_processor",
    "set_config",
]
