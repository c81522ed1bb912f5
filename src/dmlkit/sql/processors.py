"""Placeholder processors and their registry.

A processor renders the positional placeholder tokens that end up in the
generated SQL. Builders call :meth:`BuilderProcessor.begin_params` once at the
start of every statement and :meth:`BuilderProcessor.next_param` for every
placeholder, in the order the matching argument appears in the parameter list.

A processor may also define ``escape_text(text) -> str``. The WHERE rewriter
passes every piece of fragment text it copies through that hook. Processors
without it get the text unchanged.
"""

from __future__ import annotations

from typing import Callable, Protocol, runtime_checkable


@runtime_checkable
class BuilderProcessor(Protocol):
    """Generates parameter tokens compatible with a database driver."""

    def begin_params(self) -> None:
        """Start a new statement."""
        ...

    def next_param(self, field_name: str) -> str:
        """Return the token for the next positional parameter.

        Args:
            field_name: Name of the field the parameter belongs to, ``""`` for
                WHERE arguments.
        """
        ...


class DefaultProcessor:
    """Renders every parameter as ``?`` (the DB-API ``qmark`` style)."""

    def begin_params(self) -> None:
        pass

    def next_param(self, field_name: str) -> str:
        return "?"

    def __repr__(self) -> str:
        return "DefaultProcessor()"


class NumericProcessor:
    """Renders parameters as ``$1``, ``$2``, ... restarting on every statement.

    The counter lives on the instance. Sharing one instance between statements
    is fine as long as each build starts with :meth:`begin_params`, which the
    builders always do. Building two statements on it concurrently is not.
    """

    def __init__(self) -> None:
        self._count = 1

    def begin_params(self) -> None:
        self._count = 1

    def next_param(self, field_name: str) -> str:
        token = f"${self._count}"
        self._count += 1
        return token

    def __repr__(self) -> str:
        return f"NumericProcessor(next={self._count})"


class FormatProcessor:
    """Renders every parameter as ``%s`` (the DB-API ``format`` style)."""

    def begin_params(self) -> None:
        pass

    def next_param(self, field_name: str) -> str:
        return "%s"

    def escape_text(self, text: str) -> str:
        """Double ``%`` so the driver's ``%`` formatting leaves it literal."""
        return text.replace("%", "%%")

    def __repr__(self) -> str:
        return "FormatProcessor()"


PROCESSORS: dict[str, Callable[[], BuilderProcessor]] = {
    "default": DefaultProcessor,
    "qmark": DefaultProcessor,
    "numeric": NumericProcessor,
    "format": FormatProcessor,
}


def get_processor(name: str) -> BuilderProcessor:
    """Return a fresh processor for a registered paramstyle name."""
    try:
        factory = PROCESSORS[name.lower()]
    except KeyError as exc:
        raise ValueError(
            f"Unknown paramstyle '{name}'. Supported: {', '.join(sorted(PROCESSORS))}"
        ) from exc
    return factory()
