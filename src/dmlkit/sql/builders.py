"""Helper utilities for SQL generation."""

from __future__ import annotations

from typing import Iterable

from .processors import BuilderProcessor

QUOTE_CHARS = "'\""
MARKER = "?"


def comma_separated(values: Iterable[str]) -> str:
    return ", ".join(values)


def rewrite_placeholders(fragment: str, processor: BuilderProcessor) -> str:
    """Replace every ``?`` marker in ``fragment`` with a processor token.

    Markers inside a single- or double-quoted literal are copied as-is. A
    literal is closed only by the same quote character that opened it, so
    ``"it's"`` and ``'say "hi"'`` are both read as one literal. Each marker
    outside a literal consumes one :meth:`BuilderProcessor.next_param` call,
    left to right. The processor is not reset here.

    All copied text, literals included, goes through the processor's
    ``escape_text`` hook when it has one.

    Args:
        fragment: Raw SQL text using ``?`` as its parameter marker
        processor: Processor producing the replacement tokens

    Returns:
        The rewritten fragment
    """
    escape = getattr(processor, "escape_text", None)
    parts: list[str] = []
    inside = False
    opened_with = ""
    for char in fragment:
        if char in QUOTE_CHARS and (not inside or char == opened_with):
            inside = not inside
            opened_with = char
        if char == MARKER and not inside:
            parts.append(processor.next_param(""))
        elif escape is not None:
            parts.append(escape(char))
        else:
            parts.append(char)
    return "".join(parts)


def where_clause(fragment: str, processor: BuilderProcessor) -> str:
    """Render ``" WHERE <fragment>"`` or ``""`` when there is no fragment."""
    if not fragment:
        return ""
    return f" WHERE {rewrite_placeholders(fragment, processor)}"
