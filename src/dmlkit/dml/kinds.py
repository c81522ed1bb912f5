"""Statement kinds understood by the single-row builder."""

from __future__ import annotations

from enum import Enum
from typing import Optional, Union


class DMLType(Enum):
    INSERT = "insert"
    UPDATE = "update"
    DELETE = "delete"


KindLike = Union[DMLType, str]


def resolve_kind(kind: object) -> Optional[DMLType]:
    """Map a kind argument to a :class:`DMLType`, or ``None`` if unrecognized.

    Accepts enum members and their names in any case (``"update"``, ``"DELETE"``).
    """
    if isinstance(kind, DMLType):
        return kind
    if isinstance(kind, str):
        try:
            return DMLType(kind.lower())
        except ValueError:
            return None
    return None
