"""Core dataclasses shared across crudgen subsystems."""
from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Any, FrozenSet, Tuple, Union

from .errors import InvalidSelector


@dataclass(frozen=True)
class OperationSpec:
    """One catalog entry: an operation id and its declared arity.

    The arity excludes the repository argument supplied by the binding layer.
    """

    id: str
    arity: int


@dataclass(frozen=True)
class ResolvedEntry:
    """Generated function name plus its ``name/arity`` description."""

    name: str
    description: str


class ShorthandKind(str, enum.Enum):
    READ = "read"
    READ_WRITE = "read_write"


@dataclass(frozen=True)
class NoFilter:
    """Keep every catalog entry."""


@dataclass(frozen=True)
class Shorthand:
    kind: ShorthandKind


def _frozen_ids(ids: Any) -> FrozenSet[str]:
    if isinstance(ids, (str, bytes)):
        raise InvalidSelector(ids, "operation ids must be given as a collection, not a single string")
    try:
        items = frozenset(ids)
    except TypeError:
        raise InvalidSelector(ids, "operation ids must be given as a collection") from None
    for item in items:
        if not isinstance(item, str):
            raise InvalidSelector(ids, f"operation id {item!r} is not a string")
    return items


@dataclass(frozen=True)
class Only:
    ids: FrozenSet[str]

    def __post_init__(self) -> None:
        object.__setattr__(self, "ids", _frozen_ids(self.ids))


@dataclass(frozen=True)
class Except:
    ids: FrozenSet[str]

    def __post_init__(self) -> None:
        object.__setattr__(self, "ids", _frozen_ids(self.ids))


Selector = Union[NoFilter, Shorthand, Only, Except]
SELECTOR_TYPES: Tuple[type, ...] = (NoFilter, Shorthand, Only, Except)
