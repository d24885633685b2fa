"""Operation catalog: the fixed universe of generated CRUD functions."""
from __future__ import annotations

from typing import Dict, Iterable, Iterator, Mapping, Tuple

from crudgen.core import OperationSpec, ShorthandKind, UnknownOperationId

DEFAULT_OPERATIONS: Tuple[Tuple[str, int], ...] = (
    ("update!", 2),
    ("update", 2),
    ("get_by!", 2),
    ("get_by", 2),
    ("get!", 2),
    ("get", 2),
    ("delete!", 1),
    ("delete", 1),
    ("create!", 1),
    ("create", 1),
    ("change", 1),
    ("all", 1),
)

READ_IDS: Tuple[str, ...] = ("all", "get", "get!", "get_by", "get_by!")
READ_WRITE_IDS: Tuple[str, ...] = READ_IDS + ("change", "create", "create!", "update", "update!")

SHORTHANDS: Mapping[ShorthandKind, Tuple[str, ...]] = {
    ShorthandKind.READ: READ_IDS,
    ShorthandKind.READ_WRITE: READ_WRITE_IDS,
}


class OperationCatalog:
    """Immutable, ordered collection of :class:`OperationSpec` entries."""

    def __init__(self, operations: Iterable[OperationSpec]) -> None:
        specs = tuple(operations)
        index: Dict[str, OperationSpec] = {}
        for spec in specs:
            if spec.id in index:
                raise ValueError(f"Operation '{spec.id}' listed twice in catalog")
            index[spec.id] = spec
        self._operations = specs
        self._index = index

    @classmethod
    def from_pairs(cls, pairs: Iterable[Tuple[str, int]]) -> "OperationCatalog":
        return cls(OperationSpec(id=op_id, arity=arity) for op_id, arity in pairs)

    def get(self, operation_id: str) -> OperationSpec:
        try:
            return self._index[operation_id]
        except KeyError:
            raise UnknownOperationId(operation_id) from None

    def ids(self) -> Tuple[str, ...]:
        return tuple(spec.id for spec in self._operations)

    def __contains__(self, operation_id: object) -> bool:
        return operation_id in self._index

    def __iter__(self) -> Iterator[OperationSpec]:
        return iter(self._operations)

    def __len__(self) -> int:
        return len(self._operations)

    def __repr__(self) -> str:
        return f"OperationCatalog({', '.join(self.ids())})"


DEFAULT_CATALOG = OperationCatalog.from_pairs(DEFAULT_OPERATIONS)
