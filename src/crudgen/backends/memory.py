"""In-memory repository driver used for development, examples and tests."""
from __future__ import annotations

import dataclasses
import itertools
from typing import Any, Dict, List, Mapping, Optional

from crudgen.core import Changeset
from crudgen.core.changeset import PRIMARY_KEY

from .base import RepositoryDriver, repository_manager


class InMemoryRepository(RepositoryDriver):
    """Stores dataclass records in per-schema dictionaries keyed by ``id``."""

    def __init__(self, name: str = "memory") -> None:
        self.name = name
        self._tables: Dict[type, Dict[Any, Any]] = {}
        self._sequences: Dict[type, itertools.count] = {}

    def all(
        self,
        schema: type,
        where: Optional[Mapping[str, Any]] = None,
        order_by: Optional[str] = None,
        limit: Optional[int] = None,
    ) -> List[Any]:
        records = [record for record in self._table(schema).values() if _matches(record, where or {})]
        if order_by:
            descending = order_by.startswith("-")
            key = order_by.lstrip("-")
            records.sort(key=lambda record: getattr(record, key), reverse=descending)
        if limit is not None:
            records = records[:limit]
        return records

    def get(self, schema: type, record_id: Any) -> Any:
        return self._table(schema).get(record_id)

    def get_by(self, schema: type, clauses: Mapping[str, Any]) -> Any:
        for record in self._table(schema).values():
            if _matches(record, clauses):
                return record
        return None

    def insert(self, changeset: Changeset) -> Any:
        schema = changeset.schema
        record = changeset.apply()
        if getattr(record, PRIMARY_KEY, None) is None:
            record = dataclasses.replace(record, **{PRIMARY_KEY: next(self._sequence(schema))})
        self._table(schema)[getattr(record, PRIMARY_KEY)] = record
        return record

    def update(self, changeset: Changeset) -> Any:
        record = changeset.apply()
        table = self._table(changeset.schema)
        record_id = getattr(record, PRIMARY_KEY)
        if record_id not in table:
            return None
        table[record_id] = record
        return record

    def delete(self, schema: type, record: Any) -> Any:
        return self._table(schema).pop(getattr(record, PRIMARY_KEY), None)

    def clear(self) -> None:
        self._tables.clear()
        self._sequences.clear()

    def _table(self, schema: type) -> Dict[Any, Any]:
        return self._tables.setdefault(schema, {})

    def _sequence(self, schema: type) -> itertools.count:
        return self._sequences.setdefault(schema, itertools.count(1))


def _matches(record: Any, clauses: Mapping[str, Any]) -> bool:
    return all(getattr(record, key, None) == value for key, value in clauses.items())


def register_memory_repository(name: str = "memory") -> InMemoryRepository:
    """Register (once) and return the default in-memory driver."""

    if name in repository_manager:
        driver = repository_manager.get_driver(name)
        if isinstance(driver, InMemoryRepository):
            return driver
    return repository_manager.register(InMemoryRepository(name=name))
