"""Minimal changesets used by the generated write functions."""
from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional

PRIMARY_KEY = "id"


@dataclass
class Changeset:
    """Pending changes against a record of ``schema``.

    ``data`` is the record being changed (``None`` for inserts). ``record`` is
    filled in by the repository once the changes have been persisted.
    """

    schema: type
    data: Any = None
    changes: Dict[str, Any] = field(default_factory=dict)
    errors: Dict[str, List[str]] = field(default_factory=dict)
    action: Optional[str] = None
    record: Any = None

    @property
    def valid(self) -> bool:
        return not self.errors

    def add_error(self, key: str, message: str) -> "Changeset":
        self.errors.setdefault(key, []).append(message)
        return self

    def apply(self) -> Any:
        """Return a new record with the changes applied."""

        if self.data is None:
            return self.schema(**self.changes)
        return dataclasses.replace(self.data, **self.changes)


def schema_fields(schema: type) -> Dict[str, dataclasses.Field]:
    if not dataclasses.is_dataclass(schema):
        raise TypeError(f"Schema {schema!r} must be a dataclass type")
    return {item.name: item for item in dataclasses.fields(schema)}


def required_fields(schema: type) -> List[str]:
    required = []
    for name, item in schema_fields(schema).items():
        if name == PRIMARY_KEY:
            continue
        if item.default is dataclasses.MISSING and item.default_factory is dataclasses.MISSING:
            required.append(name)
    return required


def change(schema: type, record: Any = None, attrs: Optional[Mapping[str, Any]] = None) -> Changeset:
    """Build a changeset casting ``attrs`` onto ``record``.

    A schema may provide a ``changeset(record, attrs)`` classmethod returning a
    :class:`Changeset`; it replaces the default casting below.
    """

    if isinstance(record, Changeset):
        changeset = record
        attrs = dict(attrs or {})
        for key, value in attrs.items():
            _cast_field(changeset, key, value)
        return changeset
    custom = getattr(schema, "changeset", None)
    if callable(custom):
        return custom(record, dict(attrs or {}))
    changeset = Changeset(schema=schema, data=record)
    for key, value in dict(attrs or {}).items():
        _cast_field(changeset, key, value)
    if record is None:
        for name in required_fields(schema):
            if changeset.changes.get(name) is None:
                changeset.add_error(name, "can't be blank")
    return changeset


def _cast_field(changeset: Changeset, key: str, value: Any) -> None:
    fields = schema_fields(changeset.schema)
    if key == PRIMARY_KEY:
        changeset.add_error(key, "cannot be changed")
    elif key not in fields:
        changeset.add_error(key, "is not a field")
    else:
        changeset.changes[key] = value
