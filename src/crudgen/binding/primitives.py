"""Storage primitives the generated functions delegate to.

Every primitive takes the repository and schema explicitly; the binding layer
closes over both. Reads return the record (or ``None``), writes return a
:class:`~crudgen.core.Changeset`, and the ``*_or_raise`` variants return the
record or raise.
"""
from __future__ import annotations

from typing import Any, Callable, Dict, List, Mapping, Optional

from crudgen.backends import RepositoryDriver
from crudgen.core import Changeset, ChangesetInvalid, RecordNotFound, change as build_changeset

QUERY_OPTIONS = ("where", "order_by", "limit")


def all_records(repository: RepositoryDriver, schema: type, options: Optional[Mapping[str, Any]] = None) -> List[Any]:
    """List records, optionally filtered with ``where``, ``order_by`` and ``limit``."""

    opts = _check_options(options, QUERY_OPTIONS)
    return repository.all(schema, where=opts.get("where"), order_by=opts.get("order_by"), limit=opts.get("limit"))


def get(repository: RepositoryDriver, schema: type, record_id: Any, options: Optional[Mapping[str, Any]] = None) -> Any:
    """Fetch a record by primary key, ``None`` when missing."""

    _check_options(options, ())
    return repository.get(schema, record_id)


def get_or_raise(
    repository: RepositoryDriver, schema: type, record_id: Any, options: Optional[Mapping[str, Any]] = None
) -> Any:
    """Fetch a record by primary key, raising :class:`RecordNotFound` when missing."""

    record = get(repository, schema, record_id, options)
    if record is None:
        raise RecordNotFound(schema, {"id": record_id})
    return record


def get_by(
    repository: RepositoryDriver, schema: type, clauses: Mapping[str, Any], options: Optional[Mapping[str, Any]] = None
) -> Any:
    """Fetch the first record whose fields equal ``clauses``."""

    _check_options(options, ())
    return repository.get_by(schema, dict(clauses))


def get_by_or_raise(
    repository: RepositoryDriver, schema: type, clauses: Mapping[str, Any], options: Optional[Mapping[str, Any]] = None
) -> Any:
    record = get_by(repository, schema, clauses, options)
    if record is None:
        raise RecordNotFound(schema, dict(clauses))
    return record


def create(repository: RepositoryDriver, schema: type, attrs: Mapping[str, Any]) -> Changeset:
    """Insert a record built from ``attrs``."""

    changeset = build_changeset(schema, None, attrs)
    changeset.action = "insert"
    if changeset.valid:
        changeset.record = repository.insert(changeset)
    return changeset


def create_or_raise(repository: RepositoryDriver, schema: type, attrs: Mapping[str, Any]) -> Any:
    return _unwrap(create(repository, schema, attrs))


def update(repository: RepositoryDriver, schema: type, record: Any, attrs: Mapping[str, Any]) -> Changeset:
    """Apply ``attrs`` to an existing record."""

    changeset = build_changeset(schema, record, attrs)
    changeset.action = "update"
    if changeset.valid:
        changeset.record = repository.update(changeset)
        if changeset.record is None:
            changeset.add_error("id", "is stale")
    return changeset


def update_or_raise(repository: RepositoryDriver, schema: type, record: Any, attrs: Mapping[str, Any]) -> Any:
    return _unwrap(update(repository, schema, record, attrs))


def delete(repository: RepositoryDriver, schema: type, record: Any) -> Changeset:
    """Remove a record."""

    changeset = Changeset(schema=schema, data=record, action="delete")
    changeset.record = repository.delete(schema, record)
    if changeset.record is None:
        changeset.add_error("id", "is stale")
    return changeset


def delete_or_raise(repository: RepositoryDriver, schema: type, record: Any) -> Any:
    return _unwrap(delete(repository, schema, record))


def change(
    repository: RepositoryDriver, schema: type, record: Any = None, attrs: Optional[Mapping[str, Any]] = None
) -> Changeset:
    """Build a changeset without touching the repository."""

    return build_changeset(schema, record, attrs)


PRIMITIVES: Dict[str, Callable[..., Any]] = {
    "all": all_records,
    "get": get,
    "get!": get_or_raise,
    "get_by": get_by,
    "get_by!": get_by_or_raise,
    "create": create,
    "create!": create_or_raise,
    "update": update,
    "update!": update_or_raise,
    "delete": delete,
    "delete!": delete_or_raise,
    "change": change,
}


def _check_options(options: Optional[Mapping[str, Any]], allowed: tuple) -> Mapping[str, Any]:
    opts = dict(options or {})
    unknown = sorted(set(opts) - set(allowed))
    if unknown:
        raise ValueError(f"Unsupported option(s): {', '.join(unknown)}")
    return opts


def _unwrap(changeset: Changeset) -> Any:
    if not changeset.valid:
        raise ChangesetInvalid(changeset)
    return changeset.record
