"""Binds generated CRUD functions onto a host module or class."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Mapping, Tuple

from crudgen.backends import RepositoryDriver, resolve_repository
from crudgen.core import InvalidSelector, NameConflict, UnknownOperationId
from crudgen.operations import DEFAULT_CATALOG, OperationCatalog
from crudgen.registry import registry
from crudgen.resolver import OptionResolver, SelectorInput, compute_suffix

from .primitives import PRIMITIVES

logger = logging.getLogger(__name__)

STRICT_ATTRIBUTE_SUFFIX = "_or_raise"
DESCRIPTION_ATTRIBUTE = "__crudgen_description__"
SCHEMA_ATTRIBUTE = "__crudgen_schema__"
RESOURCES_ATTRIBUTE = "__crudgen_resources__"

_SELECTOR_OPTIONS = ("only", "except", "except_", "preset", "selector")
_KNOWN_OPTIONS = ("suffix",) + _SELECTOR_OPTIONS
_MISSING = object()


@dataclass(frozen=True)
class BoundResource:
    """What one :func:`bind_resource` call put on a host."""

    host: str
    repository: str
    schema: type
    descriptions: Tuple[str, ...]
    functions: Mapping[str, str] = field(default_factory=dict)

    @property
    def schema_name(self) -> str:
        return self.schema.__name__


def python_name(name: str) -> str:
    """``create_user!`` -> ``create_user_or_raise``; other names are unchanged."""

    if name.endswith("!"):
        return name[:-1] + STRICT_ATTRIBUTE_SUFFIX
    return name


def selector_from_options(options: Mapping[str, Any]) -> SelectorInput:
    chosen = [(key, options[key]) for key in _SELECTOR_OPTIONS if options.get(key) is not None]
    if not chosen:
        return None
    if len(chosen) > 1:
        raise InvalidSelector(dict(options), "choose one of only, except, preset or selector")
    key, value = chosen[0]
    if key == "only":
        return {"only": value}
    if key in ("except", "except_"):
        return {"except": value}
    return value


def bind_resource(
    host: Any,
    repository: Any,
    schema: type,
    *,
    catalog: OperationCatalog = DEFAULT_CATALOG,
    **options: Any,
) -> BoundResource:
    """Generate and attach CRUD functions for ``schema`` to ``host``.

    ``options`` accepts ``suffix=False`` and one of ``only=[...]``,
    ``except_=[...]``, ``preset="read"|"read_write"`` or ``selector=...``.
    """

    unknown = sorted(set(options) - set(_KNOWN_OPTIONS))
    if unknown:
        raise TypeError(f"Unknown binding option(s): {', '.join(unknown)}")
    driver = resolve_repository(repository)
    suffix = compute_suffix(schema, options)
    resolved = OptionResolver(catalog).resolve(suffix, selector_from_options(options))
    host_name = _host_name(host)

    functions: Dict[str, Callable[..., Any]] = {}
    attributes: Dict[str, str] = {}
    for op_id, entry in resolved.items():
        try:
            delegate = PRIMITIVES[op_id]
        except KeyError:
            raise UnknownOperationId(op_id) from None
        attribute = python_name(entry.name)
        _check_conflict(host, host_name, attribute, entry.description, schema)
        functions[attribute] = _make_function(delegate, driver, schema, host_name, attribute, entry.description)
        attributes[op_id] = attribute

    for attribute, function in functions.items():
        setattr(host, attribute, function)
        logger.debug("Bound %s.%s (%s)", host_name, attribute, function.__crudgen_description__)

    bound = BoundResource(
        host=host_name,
        repository=driver.name,
        schema=schema,
        descriptions=tuple(sorted(entry.description for entry in resolved.values())),
        functions=attributes,
    )
    existing = [item for item in getattr(host, RESOURCES_ATTRIBUTE, []) if item.schema is not schema]
    setattr(host, RESOURCES_ATTRIBUTE, existing + [bound])
    registry.update_or_register(bound)
    logger.info("Bound %d function(s) for %s on %s", len(functions), schema.__name__, host_name)
    return bound


def resources(host: Any) -> List[BoundResource]:
    """Return the resources bound onto ``host``, in binding order."""

    return list(getattr(host, RESOURCES_ATTRIBUTE, []))


def _host_name(host: Any) -> str:
    return getattr(host, "__name__", type(host).__name__)


def _check_conflict(host: Any, host_name: str, attribute: str, description: str, schema: type) -> None:
    existing = getattr(host, attribute, _MISSING)
    if existing is _MISSING:
        return
    # only a function generated for this same schema may be replaced
    if (
        getattr(existing, SCHEMA_ATTRIBUTE, None) is schema
        and getattr(existing, DESCRIPTION_ATTRIBUTE, None) == description
    ):
        return
    raise NameConflict(host_name, attribute)


def _make_function(
    delegate: Callable[..., Any],
    repository: RepositoryDriver,
    schema: type,
    host_name: str,
    attribute: str,
    description: str,
) -> Callable[..., Any]:
    def generated(*args: Any, **kwargs: Any) -> Any:
        return delegate(repository, schema, *args, **kwargs)

    generated.__name__ = attribute
    generated.__qualname__ = attribute
    generated.__module__ = host_name
    summary = (delegate.__doc__ or "").strip().splitlines()
    generated.__doc__ = f"{description} for {schema.__name__}" + (f": {summary[0]}" if summary else "")
    setattr(generated, DESCRIPTION_ATTRIBUTE, description)
    setattr(generated, SCHEMA_ATTRIBUTE, schema)
    return generated
