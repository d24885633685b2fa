"""Selector parsing and catalog filtering.

Callers hand in loosely shaped selector values (``None``, ``"read"``,
``{"only": [...]}`` ...). :func:`parse_selector` is the single place that turns
those into one of the :data:`~crudgen.core.Selector` variants; everything past
that point works on the tagged union only.
"""
from __future__ import annotations

from typing import Any, Iterable, Mapping, Tuple, Union

from crudgen.core import (
    Except,
    InvalidSelector,
    NoFilter,
    Only,
    OperationSpec,
    Selector,
    Shorthand,
    ShorthandKind,
)
from crudgen.core.models import SELECTOR_TYPES
from crudgen.operations import SHORTHANDS, OperationCatalog

SelectorInput = Union[None, str, ShorthandKind, Mapping[str, Iterable[str]], Selector, Tuple[Any, ...]]

_FILTER_KEYS = ("only", "except")


def parse_selector(raw: SelectorInput) -> Selector:
    """Normalize caller input into a :data:`Selector`.

    Shorthands are expanded to :class:`Only` here. Anything unrecognized raises
    :class:`InvalidSelector`.
    """

    if raw is None:
        return NoFilter()
    if isinstance(raw, Shorthand):
        return expand_shorthand(raw.kind)
    if isinstance(raw, SELECTOR_TYPES):
        return raw
    if isinstance(raw, str):
        return expand_shorthand(_shorthand_kind(raw))
    if isinstance(raw, Mapping):
        return _parse_mapping(raw)
    if isinstance(raw, (list, tuple)):
        if not raw:
            return NoFilter()
        # keyword-list form: [("only", [...])]
        if all(isinstance(item, tuple) and len(item) == 2 for item in raw):
            keys = [item[0] for item in raw]
            if len(set(keys)) != len(keys):
                raise InvalidSelector(raw, "repeated filter keys")
            return _parse_mapping(dict(raw))
    raise InvalidSelector(raw)


def expand_shorthand(kind: ShorthandKind) -> Only:
    return Only(frozenset(SHORTHANDS[kind]))


def filter_operations(catalog: OperationCatalog, selector: Selector) -> Tuple[OperationSpec, ...]:
    """Return the catalog entries kept by ``selector``, in catalog order."""

    if isinstance(selector, NoFilter):
        return tuple(catalog)
    if isinstance(selector, Shorthand):
        selector = expand_shorthand(selector.kind)
    if isinstance(selector, Only):
        return tuple(spec for spec in catalog if spec.id in selector.ids)
    if isinstance(selector, Except):
        return tuple(spec for spec in catalog if spec.id not in selector.ids)
    raise InvalidSelector(selector, "expected NoFilter, Shorthand, Only or Except")


def _shorthand_kind(raw: str) -> ShorthandKind:
    try:
        return ShorthandKind(raw)
    except ValueError:
        expected = ", ".join(repr(kind.value) for kind in ShorthandKind)
        raise InvalidSelector(raw, f"unknown shorthand, expected one of {expected}") from None


def _parse_mapping(raw: Mapping[Any, Any]) -> Selector:
    if not raw:
        return NoFilter()
    unknown = [key for key in raw if key not in _FILTER_KEYS]
    if unknown:
        raise InvalidSelector(raw, f"unexpected keys {unknown!r}")
    if len(raw) != 1:
        raise InvalidSelector(raw, "use either 'only' or 'except', not both")
    key, value = next(iter(raw.items()))
    try:
        return Only(value) if key == "only" else Except(value)
    except InvalidSelector as exc:
        raise InvalidSelector(raw, exc.reason) from None
