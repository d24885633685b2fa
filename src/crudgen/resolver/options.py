"""Option resolution: selector + suffix -> generated function names."""
from __future__ import annotations

import logging
import re
from typing import Any, Dict, Mapping, Optional

import inflection

from crudgen.core import ResolvedEntry
from crudgen.operations import DEFAULT_CATALOG, OperationCatalog

from .naming import derive
from .selectors import SelectorInput, filter_operations, parse_selector

logger = logging.getLogger(__name__)

_SUFFIX_PATTERN = re.compile(r"[a-z0-9_]*")


class OptionResolver:
    """Resolves selectors against one immutable catalog."""

    def __init__(self, catalog: OperationCatalog = DEFAULT_CATALOG) -> None:
        self.catalog = catalog

    def resolve(self, suffix: str, selector: SelectorInput = None) -> Dict[str, ResolvedEntry]:
        if not isinstance(suffix, str):
            raise TypeError(f"suffix must be a string, got {type(suffix).__name__}")
        if not _SUFFIX_PATTERN.fullmatch(suffix):
            raise ValueError(f"suffix must be snake_case (a-z, 0-9, _), got {suffix!r}")
        parsed = parse_selector(selector)
        resolved = {
            spec.id: derive(spec.id, spec.arity, suffix, catalog=self.catalog)
            for spec in filter_operations(self.catalog, parsed)
        }
        logger.debug("Resolved %d operation(s) for suffix %r with %r", len(resolved), suffix, parsed)
        return resolved


_default_resolver = OptionResolver()


def resolve(
    suffix: str,
    selector: SelectorInput = None,
    *,
    catalog: Optional[OperationCatalog] = None,
) -> Dict[str, ResolvedEntry]:
    """Map each selected operation id to its generated name and description."""

    resolver = _default_resolver if catalog is None else OptionResolver(catalog)
    return resolver.resolve(suffix, selector)


def compute_suffix(schema_identifier: Any, options: Optional[Mapping[str, Any]] = None) -> str:
    """Return the naming suffix for a schema.

    ``{"suffix": False}`` disables suffixing. Otherwise the last dotted segment
    of the identifier (or the class name) is converted to snake case:
    ``BlogPost`` -> ``blog_post``, ``"Blog Post"`` -> ``blog_post``.
    """

    if options and options.get("suffix") is False:
        return ""
    name = schema_identifier if isinstance(schema_identifier, str) else schema_identifier.__name__
    name = name.replace(":", ".").rsplit(".", 1)[-1]
    suffix = inflection.parameterize(inflection.underscore(name), separator="_")
    if not suffix:
        raise ValueError(f"Cannot derive a suffix from {schema_identifier!r}")
    return suffix
