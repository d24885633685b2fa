"""Derivation of generated function names and their descriptions."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import inflection

from crudgen.core import ResolvedEntry, UnknownOperationId
from crudgen.operations import OperationCatalog

STRICT_MARK = "!"


@dataclass(frozen=True)
class FunctionName:
    """Structured identifier rendered as ``root[_suffix][_qualifier][!]``."""

    root: str
    suffix: str = ""
    qualifier: str = ""
    strict: bool = False

    def render(self) -> str:
        parts = [part for part in (self.root, self.suffix, self.qualifier) if part]
        return "_".join(parts) + (STRICT_MARK if self.strict else "")


def function_name(operation_id: str, suffix: str) -> FunctionName:
    strict = operation_id.endswith(STRICT_MARK)
    base = operation_id[: -len(STRICT_MARK)] if strict else operation_id
    if not suffix:
        return FunctionName(root=base, strict=strict)
    if base == "all":
        return FunctionName(root=base, suffix=inflection.pluralize(suffix), strict=strict)
    if base == "get_by":
        # the suffix goes between "get" and "by": get_user_by
        return FunctionName(root="get", suffix=suffix, qualifier="by", strict=strict)
    return FunctionName(root=base, suffix=suffix, strict=strict)


def derive(
    operation_id: str,
    arity: int,
    suffix: str,
    *,
    catalog: Optional[OperationCatalog] = None,
) -> ResolvedEntry:
    """Return the generated name and ``name/arity`` description for one operation."""

    if catalog is not None and operation_id not in catalog:
        raise UnknownOperationId(operation_id)
    name = function_name(operation_id, suffix).render()
    return ResolvedEntry(name=name, description=f"{name}/{arity}")
