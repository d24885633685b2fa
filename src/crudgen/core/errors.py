"""Exception hierarchy raised by crudgen."""
from __future__ import annotations

from typing import Any


class CrudgenError(Exception):
    """Base class for every error raised by crudgen."""


class InvalidSelector(CrudgenError, ValueError):
    """The selector is not one of the recognized shapes."""

    def __init__(self, selector: Any, reason: str = "") -> None:
        self.selector = selector
        self.reason = reason
        message = f"Invalid selector {selector!r}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class UnknownOperationId(CrudgenError, KeyError):
    """An operation id outside the catalog was requested."""

    def __init__(self, operation_id: str) -> None:
        self.operation_id = operation_id
        super().__init__(f"Operation '{operation_id}' is not in the catalog")

    def __str__(self) -> str:
        return str(self.args[0])


class RecordNotFound(CrudgenError, LookupError):
    """A strict read found no matching record."""

    def __init__(self, schema: type, criteria: Any) -> None:
        self.schema = schema
        self.criteria = criteria
        super().__init__(f"No {schema.__name__} found for {criteria!r}")


class ChangesetInvalid(CrudgenError, ValueError):
    """A strict write was attempted with an invalid changeset."""

    def __init__(self, changeset: Any) -> None:
        self.changeset = changeset
        errors = "; ".join(f"{field}: {', '.join(msgs)}" for field, msgs in sorted(changeset.errors.items()))
        super().__init__(f"Invalid changeset for {changeset.schema.__name__} ({changeset.action}): {errors}")


class NameConflict(CrudgenError, AttributeError):
    """Binding would overwrite an existing attribute on the host."""

    def __init__(self, host_name: str, attribute: str) -> None:
        self.host_name = host_name
        self.attribute = attribute
        super().__init__(f"'{host_name}' already defines '{attribute}'")
