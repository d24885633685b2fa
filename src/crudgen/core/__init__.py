"""Core models and helpers exposed at the package level."""
from .changeset import Changeset, change
from .errors import (
    ChangesetInvalid,
    CrudgenError,
    InvalidSelector,
    NameConflict,
    RecordNotFound,
    UnknownOperationId,
)
from .models import (
    Except,
    NoFilter,
    Only,
    OperationSpec,
    ResolvedEntry,
    Selector,
    Shorthand,
    ShorthandKind,
)
from .results import ResourceReport

__all__ = [
    "Changeset",
    "ChangesetInvalid",
    "CrudgenError",
    "Except",
    "InvalidSelector",
    "NameConflict",
    "NoFilter",
    "Only",
    "OperationSpec",
    "RecordNotFound",
    "ResolvedEntry",
    "ResourceReport",
    "Selector",
    "Shorthand",
    "ShorthandKind",
    "UnknownOperationId",
    "change",
]
