"""Operation catalog exports."""
from .catalog import (
    DEFAULT_CATALOG,
    DEFAULT_OPERATIONS,
    READ_IDS,
    READ_WRITE_IDS,
    SHORTHANDS,
    OperationCatalog,
)

__all__ = [
    "DEFAULT_CATALOG",
    "DEFAULT_OPERATIONS",
    "READ_IDS",
    "READ_WRITE_IDS",
    "SHORTHANDS",
    "OperationCatalog",
]
