"""Shared helpers."""
from .importing import import_module, import_string

__all__ = ["import_module", "import_string"]
