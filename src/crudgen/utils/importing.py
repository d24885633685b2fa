"""Utility helpers for dynamic imports."""
from __future__ import annotations

import importlib
from typing import Any


def import_string(path: str) -> Any:
    """Return the object at the given dotted path.

    Supports ``module:attr`` or ``module.attr`` syntax. A path without any
    separator is imported as a module.
    """

    if not path:
        raise ValueError("Empty import path provided")
    module_name, sep, attr = path.partition(":")
    if not sep:
        module_name, sep, attr = path.rpartition(".")
        if not sep:
            return importlib.import_module(path)
    if not module_name or not attr:
        raise ValueError(f"Invalid import path '{path}'")
    module = importlib.import_module(module_name)
    try:
        return getattr(module, attr)
    except AttributeError as exc:
        raise AttributeError(f"Module '{module_name}' has no attribute '{attr}'") from exc


def import_module(path: str) -> Any:
    """Import a host module by its dotted name."""

    if not path:
        raise ValueError("Empty module path provided")
    return importlib.import_module(path)
