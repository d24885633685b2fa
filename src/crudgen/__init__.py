"""crudgen package initialization."""
from __future__ import annotations

import importlib
import logging
import os

from .version import __version__

__all__ = [
    "__version__",
    "bootstrap",
]

logger = logging.getLogger(__name__)

_BOOTSTRAPPED = False


def bootstrap() -> None:
    """Initialize crudgen (idempotent)."""

    global _BOOTSTRAPPED
    if _BOOTSTRAPPED:
        return
    from crudgen.backends import register_memory_repository

    register_memory_repository()
    _load_plugins(os.environ.get("CRUDGEN_PLUGINS"))
    _BOOTSTRAPPED = True


def load_plugins(names) -> None:
    """Import each plugin module and call its ``register()`` hook."""

    for item in names:
        module_name = item.strip()
        if not module_name:
            continue
        module = importlib.import_module(module_name)
        register = getattr(module, "register", None)
        if callable(register):
            logger.debug("Registering plugin %s", module_name)
            register()


def _load_plugins(plugin_env: str | None) -> None:
    if not plugin_env:
        return
    load_plugins(plugin_env.split(","))
