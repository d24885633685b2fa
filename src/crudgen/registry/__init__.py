"""Resource registry public API."""
from .registry import ResourceRegistry, clear_registry, registry

__all__ = [
    "ResourceRegistry",
    "clear_registry",
    "registry",
]
