"""Resource manifest loading and application."""
from .apply import bind_manifest, describe_manifest
from .loader import MANIFEST_SCHEMA, load_manifest
from .models import Manifest, ResourceConfig

__all__ = [
    "MANIFEST_SCHEMA",
    "Manifest",
    "ResourceConfig",
    "bind_manifest",
    "describe_manifest",
    "load_manifest",
]
