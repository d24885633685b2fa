"""Binding layer: attaches generated CRUD functions to host modules."""
from .generator import BoundResource, bind_resource, python_name, resources, selector_from_options
from .primitives import PRIMITIVES

__all__ = [
    "BoundResource",
    "PRIMITIVES",
    "bind_resource",
    "python_name",
    "resources",
    "selector_from_options",
]
