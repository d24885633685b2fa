"""Turn a loaded manifest into resolved listings or bound resources."""
from __future__ import annotations

import logging
import sys
from typing import List

from crudgen import load_plugins
from crudgen.binding import BoundResource, bind_resource
from crudgen.core import ResourceReport
from crudgen.resolver import compute_suffix, resolve
from crudgen.utils import import_module, import_string

from .models import Manifest

logger = logging.getLogger(__name__)


def describe_manifest(manifest: Manifest) -> List[ResourceReport]:
    """Resolve every resource without touching any host module."""

    _extend_path(manifest)
    reports: List[ResourceReport] = []
    for resource in manifest.resources:
        schema = import_string(resource.schema)
        suffix = compute_suffix(schema, resource.options())
        reports.append(
            ResourceReport(
                schema=schema.__name__,
                suffix=suffix,
                entries=resolve(suffix, resource.selector()),
                repository=resource.repository,
                host=resource.host,
            )
        )
    return reports


def bind_manifest(manifest: Manifest) -> List[BoundResource]:
    """Load plugins, then bind each resource onto its host module."""

    _extend_path(manifest)
    load_plugins(manifest.plugins)
    bound: List[BoundResource] = []
    for resource in manifest.resources:
        if not resource.host:
            raise ValueError(f"Resource {resource.schema} has no host to bind into")
        host = import_module(resource.host)
        schema = import_string(resource.schema)
        bound.append(bind_resource(host, resource.repository, schema, **resource.options()))
    return bound


def _extend_path(manifest: Manifest) -> None:
    for path in manifest.paths:
        entry = str(path)
        if entry not in sys.path:
            logger.debug("Adding %s to sys.path", entry)
            sys.path.insert(0, entry)
