"""YAML loader and validation for resource manifests."""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Mapping

import yaml
from jsonschema import Draft7Validator

from crudgen.core import ShorthandKind

from .models import Manifest, ResourceConfig

logger = logging.getLogger(__name__)

DEFAULT_REPOSITORY = "memory"
_SELECTOR_KEYS = ("only", "except", "preset")


def load_manifest(path: str) -> Manifest:
    """Load and validate a manifest file."""
    manifest_path = Path(path).expanduser().resolve()
    raw = yaml.safe_load(manifest_path.read_text(encoding="utf-8")) or {}
    if not isinstance(raw, Mapping):
        raise ValueError("Manifest file must contain a mapping at the top level")
    errors = sorted(_validator.iter_errors(raw), key=lambda e: [str(part) for part in e.path])
    if errors:
        messages = "; ".join(f"{'/'.join(map(str, err.path)) or 'root'}: {err.message}" for err in errors)
        raise ValueError(f"Manifest schema validation failed: {messages}")
    repository = str(raw.get("repository", DEFAULT_REPOSITORY))
    resources = tuple(_parse_resource(entry, index, repository) for index, entry in enumerate(raw["resources"]))
    _validate_unique(resources)
    paths = tuple((manifest_path.parent / item).resolve() for item in raw.get("paths", []) or [])
    manifest = Manifest(
        resources=resources,
        repository=repository,
        plugins=tuple(raw.get("plugins", []) or []),
        paths=paths,
        source=manifest_path,
    )
    logger.debug("Loaded %d resource(s) from %s", len(resources), manifest_path)
    return manifest


def _parse_resource(entry: Mapping[str, Any], index: int, default_repository: str) -> ResourceConfig:
    selectors = [key for key in _SELECTOR_KEYS if key in entry]
    if len(selectors) > 1:
        raise ValueError(f"resources/{index}: use only one of {', '.join(selectors)}")
    only = entry.get("only")
    excluded = entry.get("except")
    return ResourceConfig(
        schema=entry["schema"].strip(),
        repository=str(entry.get("repository", default_repository)),
        host=entry.get("host"),
        suffix=bool(entry.get("suffix", True)),
        only=tuple(only) if only is not None else None,
        except_=tuple(excluded) if excluded is not None else None,
        preset=entry.get("preset"),
    )


def _validate_unique(resources: tuple) -> None:
    seen: set[tuple[Any, str]] = set()
    for resource in resources:
        key = (resource.host, resource.schema)
        if key in seen:
            target = resource.host or "<no host>"
            raise ValueError(f"Duplicate resource {resource.schema} for host {target}")
        seen.add(key)


_ID_LIST = {"type": "array", "items": {"type": "string", "minLength": 1}}

MANIFEST_SCHEMA = {
    "type": "object",
    "required": ["resources"],
    "additionalProperties": False,
    "properties": {
        "repository": {"type": "string", "minLength": 1},
        "plugins": {"type": "array", "items": {"type": "string", "minLength": 1}},
        "paths": {"type": "array", "items": {"type": "string", "minLength": 1}},
        "resources": {
            "type": "array",
            "minItems": 1,
            "items": {
                "type": "object",
                "required": ["schema"],
                "additionalProperties": False,
                "properties": {
                    "schema": {"type": "string", "minLength": 1},
                    "repository": {"type": "string", "minLength": 1},
                    "host": {"type": "string", "minLength": 1},
                    "suffix": {"type": "boolean"},
                    "only": _ID_LIST,
                    "except": _ID_LIST,
                    "preset": {"enum": [kind.value for kind in ShorthandKind]},
                },
            },
        },
    },
}
_validator = Draft7Validator(MANIFEST_SCHEMA)
