"""JSON schema definition for reporter output."""
from __future__ import annotations

SCHEMA_VERSION = "1.0.0"

JSON_SCHEMA_V1 = {
    "$schema": "http://json-schema.org/draft-07/schema#",
    "title": "crudgen function listing",
    "type": "object",
    "required": ["schema_version", "generated_at", "summary", "resources"],
    "properties": {
        "schema_version": {"type": "string"},
        "generated_at": {"type": "string", "format": "date-time"},
        "summary": {
            "type": "object",
            "required": ["resources", "functions"],
            "properties": {
                "resources": {"type": "integer"},
                "functions": {"type": "integer"},
            },
        },
        "resources": {
            "type": "array",
            "items": {
                "type": "object",
                "required": ["schema", "suffix", "functions"],
                "properties": {
                    "schema": {"type": "string"},
                    "suffix": {"type": "string"},
                    "repository": {"type": ["string", "null"]},
                    "host": {"type": ["string", "null"]},
                    "functions": {
                        "type": "object",
                        "additionalProperties": {
                            "type": "object",
                            "required": ["name", "description"],
                            "properties": {
                                "name": {"type": "string", "pattern": "^[A-Za-z_][A-Za-z0-9_]*!?$"},
                                "description": {"type": "string", "pattern": "^[A-Za-z_][A-Za-z0-9_]*!?/[0-9]+$"},
                            },
                        },
                    },
                },
            },
        },
    },
}
