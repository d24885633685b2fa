"""JSON reporter emitting structured function listings."""
from __future__ import annotations

import datetime as dt
import json
import pathlib
from typing import Any, Dict, Optional, Sequence

import click
from jsonschema import validate

from crudgen.core import ResourceReport

from .base import Reporter
from .schema import JSON_SCHEMA_V1, SCHEMA_VERSION


class JsonReporter(Reporter):
    """Writes listings to a JSON file (or stdout) validated against the schema."""

    def __init__(self, path: Optional[str] = None) -> None:
        self._path = pathlib.Path(path) if path else None
        self._records: list[Dict[str, Any]] = []

    def on_start(self, total: int) -> None:
        self._records.clear()

    def on_resource(self, report: ResourceReport, index: int, total: int) -> None:
        self._records.append(report_to_dict(report))

    def on_complete(self, reports: Sequence[ResourceReport]) -> None:
        payload = {
            "schema_version": SCHEMA_VERSION,
            "generated_at": dt.datetime.now(dt.timezone.utc).isoformat(timespec="seconds").replace("+00:00", "Z"),
            "summary": {
                "resources": len(reports),
                "functions": sum(len(report.entries) for report in reports),
            },
            "resources": self._records,
        }
        validate(instance=payload, schema=JSON_SCHEMA_V1)
        text = json.dumps(payload, indent=2)
        if self._path is None:
            click.echo(text)
            return
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            self._path.write_text(text, encoding="utf-8")
        except OSError as exc:  # pragma: no cover - filesystem protection
            raise RuntimeError(f"Failed to write JSON report to {self._path}: {exc}") from exc
        click.echo(f"JSON report written to {self._path}")


def report_to_dict(report: ResourceReport) -> Dict[str, Any]:
    return {
        "schema": report.schema,
        "suffix": report.suffix,
        "repository": report.repository,
        "host": report.host,
        "functions": {
            op_id: {"name": entry.name, "description": entry.description}
            for op_id, entry in sorted(report.entries.items())
        },
    }
