"""Terminal reporter listing generated functions."""
from __future__ import annotations

from typing import Sequence

import click
from colorama import init as colorama_init

from crudgen.core import ResourceReport

from .base import Reporter


class TerminalReporter(Reporter):
    """Human-readable reporter that streams to stdout."""

    def __init__(self, *, use_color: bool = True) -> None:
        self._use_color = use_color
        if use_color:
            colorama_init()

    def on_start(self, total: int) -> None:
        click.echo(self._styled(f"Resolving {total} resource(s)", "cyan"))

    def on_resource(self, report: ResourceReport, index: int, total: int) -> None:
        header = f"[{index}/{total}] {report.label()}"
        if report.repository:
            header += f" repository={report.repository}"
        click.echo(self._styled(header, "green"))
        if not report.entries:
            click.echo("    (no functions selected)")
            return
        for op_id, entry in sorted(report.entries.items(), key=lambda item: item[1].name):
            click.echo(f"    {entry.description:<28} {self._styled(op_id, 'yellow')}")

    def on_complete(self, reports: Sequence[ResourceReport]) -> None:
        functions = sum(len(report.entries) for report in reports)
        click.echo(self._styled(f"Summary: resources={len(reports)} functions={functions}", "cyan"))

    def _styled(self, text: str, color: str) -> str:
        if not self._use_color:
            return text
        return click.style(text, fg=color)
