"""Reporter interface definitions."""
from __future__ import annotations

from typing import List, Sequence

from crudgen.core import ResourceReport


class Reporter:
    """Interface for output renderers."""

    def on_start(self, total: int) -> None:  # pragma: no cover - interface
        raise NotImplementedError

    def on_resource(self, report: ResourceReport, index: int, total: int) -> None:  # pragma: no cover
        raise NotImplementedError

    def on_complete(self, reports: Sequence[ResourceReport]) -> None:  # pragma: no cover
        raise NotImplementedError


class ReportManager:
    """Dispatches lifecycle callbacks to multiple reporters."""

    def __init__(self, reporters: Sequence[Reporter]) -> None:
        self._reporters = list(reporters)

    def emit(self, reports: Sequence[ResourceReport]) -> None:
        total = len(reports)
        for reporter in self._reporters:
            reporter.on_start(total)
        for index, report in enumerate(reports, start=1):
            for reporter in self._reporters:
                reporter.on_resource(report, index, total)
        for reporter in self._reporters:
            reporter.on_complete(reports)

    def reporters(self) -> List[Reporter]:
        return list(self._reporters)
