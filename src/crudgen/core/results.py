"""Result data structures produced by resolution and consumed by reporters."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping, Optional, Tuple

from .models import ResolvedEntry


@dataclass(frozen=True)
class ResourceReport:
    """Resolved function listing for one schema."""

    schema: str
    suffix: str
    entries: Mapping[str, ResolvedEntry]
    repository: Optional[str] = None
    host: Optional[str] = None

    def descriptions(self) -> Tuple[str, ...]:
        return tuple(sorted(entry.description for entry in self.entries.values()))

    def label(self) -> str:
        if self.host:
            return f"{self.host}:{self.schema}"
        return self.schema
