"""Data models for the resource manifest."""
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional, Tuple


@dataclass(frozen=True)
class ResourceConfig:
    schema: str
    repository: str
    host: Optional[str] = None
    suffix: bool = True
    only: Optional[Tuple[str, ...]] = None
    except_: Optional[Tuple[str, ...]] = None
    preset: Optional[str] = None

    def selector(self) -> Any:
        if self.only is not None:
            return {"only": list(self.only)}
        if self.except_ is not None:
            return {"except": list(self.except_)}
        return self.preset

    def options(self) -> Dict[str, Any]:
        options: Dict[str, Any] = {"suffix": self.suffix}
        selector = self.selector()
        if selector is not None:
            options["selector"] = selector
        return options


@dataclass(frozen=True)
class Manifest:
    resources: Tuple[ResourceConfig, ...]
    repository: str = "memory"
    plugins: Tuple[str, ...] = tuple()
    paths: Tuple[Path, ...] = tuple()
    source: Optional[Path] = None
