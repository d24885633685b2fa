"""Repository driver abstractions."""
from __future__ import annotations

from typing import Any, Dict, Iterable, List, Mapping, Optional

from crudgen.core import Changeset


class RepositoryDriver:
    """Base interface for storage repositories used by generated functions."""

    name: str = ""

    def all(
        self,
        schema: type,
        where: Optional[Mapping[str, Any]] = None,
        order_by: Optional[str] = None,
        limit: Optional[int] = None,
    ) -> List[Any]:
        raise NotImplementedError

    def get(self, schema: type, record_id: Any) -> Any:
        raise NotImplementedError

    def get_by(self, schema: type, clauses: Mapping[str, Any]) -> Any:
        raise NotImplementedError

    def insert(self, changeset: Changeset) -> Any:
        raise NotImplementedError

    def update(self, changeset: Changeset) -> Any:
        raise NotImplementedError

    def delete(self, schema: type, record: Any) -> Any:
        raise NotImplementedError


class RepositoryManager:
    """Registry for repository drivers keyed by name."""

    def __init__(self) -> None:
        self._drivers: Dict[str, RepositoryDriver] = {}

    def register(self, driver: RepositoryDriver) -> RepositoryDriver:
        if not driver.name:
            raise ValueError("Repository drivers need a name to be registered")
        if driver.name in self._drivers:
            raise ValueError(f"Repository '{driver.name}' already registered")
        self._drivers[driver.name] = driver
        return driver

    def get_driver(self, name: str) -> RepositoryDriver:
        try:
            return self._drivers[name]
        except KeyError as exc:
            known = ", ".join(sorted(self._drivers)) or "none"
            raise KeyError(f"No repository registered as {name!r} (known: {known})") from exc

    def unregister(self, name: str) -> None:
        self._drivers.pop(name, None)

    def __contains__(self, name: object) -> bool:
        return name in self._drivers

    def drivers(self) -> Iterable[RepositoryDriver]:
        return tuple(self._drivers.values())


repository_manager = RepositoryManager()


def resolve_repository(repository: Any) -> RepositoryDriver:
    """Accept a driver instance or the name of a registered driver."""

    if isinstance(repository, RepositoryDriver):
        return repository
    if isinstance(repository, str):
        return repository_manager.get_driver(repository)
    raise TypeError(f"Expected a RepositoryDriver or driver name, got {repository!r}")
