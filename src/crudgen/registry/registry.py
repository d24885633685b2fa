"""Resource registry implementation."""
from __future__ import annotations

from typing import Any, Dict, Iterable, Iterator, Tuple

ResourceKey = Tuple[str, str]


class ResourceRegistry:
    """Stores bound resources and exposes lookup utilities.

    Entries are keyed by ``(host name, schema name)``.
    """

    def __init__(self) -> None:
        self._resources: Dict[ResourceKey, Any] = {}

    def update_or_register(self, resource: Any) -> Any:
        self._resources[_key(resource)] = resource
        return resource

    def get(self, host: str, schema_name: str) -> Any:
        try:
            return self._resources[(host, schema_name)]
        except KeyError as exc:
            raise KeyError(f"Resource '{schema_name}' is not registered on '{host}'") from exc

    def __contains__(self, key: object) -> bool:
        return key in self._resources

    def __iter__(self) -> Iterator[Any]:
        return iter(self._resources.values())

    def __len__(self) -> int:
        return len(self._resources)

    def names(self) -> Iterable[ResourceKey]:
        return tuple(self._resources.keys())


def _key(resource: Any) -> ResourceKey:
    return (resource.host, resource.schema.__name__)


registry = ResourceRegistry()


def clear_registry() -> None:
    registry._resources.clear()
