"""Example plugin registering a second in-memory repository."""
from crudgen.backends import InMemoryRepository, repository_manager


def register() -> None:
    if "archive" not in repository_manager:
        repository_manager.register(InMemoryRepository(name="archive"))
