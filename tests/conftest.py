import pytest

from crudgen import bootstrap
from crudgen.backends import register_memory_repository
from crudgen.registry import clear_registry


@pytest.fixture(scope="session", autouse=True)
def setup_crudgen() -> None:
    """Bootstrap built-in repositories once for the entire test session."""

    bootstrap()


@pytest.fixture(autouse=True)
def memory_repository():
    """Each test starts with an empty in-memory repository and registry."""

    repository = register_memory_repository()
    repository.clear()
    clear_registry()
    yield repository
    repository.clear()
    clear_registry()
