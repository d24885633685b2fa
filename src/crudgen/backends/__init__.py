"""Repository driver exports."""
from .base import RepositoryDriver, RepositoryManager, repository_manager, resolve_repository
from .memory import InMemoryRepository, register_memory_repository

__all__ = [
    "InMemoryRepository",
    "RepositoryDriver",
    "RepositoryManager",
    "register_memory_repository",
    "repository_manager",
    "resolve_repository",
]
