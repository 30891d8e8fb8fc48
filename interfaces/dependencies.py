"""FastAPI dependency providing the Lagom container."""

from functools import lru_cache

from lagom import Container

from infrastructure.config import settings
from infrastructure.di.container import create_container


@lru_cache
def get_container() -> Container:
    """Return the process-wide container.

    The catalog engine and blob store client inside it are built once, so
    every request shares one connection pool. Tests replace this dependency
    through ``app.dependency_overrides``.
    """
    return create_container(settings)
