import os

from diner.domain.registry import Registry


def create_registry(backend: str | None = None) -> Registry:
    """
    Factory: create the right registry adapter based on config.

    The backend can be passed explicitly or read from the
    DINER_REGISTRY_BACKEND env var. Defaults to "memory".
    """
    backend = backend or os.environ.get("DINER_REGISTRY_BACKEND", "memory")

    if backend == "memory":
        from .memory_registry import InMemoryRegistry

        return InMemoryRegistry()

    if backend == "locked":
        from .locked_registry import LockedRegistry

        return LockedRegistry()

    raise ValueError(f"Unknown registry backend: {backend!r}")
