"""Factory for creating key-value storage backends."""

from typing import Any

from .base import KeyValueStore


def create_kv_store(
    backend: str = "file",
    **kwargs: Any
) -> KeyValueStore:
    """Create a key-value storage backend.

    Args:
        backend: Backend type ("file" or "memory")
        **kwargs: Backend-specific configuration
            For file:
                - path: str | Path (default: ~/.agichat/storage.json)
            For memory:
                - initial: dict[str, str] | None

    Returns:
        KeyValueStore instance

    Raises:
        ValueError: If backend type is not supported
    """
    if backend == "memory":
        from .in_memory import InMemoryKeyValueStore
        return InMemoryKeyValueStore(**kwargs)

    elif backend == "file":
        from .file import FileKeyValueStore
        return FileKeyValueStore(**kwargs)

    raise ValueError(
        f"Unsupported storage backend: {backend}. "
        f"Supported backends: file, memory"
    )
