"""Abstract base class for key-value storage backends.

The abstraction hides:
- Storage format (JSON document, process memory)
- Persistence mechanism and location
- Write atomicity
"""

from abc import ABC, abstractmethod


class KeyValueStore(ABC):
    """String-keyed store of serialized string values.

    Calls are synchronous; implementations raise StorageError when the
    underlying medium cannot be read or written.
    """

    @abstractmethod
    def get(self, key: str) -> str | None:
        """Return the value stored under key, or None if absent."""

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        """Store value under key, replacing any previous value."""

    @abstractmethod
    def delete(self, key: str) -> None:
        """Remove key if present."""

    @property
    @abstractmethod
    def backend_type(self) -> str:
        """Get the backend type identifier."""
