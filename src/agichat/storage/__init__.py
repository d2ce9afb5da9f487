"""Persistent key-value storage for agichat.

Holds small serialized records (user configuration) across restarts.
"""

from .base import KeyValueStore
from .factory import create_kv_store

__all__ = [
    "KeyValueStore",
    "create_kv_store",
]
