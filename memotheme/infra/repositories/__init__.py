"""Key-value repositories for the learning tables.

- KeyValueStore: interface
- InMemoryKeyValueStore: dict-backed, for tests and ephemeral sessions
- KuzuKeyValueStore: persisted in KùzuDB
"""

from .base import KeyValueStore
from .kuzu_store import KuzuKeyValueStore
from .memory import InMemoryKeyValueStore

__all__ = [
    "KeyValueStore",
    "InMemoryKeyValueStore",
    "KuzuKeyValueStore",
]
