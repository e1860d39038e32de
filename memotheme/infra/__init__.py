"""Infrastructure layer - Persistence and catalog adapters."""

from .catalog import dump_themes, load_themes, parse_themes
from .database import DatabaseConnection
from .repositories import InMemoryKeyValueStore, KeyValueStore, KuzuKeyValueStore

__all__ = [
    "DatabaseConnection",
    "KeyValueStore",
    "InMemoryKeyValueStore",
    "KuzuKeyValueStore",
    "dump_themes",
    "load_themes",
    "parse_themes",
]
