"""KùzuDB-backed key-value store."""

from __future__ import annotations

import logging

from ...domain.exceptions import StorageError
from ..database import DatabaseConnection
from .base import KeyValueStore

logger = logging.getLogger(__name__)


class KuzuKeyValueStore(KeyValueStore):
    """Key-value store persisted in the KeyValue node table."""

    def __init__(self, db: DatabaseConnection) -> None:
        """Initialize the store.

        Args:
            db: Database connection owning the KeyValue table.
        """
        self._db = db

    def get_item(self, key: str) -> str | None:
        try:
            result = self._db.execute(
                """
                MATCH (k:KeyValue)
                WHERE k.key = $key
                RETURN k.value
                """,
                parameters={"key": key},
            )
            if not result.has_next():
                return None
            return result.get_next()[0]
        except Exception as e:
            raise StorageError(key, f"read failed: {e}") from e

    def set_item(self, key: str, value: str) -> None:
        try:
            self._db.execute(
                """
                MERGE (k:KeyValue {key: $key})
                ON CREATE SET k.value = $value
                ON MATCH SET k.value = $value
                """,
                parameters={"key": key, "value": value},
            )
        except Exception as e:
            raise StorageError(key, f"write failed: {e}") from e
        logger.debug(f"Stored {len(value)} characters under '{key}'")

    def remove_item(self, key: str) -> None:
        try:
            self._db.execute(
                """
                MATCH (k:KeyValue)
                WHERE k.key = $key
                DELETE k
                """,
                parameters={"key": key},
            )
        except Exception as e:
            raise StorageError(key, f"delete failed: {e}") from e

    def close(self) -> None:
        self._db.close()
