"""
Persisted key-value settings store.
Injected into FavoriteSet in place of a process-wide defaults object.
"""

import copy
import json
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

from .db import get_db, health_check, init_db
from ..util.logging import logger


class SettingsStore(ABC):
    """Abstract interface for a flat key-value settings store."""

    @abstractmethod
    def get(self, key: str) -> Optional[Any]:
        """Return the stored value for key, or None when absent."""
        pass

    @abstractmethod
    def set(self, key: str, value: Any) -> bool:
        """Store a JSON-serialisable value under key. Returns True on success."""
        pass

    @abstractmethod
    def delete(self, key: str) -> bool:
        """Remove key. Returns True if a value was removed."""
        pass

    @abstractmethod
    def keys(self) -> List[str]:
        """List stored keys."""
        pass


class InMemorySettingsStore(SettingsStore):
    """Dict-backed store for tests and the `memory` backend."""

    def __init__(self, initial: Optional[Dict[str, Any]] = None):
        self._data: Dict[str, Any] = copy.deepcopy(initial) if initial else {}

    def get(self, key: str) -> Optional[Any]:
        if key not in self._data:
            return None
        # Copies keep callers from mutating stored lists in place
        return copy.deepcopy(self._data[key])

    def set(self, key: str, value: Any) -> bool:
        self._data[key] = copy.deepcopy(value)
        return True

    def delete(self, key: str) -> bool:
        return self._data.pop(key, None) is not None

    def keys(self) -> List[str]:
        return list(self._data.keys())


class SQLiteSettingsStore(SettingsStore):
    """SQLite-backed settings store with JSON-encoded values."""

    def __init__(self, db_path: Optional[str] = None):
        self.db_path = db_path
        init_db(self.db_path)

    def get(self, key: str) -> Optional[Any]:
        """Get a value by key; database or decode failures are logged and read as absent."""
        try:
            if not key or not key.strip():
                return None

            with get_db(self.db_path) as conn:
                cursor = conn.cursor()
                cursor.execute("SELECT value FROM settings WHERE key = ?", (key,))
                row = cursor.fetchone()

            if row is None:
                return None
            return json.loads(row[0])
        except json.JSONDecodeError as e:
            logger.warning(f"Stored value for settings key '{key}' is not valid JSON: {e}")
            return None
        except Exception as e:
            logger.error(f"Failed to get settings key '{key}': {e}")
            return None

    def set(self, key: str, value: Any) -> bool:
        """Insert or replace a value."""
        try:
            encoded = json.dumps(value)
        except (TypeError, ValueError) as e:
            logger.error(f"Value for settings key '{key}' is not JSON serialisable: {e}")
            return False

        try:
            with get_db(self.db_path) as conn:
                cursor = conn.cursor()
                cursor.execute(
                    "INSERT INTO settings (key, value, updated_at) VALUES (?, ?, CURRENT_TIMESTAMP) "
                    "ON CONFLICT(key) DO UPDATE SET value = excluded.value, updated_at = CURRENT_TIMESTAMP",
                    (key, encoded)
                )
                conn.commit()
        except Exception as db_error:
            logger.error(f"Database error during settings set for key '{key}': {db_error}")
            return False

        logger.log_settings_operation("set", key)
        return True

    def delete(self, key: str) -> bool:
        try:
            with get_db(self.db_path) as conn:
                cursor = conn.cursor()
                cursor.execute("DELETE FROM settings WHERE key = ?", (key,))
                conn.commit()
                removed = cursor.rowcount > 0
        except Exception as e:
            logger.error(f"Failed to delete settings key '{key}': {e}")
            return False

        if removed:
            logger.log_settings_operation("delete", key)
        return removed

    def keys(self) -> List[str]:
        try:
            with get_db(self.db_path) as conn:
                cursor = conn.cursor()
                cursor.execute("SELECT key FROM settings ORDER BY key")
                return [row[0] for row in cursor.fetchall()]
        except Exception as e:
            logger.error(f"Failed to list settings keys: {e}")
            return []

    def health_check(self) -> bool:
        return health_check(self.db_path)
