"""
Favorite set persisted as a string list under one settings key.
No caching: every lookup re-reads the settings store.
"""

from typing import Any, List, Optional, Set

from .config import FAVORITES_KEY
from .settings_store import SettingsStore
from ..util.logging import logger


class FavoriteSet:
    """
    Deduplicated favorite keys with toggle semantics.

    The backing value is a JSON list so the saved order survives; membership
    is what matters. A single writer per process is assumed.
    """

    def __init__(self, store: SettingsStore, settings_key: Optional[str] = None):
        self.store = store
        self.settings_key = settings_key or FAVORITES_KEY

    def _load(self) -> List[str]:
        raw: Any = self.store.get(self.settings_key)
        if raw is None:
            return []
        if not isinstance(raw, list) or not all(isinstance(item, str) for item in raw):
            logger.warning(f"Ignoring malformed favorites value under '{self.settings_key}'")
            return []

        names: List[str] = []
        for item in raw:
            if item not in names:
                names.append(item)
        return names

    def toggle(self, key: str) -> bool:
        """
        Add `key` if absent, remove it if present, and persist the full list.

        Returns the membership after the call. An empty key is a no-op that
        returns False. If the write fails the previous membership is returned.
        """
        if not key:
            logger.debug("Favorite toggle ignored: no key")
            return False

        names = self._load()
        was_member = key in names
        if was_member:
            names = [name for name in names if name != key]
        else:
            names.append(key)

        if not self.store.set(self.settings_key, names):
            logger.log_favorite_toggle(key, was_member, status="failed")
            return was_member

        logger.log_favorite_toggle(key, not was_member)
        return not was_member

    def is_member(self, key: str) -> bool:
        if not key:
            return False
        return key in self._load()

    def all(self) -> Set[str]:
        return set(self._load())

    def names(self) -> List[str]:
        """Favorites in saved order."""
        return self._load()
