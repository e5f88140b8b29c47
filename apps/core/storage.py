"""
Persisted key-value storage for tokens and store snapshots.

Backed by the Django cache (Redis in development, local memory in tests).
Values are JSON-encoded and never expire.
"""
import json
import logging

from django.core.cache import caches

logger = logging.getLogger(__name__)


class PersistedStorage:
    """Key-value storage with the semantics of browser local storage."""

    def __init__(self, alias='default'):
        self.alias = alias

    @property
    def _cache(self):
        return caches[self.alias]

    def get_item(self, key, default=None):
        raw = self._cache.get(key)
        if raw is None:
            return default
        try:
            return json.loads(raw)
        except (TypeError, ValueError):
            logger.warning(f"Discarding unreadable storage value for key '{key}'")
            return default

    def set_item(self, key, value):
        self._cache.set(key, json.dumps(value), timeout=None)

    def remove_item(self, key):
        self._cache.delete(key)

    def has_item(self, key):
        return self._cache.get(key) is not None

    def clear(self):
        self._cache.clear()


_storage = None


def get_storage():
    """Return the shared storage instance."""
    global _storage
    if _storage is None:
        _storage = PersistedStorage()
    return _storage
