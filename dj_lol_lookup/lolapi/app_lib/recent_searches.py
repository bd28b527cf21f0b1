import json
import logging

logger = logging.getLogger(__name__)


class RecentSearches:
    """Most recent searched names first, kept in an injected key-value storage (e.g. a Django session)"""
    STORAGE_KEY = 'lol-recent-searches'
    LIMIT = 10

    def __init__(self, storage):
        self.__storage = storage

    def get(self):
        saved = self.__storage.get(self.STORAGE_KEY)
        if not saved:
            return []
        try:
            searches = json.loads(saved)
        except ValueError as e:
            logger.error("Failed to parse recent searches: %s", e)
            return []
        if not isinstance(searches, list):
            logger.error("Failed to parse recent searches: not a list")
            return []
        return searches

    def add(self, name):
        updated = [name] + [n for n in self.get() if n != name]
        updated = updated[:self.LIMIT]
        self.__storage[self.STORAGE_KEY] = json.dumps(updated)
        return updated
