"""Message repository interface and in-memory implementation.

The repository is the system of record for message items. MessageStorage only
talks to this interface, so SQL, document or file backends can be swapped in
without touching the merge logic.
"""

import copy
import threading
from abc import ABC, abstractmethod
from typing import Callable, Dict, List, Optional

from gettext_cms.logging import get_module_logger
from gettext_cms.storage.models import MessageItem

logger = get_module_logger()


class MessageRepository(ABC):
    """Abstract base for message item repositories.

    Implementations backed by a multi-writer store are responsible for
    serializing writes per key if stronger guarantees than last-write-wins
    are needed.
    """

    @abstractmethod
    def get_single(self, key: str) -> Optional[MessageItem]:
        """Get a stored item by its key.

        Args:
            key: Message fingerprint.

        Returns:
            The stored MessageItem, or None if not found.
        """
        pass

    @abstractmethod
    def save(self, item: MessageItem) -> None:
        """Create or update an item, keyed by ``item.key``.

        Args:
            item: MessageItem to persist.
        """
        pass

    @abstractmethod
    def get_all(self, locale: str, domain: str) -> List[MessageItem]:
        """Get all items, including disabled and untranslated ones."""
        pass

    @abstractmethod
    def get_enabled(self, locale: str, domain: str) -> List[MessageItem]:
        """Get items that are not disabled."""
        pass

    @abstractmethod
    def get_enabled_translated(self, locale: str, domain: str) -> List[MessageItem]:
        """Get items that are not disabled and have a translation."""
        pass

    @abstractmethod
    def get_requires_translating(self, locale: str, domain: str) -> List[MessageItem]:
        """Get enabled items that still need a translation or plural forms."""
        pass

    @abstractmethod
    def disable_all(self, locale: str, domain: str) -> None:
        """Mark every item in the locale and domain as disabled."""
        pass


class InMemoryMessageRepository(MessageRepository):
    """Repository keeping message items in process memory.

    Items are kept in insertion order; updating an existing key keeps its
    position. Stored and returned items are copies, so callers can never
    modify the store by accident.

    Attributes:
        _items: Dict mapping key to MessageItem.
        _lock: Threading lock for thread-safe operations.
    """

    def __init__(self):
        self._items: Dict[str, MessageItem] = {}
        self._lock = threading.Lock()

    def get_single(self, key: str) -> Optional[MessageItem]:
        with self._lock:
            item = self._items.get(key)
            return copy.deepcopy(item) if item is not None else None

    def save(self, item: MessageItem) -> None:
        with self._lock:
            self._items[item.key] = copy.deepcopy(item)
        logger.debug("message_item_saved", key=item.key)

    def get_all(self, locale: str, domain: str) -> List[MessageItem]:
        return self._filter(locale, domain, lambda item: True)

    def get_enabled(self, locale: str, domain: str) -> List[MessageItem]:
        return self._filter(locale, domain, lambda item: not item.is_disabled)

    def get_enabled_translated(self, locale: str, domain: str) -> List[MessageItem]:
        return self._filter(
            locale,
            domain,
            lambda item: not item.is_disabled and item.has_original_translation,
        )

    def get_requires_translating(self, locale: str, domain: str) -> List[MessageItem]:
        return self._filter(
            locale,
            domain,
            lambda item: not item.is_disabled and item.requires_translating,
        )

    def disable_all(self, locale: str, domain: str) -> None:
        count = 0
        with self._lock:
            for item in self._items.values():
                if item.locale == locale and item.domain == domain:
                    item.is_disabled = True
                    count += 1
        logger.info("disabled_all_messages", locale=locale, domain=domain, count=count)

    def clear(self) -> None:
        """Remove every stored item (for testing)."""
        with self._lock:
            self._items.clear()

    def _filter(
        self,
        locale: str,
        domain: str,
        predicate: Callable[[MessageItem], bool],
    ) -> List[MessageItem]:
        with self._lock:
            return [
                copy.deepcopy(item)
                for item in self._items.values()
                if item.locale == locale and item.domain == domain and predicate(item)
            ]
