"""Message storage factory."""

from typing import Optional

from gettext_cms.configuration import settings
from gettext_cms.logging import get_module_logger
from gettext_cms.storage.repository import InMemoryMessageRepository, MessageRepository
from gettext_cms.storage.service import MessageStorage

logger = get_module_logger()

# Singleton storage instance
_storage_instance: Optional[MessageStorage] = None


def create_repository(backend: str) -> MessageRepository:
    """Create a repository for the named backend.

    Args:
        backend: Backend name from settings.storage.backend.

    Returns:
        MessageRepository instance.

    Raises:
        ValueError: If the backend is not supported.
    """
    if backend == "memory":
        return InMemoryMessageRepository()
    raise ValueError(f"Unsupported storage backend: {backend}")


def get_message_storage() -> MessageStorage:
    """Get the message storage singleton.

    Returns:
        MessageStorage backed by the configured repository.
    """
    global _storage_instance

    if _storage_instance is not None:
        return _storage_instance

    backend = settings.storage.backend
    _storage_instance = MessageStorage(create_repository(backend))
    logger.info("initialized_message_storage", backend=backend)

    return _storage_instance


def reset_message_storage() -> None:
    """Reset the storage singleton (for testing only)."""
    global _storage_instance
    _storage_instance = None
    logger.debug("reset_message_storage_singleton")
