"""Tests for gettext_cms.storage.factory module."""

import pytest

from gettext_cms.storage import factory
from gettext_cms.storage.repository import InMemoryMessageRepository
from gettext_cms.storage.service import MessageStorage


@pytest.fixture(autouse=True)
def reset_storage():
    factory.reset_message_storage()
    yield
    factory.reset_message_storage()


@pytest.mark.unit
class TestStorageFactory:
    """Tests for the message storage singleton."""

    def test_get_message_storage_uses_memory_backend(self):
        storage = factory.get_message_storage()

        assert isinstance(storage, MessageStorage)
        assert isinstance(storage.repository, InMemoryMessageRepository)

    def test_get_message_storage_returns_singleton(self):
        assert factory.get_message_storage() is factory.get_message_storage()

    def test_reset_creates_new_instance(self):
        first = factory.get_message_storage()
        factory.reset_message_storage()

        assert factory.get_message_storage() is not first

    def test_unsupported_backend(self, monkeypatch):
        monkeypatch.setattr(factory.settings.storage, "backend", "mysql")

        with pytest.raises(ValueError, match="Unsupported storage backend"):
            factory.get_message_storage()
