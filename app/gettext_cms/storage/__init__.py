"""Message storage - translation persistence and merge layer.

Main components:
- models: MessageEntry, MessageItem, MessageCatalog
- repository: MessageRepository and InMemoryMessageRepository
- plurals: PluralRuleProvider and BabelPluralRuleProvider
- service: MessageStorage coordinator
- babel_catalog: conversion to and from Babel catalogs
"""

from gettext_cms.storage.babel_catalog import from_babel_catalog, to_babel_catalog
from gettext_cms.storage.exceptions import (
    GettextCmsError,
    InvalidLocaleError,
    InvalidTranslationError,
)
from gettext_cms.storage.factory import get_message_storage, reset_message_storage
from gettext_cms.storage.models import MessageCatalog, MessageEntry, MessageItem
from gettext_cms.storage.plurals import BabelPluralRuleProvider, PluralRuleProvider
from gettext_cms.storage.repository import InMemoryMessageRepository, MessageRepository
from gettext_cms.storage.service import (
    MessageStorage,
    entry_to_item,
    item_to_entry,
    message_key,
)

__all__ = [
    "MessageEntry",
    "MessageItem",
    "MessageCatalog",
    "MessageRepository",
    "InMemoryMessageRepository",
    "PluralRuleProvider",
    "BabelPluralRuleProvider",
    "MessageStorage",
    "message_key",
    "entry_to_item",
    "item_to_entry",
    "from_babel_catalog",
    "to_babel_catalog",
    "get_message_storage",
    "reset_message_storage",
    "GettextCmsError",
    "InvalidTranslationError",
    "InvalidLocaleError",
]
