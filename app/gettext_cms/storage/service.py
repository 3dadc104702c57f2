"""Message storage coordinator.

Saves catalogs by merging every entry with its previously stored version and
rebuilds catalogs from filtered repository queries.
"""

import hashlib
import json
import threading
from typing import Dict, List, Optional

from gettext_cms.logging import get_module_logger
from gettext_cms.storage.exceptions import InvalidTranslationError
from gettext_cms.storage.models import MessageCatalog, MessageEntry, MessageItem
from gettext_cms.storage.plurals import BabelPluralRuleProvider, PluralRuleProvider
from gettext_cms.storage.repository import MessageRepository

logger = get_module_logger()


def message_key(locale: str, domain: str, context: str, original: str) -> str:
    """Generate the storage key (primary key) for a message.

    Args:
        locale: Locale code.
        domain: Message domain.
        context: Message context, empty when absent.
        original: Singular source text.

    Returns:
        Hex md5 digest of the fields encoded as a JSON array.
    """
    # JSON quoting keeps field boundaries unambiguous whatever the text holds
    raw = json.dumps([locale, domain, context or "", original])
    return hashlib.md5(raw.encode("utf-8"), usedforsecurity=False).hexdigest()


def entry_to_item(locale: str, domain: str, entry: MessageEntry) -> MessageItem:
    """Convert an entry to its persisted form.

    Derived flags are left at their defaults; MessageStorage sets them.
    """
    return MessageItem(
        key=message_key(locale, domain, entry.context, entry.original),
        locale=locale,
        domain=domain,
        original=entry.original,
        context=entry.context or "",
        original_plural=entry.original_plural,
        translation=entry.translation,
        plural_translations=list(entry.plural_translations),
        references=list(entry.references),
        comments=list(entry.comments),
        extracted_comments=list(entry.extracted_comments),
        is_disabled=entry.is_disabled,
    )


def item_to_entry(item: MessageItem) -> MessageEntry:
    """Convert a persisted item back to an entry."""
    return MessageEntry(
        original=item.original,
        context=item.context,
        original_plural=item.original_plural,
        translation=item.translation,
        plural_translations=list(item.plural_translations),
        references=[tuple(ref) for ref in item.references],
        comments=list(item.comments),
        extracted_comments=list(item.extracted_comments),
        is_disabled=item.is_disabled,
    )


class MessageStorage:
    """Saves and retrieves translations using the given repository.

    Usage:
        storage = MessageStorage(InMemoryMessageRepository())
        storage.save_catalog(catalog)
        pending = storage.get_requires_translating("lt", "messages")

    Attributes:
        repository: MessageRepository holding the message items.
        plural_rules: PluralRuleProvider resolving plural form counts.
    """

    def __init__(
        self,
        repository: MessageRepository,
        plural_rules: Optional[PluralRuleProvider] = None,
    ):
        """Initialize message storage.

        Args:
            repository: Repository used as the system of record.
            plural_rules: Optional plural rule provider. Defaults to
                BabelPluralRuleProvider.
        """
        self.repository = repository
        self.plural_rules = plural_rules or BabelPluralRuleProvider()
        self._plural_counts: Dict[str, int] = {}
        self._plural_lock = threading.Lock()

    def save_catalog(self, catalog: MessageCatalog) -> None:
        """Save every entry of a catalog for a single locale and domain.

        Entries are saved in catalog order and not as a transaction: if an
        entry fails, the entries before it stay saved.

        Args:
            catalog: Catalog to save.

        Raises:
            InvalidTranslationError: If the catalog has no locale or domain.
            InvalidLocaleError: If plural rules for the locale are unknown.
        """
        locale = catalog.locale
        domain = catalog.domain or ""

        if not locale:
            logger.warning("catalog_rejected", reason="locale_missing", domain=domain)
            raise InvalidTranslationError("Locale is missing")

        if not domain:
            logger.warning("catalog_rejected", reason="domain_missing", locale=locale)
            raise InvalidTranslationError("Domain is missing")

        for entry in catalog:
            self.save_single(locale, domain, entry)

        logger.info("catalog_saved", locale=locale, domain=domain, count=len(catalog))

    def save_single(self, locale: str, domain: str, entry: MessageEntry) -> MessageItem:
        """Save an entry by merging it into its previously saved version.

        Args:
            locale: Locale code.
            domain: Message domain.
            entry: Entry to save. It is not modified.

        Returns:
            The MessageItem passed to the repository.

        Raises:
            InvalidLocaleError: If plural rules for the locale are unknown.
        """
        entry = entry.copy()
        key = message_key(locale, domain, entry.context, entry.original)

        existing_item = self.repository.get_single(key)

        if existing_item is not None:
            merged = entry.merge_with(item_to_entry(existing_item))
            item = entry_to_item(locale, domain, merged)
            # The latest source scan decides whether the message is disabled
            item.is_disabled = entry.is_disabled
        else:
            merged = entry
            item = entry_to_item(locale, domain, merged)

        item.has_original_translation = merged.has_translation()
        item.requires_translating = self._requires_translating(locale, merged)

        self.repository.save(item)
        logger.debug(
            "message_saved",
            key=key,
            merged=existing_item is not None,
            requires_translating=item.requires_translating,
        )
        return item

    def get_plural_count(self, locale: str) -> int:
        """Get the number of plural forms for a locale.

        Resolved once per locale, then served from cache.

        Args:
            locale: Locale code.

        Returns:
            Number of plural forms.

        Raises:
            InvalidLocaleError: If the locale is not recognized.
        """
        with self._plural_lock:
            if locale not in self._plural_counts:
                count = self.plural_rules.categories_for(locale)
                self._plural_counts[locale] = count
                logger.debug("plural_count_resolved", locale=locale, count=count)
            return self._plural_counts[locale]

    def get_all(self, locale: str, domain: str) -> MessageCatalog:
        """All translations, including disabled, enabled and untranslated."""
        return self._to_catalog(locale, domain, self.repository.get_all(locale, domain))

    def get_all_enabled(self, locale: str, domain: str) -> MessageCatalog:
        """All enabled translations, including untranslated."""
        return self._to_catalog(
            locale, domain, self.repository.get_enabled(locale, domain)
        )

    def get_enabled_translated(self, locale: str, domain: str) -> MessageCatalog:
        """Enabled and translated translations only."""
        items = self.repository.get_enabled_translated(locale, domain)
        return self._to_catalog(locale, domain, items)

    def get_requires_translating(self, locale: str, domain: str) -> MessageCatalog:
        """Translations missing a translation or some of their plural forms."""
        return self._to_catalog(
            locale, domain, self.repository.get_requires_translating(locale, domain)
        )

    def disable_all(self, locale: str, domain: str) -> None:
        """Mark all messages in the given locale and domain as disabled."""
        self.repository.disable_all(locale, domain)

    def _requires_translating(self, locale: str, entry: MessageEntry) -> bool:
        if not entry.has_translation():
            return True

        if entry.has_plural():
            return self.get_plural_count(locale) != entry.translated_plural_count()

        return False

    def _to_catalog(
        self, locale: str, domain: str, items: List[MessageItem]
    ) -> MessageCatalog:
        catalog = MessageCatalog(locale=locale, domain=domain)
        catalog.extend([item_to_entry(item) for item in items])
        return catalog
