"""Message storage models.

Defines the in-memory translation unit (MessageEntry), its persisted form
(MessageItem) and the per-locale, per-domain container (MessageCatalog).
"""

import copy
from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Tuple

Reference = Tuple[str, Optional[int]]


@dataclass
class MessageEntry:
    """A single translatable message.

    Attributes:
        original: Singular source text (msgid).
        context: Disambiguating context (msgctxt), empty when absent.
        original_plural: Plural source text (msgid_plural), empty when absent.
        translation: Singular translation.
        plural_translations: Translations for every plural form, in form order.
        references: Source locations as (filename, line) pairs.
        comments: Translator comments.
        extracted_comments: Comments extracted from source code.
        is_disabled: Whether the message is no longer present in the source.
    """

    original: str
    context: str = ""
    original_plural: str = ""
    translation: str = ""
    plural_translations: List[str] = field(default_factory=list)
    references: List[Reference] = field(default_factory=list)
    comments: List[str] = field(default_factory=list)
    extracted_comments: List[str] = field(default_factory=list)
    is_disabled: bool = False

    def has_translation(self) -> bool:
        return self.translation != ""

    def has_plural(self) -> bool:
        return self.original_plural != ""

    def has_plural_translations(self) -> bool:
        return any(self.plural_translations)

    def translated_plural_count(self) -> int:
        """Number of plural forms carrying a non-empty translation."""
        return len([v for v in self.plural_translations if v])

    def add_reference(self, filename: str, line: Optional[int] = None) -> None:
        reference = (filename, line)
        if reference not in self.references:
            self.references.append(reference)

    def add_comment(self, comment: str) -> None:
        if comment not in self.comments:
            self.comments.append(comment)

    def add_extracted_comment(self, comment: str) -> None:
        if comment not in self.extracted_comments:
            self.extracted_comments.append(comment)

    def copy(self) -> "MessageEntry":
        """Return an independent deep copy of this entry."""
        return copy.deepcopy(self)

    def merge_with(self, existing: "MessageEntry") -> "MessageEntry":
        """Merge a previously stored entry underneath this one.

        Translated text from ``existing`` fills in whatever this entry leaves
        empty. References and comments always come from this entry, as it
        reflects the latest source scan. Neither entry is modified.

        Args:
            existing: Previously stored version of the same message.

        Returns:
            A new MessageEntry holding the merged content.
        """
        merged = self.copy()

        if not merged.has_translation():
            merged.translation = existing.translation

        if not merged.has_plural():
            merged.original_plural = existing.original_plural

        if not merged.has_plural_translations():
            merged.plural_translations = list(existing.plural_translations)

        return merged


@dataclass
class MessageItem:
    """Persisted form of a MessageEntry.

    Attributes:
        key: Fingerprint of (locale, domain, context, original).
        locale: Locale code (e.g., "lt", "en_US").
        domain: Message domain.
        has_original_translation: Whether a singular translation is present.
        requires_translating: Whether the translation or any required
            plural form is missing.

    The remaining attributes mirror MessageEntry.
    """

    key: str
    locale: str
    domain: str
    original: str
    context: str = ""
    original_plural: str = ""
    translation: str = ""
    plural_translations: List[str] = field(default_factory=list)
    references: List[Reference] = field(default_factory=list)
    comments: List[str] = field(default_factory=list)
    extracted_comments: List[str] = field(default_factory=list)
    is_disabled: bool = False
    has_original_translation: bool = False
    requires_translating: bool = False


@dataclass
class MessageCatalog:
    """Ordered collection of entries for one locale and domain.

    Attributes:
        locale: Locale code the entries are translated into.
        domain: Domain the entries belong to.
        entries: Entries in catalog order. Entries sharing an identity are
            allowed; the last one wins when the catalog is saved.
    """

    locale: str = ""
    domain: str = ""
    entries: List[MessageEntry] = field(default_factory=list)

    def __iter__(self) -> Iterator[MessageEntry]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)

    def append(self, entry: MessageEntry) -> None:
        self.entries.append(entry)

    def extend(self, entries: List[MessageEntry]) -> None:
        self.entries.extend(entries)

    def find(self, original: str, context: str = "") -> Optional[MessageEntry]:
        """Find the last entry with the given original and context.

        Args:
            original: Singular source text.
            context: Message context, empty when absent.

        Returns:
            Matching MessageEntry, or None if not found.
        """
        for entry in reversed(self.entries):
            if entry.original == original and entry.context == context:
                return entry
        return None
