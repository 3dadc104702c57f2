"""Conversion between Babel message catalogs and MessageCatalog.

Lets catalogs read with ``babel.messages.pofile.read_po`` (or built by an
extraction run) be saved through MessageStorage, and stored catalogs be
written back out with ``write_po``/``write_mo``.
"""

from typing import Optional, Union

from babel.core import Locale
from babel.messages.catalog import Catalog, Message

from gettext_cms.configuration import settings
from gettext_cms.logging import get_module_logger
from gettext_cms.storage.models import MessageCatalog, MessageEntry

logger = get_module_logger()


def _babel_locale(locale: str) -> Union[Locale, str, None]:
    """Accept BCP 47 style identifiers ("pt-BR") next to POSIX ones ("pt_BR")."""
    if not locale:
        return None
    if "-" in locale:
        return Locale.parse(locale, sep="-")
    return locale


def message_to_entry(message: Message, is_disabled: bool = False) -> MessageEntry:
    """Convert a Babel message to a MessageEntry.

    Args:
        message: Babel message, singular or pluralizable.
        is_disabled: Whether the message came from the obsolete section.

    Returns:
        MessageEntry with the message content.
    """
    if message.pluralizable:
        original, original_plural = message.id[0], message.id[1]
        strings = message.string or ()
        if isinstance(strings, str):
            strings = (strings,)
        forms = [form or "" for form in strings]
        translation = forms[0] if forms else ""
    else:
        original, original_plural = message.id, ""
        forms = []
        translation = message.string or ""

    entry = MessageEntry(
        original=original,
        context=message.context or "",
        original_plural=original_plural,
        translation=translation,
        plural_translations=forms,
        is_disabled=is_disabled,
    )
    for filename, lineno in message.locations:
        entry.add_reference(filename, lineno)
    for comment in message.user_comments:
        entry.add_comment(comment)
    for comment in message.auto_comments:
        entry.add_extracted_comment(comment)
    return entry


def from_babel_catalog(catalog: Catalog, domain: Optional[str] = None) -> MessageCatalog:
    """Convert a Babel catalog to a MessageCatalog.

    The header entry is skipped; obsolete messages become disabled entries.

    Args:
        catalog: Babel catalog, typically from ``read_po``.
        domain: Domain to use. Defaults to ``catalog.domain``, then to the
            configured default domain.

    Returns:
        MessageCatalog ready for MessageStorage.save_catalog().
    """
    result = MessageCatalog(
        locale=catalog.locale_identifier or "",
        domain=domain or catalog.domain or settings.storage.default_domain,
    )

    for message in catalog:
        if not message.id:
            continue
        result.append(message_to_entry(message))

    for message in catalog.obsolete.values():
        result.append(message_to_entry(message, is_disabled=True))

    logger.debug(
        "babel_catalog_converted",
        locale=result.locale,
        domain=result.domain,
        count=len(result),
    )
    return result


def to_babel_catalog(message_catalog: MessageCatalog) -> Catalog:
    """Convert a MessageCatalog to a Babel catalog.

    Disabled entries are written to the obsolete section.

    Args:
        message_catalog: Catalog to convert.

    Returns:
        Babel Catalog with locale and domain set.
    """
    catalog = Catalog(
        locale=_babel_locale(message_catalog.locale),
        domain=message_catalog.domain or None,
    )

    for entry in message_catalog:
        if entry.has_plural():
            message_id = (entry.original, entry.original_plural)
            string = tuple(entry.plural_translations) or (entry.translation,)
        else:
            message_id = entry.original
            string = entry.translation

        message = Message(
            message_id,
            string,
            locations=list(entry.references),
            auto_comments=list(entry.extracted_comments),
            user_comments=list(entry.comments),
            context=entry.context or None,
        )

        if entry.is_disabled:
            key = (entry.original, entry.context) if entry.context else entry.original
            catalog.obsolete[key] = message
        else:
            catalog[message_id] = message

    return catalog
