"""Tests for gettext_cms.storage.babel_catalog module."""

from io import BytesIO

import pytest
from babel.messages.catalog import Catalog, Message
from babel.messages.pofile import read_po, write_po

from gettext_cms.storage.babel_catalog import (
    from_babel_catalog,
    message_to_entry,
    to_babel_catalog,
)
from gettext_cms.storage.models import MessageCatalog
from gettext_cms.storage.repository import InMemoryMessageRepository
from gettext_cms.storage.service import MessageStorage
from tests.factories.storage import make_message_entry, make_plural_entry

LT_PO = b"""\
msgid ""
msgstr ""
"Content-Type: text/plain; charset=UTF-8\\n"
"Plural-Forms: nplurals=3; plural=(n%10==1 && n%100!=11 ? 0 : n%10>=2 && (n%100<10 || n%100>=20) ? 1 : 2);\\n"

#. Shown on the start page
#: src/home.py:12
msgid "Hello"
msgstr "Labas"

# reviewed
#: src/cart.py:40
msgctxt "cart"
msgid "%d apple"
msgid_plural "%d apples"
msgstr[0] "%d obuolys"
msgstr[1] "%d obuoliai"
msgstr[2] "%d obuoli\xc5\xb3"

#~ msgid "Old"
#~ msgstr "Sena"
"""


@pytest.fixture
def lt_catalog():
    return read_po(BytesIO(LT_PO), locale="lt", domain="shop")


@pytest.mark.unit
class TestFromBabelCatalog:
    """Tests for from_babel_catalog()."""

    def test_header_skipped_and_locale_domain_set(self, lt_catalog):
        catalog = from_babel_catalog(lt_catalog)

        assert catalog.locale == "lt"
        assert catalog.domain == "shop"
        assert [e.original for e in catalog] == ["Hello", "%d apple", "Old"]

    def test_singular_message(self, lt_catalog):
        entry = from_babel_catalog(lt_catalog).find("Hello")

        assert entry.translation == "Labas"
        assert entry.references == [("src/home.py", 12)]
        assert entry.extracted_comments == ["Shown on the start page"]
        assert entry.is_disabled is False

    def test_plural_message(self, lt_catalog):
        entry = from_babel_catalog(lt_catalog).find("%d apple", context="cart")

        assert entry.original_plural == "%d apples"
        assert entry.translation == "%d obuolys"
        assert entry.plural_translations == ["%d obuolys", "%d obuoliai", "%d obuolių"]
        assert entry.comments == ["reviewed"]

    def test_obsolete_message_is_disabled(self, lt_catalog):
        entry = from_babel_catalog(lt_catalog).find("Old")

        assert entry.is_disabled is True
        assert entry.translation == "Sena"

    def test_domain_argument_overrides(self, lt_catalog):
        assert from_babel_catalog(lt_catalog, domain="admin").domain == "admin"

    def test_default_domain_from_settings(self):
        catalog = from_babel_catalog(Catalog(locale="lt"))
        assert catalog.domain == "messages"

    def test_message_without_locations(self):
        catalog = Catalog(locale="en")
        catalog.add("Bare")

        entry = message_to_entry(catalog["Bare"])

        assert entry.references == []
        assert entry.context == ""

    def test_plural_message_with_single_string(self):
        """A plain string on a plural message is one form, not one per character."""
        message = Message(("%d apple", "%d apples"), "obuolys")

        entry = message_to_entry(message)

        assert entry.translation == "obuolys"
        assert entry.plural_translations == ["obuolys"]


@pytest.mark.unit
class TestToBabelCatalog:
    """Tests for to_babel_catalog()."""

    def test_locale_and_domain(self):
        catalog = to_babel_catalog(MessageCatalog(locale="lt", domain="shop"))

        assert str(catalog.locale) == "lt"
        assert catalog.domain == "shop"

    def test_hyphenated_locale(self):
        """BCP 47 locales saved through storage can be exported."""
        storage = MessageStorage(InMemoryMessageRepository())
        storage.save_catalog(
            MessageCatalog(
                locale="pt-BR",
                domain="messages",
                entries=[make_message_entry(translation="Olá")],
            )
        )

        catalog = to_babel_catalog(storage.get_all("pt-BR", "messages"))

        assert str(catalog.locale) == "pt_BR"
        assert catalog.get("Hello").string == "Olá"

    def test_singular_and_plural_messages(self):
        message_catalog = MessageCatalog(
            locale="lt",
            domain="shop",
            entries=[
                make_message_entry(translation="Labas", comments=["ok"]),
                make_plural_entry(forms=["a", "b", "c"], context="cart"),
            ],
        )

        catalog = to_babel_catalog(message_catalog)

        hello = catalog.get("Hello")
        assert hello.string == "Labas"
        assert hello.user_comments == ["ok"]
        assert hello.locations == [("src/app.py", 10)]

        apple = catalog.get("%d apple", context="cart")
        assert apple.id == ("%d apple", "%d apples")
        assert apple.string == ("a", "b", "c")

    def test_disabled_entries_are_obsolete(self):
        message_catalog = MessageCatalog(
            locale="lt",
            domain="shop",
            entries=[make_message_entry(original="Old", is_disabled=True)],
        )

        catalog = to_babel_catalog(message_catalog)

        assert catalog.get("Old") is None
        assert "Old" in catalog.obsolete

    def test_po_round_trip(self, lt_catalog):
        """A PO file survives conversion into and out of MessageCatalog."""
        converted = to_babel_catalog(from_babel_catalog(lt_catalog))
        buffer = BytesIO()
        write_po(buffer, converted)

        reread = from_babel_catalog(read_po(BytesIO(buffer.getvalue()), locale="lt"))

        assert reread.entries == from_babel_catalog(lt_catalog).entries
