"""Plural rule providers.

Resolve how many plural forms a locale's grammar requires, as gettext counts
them (``nplurals`` in a PO header).
"""

from abc import ABC, abstractmethod

from babel.core import UnknownLocaleError
from babel.messages.plurals import get_plural

from gettext_cms.logging import get_module_logger
from gettext_cms.storage.exceptions import InvalidLocaleError

logger = get_module_logger()


class PluralRuleProvider(ABC):
    """Abstract base for plural rule providers."""

    @abstractmethod
    def categories_for(self, locale: str) -> int:
        """Get the number of plural forms for a locale.

        Args:
            locale: Locale code (e.g., "lt", "pt_BR", "pt-BR").

        Returns:
            Number of plural forms, at least 1.

        Raises:
            InvalidLocaleError: If the locale is not recognized.
        """
        pass


class BabelPluralRuleProvider(PluralRuleProvider):
    """Plural rule provider backed by Babel's gettext plural table.

    Locales missing from the table but known to CLDR fall back to Babel's
    default of two forms.
    """

    def categories_for(self, locale: str) -> int:
        if not locale:
            logger.warning("empty_locale")
            raise InvalidLocaleError(locale, "Locale is empty")

        try:
            plural = get_plural(locale.replace("-", "_"))
        except (UnknownLocaleError, ValueError) as e:
            logger.warning("unknown_locale", locale=locale, error=str(e))
            raise InvalidLocaleError(locale) from e

        return plural.num_plurals
