"""Exceptions raised by the message storage layer."""


class GettextCmsError(Exception):
    """Base exception for all gettext-cms errors.

    Example:
        try:
            storage.save_catalog(catalog)
        except GettextCmsError as e:
            logger.error("catalog_save_failed", error=str(e))
    """

    pass


class InvalidTranslationError(GettextCmsError):
    """Raised when a catalog cannot be saved because it lacks a locale or domain.

    Example:
        >>> storage.save_catalog(MessageCatalog(locale="lt"))
        Traceback (most recent call last):
        ...
        InvalidTranslationError: Domain is missing
    """

    pass


class InvalidLocaleError(GettextCmsError):
    """Raised when plural rules cannot be resolved for a locale code.

    Attributes:
        locale: The locale string that failed to resolve.
    """

    def __init__(self, locale: str, message: str = ""):
        self.locale = locale
        super().__init__(message or f"Unknown locale: {locale!r}")
