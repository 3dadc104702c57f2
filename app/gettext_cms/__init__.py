"""gettext-cms: translation storage and merge layer for CMS localization."""

__version__ = "0.1.0"
