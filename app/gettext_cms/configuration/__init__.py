"""Configuration module - public API.

Centralized configuration for gettext-cms using Pydantic BaseSettings.

Exports:
    settings: Singleton Settings instance (main configuration object)
    Settings: Main settings class (for testing/overrides)
    StorageSettings: Message storage settings class
"""

from gettext_cms.configuration.settings import Settings, settings
from gettext_cms.configuration.storage import StorageSettings

__all__ = ["Settings", "StorageSettings", "settings"]
