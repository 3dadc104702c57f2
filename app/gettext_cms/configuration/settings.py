"""gettext-cms configuration settings - main aggregator."""

from pydantic_settings import BaseSettings, SettingsConfigDict

from gettext_cms.configuration.storage import StorageSettings


class Settings(BaseSettings):
    """gettext-cms configuration settings - main aggregator.

    Environment Variables:
        PREFIX: Environment prefix for non-production deployments
        LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR)

    Example:
        ```python
        from gettext_cms.configuration import settings

        if settings.is_production:
            # Production-specific logic...
        backend = settings.storage.backend
        ```
    """

    PREFIX: str = ""
    LOG_LEVEL: str = "INFO"

    storage: StorageSettings

    @property
    def is_production(self) -> bool:
        """Check if the application is running in production.

        Returns:
            True if PREFIX is empty (production), False otherwise.
        """
        return not bool(self.PREFIX)

    def __init__(self, **kwargs):
        """Initialize Settings with automatic subsettings instantiation.

        Args:
            **kwargs: Optional overrides for specific settings sections.
        """
        settings_map = {
            "storage": StorageSettings,
        }

        for setting_name, setting_class in settings_map.items():
            if setting_name not in kwargs:
                kwargs[setting_name] = setting_class()

        super().__init__(**kwargs)

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )


# Create the singleton settings instance
settings = Settings()
