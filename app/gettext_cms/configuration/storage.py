"""Message storage settings."""

from pydantic import Field

from gettext_cms.configuration.base import ComponentSettings


class StorageSettings(ComponentSettings):
    """Message storage configuration.

    Environment Variables:
        STORAGE_BACKEND: Repository backend used by the storage factory
            (default: "memory")
        STORAGE_DEFAULT_DOMAIN: Domain assigned to imported catalogs that
            carry none (default: "messages")

    Backends:
        - memory: In-process repository (development, testing)

    Example:
        ```python
        from gettext_cms.configuration import settings

        backend = settings.storage.backend
        ```
    """

    backend: str = Field(
        default="memory",
        alias="STORAGE_BACKEND",
        description="Repository backend for message storage",
    )
    default_domain: str = Field(
        default="messages",
        alias="STORAGE_DEFAULT_DOMAIN",
        description="Fallback domain for catalogs imported without one",
    )
