"""Core DI providers (non-mockable)."""

from dishka import Scope, provide

from materia.config import AuthSettings, Settings, StorageSettings
from materia.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Settings provider.

    Settings are read once from the environment and ``.env``; the sections
    consumed by single components are exposed on their own so those
    components do not depend on the whole configuration.
    """

    scope = Scope.APP

    @provide
    def provide_settings(self) -> Settings:
        return Settings()

    @provide
    def provide_auth_settings(self, settings: Settings) -> AuthSettings:
        """Session cookie configuration, read by the API layer."""
        return settings.auth

    @provide
    def provide_storage_settings(self, settings: Settings) -> StorageSettings:
        """File storage configuration."""
        return settings.storage
