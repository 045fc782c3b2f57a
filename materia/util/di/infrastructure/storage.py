"""File storage infrastructure providers."""

from dishka import Scope, provide

from materia.adapter.storage import LocalFileStorage
from materia.config import StorageSettings
from materia.domain.service import FileStorage
from materia.util.di.base import ProviderBase


class StorageProvider(ProviderBase):
    """File storage component base."""

    __mock_component__ = "storage"


class ProdStorageProvider(StorageProvider):
    """Production storage provider writing to the local disk."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_file_storage(self, storage_settings: StorageSettings) -> FileStorage:
        """Provide file storage rooted at the configured directory."""
        return LocalFileStorage(root=storage_settings.root)
