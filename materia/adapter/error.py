"""Adapter layer errors."""


class AdapterError(Exception):
    """Base adapter error."""

    pass


class FileStorageError(AdapterError):
    """File storage read or write error."""

    pass
