"""File use cases."""

from .download_file import DownloadFileRequest, DownloadFileResponse, DownloadFileUseCase

__all__ = [
    "DownloadFileRequest",
    "DownloadFileResponse",
    "DownloadFileUseCase",
]
