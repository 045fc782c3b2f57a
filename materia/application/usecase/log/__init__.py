"""Log use cases."""

from .list_logs import ListLogsRequest, ListLogsResponse, ListLogsUseCase, LogItem

__all__ = [
    "ListLogsRequest",
    "ListLogsResponse",
    "ListLogsUseCase",
    "LogItem",
]
