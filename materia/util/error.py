"""Utility layer errors."""

from typing import Optional


class UtilError(Exception):
    """Base utility error."""

    pass


class DependencyInjectionError(UtilError):
    """Raised when a component has no provider of the requested kind."""

    def __init__(self, component: str, use_mock: bool, detail: Optional[str] = None):
        self.component = component
        self.use_mock = use_mock
        kind = "mock" if use_mock else "production"
        message = f"No {kind} implementation for {component}"
        super().__init__(f"{message}: {detail}" if detail else message)
