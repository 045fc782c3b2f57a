"""Base classes for dependency injection providers."""

from typing import ClassVar, Literal

from dishka import Provider

# Components that tests can swap for in-memory implementations
Component = Literal["persistence", "storage"]


class ProviderBase(Provider):
    """Base for all DI providers.

    A mockable component is declared as a base class naming the component,
    with one production and one mock subclass below it. Concrete providers
    have no subclasses and are always used as-is.

    Attributes:
        __mock_component__: Component name, None for concrete providers
        __is_mock__: Whether this class is the in-memory implementation
    """

    __mock_component__: ClassVar[Component | None] = None
    __is_mock__: ClassVar[bool] = False

    @classmethod
    def is_mockable(cls) -> bool:
        """Whether this class is a component base with implementations below it."""
        return cls.__mock_component__ is not None and bool(cls.__subclasses__())
