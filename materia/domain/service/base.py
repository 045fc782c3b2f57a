"""Base class of domain services."""


class Service:
    """Marker base of the domain services.

    Services are built per unit of work by the DI container and receive
    repositories through their constructor; they never open sessions
    themselves.
    """
