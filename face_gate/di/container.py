# Local application imports
from .base_container import BaseContainer
from .providers import (
    AccessProvider,
    InfrastructureProvider,
)


class DIContainer(BaseContainer):
    """
    Main dependency injection container.
    Composes all providers in the correct order.

    Registration order is important:
    1. External collaborators (InfrastructureProvider)
    2. Use cases (AccessProvider) - depend on the collaborators
    """

    def __init__(self) -> None:
        super().__init__()
        self.setup()

    def setup(self) -> None:
        """
        Setup dependency registrations by composing all providers.
        Order matters: infrastructure → use cases
        """
        InfrastructureProvider.register(self)
        AccessProvider.register(self)


# Global container instance (singleton pattern)
_container: DIContainer | None = None


def get_container() -> DIContainer:
    """
    Get the global DI container instance (singleton pattern)

    Returns:
        DIContainer instance with all dependencies registered
    """
    global _container
    if _container is None:
        _container = DIContainer()
    return _container


def reset_container() -> None:
    """Drop the global container (next get_container() builds a fresh one)."""
    global _container
    _container = None
