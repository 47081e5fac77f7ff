from .infrastructure_provider import InfrastructureProvider
from .access_provider import AccessProvider


__all__ = [
    "InfrastructureProvider",
    "AccessProvider",
]
