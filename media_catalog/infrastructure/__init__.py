"""Infrastructure adapters and the factory that wires them."""

from media_catalog.infrastructure.factory import (
    InfrastructureFactory,
    get_factory,
    reset_factory,
)

__all__ = [
    "InfrastructureFactory",
    "get_factory",
    "reset_factory",
]
