"""Infrastructure providers."""

from .persistence import PersistenceProvider

# Implementations must be imported for __subclasses__()
from .persistence import ProdPersistenceProvider  # noqa: F401

__all__ = [
    "PersistenceProvider",
    "ProdPersistenceProvider",
]
