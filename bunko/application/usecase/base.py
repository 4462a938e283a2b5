"""Base use case."""

from abc import ABC, abstractmethod
from typing import Any


class BaseUseCase(ABC):
    """Orchestrates domain services for one request type.

    Expected not-found outcomes are returned as ``None``; domain errors
    propagate to the interface layer.
    """

    @abstractmethod
    async def execute(self, request: Any) -> Any:
        pass
