"""Base use case."""

from abc import ABC, abstractmethod
from typing import Any


class BaseUseCase(ABC):
    """Use case that authenticates the caller before calling domain services."""

    @abstractmethod
    async def execute(self, request: Any) -> Any:
        pass
