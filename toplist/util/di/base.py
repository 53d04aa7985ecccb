"""Base classes for dependency injection providers."""

from typing import ClassVar, Literal

from dishka import Provider

# Components with a production and a mock implementation
Component = Literal["clock", "persistence", "status"]


class ProviderBase(Provider):
    """Base for all DI providers.

    Attributes:
        __mock_component__: Component name for swappable providers, None for
            providers that always use the same implementation
        __is_mock__: Whether this implementation is the test double
    """

    __mock_component__: ClassVar[Component | None] = None
    __is_mock__: ClassVar[bool] = False

    @classmethod
    def implementations(cls) -> list[type["ProviderBase"]]:
        """Providers implementing this component (empty for concrete ones)."""
        return cls.__subclasses__()
