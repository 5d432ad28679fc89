"""Provider metadata shared by every Explora DI provider."""

from typing import ClassVar, Literal

from dishka import Provider

# Components that have a swappable test implementation
Component = Literal["persistence"]


class ProviderBase(Provider):
    """Provider carrying mock-selection metadata.

    A provider listed in ``PROVIDERS`` with subclasses is a swappable
    component: its subclasses declare ``__is_mock__`` and the container
    builder picks one. Providers without subclasses are wired as they are.

    Attributes:
        __mock_component__: Name used in ``unmock={...}``, None when not swappable
        __is_mock__: True for the test implementation of a component
    """

    __mock_component__: ClassVar[Component | None] = None
    __is_mock__: ClassVar[bool] = False
