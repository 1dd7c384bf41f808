"""Provider base shared by every DI provider."""

from typing import ClassVar, Literal

from dishka import Provider

# Components with an in-memory stand-in for tests
Component = Literal["persistence"]


class ProviderBase(Provider):
    """dishka provider carrying selection metadata.

    A concrete provider leaves both attributes at their defaults. A mockable
    component is declared by a base class that sets ``__mock_component__``,
    with one production and one mock subclass told apart by ``__is_mock__``.
    """

    __mock_component__: ClassVar[Component | None] = None
    __is_mock__: ClassVar[bool] = False
