"""Base class for dependency injection providers."""

from typing import ClassVar, Literal

from dishka import Provider

# Infrastructure that tests swap for in-memory doubles
Component = Literal["persistence", "realtime"]


class ProviderBase(Provider):
    """Provider carrying the metadata used to pick implementations.

    A provider without subclasses is concrete and always used. A provider
    with subclasses names a mockable component; its subclasses are the
    production (``__is_mock__ = False``) and test (``__is_mock__ = True``)
    implementations.
    """

    __mock_component__: ClassVar[Component | None] = None
    __is_mock__: ClassVar[bool] = False
