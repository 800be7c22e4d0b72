"""Provider base carrying component metadata."""

from typing import ClassVar, Literal

from dishka import Provider

Component = Literal["persistence"]


class ProviderBase(Provider):
    """Dishka provider that may stand for a swappable component.

    A component base sets ``__component__``; each implementation of it sets
    ``__in_memory__`` to say whether it keeps state in process. Providers
    without a component are used as-is everywhere.
    """

    __component__: ClassVar[Component | None] = None
    __in_memory__: ClassVar[bool] = False
