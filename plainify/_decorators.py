"""Class decorator declaring convertible properties."""

from __future__ import annotations

from collections.abc import Callable
from typing import TypeVar

from plainify._registry import DEFAULT_REGISTRY, PropertyRegistry
from plainify._to_plain import create_to_plain
from plainify._types import PropertyOptions, ToPlainOptions

T = TypeVar("T", bound=type)


def serializable(
    options: ToPlainOptions | None = None,
    registry: PropertyRegistry | None = None,
    /,
    **properties: PropertyOptions | None,
) -> Callable[[T], T]:
    """Register ``properties`` on the decorated class and give it ``to_plain``.

    Keyword order is the declaration order of the properties. ``options`` and
    ``registry`` are positional-only, so every keyword names a property. The
    installed ``to_plain`` is a static method, so the class also satisfies
    ``ToPlainCapable`` and can be referenced from another property's ``type``.

    Example::

        @serializable(name=None, tags=PropertyOptions(context={"admin"}))
        class User:
            ...

        User.to_plain(user, "admin")

        @serializable(ToPlainOptions(omit_undefined=False), my_registry, id=None)
        class Event:
            ...
    """
    target = registry if registry is not None else DEFAULT_REGISTRY

    def decorate(cls: T) -> T:
        for name, property_options in properties.items():
            target.register(cls, name, property_options)
        cls.to_plain = staticmethod(create_to_plain(cls, options, provider=target))
        return cls

    return decorate
