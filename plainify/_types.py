"""Type definitions and protocols for plainify."""

from __future__ import annotations

from collections.abc import Callable, Collection, Mapping
from dataclasses import dataclass
from typing import Any, Final, Protocol, runtime_checkable

from pydantic import BaseModel, ConfigDict
from pydantic_core import PydanticUndefined

from plainify._config import DEFAULT_OMIT_UNDEFINED

UNDEFINED: Final = PydanticUndefined
"""Marker for a property that holds no value at all (``None`` is a value)."""

PlainMapping = dict[str, Any]


def _normalize_context(context: Collection[str] | str | None) -> frozenset[str] | None:
    if context is None:
        return None
    if isinstance(context, str):
        return frozenset((context,))
    return frozenset(context)


@dataclass(frozen=True, slots=True)
class PropertyTransformer:
    """Custom conversion hook for a single property.

    Attributes:
        to: Callable receiving the raw property value and returning its plain
            form. When set, it replaces every default conversion step.
    """

    to: Callable[[Any], Any] | None = None


@dataclass(frozen=True, slots=True)
class SpreadOptions:
    """Request that a mapping-valued property is merged into its parent."""

    context: frozenset[str] | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "context", _normalize_context(self.context))


@dataclass(frozen=True, slots=True)
class PropertyOptions:
    """Per-property conversion metadata.

    Attributes:
        context: Context names the property is included for; ``None`` means
            every context.
        transformer: Optional custom to-plain hook.
        type: Zero-argument factory returning the nested class; evaluated
            lazily so that classes may reference each other.
        spread: Merge the converted mapping into the parent instead of
            nesting it under the property name.
    """

    context: frozenset[str] | None = None
    transformer: PropertyTransformer | None = None
    type: Callable[[], type] | None = None
    spread: SpreadOptions | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "context", _normalize_context(self.context))


class ToPlainOptions(BaseModel):
    """Build-time options captured by :func:`plainify.create_to_plain`."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    omit_undefined: bool = DEFAULT_OMIT_UNDEFINED
    """Drop properties whose raw or converted value is undefined."""


@runtime_checkable
class ToPlainCapable(Protocol):
    """A class able to convert its own instances to plain mappings.

    ``to_plain`` is looked up on the class itself and called as
    ``cls.to_plain(value, context)``.
    """

    @staticmethod
    def to_plain(value: Any, context: str | None = None) -> Mapping[str, Any]:
        """Convert ``value`` for ``context``."""
        ...


@runtime_checkable
class PropertyOptionsProvider(Protocol):
    """Read-only lookup of declared properties for an object."""

    def get_property_map(self, obj: Any) -> Mapping[str, PropertyOptions] | None:
        """Return the declared properties of ``obj`` in declaration order."""
        ...


class ToPlainFunction(Protocol):
    """Conversion function returned by :func:`plainify.create_to_plain`."""

    def __call__(self, obj: Any, context: str | None = None) -> PlainMapping:
        """Convert ``obj`` to a plain mapping."""
        ...
