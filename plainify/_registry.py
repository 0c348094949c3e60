"""Property metadata store for plainify."""

from __future__ import annotations

from typing import Any

from plainify._types import PropertyOptions


class PropertyRegistry:
    """Records declared properties per class, in declaration order.

    Lookups follow the method resolution order, so subclasses inherit the
    properties of their bases and may redeclare them with new options.
    """

    def __init__(self) -> None:
        self._properties: dict[type, dict[str, PropertyOptions]] = {}

    def register(
        self,
        cls: type,
        name: str,
        options: PropertyOptions | None = None,
    ) -> None:
        """Declare ``name`` as a converted property of ``cls``."""
        self._properties.setdefault(cls, {})[name] = options or PropertyOptions()

    def get_property_map(self, obj: Any) -> dict[str, PropertyOptions] | None:
        """Return the properties declared for ``type(obj)`` and its bases."""
        merged: dict[str, PropertyOptions] = {}
        for klass in reversed(type(obj).__mro__):
            declared = self._properties.get(klass)
            if declared:
                merged.update(declared)
        return merged or None

    def is_registered(self, cls: type) -> bool:
        """Return True when ``cls`` declared properties itself."""
        return cls in self._properties


DEFAULT_REGISTRY = PropertyRegistry()
