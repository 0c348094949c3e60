from __future__ import annotations

from collections.abc import Callable

import pytest

from plainify import PropertyOptions, PropertyRegistry
from tests.helpers.models import Record


@pytest.fixture
def registry() -> PropertyRegistry:
    return PropertyRegistry()


@pytest.fixture
def declare(
    registry: PropertyRegistry,
) -> Callable[..., type[Record]]:
    """Create a fresh Record subclass with properties in keyword order."""

    def _factory(**properties: PropertyOptions | None) -> type[Record]:
        cls = type("Declared", (Record,), {})
        for name, options in properties.items():
            registry.register(cls, name, options)
        return cls

    return _factory
