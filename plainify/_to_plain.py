"""Plain mapping builder for plainify."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from plainify._config import DEFAULT_CONTEXT
from plainify._context import in_context
from plainify._registry import DEFAULT_REGISTRY
from plainify._transformer import transform
from plainify._types import (
    UNDEFINED,
    PlainMapping,
    PropertyOptionsProvider,
    ToPlainFunction,
    ToPlainOptions,
)

logger = logging.getLogger(__name__)


def _read_property(obj: Any, key: str) -> Any:
    if isinstance(obj, Mapping):
        return obj.get(key, UNDEFINED)
    return getattr(obj, key, UNDEFINED)


def create_to_plain(
    cls: type,
    options: ToPlainOptions | None = None,
    *,
    provider: PropertyOptionsProvider | None = None,
) -> ToPlainFunction:
    """Create the ``to_plain`` conversion function for ``cls``.

    Parameters
    ----------
    cls : type
        Class the function converts instances of
    options : ToPlainOptions | None
        Build-time options; defaults to ``ToPlainOptions()``
    provider : PropertyOptionsProvider | None
        Source of declared properties; defaults to the shared registry

    Returns
    -------
    ToPlainFunction
        ``to_plain(obj, context=None)`` returning a fresh plain mapping
    """
    build_options = options if options is not None else ToPlainOptions()
    omit_undefined = build_options.omit_undefined
    properties_provider = provider if provider is not None else DEFAULT_REGISTRY

    def to_plain(obj: Any, context: str | None = None) -> PlainMapping:
        context = context or DEFAULT_CONTEXT
        properties = properties_provider.get_property_map(obj)
        if not properties:
            return {}

        result: PlainMapping = {}
        for key, property_options in properties.items():
            if not in_context(context, property_options.context):
                logger.debug(
                    "Skipping %s.%s: not in context %r", cls.__name__, key, context
                )
                continue

            raw = _read_property(obj, key)
            if raw is UNDEFINED and omit_undefined:
                continue

            transformed = transform(raw, context, property_options)
            if transformed is UNDEFINED:
                if omit_undefined:
                    continue
                transformed = None

            spread = property_options.spread
            if (
                isinstance(transformed, Mapping)
                and spread is not None
                and in_context(context, spread.context)
            ):
                # Keys already accumulated take precedence over spread entries.
                result = {**transformed, **result}
            else:
                result[key] = transformed
        return result

    to_plain.__qualname__ = f"{cls.__qualname__}.to_plain"
    return to_plain
