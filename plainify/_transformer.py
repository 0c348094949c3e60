"""Value transformation for plainify."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from plainify._assume_type import assume_type
from plainify._config import TYPE_ATTRIBUTE_NAME
from plainify._exceptions import TypeMismatchError
from plainify._types import UNDEFINED, PropertyOptions


def transform(
    value: Any,
    context: str,
    options: PropertyOptions | None = None,
) -> Any:
    """Convert one raw value to its plain equivalent.

    Sequences are converted element-wise with the same ``options``; an element
    converted to :data:`UNDEFINED` becomes ``None``. A custom
    ``transformer.to`` takes precedence over every other rule, including the
    undefined check, so it also receives :data:`UNDEFINED`.

    Parameters
    ----------
    value : Any
        Raw value to convert
    context : str
        Conversion context forwarded to nested ``to_plain`` routines
    options : PropertyOptions | None
        Declared options of the property holding ``value``

    Returns
    -------
    Any
        The plain value, or :data:`UNDEFINED` to signal omission
    """
    if isinstance(value, (list, tuple)):
        items = (transform(item, context, options) for item in value)
        # Undefined elements keep their slot as None.
        return [None if item is UNDEFINED else item for item in items]

    if options is not None and options.transformer is not None:
        if options.transformer.to is not None:
            return options.transformer.to(value)

    if value is UNDEFINED:
        return UNDEFINED

    if options is not None and options.type is not None:
        resolved = assume_type(options.type(), value)
        plain = resolved.to_plain(value, context)
        if not isinstance(plain, Mapping):
            raise TypeMismatchError(
                f"{resolved.__name__}.to_plain() returned "
                f"{type(plain).__name__}, expected a mapping",
                declared=resolved,
                value=value,
            )
        plain = dict(plain)
        if TYPE_ATTRIBUTE_NAME not in plain:
            plain[TYPE_ATTRIBUTE_NAME] = resolved.__name__
        return plain

    return value
