"""Capability-checked narrowing of declared nested types."""

from __future__ import annotations

from typing import Any

from plainify._exceptions import TypeMismatchError
from plainify._types import ToPlainCapable


def _is_capable(cls: type) -> bool:
    return isinstance(cls, ToPlainCapable) and callable(cls.to_plain)


def assume_type(declared: Any, value: Any) -> type[ToPlainCapable]:
    """Resolve the class whose ``to_plain`` converts ``value``.

    Parameters
    ----------
    declared : Any
        Result of the property's ``type`` factory
    value : Any
        Runtime value found on the property

    Returns
    -------
    type[ToPlainCapable]
        ``type(value)`` when it is a convertible subclass of ``declared``,
        otherwise ``declared`` itself

    Raises
    ------
    TypeMismatchError
        If ``declared`` is not a class, ``value`` is not an instance of it,
        or no conversion routine is available
    """
    if not isinstance(declared, type):
        raise TypeMismatchError(
            f"Declared nested type must be a class, got {declared!r}",
            declared=declared,
            value=value,
        )
    if not isinstance(value, declared):
        raise TypeMismatchError(
            f"Expected an instance of {declared.__name__}, "
            f"got {type(value).__name__}",
            declared=declared,
            value=value,
        )

    runtime_type = type(value)
    if runtime_type is not declared and _is_capable(runtime_type):
        return runtime_type
    if _is_capable(declared):
        return declared

    raise TypeMismatchError(
        f"{declared.__name__} does not provide a to_plain() conversion",
        declared=declared,
        value=value,
    )
