"""Exception hierarchy for plainify."""

from __future__ import annotations


class PlainifyError(Exception):
    """Base class for all errors raised by plainify."""


class TypeMismatchError(PlainifyError, TypeError):
    """A declared nested type cannot convert the value found at runtime.

    Raised before the nested conversion routine is invoked, and propagated
    unchanged to the caller of the top-level conversion.
    """

    def __init__(self, message: str, *, declared: object, value: object) -> None:
        super().__init__(message)
        self.declared = declared
        self.value = value
