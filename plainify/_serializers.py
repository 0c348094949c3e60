"""JSON rendering of plain mappings."""

from __future__ import annotations

from typing import Any

from pydantic_core import to_json as _pydantic_to_json
from pydantic_core import to_jsonable_python


def to_jsonable(plain: Any) -> Any:
    """Convert a plain value to JSON-compatible Python objects.

    Parameters
    ----------
    plain : Any
        Output of a ``to_plain`` call (or any plain value)

    Returns
    -------
    Any
        Value containing only JSON-compatible builtins; dates, UUIDs,
        decimals and similar scalars are rendered the way pydantic does
    """
    return to_jsonable_python(plain, serialize_unknown=True)


def to_json(plain: Any, *, indent: int | None = None) -> str:
    """Render a plain value as a JSON string.

    Parameters
    ----------
    plain : Any
        Output of a ``to_plain`` call (or any plain value)
    indent : int | None
        Indentation passed through to ``pydantic_core``

    Returns
    -------
    str
        JSON document
    """
    return _pydantic_to_json(plain, indent=indent, serialize_unknown=True).decode()
