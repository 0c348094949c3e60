"""Context matching for property and spread declarations."""

from __future__ import annotations

from collections.abc import Collection


def in_context(context: str, declared: Collection[str] | None) -> bool:
    """Return True when ``context`` is allowed by a declared context set.

    A missing declaration (``None``) allows every context.
    """
    if declared is None:
        return True
    return context in declared
