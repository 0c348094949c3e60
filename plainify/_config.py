"""Centralized configuration for plainify."""

from __future__ import annotations

# Context used when the caller does not name one
DEFAULT_CONTEXT = "to_plain"

# Discriminator key injected into plain mappings produced from nested types
TYPE_ATTRIBUTE_NAME = "__type"

# Omission policy default for builders created without explicit options
DEFAULT_OMIT_UNDEFINED = True
