"""Convert annotated Python objects to plain, serialization-ready mappings."""

from importlib.metadata import PackageNotFoundError, version

from plainify._assume_type import assume_type
from plainify._config import DEFAULT_CONTEXT, TYPE_ATTRIBUTE_NAME
from plainify._context import in_context
from plainify._decorators import serializable
from plainify._exceptions import PlainifyError, TypeMismatchError
from plainify._registry import DEFAULT_REGISTRY, PropertyRegistry
from plainify._serializers import to_json, to_jsonable
from plainify._to_plain import create_to_plain
from plainify._transformer import transform
from plainify._types import (
    UNDEFINED,
    PropertyOptions,
    PropertyOptionsProvider,
    PropertyTransformer,
    SpreadOptions,
    ToPlainCapable,
    ToPlainFunction,
    ToPlainOptions,
)

try:
    __version__ = version("plainify")
except PackageNotFoundError:
    __version__ = "0.0.0"

__all__ = [
    "DEFAULT_CONTEXT",
    "DEFAULT_REGISTRY",
    "TYPE_ATTRIBUTE_NAME",
    "UNDEFINED",
    "PlainifyError",
    "PropertyOptions",
    "PropertyOptionsProvider",
    "PropertyRegistry",
    "PropertyTransformer",
    "SpreadOptions",
    "ToPlainCapable",
    "ToPlainFunction",
    "ToPlainOptions",
    "TypeMismatchError",
    "assume_type",
    "create_to_plain",
    "in_context",
    "serializable",
    "to_json",
    "to_jsonable",
    "transform",
]
