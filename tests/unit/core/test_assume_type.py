from __future__ import annotations

import pytest

from plainify import ToPlainCapable, TypeMismatchError, assume_type
from tests.helpers.models import LabeledPoint, Point


class NoConversion:
    pass


class ConvertibleChild(NoConversion):
    @staticmethod
    def to_plain(value, context=None):
        return {}


def test_convertible_classes_satisfy_protocol_at_class_level() -> None:
    assert isinstance(Point, ToPlainCapable)
    assert isinstance(ConvertibleChild, ToPlainCapable)
    assert not isinstance(NoConversion, ToPlainCapable)
    assert Point.to_plain(Point(1, 2), None) == {"x": 1, "y": 2}


def test_assume_type_returns_declared_type() -> None:
    assert assume_type(Point, Point(0, 0)) is Point


def test_assume_type_narrows_to_runtime_subclass() -> None:
    assert assume_type(Point, LabeledPoint(0, 0)) is LabeledPoint


def test_assume_type_uses_subclass_when_declared_type_cannot_convert() -> None:
    assert assume_type(NoConversion, ConvertibleChild()) is ConvertibleChild


@pytest.mark.parametrize(
    ("declared", "value", "message"),
    [
        ("Point", Point(0, 0), "must be a class"),
        (Point, {"x": 0, "y": 0}, "Expected an instance of Point, got dict"),
        (LabeledPoint, Point(0, 0), "Expected an instance of LabeledPoint"),
        (NoConversion, NoConversion(), "does not provide a to_plain"),
    ],
    ids=["not-a-class", "plain-dict", "base-for-subclass", "no-routine"],
)
def test_assume_type_rejects_incompatible_values(declared, value, message) -> None:
    with pytest.raises(TypeMismatchError, match=message) as exc_info:
        assume_type(declared, value)

    assert isinstance(exc_info.value, TypeError)
    assert exc_info.value.value is value
