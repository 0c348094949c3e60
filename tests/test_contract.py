from __future__ import annotations

import pytest

from plainify import PropertyOptions, SpreadOptions, serializable, transform

pytestmark = pytest.mark.regression_contract


@serializable(
    a=None,
    b=None,
    c=PropertyOptions(context=["special"]),
)
class Sample:
    def __init__(self) -> None:
        self.a = 1
        self.c = "x"


@serializable(
    meta=PropertyOptions(spread=SpreadOptions()),
    x=None,
)
class Flattened:
    def __init__(self) -> None:
        self.meta = {"x": 1}
        self.x = 99


def test_default_context_omits_undefined_and_out_of_context_properties() -> None:
    assert Sample.to_plain(Sample()) == {"a": 1}


def test_named_context_includes_matching_properties() -> None:
    assert Sample.to_plain(Sample(), "special") == {"a": 1, "c": "x"}


def test_direct_property_wins_over_spread_contribution() -> None:
    assert Flattened.to_plain(Flattened()) == {"x": 99}


@pytest.mark.parametrize(
    "value",
    [[], [1], [1, [2, 3], "a"]],
    ids=["empty", "single", "mixed"],
)
def test_sequences_keep_length_and_order(value) -> None:
    options = PropertyOptions()

    result = transform(value, "to_plain", options)

    assert len(result) == len(value)
    assert result == [transform(item, "to_plain", options) for item in value]
