import pytest

from agx.split import SplitDirection


def test_vertical_parses():
    assert SplitDirection.from_config_value("vertical") is SplitDirection.VERTICAL


def test_horizontal_parses():
    assert SplitDirection.from_config_value("horizontal") is SplitDirection.HORIZONTAL


@pytest.mark.parametrize("value", ["  Horizontal ", "HORIZONTAL", "\thorizontal\n"])
def test_case_and_whitespace_ignored(value):
    assert SplitDirection.from_config_value(value) is SplitDirection.HORIZONTAL


@pytest.mark.parametrize("value", ["diagonal", "", "vert", "horizontal-ish"])
def test_unknown_values_are_none(value):
    assert SplitDirection.from_config_value(value) is None


def test_round_trip_through_value():
    for direction in SplitDirection:
        assert SplitDirection.from_config_value(direction.value) is direction