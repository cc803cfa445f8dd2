import pytest

from agx.colors import Color, parse_color


def test_parse_color_named():
    assert parse_color("cyan") == Color.CYAN
    assert parse_color("Red") == Color.RED
    assert parse_color("BLUE") == Color.BLUE


def test_parse_color_hex():
    assert parse_color("#ff00aa") == Color.rgb(255, 0, 170)
    assert parse_color("#000000") == Color.rgb(0, 0, 0)


def test_parse_color_hex_uppercase():
    assert parse_color("#FF00AA") == Color.rgb(255, 0, 170)


@pytest.mark.parametrize("value", ["rainbow", "#zzzzzz", "#fff"])
def test_parse_color_invalid(value):
    with pytest.raises(ValueError):
        parse_color(value)


@pytest.mark.parametrize("value", ["#f_f000", "#+f0000", "# f0000"])
def test_parse_color_rejects_loose_hex(value):
    with pytest.raises(ValueError):
        parse_color(value)


def test_gray_aliases():
    assert parse_color("grey") == Color.GRAY
    assert parse_color("gray") == Color.GRAY


@pytest.mark.parametrize("value", ["darkgray", "dark-gray", "dark_grey", "darkgrey"])
def test_dark_gray_aliases(value):
    assert parse_color(value) == Color.DARK_GRAY


def test_whitespace_trimmed():
    assert parse_color("  green  ") == Color.GREEN


def test_rgb_components_kept():
    assert Color.rgb(10, 20, 30).components == (10, 20, 30)


def test_indexed_equality():
    assert Color.indexed(196) == Color.indexed(196)
    assert Color.indexed(196) != Color.indexed(197)


@pytest.mark.parametrize("args", [(256, 0, 0), (0, -1, 0), (0, 0, 300)])
def test_rgb_out_of_range(args):
    with pytest.raises(ValueError):
        Color.rgb(*args)


def test_indexed_out_of_range():
    with pytest.raises(ValueError):
        Color.indexed(256)