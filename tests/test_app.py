import pytest

from spaceinvaders.app import format_with_leading_zeros


def test_pads_level():
    assert format_with_leading_zeros(7, 2) == "07"


@pytest.mark.parametrize("number,width", [(0, 6), (42, 6), (123456, 6), (5, 1), (99, 2)])
def test_width_and_round_trip(number, width):
    text = format_with_leading_zeros(number, width)
    assert len(text) == width
    assert int(text) == number
    assert text.endswith(str(number))
    assert set(text[: width - len(str(number))]) <= {"0"}


def test_exact_width_unchanged():
    assert format_with_leading_zeros(123, 3) == "123"


def test_too_long_raises():
    with pytest.raises(ValueError):
        format_with_leading_zeros(1234567, 6)