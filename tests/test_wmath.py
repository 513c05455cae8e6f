import pytest

from wiringkit.wmath import (
    make_word,
    map_range,
    random_long,
    random_seed,
)


def _draw(count, *args):
    return [random_long(*args) for _ in range(count)]


def test_seed_makes_sequence_repeatable():
    random_seed(42)
    first = _draw(20, 1000)
    random_seed(42)
    assert _draw(20, 1000) == first


def test_seed_zero_does_not_reseed():
    random_seed(5)
    first = _draw(10, 1000)
    random_seed(5)
    random_seed(0)
    assert _draw(10, 1000) == first


def test_zero_bound_returns_zero():
    assert random_long(0) == 0


@pytest.mark.parametrize("bound", [1, 10, -7])
def test_single_bound_range(bound):
    random_seed(3)
    assert all(0 <= r < abs(bound) for r in _draw(200, bound))


def test_empty_range_returns_lower_bound():
    assert random_long(10, 5) == 10
    assert random_long(3, 3) == 3


def test_two_bound_range():
    random_seed(9)
    values = _draw(300, -5, 5)
    assert all(-5 <= r < 5 for r in values)
    assert len(set(values)) > 1


@pytest.mark.parametrize(
    "in_min, in_max, out_min, out_max",
    [(0, 1023, 0, 255), (10, 20, 100, -100), (-50, 50, 0, 1000)],
)
def test_map_range_endpoints(in_min, in_max, out_min, out_max):
    assert map_range(in_min, in_min, in_max, out_min, out_max) == out_min
    assert map_range(in_max, in_min, in_max, out_min, out_max) == out_max


@pytest.mark.parametrize("x", [1, 2, 5, 100])
def test_map_range_truncates_toward_zero(x):
    assert map_range(-x, 0, 3, 0, 1) == -map_range(x, 0, 3, 0, 1)


def test_map_range_equal_input_bounds():
    with pytest.raises(ZeroDivisionError):
        map_range(5, 3, 3, 0, 10)


def test_make_word_from_bytes():
    assert make_word(0x12, 0x34) == 0x1234
    assert make_word(0x1FF, 0x00) == make_word(0xFF, 0x00)
    assert make_word(0x7F, 0x1AB) == make_word(0x7F, 0xAB)


def test_make_word_single_value_truncates():
    assert make_word(0x1ABCD) == 0xABCD