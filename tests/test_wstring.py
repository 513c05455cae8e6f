import math

import pytest

from wiringkit.wstring import WString


def test_index_of_string_finds_first_occurrence():
    s = WString("hello world")
    idx = s.index_of("world")
    assert str(s)[idx:idx + len("world")] == "world"
    assert s.index_of("xyz") == -1


def test_index_of_char_from_index():
    s = WString("banana")
    first = s.index_of("a")
    second = s.index_of("a", first + 1)
    assert second > first
    assert str(s)[second] == "a"
    assert "a" not in str(s)[first + 1:second]


def test_index_of_from_past_end_is_minus_one():
    s = WString("abc")
    assert s.index_of("a", 3) == -1
    assert s.index_of("a", 10) == -1


def test_index_of_empty_target_returns_from_index():
    s = WString("abc")
    assert s.index_of("", 1) == 1


def test_index_of_on_invalid_string():
    assert WString(None).index_of("a") == -1


def test_index_of_negative_from_raises():
    with pytest.raises(ValueError):
        WString("abc").index_of("a", -1)


def test_last_index_of_char_default_and_bounded():
    s = WString("banana")
    last = s.last_index_of("a")
    assert last == len("banana") - 1
    earlier = s.last_index_of("a", last - 1)
    assert earlier < last
    assert str(s)[earlier] == "a"


def test_last_index_of_char_from_past_end():
    s = WString("banana")
    assert s.last_index_of("a", 6) == -1


def test_last_index_of_string_clamps_from_index():
    s = WString("abcabc")
    assert s.last_index_of("abc", 100) == s.last_index_of("abc")
    idx = s.last_index_of("abc")
    assert str(s)[idx:] == "abc"


def test_last_index_of_string_respects_from_index():
    s = WString("abcabc")
    last = s.last_index_of("abc")
    assert s.last_index_of("abc", last - 1) == s.index_of("abc")


def test_last_index_of_empty_or_too_long():
    s = WString("abc")
    assert s.last_index_of("") == -1
    assert s.last_index_of("abcd") == -1
    assert WString("").last_index_of("ab") == -1


def test_last_index_of_accepts_wstring_target():
    s = WString("xyxy")
    assert s.last_index_of(WString("xy")) == s.last_index_of("xy")


def test_substring_swaps_bounds():
    s = WString("hello world")
    assert s.substring(5, 0) == s.substring(0, 5)
    assert str(s.substring(0, 5)) == "hello"


def test_substring_default_end_and_clamp():
    s = WString("hello world")
    assert str(s.substring(6)) == "world"
    assert s.substring(6, 100) == s.substring(6)


def test_substring_past_end_is_empty_valid():
    sub = WString("abc").substring(5)
    assert bool(sub) is True
    assert len(sub) == 0
    assert isinstance(sub, WString)


def test_replace_same_length():
    s = WString("a-b-c")
    s.replace("-", "+")
    assert str(s) == "a+b+c"


def test_replace_shorter():
    s = WString("one, two, three")
    s.replace(", ", ",")
    assert str(s) == "one,two,three"


def test_replace_longer():
    s = WString("a.b.c")
    s.replace(".", "::")
    assert str(s) == "a::b::c"


def test_replace_longer_overlapping_resolves_from_right():
    s = WString("aaa")
    s.replace("aa", "bbb")
    assert str(s) == "abbb"


def test_replace_no_match_leaves_string():
    s = WString("abc")
    s.replace("x", "yyy")
    assert str(s) == "abc"


def test_replace_with_empty_find_is_noop():
    s = WString("abc")
    s.replace("", "z")
    assert str(s) == "abc"


def test_replace_removes_with_empty_replacement():
    s = WString("a b c")
    s.replace(" ", "")
    assert str(s) == "abc"


def test_remove_to_end_and_count():
    s = WString("abcdef")
    s.remove(3)
    assert str(s) == "abc"
    t = WString("abcdef")
    t.remove(1, 2)
    assert str(t) == "adef"


def test_remove_out_of_range_and_clamped():
    s = WString("abc")
    s.remove(5)
    assert str(s) == "abc"
    s.remove(1, 100)
    assert str(s) == "a"
    s.remove(0, 0)
    assert str(s) == "a"


def test_case_conversion_ascii_only():
    s = WString("Hello, World é")
    s.to_upper_case()
    assert str(s) == "HELLO, WORLD é"
    s.to_lower_case()
    assert str(s) == "hello, world é"


def test_case_conversion_on_invalid_keeps_invalid():
    s = WString(None)
    s.to_upper_case()
    assert (bool(s), len(s), str(s)) == (False, 0, "")


def test_trim():
    s = WString(" \t hello \r\n")
    s.trim()
    assert str(s) == "hello"


def test_trim_all_whitespace():
    s = WString("   \t")
    s.trim()
    assert len(s) == 0
    assert bool(s) is True


def test_to_int():
    assert WString("  -42abc").to_int() == -42
    assert WString("+7").to_int() == 7
    assert WString("abc").to_int() == 0
    assert WString(None).to_int() == 0


def test_to_float():
    assert WString("3.5").to_float() == 3.5
    assert WString("  -0.25xyz").to_float() == -0.25
    assert WString("x").to_float() == 0.0
    assert WString(None).to_float() == 0.0


def test_to_float_exponent_and_special():
    assert WString("1e2").to_float() == 100.0
    assert math.isinf(WString("1e300").to_float())
    assert math.isnan(WString("nan").to_float())


def test_to_float_is_single_precision():
    value = WString("0.1").to_float()
    assert value != 0.1
    assert abs(value - 0.1) < 1e-7


def test_round_trip_substring_concat():
    s = WString("hello world")
    mid = s.index_of(" ")
    rebuilt = s.substring(0, mid) + s.substring(mid)
    assert rebuilt == s