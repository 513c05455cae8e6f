"""Searching, slicing and in-place editing for Arduino-style strings."""

from __future__ import annotations

import math
import re
import struct

from wiringkit.strbase import BaseString

_C_SPACE = " \t\n\v\f\r"

_INT_PATTERN = re.compile(r"[+-]?\d+")
_FLOAT_PATTERN = re.compile(
    r"""
    (?P<hex>[+-]?0[xX](?:[0-9a-fA-F]+\.?[0-9a-fA-F]*|\.[0-9a-fA-F]+)(?:[pP][+-]?\d+)?)
    | (?P<dec>[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)
    | (?P<special>[+-]?(?:inf(?:inity)?|nan))
    """,
    re.VERBOSE | re.IGNORECASE,
)


def _text_of(value):
    if value is None:
        return ""
    if isinstance(value, BaseString):
        return str(value)
    if isinstance(value, str):
        return value
    raise TypeError(f"expected text, not {type(value).__name__}")


def _check_index(name, value):
    if value < 0:
        raise ValueError(f"{name} must not be negative")


def _to_f32(value):
    try:
        return struct.unpack("<f", struct.pack("<f", value))[0]
    except OverflowError:
        return math.copysign(math.inf, value)


def _ascii_map(text, low, high, shift):
    return "".join(chr(ord(c) + shift) if low <= c <= high else c for c in text)


class WString(BaseString):
    """A :class:`BaseString` with search, substring and editing operations."""

    def index_of(self, target, from_index=0):
        """Return the first position of ``target`` at or after ``from_index``, or -1."""
        _check_index("from_index", from_index)
        if from_index >= len(self):
            return -1
        return self._buffer.find(_text_of(target), from_index)

    def last_index_of(self, target, from_index=None):
        """Return the last position of ``target`` starting at or before ``from_index``, or -1.

        A single character is searched up to ``from_index`` (default: the end)
        and gives -1 when ``from_index`` is past the end. A longer string is
        never found when empty; ``from_index`` past the end is clamped.
        """
        if from_index is not None:
            _check_index("from_index", from_index)
        text = self._buffer or ""
        size = len(text)
        if isinstance(target, str) and len(target) == 1:
            if from_index is None:
                from_index = size - 1
            if from_index < 0 or from_index >= size:
                return -1
            return text.rfind(target, 0, from_index + 1)
        needle = _text_of(target)
        if not needle or size == 0 or len(needle) > size:
            return -1
        if from_index is None:
            from_index = size - len(needle)
        return self._last_occurrence(text, needle, from_index)

    @staticmethod
    def _last_occurrence(text, needle, from_index):
        if not needle or not text or len(needle) > len(text):
            return -1
        from_index = min(from_index, len(text) - 1)
        return text.rfind(needle, 0, from_index + len(needle))

    def substring(self, begin, end=None):
        """Return the characters from ``begin`` up to ``end`` (bounds may be given in either order)."""
        if end is None:
            end = len(self)
        _check_index("begin", begin)
        _check_index("end", end)
        if begin > end:
            begin, end = end, begin
        if begin >= len(self):
            return type(self)("")
        return type(self)(self._buffer[begin:min(end, len(self))])

    def replace(self, find, replacement):
        """Replace every occurrence of ``find`` with ``replacement`` in place.

        When the replacement is longer, matches are replaced from the end
        backwards, so overlapping matches resolve from the right.
        """
        needle = _text_of(find)
        substitute = _text_of(replacement)
        if len(self) == 0 or not needle:
            return
        text = self._buffer
        if len(substitute) <= len(needle):
            self._assign(text.replace(needle, substitute))
            return
        if needle not in text:
            return
        index = len(text) - 1
        while index >= 0:
            index = self._last_occurrence(text, needle, index)
            if index < 0:
                break
            text = text[:index] + substitute + text[index + len(needle):]
            index -= 1
        self._assign(text)

    def remove(self, index, count=None):
        """Delete ``count`` characters from ``index`` (default: to the end)."""
        _check_index("index", index)
        size = len(self)
        if index >= size:
            return
        if count is None:
            count = size - index
        if count <= 0:
            return
        count = min(count, size - index)
        self._buffer = self._buffer[:index] + self._buffer[index + count:]

    def to_lower_case(self):
        """Lower-case ASCII letters in place."""
        if self._buffer is not None:
            self._buffer = _ascii_map(self._buffer, "A", "Z", 32)

    def to_upper_case(self):
        """Upper-case ASCII letters in place."""
        if self._buffer is not None:
            self._buffer = _ascii_map(self._buffer, "a", "z", -32)

    def trim(self):
        """Strip leading and trailing whitespace in place."""
        if not self._buffer:
            return
        self._buffer = self._buffer.strip(_C_SPACE)

    def to_int(self):
        """Parse a leading decimal integer after optional whitespace; 0 if there is none."""
        if self._buffer is None:
            return 0
        match = _INT_PATTERN.match(self._buffer.lstrip(_C_SPACE))
        return int(match.group()) if match else 0

    def to_float(self):
        """Parse a leading number in single precision; 0.0 if there is none."""
        if self._buffer is None:
            return 0.0
        match = _FLOAT_PATTERN.match(self._buffer.lstrip(_C_SPACE))
        if not match:
            return 0.0
        if match.group("hex"):
            value = float.fromhex(match.group("hex"))
        else:
            value = float(match.group())
        return _to_f32(value)