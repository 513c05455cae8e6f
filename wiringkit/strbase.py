"""A mutable, possibly invalid character string with Arduino-style semantics."""

from __future__ import annotations

from wiringkit.dtostrf import dtostrf

_DIGIT_CHARS = "0123456789abcdefghijklmnopqrstuvwxyz"
_UINT_MASK = 0xFFFFFFFF


def _int_to_text(value, base):
    if not 2 <= base <= 36:
        raise ValueError(f"base must be between 2 and 36, not {base}")
    value = int(value)
    if value < 0:
        if base == 10:
            return "-" + _int_to_text(-value, 10)
        value &= _UINT_MASK
    digits = []
    while True:
        value, rem = divmod(value, base)
        digits.append(_DIGIT_CHARS[rem])
        if not value:
            break
    return "".join(reversed(digits))


def _ascii_lower(text):
    return "".join(chr(ord(c) + 32) if "A" <= c <= "Z" else c for c in text)


def _strcmp(a, b):
    a = a.split("\0", 1)[0]
    b = b.split("\0", 1)[0]
    for x, y in zip(a, b):
        if x != y:
            return ord(x) - ord(y)
    if len(a) > len(b):
        return ord(a[len(b)])
    if len(b) > len(a):
        return -ord(b[len(a)])
    return 0


class BaseString:
    """A character string that may be invalid (holding no buffer at all).

    ``BaseString(None)`` is invalid and false in a boolean context; every
    other value, including the empty string, is valid. Integers are rendered
    in base ``fmt`` (default 10), floats with ``fmt`` decimals (default 2).
    """

    __hash__ = None

    def __init__(self, value="", fmt=None):
        self._buffer = None
        self._capacity = 0
        if value is None or isinstance(value, (str, BaseString)):
            if fmt is not None:
                raise TypeError(f"a format is not accepted for {type(value).__name__}")
            text = value._buffer if isinstance(value, BaseString) else value
        elif isinstance(value, float):
            places = 2 if fmt is None else int(fmt)
            text = dtostrf(value, places + 2, places)
        elif isinstance(value, int):
            text = _int_to_text(value, 10 if fmt is None else int(fmt))
        else:
            raise TypeError(f"cannot build a string from {type(value).__name__}")
        if text is not None:
            self._assign(text)

    def _assign(self, text):
        self.reserve(len(text))
        self._buffer = text

    def _invalidate(self):
        self._buffer = None
        self._capacity = 0

    def reserve(self, size):
        """Make room for ``size`` characters; an invalid string becomes empty."""
        if size < 0:
            raise ValueError("size must not be negative")
        if self._buffer is not None and self._capacity >= size:
            return True
        self._capacity = size
        if self._buffer is None:
            self._buffer = ""
        return True

    def __len__(self):
        return 0 if self._buffer is None else len(self._buffer)

    def __bool__(self):
        return self._buffer is not None

    def __str__(self):
        return self._buffer or ""

    def __repr__(self):
        if self._buffer is None:
            return f"{type(self).__name__}(None)"
        return f"{type(self).__name__}({self._buffer!r})"

    def concat(self, value):
        """Append ``value`` in text form; return False and change nothing on failure.

        Integers are appended in decimal, floats with two decimals. ``None``
        and invalid strings cannot be appended.
        """
        if value is None:
            return False
        if isinstance(value, BaseString):
            text = value._buffer
            if text is None:
                return False
        elif isinstance(value, str):
            text = value
        elif isinstance(value, float):
            text = dtostrf(value, 4, 2)
        elif isinstance(value, int):
            text = _int_to_text(value, 10)
        else:
            raise TypeError(f"cannot append value of type {type(value).__name__}")
        if not text:
            return True
        current = self._buffer or ""
        self.reserve(len(current) + len(text))
        self._buffer = current + text
        return True

    def __iadd__(self, value):
        self.concat(value)
        return self

    def __add__(self, value):
        result = type(self)(self)
        if not result.concat(value):
            result._invalidate()
        return result

    @staticmethod
    def _other_text(other):
        if other is None or isinstance(other, str):
            return other
        if isinstance(other, BaseString):
            return other._buffer
        raise TypeError(f"cannot compare with {type(other).__name__}")

    def compare_to(self, other):
        """Return a negative, zero or positive value as this sorts before, with or after ``other``."""
        mine = self._buffer
        theirs = self._other_text(other)
        if mine is None or theirs is None:
            if theirs:
                return -ord(theirs[0])
            if mine:
                return ord(mine[0])
            return 0
        return _strcmp(mine, theirs)

    def equals(self, other):
        """Return True if the contents are equal; ``None`` equals only an empty string."""
        if isinstance(other, BaseString):
            return len(self) == len(other) and self.compare_to(other) == 0
        other = self._other_text(other)
        if len(self) == 0:
            return other is None or other.startswith("\0") or other == ""
        if other is None:
            return self._buffer.startswith("\0")
        return _strcmp(self._buffer, other) == 0

    def __eq__(self, other):
        if isinstance(other, (BaseString, str)):
            return self.equals(other)
        return NotImplemented

    def _ordered(self, other):
        if isinstance(other, (BaseString, str)):
            return self.compare_to(other)
        return None

    def __lt__(self, other):
        result = self._ordered(other)
        return NotImplemented if result is None else result < 0

    def __le__(self, other):
        result = self._ordered(other)
        return NotImplemented if result is None else result <= 0

    def __gt__(self, other):
        result = self._ordered(other)
        return NotImplemented if result is None else result > 0

    def __ge__(self, other):
        result = self._ordered(other)
        return NotImplemented if result is None else result >= 0

    def equals_ignore_case(self, other):
        """Compare ignoring the case of ASCII letters."""
        if other is self:
            return True
        theirs = self._other_text(other) or ""
        if len(self) != len(theirs):
            return False
        if len(self) == 0:
            return True
        return _ascii_lower(self._buffer) == _ascii_lower(theirs)

    def starts_with(self, prefix, offset=None):
        """Return True if ``prefix`` occurs at ``offset`` (default 0)."""
        theirs = self._other_text(prefix)
        mine = self._buffer
        if offset is None:
            offset = 0
        if mine is None or theirs is None or offset < 0:
            return False
        if len(theirs) > len(mine) or offset > len(mine) - len(theirs):
            return False
        return mine.startswith(theirs, offset)

    def ends_with(self, suffix):
        """Return True if the string ends with ``suffix``."""
        theirs = self._other_text(suffix)
        mine = self._buffer
        if mine is None or theirs is None or len(mine) < len(theirs):
            return False
        return mine.endswith(theirs)

    def char_at(self, index):
        """Return the character at ``index``, or ``"\\0"`` when out of range."""
        if self._buffer is None or not 0 <= index < len(self._buffer):
            return "\0"
        return self._buffer[index]

    def set_char_at(self, index, char):
        """Replace the character at ``index``; out-of-range indices are ignored."""
        if not isinstance(char, str) or len(char) != 1:
            raise ValueError("expected a single character")
        if self._buffer is not None and 0 <= index < len(self._buffer):
            self._buffer = self._buffer[:index] + char + self._buffer[index + 1:]

    def __getitem__(self, index):
        return self.char_at(index)

    def __setitem__(self, index, char):
        self.set_char_at(index, char)

    def get_bytes(self, bufsize, index=0):
        """Return what fits in a ``bufsize`` buffer from ``index``, less the terminator.

        Characters are encoded as Latin-1.
        """
        if bufsize <= 0 or index >= len(self) or index < 0:
            return b""
        count = min(bufsize - 1, len(self._buffer) - index)
        return self._buffer[index:index + count].encode("latin-1")