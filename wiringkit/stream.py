"""Character streams with timed reads, searching and number parsing."""

from __future__ import annotations

import enum
import struct
import time
from abc import abstractmethod

from wiringkit.printing import Print

DEFAULT_TIMEOUT_MS = 1000

_DIGITS = range(ord("0"), ord("9") + 1)
_WHITESPACE = frozenset(b" \t\r\n")
_MINUS = ord("-")
_DOT = ord(".")


class LookaheadMode(enum.Enum):
    """How :meth:`Stream.parse_int` and :meth:`Stream.parse_float` skip input."""

    SKIP_ALL = 0
    SKIP_NONE = 1
    SKIP_WHITESPACE = 2


def _as_bytes(target):
    if isinstance(target, int):
        return bytes([target & 0xFF])
    if isinstance(target, str):
        return target.encode("latin-1")
    return bytes(target)


def _char_code(char):
    if char is None:
        return None
    if isinstance(char, int):
        return char & 0xFF
    encoded = _as_bytes(char)
    if len(encoded) != 1:
        raise ValueError("expected a single character")
    return encoded[0]


def _f32(value):
    return struct.unpack("<f", struct.pack("<f", value))[0]


class Stream(Print):
    """Base class for byte streams; subclasses supply reading and writing.

    ``read`` and ``peek`` return the next byte, or -1 when none is available.
    Timed operations keep trying for ``timeout`` milliseconds.
    """

    def __init__(self, timeout=DEFAULT_TIMEOUT_MS):
        super().__init__()
        self.timeout = timeout

    @abstractmethod
    def available(self):
        """Number of bytes ready to be read."""

    @abstractmethod
    def read(self):
        """Consume and return the next byte, or -1 if none is available."""

    @abstractmethod
    def peek(self):
        """Return the next byte without consuming it, or -1."""

    def _timed(self, operation):
        start = time.monotonic()
        while True:
            c = operation()
            if c >= 0:
                return c
            if (time.monotonic() - start) * 1000.0 >= self.timeout:
                return -1

    def _timed_read(self):
        return self._timed(self.read)

    def _timed_peek(self):
        return self._timed(self.peek)

    def _peek_next_digit(self, lookahead, detect_decimal):
        while True:
            c = self._timed_peek()
            if c < 0 or c == _MINUS or c in _DIGITS or (detect_decimal and c == _DOT):
                return c
            if lookahead is LookaheadMode.SKIP_NONE:
                return -1
            if lookahead is LookaheadMode.SKIP_WHITESPACE and c not in _WHITESPACE:
                return -1
            self.read()

    def find(self, target):
        """Read until ``target`` is seen; return False on timeout."""
        return self.find_multi(target) == 0

    def find_until(self, target, terminator):
        """Like :meth:`find`, but give up with False once ``terminator`` is read."""
        return self.find_multi(target, terminator) == 0

    def find_multi(self, *args):
        """Read until one of the targets is seen; return its index or -1 on timeout.

        An empty target matches at once without consuming input.
        """
        targets = [_as_bytes(t) for t in args]
        for position, target in enumerate(targets):
            if not target:
                return position
        indices = [0] * len(targets)

        while True:
            c = self._timed_read()
            if c < 0:
                return -1
            for position, target in enumerate(targets):
                idx = indices[position]
                if c == target[idx]:
                    idx += 1
                    indices[position] = idx
                    if idx == len(target):
                        return position
                    continue
                if idx == 0:
                    continue
                # Fall back to the longest prefix that still ends at this byte.
                orig = idx
                while idx:
                    idx -= 1
                    if c != target[idx]:
                        continue
                    diff = orig - idx
                    if idx == 0 or target[:idx] == target[diff:diff + idx]:
                        idx += 1
                        break
                indices[position] = idx

    def parse_int(self, lookahead=LookaheadMode.SKIP_ALL, ignore=None):
        """Return the next integer in the stream, or 0 if none arrives in time.

        ``ignore`` names a character skipped once parsing has begun.
        """
        ignore_code = _char_code(ignore)
        c = self._peek_next_digit(lookahead, False)
        if c < 0:
            return 0
        negative = False
        value = 0
        while True:
            if c == ignore_code:
                pass
            elif c == _MINUS:
                negative = True
            elif c in _DIGITS:
                value = value * 10 + c - ord("0")
            self.read()
            c = self._timed_peek()
            if not (c in _DIGITS or (c >= 0 and c == ignore_code)):
                break
        return -value if negative else value

    def parse_float(self, lookahead=LookaheadMode.SKIP_ALL, ignore=None):
        """Return the next decimal number in single precision, or 0.0 on timeout."""
        ignore_code = _char_code(ignore)
        c = self._peek_next_digit(lookahead, True)
        if c < 0:
            return 0.0
        negative = False
        is_fraction = False
        value = 0
        fraction = 1.0
        while True:
            if c == ignore_code:
                pass
            elif c == _MINUS:
                negative = True
            elif c == _DOT:
                is_fraction = True
            elif c in _DIGITS:
                value = value * 10 + c - ord("0")
                if is_fraction:
                    fraction = _f32(fraction * 0.1)
            self.read()
            c = self._timed_peek()
            if not (
                c in _DIGITS
                or (c == _DOT and not is_fraction)
                or (c >= 0 and c == ignore_code)
            ):
                break
        if negative:
            value = -value
        if is_fraction:
            return _f32(_f32(value) * fraction)
        return _f32(value)

    def read_bytes(self, length):
        """Read up to ``length`` bytes, stopping early on timeout."""
        out = bytearray()
        while len(out) < length:
            c = self._timed_read()
            if c < 0:
                break
            out.append(c)
        return bytes(out)

    def read_bytes_until(self, terminator, length):
        """Read up to ``length`` bytes, stopping at ``terminator`` (consumed, not kept)."""
        term = _char_code(terminator)
        out = bytearray()
        while len(out) < length:
            c = self._timed_read()
            if c < 0 or c == term:
                break
            out.append(c)
        return bytes(out)

    def read_string(self):
        """Read until timeout and return the bytes as Latin-1 text."""
        out = bytearray()
        while (c := self._timed_read()) >= 0:
            out.append(c)
        return out.decode("latin-1")

    def read_string_until(self, terminator):
        """Read until ``terminator`` or timeout; the terminator is consumed, not kept."""
        term = _char_code(terminator)
        out = bytearray()
        while (c := self._timed_read()) >= 0 and c != term:
            out.append(c)
        return out.decode("latin-1")


class BytesStream(Stream):
    """An in-memory stream: reads from fed input, collects written output."""

    def __init__(self, data=b"", timeout=DEFAULT_TIMEOUT_MS):
        super().__init__(timeout)
        self._input = bytearray(_as_bytes(data))
        self._output = bytearray()

    def feed(self, data):
        """Append ``data`` to the input waiting to be read."""
        self._input.extend(_as_bytes(data))

    def available(self):
        return len(self._input)

    def read(self):
        if not self._input:
            return -1
        return self._input.pop(0)

    def peek(self):
        if not self._input:
            return -1
        return self._input[0]

    def write_byte(self, value):
        self._output.append(value & 0xFF)
        return 1

    def getvalue(self):
        """Return everything written to the stream so far."""
        return bytes(self._output)