"""Byte-oriented output sinks with Arduino-style number and float formatting."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod

DEC = 10
HEX = 16
OCT = 8
BIN = 2

LINE_ENDING = b"\r\n"

_ULONG_MASK = 0xFFFFFFFF
_FLOAT_LIMIT = 4294967040.0


def format_number(n, base=DEC):
    """Render ``n`` as a 32-bit unsigned value in ``base`` using upper-case digits.

    Bases below 2 fall back to decimal.
    """
    n = int(n) & _ULONG_MASK
    if base < 2:
        base = 10
    digits = []
    while True:
        n, c = divmod(n, base)
        digits.append(chr(ord("0") + c) if c < 10 else chr(ord("A") + c - 10))
        if not n:
            break
    return "".join(reversed(digits))


def format_float(number, digits=2):
    """Render ``number`` with ``digits`` decimals, rounding half up.

    Returns ``"nan"``, ``"inf"`` or ``"ovf"`` for values that cannot be shown.
    """
    number = float(number)
    if math.isnan(number):
        return "nan"
    if math.isinf(number):
        return "inf"
    if number > _FLOAT_LIMIT or number < -_FLOAT_LIMIT:
        return "ovf"

    sign = ""
    if number < 0.0:
        sign = "-"
        number = -number

    rounding = 0.5
    for _ in range(digits):
        rounding /= 10.0
    number += rounding

    int_part = int(number)
    remainder = number - int_part
    parts = [sign, format_number(int_part)]
    if digits > 0:
        parts.append(".")
    for _ in range(digits):
        remainder *= 10.0
        digit = int(remainder)
        parts.append(format_number(digit))
        remainder -= digit
    return "".join(parts)


class Print(ABC):
    """Base class for byte sinks; subclasses supply :meth:`write_byte`."""

    def __init__(self):
        self.write_error = 0

    def _set_write_error(self, err=1):
        self.write_error = err

    def clear_write_error(self):
        """Reset the write error indicator."""
        self._set_write_error(0)

    @abstractmethod
    def write_byte(self, value):
        """Write a single byte; return 1 on success and 0 on failure."""

    def write(self, data):
        """Write bytes, text (UTF-8) or a single byte value; return bytes written.

        Writing stops at the first byte the sink refuses.
        """
        if data is None:
            return 0
        if isinstance(data, int):
            return self.write_byte(data & 0xFF)
        if isinstance(data, str):
            data = data.encode("utf-8")
        count = 0
        for byte in bytes(data):
            if not self.write_byte(byte):
                break
            count += 1
        return count

    def available_for_write(self):
        """Bytes that can be written without blocking; 0 means unknown."""
        return 0

    def print(self, value, fmt=None):
        """Write ``value`` in text form and return the number of bytes written.

        For integers ``fmt`` is the base (default 10; 0 writes the raw byte).
        For floats it is the number of decimals (default 2). Objects with a
        ``print_to(printer)`` method print themselves.
        """
        if isinstance(value, (str, bytes, bytearray, memoryview)):
            _reject_format(value, fmt)
            return self.write(value)
        if isinstance(value, float):
            digits = 2 if fmt is None else int(fmt) & 0xFF
            return self.write(format_float(value, digits))
        if isinstance(value, int):
            base = DEC if fmt is None else int(fmt)
            if base == 0:
                return self.write_byte(value & 0xFF)
            if base == DEC and value < 0:
                return self.write("-") + self.write(format_number(-value, DEC))
            return self.write(format_number(value, base & 0xFF))
        print_to = getattr(value, "print_to", None)
        if callable(print_to):
            _reject_format(value, fmt)
            return print_to(self)
        raise TypeError(f"cannot print value of type {type(value).__name__}")

    def println(self, value=None, fmt=None):
        """Like :meth:`print`, followed by a CR LF line ending."""
        if value is None:
            return self.write(LINE_ENDING)
        return self.print(value, fmt) + self.write(LINE_ENDING)

    def flush(self):
        """Flush pending output and return the write error indicator.

        The base class buffers nothing, so only the indicator is reported.
        """
        return self.write_error


def _reject_format(value, fmt):
    if fmt is not None:
        raise TypeError(f"a format is not accepted for {type(value).__name__}")


class BufferPrint(Print):
    """A :class:`Print` that collects output in memory, optionally up to a limit."""

    def __init__(self, limit=None):
        super().__init__()
        if limit is not None and limit < 0:
            raise ValueError("limit must not be negative")
        self._limit = limit
        self._buffer = bytearray()

    def write_byte(self, value):
        if self._limit is not None and len(self._buffer) >= self._limit:
            self._set_write_error()
            return 0
        self._buffer.append(value & 0xFF)
        return 1

    def getvalue(self):
        """Return everything written so far."""
        return bytes(self._buffer)