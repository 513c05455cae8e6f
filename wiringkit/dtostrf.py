"""Fixed-point float to text conversion with a minimum field width."""

from __future__ import annotations

import math


def dtostrf(val, width, prec):
    """Format ``val`` with ``prec`` decimals, padded with spaces to ``width``.

    A negative ``width`` pads on the right (left adjustment). ``width`` must
    fit a signed byte and ``prec`` an unsigned byte.
    """
    if not -128 <= width <= 127:
        raise ValueError("width must be between -128 and 127")
    if not 0 <= prec <= 255:
        raise ValueError("prec must be between 0 and 255")
    val = float(val)
    if not math.isfinite(val):
        raise ValueError("cannot format a non-finite value")

    negative = val < 0.0
    if negative:
        val = -val

    rounding = 0.5
    for _ in range(prec):
        rounding /= 10.0
    val += rounding

    int_part = int(val)
    remainder = val - int_part
    sign = "-" if negative else ""

    if prec > 0:
        decade = 1.0
        for _ in range(prec):
            decade *= 10.0
        dec_part = int(remainder * decade)
        text = f"{sign}{int_part}.{dec_part:0{prec}d}"
    else:
        text = f"{sign}{int_part}"

    if width < 0:
        return text.ljust(-width)
    return text.rjust(width)