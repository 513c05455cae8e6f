"""Arduino-style math helpers and wiring constants."""

from __future__ import annotations

import enum
import math
import random

LOW = 0x0
HIGH = 0x1

INPUT = 0x0
OUTPUT = 0x1
INPUT_PULLUP = 0x2
INPUT_PULLDOWN = INPUT
INPUT_FLOATING = INPUT
INPUT_ANALOG = 0x4
OUTPUT_ANALOG = 0x5
OUTPUT_PWM = OUTPUT_ANALOG

PI = math.pi
HALF_PI = math.pi / 2
TWO_PI = math.tau
DEG_TO_RAD = math.pi / 180
RAD_TO_DEG = 180 / math.pi
EULER = math.e

SERIAL = 0x0
DISPLAY = 0x1

RAND_MAX = 2**31 - 1

_rng = random.Random(1)


class BitOrder(enum.IntEnum):
    """Bit order for serial shifting."""

    LSBFIRST = 0
    MSBFIRST = 1


def random_seed(seed):
    """Reseed the generator; a seed of 0 leaves it untouched."""
    if seed != 0:
        _rng.seed(seed)


def _random_below(howbig):
    if howbig == 0:
        return 0
    return _rng.randint(0, RAND_MAX) % abs(howbig)


def random_long(howsmall, howbig=None):
    """Pseudo-random integer.

    With one argument, return a value in ``[0, |howsmall|)``. With two, return
    a value in ``[howsmall, howbig)``, or ``howsmall`` if the range is empty.
    """
    if howbig is None:
        return _random_below(howsmall)
    if howsmall >= howbig:
        return howsmall
    return _random_below(howbig - howsmall) + howsmall


def _trunc_div(a, b):
    q = abs(a) // abs(b)
    return q if (a < 0) == (b < 0) else -q


def map_range(x, in_min, in_max, out_min, out_max):
    """Re-map ``x`` linearly from one range to another using integer arithmetic.

    Division truncates toward zero; equal input bounds raise ZeroDivisionError.
    """
    return _trunc_div((x - in_min) * (out_max - out_min), in_max - in_min) + out_min


def make_word(high, low=None):
    """Build a 16-bit word from one value or from a high and a low byte."""
    if low is None:
        return high & 0xFFFF
    return ((high & 0xFF) << 8) | (low & 0xFF)