# wiringkit

Pure-Python building blocks in the style of a microcontroller core library.
The package provides formatted byte output, timed stream reading and parsing,
a mutable string type that can be invalid, a four-octet IP address and a few
integer math helpers. It has no dependencies outside the standard library.

## Installation

```
pip install .
```

## Modules

### `wiringkit.printing`

- `Print` is an abstract byte sink. A subclass implements `write_byte(value)`,
  which returns 1 on success and 0 on failure. On top of it, `write(data)`
  takes bytes, text (encoded as UTF-8) or a single byte value and stops at the
  first refused byte. `print(value, fmt=None)` and `println(value=None, fmt=None)`
  return the number of bytes written:
  - integers are written in base `fmt` (default 10, upper-case digits, shown
    as 32-bit unsigned except for negative decimals); base 0 writes the raw byte;
  - floats are written with `fmt` decimals (default 2), rounding half up, and
    as `nan`, `inf` or `ovf` when they cannot be shown;
  - objects with a `print_to(printer)` method print themselves;
  - `println` appends `\r\n`.

  `write_error` holds the error indicator, `clear_write_error()` resets it and
  `flush()` returns it. `available_for_write()` returns 0.
- `BufferPrint(limit=None)` collects output in memory; `getvalue()` returns it.
  With a limit, bytes beyond it are refused and `write_error` is set.
- `format_number(n, base=10)` and `format_float(number, digits=2)` return the
  same text as `print` without writing it. The constants `DEC`, `HEX`, `OCT`
  and `BIN` name the bases.

### `wiringkit.dtostrf`

`dtostrf(val, width, prec)` formats a float with `prec` decimals and pads it
with spaces to `width` characters; a negative width pads on the right.
Non-finite values and out-of-range `width` or `prec` raise `ValueError`.

### `wiringkit.wmath`

- `random_seed(seed)` reseeds the module's generator (a seed of 0 is ignored).
- `random_long(howsmall, howbig=None)` returns a value in `[0, |howsmall|)`, or
  in `[howsmall, howbig)`, or `howsmall` if that range is empty.
- `map_range(x, in_min, in_max, out_min, out_max)` re-maps an integer linearly,
  truncating toward zero.
- `make_word(high, low=None)` builds a 16-bit word.
- `BitOrder` (`LSBFIRST`, `MSBFIRST`) and constants such as `LOW`, `HIGH`,
  `INPUT`, `OUTPUT`, `PI`, `DEG_TO_RAD` and `RAD_TO_DEG`.

### `wiringkit.stream`

- `Stream(timeout=1000)` extends `Print` with reading. Subclasses implement
  `available()`, `read()` and `peek()`, the latter two returning -1 when no byte
  is ready. Timed operations retry for `timeout` milliseconds:
  `find(target)`, `find_until(target, terminator)`, `find_multi(*targets)`,
  `parse_int(lookahead, ignore)`, `parse_float(lookahead, ignore)` (single
  precision), `read_bytes(length)`, `read_bytes_until(terminator, length)`,
  `read_string()` and `read_string_until(terminator)` (Latin-1 text).
- `LookaheadMode` (`SKIP_ALL`, `SKIP_NONE`, `SKIP_WHITESPACE`) chooses what
  the parsers skip before a number starts.
- `BytesStream(data=b"", timeout=1000)` reads from fed input (`feed(data)`)
  and collects written output (`getvalue()`).

### `wiringkit.ipaddress`

`IPAddress` is built from nothing (0.0.0.0), four octets, a 32-bit integer
whose low byte is the first octet, four bytes, or another address.
`IPAddress.from_string(text)` parses dotted-quad text and raises `ValueError`
otherwise. Addresses support `int()`, `bytes()`, `str()`, indexing and
assignment of octets, equality with addresses, integers and bytes, and
`print_to(printer)`. `INADDR_NONE` is 0.0.0.0.

### `wiringkit.strbase` and `wiringkit.wstring`

`BaseString` is a mutable string that is invalid (false in a boolean context)
when built from `None`. Integers are rendered in base `fmt`, floats with `fmt`
decimals. It offers `reserve`, `concat`, `+=`, `+`, `compare_to`, `equals`,
ordering comparisons, `equals_ignore_case`, `starts_with`, `ends_with`,
`char_at`, `set_char_at`, indexing and `get_bytes`.

`WString` adds `index_of`, `last_index_of`, `substring`, `replace`, `remove`,
`to_lower_case`, `to_upper_case`, `trim`, `to_int` and `to_float`.

## Example

```python
from wiringkit.printing import BufferPrint
from wiringkit.stream import BytesStream
from wiringkit.ipaddress import IPAddress
from wiringkit.wstring import WString
from wiringkit.dtostrf import dtostrf
from wiringkit.wmath import map_range

out = BufferPrint()
out.print(255, 16)
out.println(3.14159, 3)
print(out.getvalue())              # b'FF3.142\r\n'

stream = BytesStream(b"temp=  -42;", timeout=0)
print(stream.parse_int())          # -42

addr = IPAddress.from_string("192.168.1.10")
print(str(addr), addr[3])          # 192.168.1.10 10

s = WString("  Hello World  ")
s.trim()
s.replace("World", "There")
print(str(s), s.index_of("There")) # Hello There 6

print(repr(dtostrf(3.14159, 8, 2)))  # '    3.14'
print(map_range(512, 0, 1023, 0, 255))  # 127
```

## What it does not do

This is a library of plain data and text helpers. It does not talk to any
hardware: there are no serial ports, pins, interrupts, timers or delays, and
`Stream` reads only from what a subclass supplies, such as `BytesStream`. It
installs no commands.

## Running the tests

```
pip install .[test]
pytest
```