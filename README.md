# wirestring

A mutable string type that behaves like the `String` class found in
microcontroller frameworks, together with the small helpers it relies on:
fixed-point number formatting, integer-to-text conversion in any base,
lenient text-to-number parsing, little-endian reads from byte buffers, and
the legacy `B0`…`B11111111` binary constant names.

It is a library only: there is no command-line tool.

## Installation

```
pip install wirestring
```

## The `WString` type

```python
from wirestring.wstring import WString

s = WString("Hello ")
s += "Arduino"
s.concat(1)                   # integers are appended in decimal, floats with two decimals
assert s == "Hello Arduino1"

s.replace("Arduino", "World")  # edits in place
s.to_upper_case()
assert s.index_of("WORLD") == 6

assert WString(255, 16) == "ff"
assert WString(3.14159, decimal_places=3) == "3.142"

t = WString("  padded  ")
t.trim()                      # in place
assert t == "padded"

assert WString("-42abc").to_int() == -42
```

A `WString` can be built from another `WString`, a `str`, `bytes` (decoded
as Latin-1), an `int` (in any base from 2 to 36) or a `float` (with up to
ten decimal places).

A `WString` built from `None`, or assigned `None` with `assign(None)`, is
*invalid*: it is false in a boolean context and has length 0, whereas a
valid empty string is true. `reserve()` turns an invalid string into a
valid empty one. `concat()` returns `False` when given `None` or an invalid
`WString`, and `+` then yields an invalid result.

`compare_to()` returns a value in the manner of C `strcmp`, and the
comparison operators work against both `WString` and `str`. `WString` is
mutable and therefore not hashable.

Reading a character past the end (`char_at()` or `s[i]`) gives `"\0"`, and
writing past the end (`set_char_at()` or `s[i] = c`) is silently ignored.

## Helpers

```python
from wirestring.numfmt import dtostrf, itoa, atol, atof
from wirestring.pgmspace import read_word, read_dword, read_float
from wirestring.textops import index_of, replace_all, trim_space
from wirestring.binary import binary_constant, constant_names

dtostrf(5.678, 4, 2)          # "5.68"
itoa(-1, 10)                  # "-1"
atol("  17 apples")           # 17
atof("2.5e3 volts")           # 2500.0
read_word(b"\xad\xde", 0)     # 0xDEAD
replace_all("a-b-c", "-", "+")  # "a+b+c"
binary_constant("B00000101")  # 5, with a DeprecationWarning
constant_names(3)             # ("B11", "B011", ..., "B00000011")
```

The `read_*` functions raise `IndexError` when the read would run past the
end of the buffer; `itoa` raises `ValueError` for a base outside 2 to 36.

## Running the tests

```
pip install -e .[test]
pytest
```