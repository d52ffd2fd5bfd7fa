"""A mutable text buffer with the behaviour of the wiring ``String`` class."""

from __future__ import annotations

import math
import struct
from collections.abc import Iterator
from typing import Union

from wirestring.numfmt import atof, atol, dtostrf, itoa
from wirestring.textops import (
    index_of as _index_of,
    last_index_of as _last_index_of,
    lower_ascii,
    remove_range,
    replace_all,
    trim_space,
    upper_ascii,
)

MAX_DECIMAL_PLACES = 10

TextLike = Union["WString", str, None]


def _strcmp(left: str, right: str) -> int:
    """Compare like C ``strcmp``: the difference of the first differing characters."""
    for a, b in zip(left, right):
        if a != b:
            return ord(a) - ord(b)
    if len(left) > len(right):
        return ord(left[len(right)])
    if len(left) < len(right):
        return -ord(right[len(left)])
    return 0


def _text_of(value: object) -> str | None:
    """Return the text held by a WString, str or None; raise for anything else."""
    if value is None:
        return None
    if isinstance(value, WString):
        return value._buffer
    if isinstance(value, str):
        return value
    raise TypeError(f"expected WString, str or None, got {type(value).__name__}")


def _is_concat_operand(value: object) -> bool:
    return value is None or isinstance(value, (WString, str, bytes, bytearray, int, float))


def _check_non_negative(name: str, value: int) -> None:
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")


class WString:
    """Mutable text that may also be *invalid* (holding no buffer at all).

    An invalid string is falsy and has length 0; a valid empty string is truthy.
    """

    __hash__ = None  # mutable

    def __init__(
        self,
        value: object = "",
        base: int = 10,
        decimal_places: int = 2,
    ) -> None:
        self._buffer: str | None = None
        if value is None:
            return
        if isinstance(value, WString):
            self._buffer = value._buffer
        elif isinstance(value, str):
            self._buffer = value
        elif isinstance(value, (bytes, bytearray)):
            self._buffer = bytes(value).decode("latin-1")
        elif isinstance(value, int):
            self._buffer = itoa(int(value), base)
        elif isinstance(value, float):
            _check_non_negative("decimal_places", decimal_places)
            places = min(decimal_places, MAX_DECIMAL_PLACES)
            self._buffer = dtostrf(value, places + 2, places)
        else:
            raise TypeError(f"cannot build a WString from {type(value).__name__}")

    # -- memory and state -------------------------------------------------

    def _invalidate(self) -> None:
        self._buffer = None

    def reserve(self, size: int) -> None:
        """Make room for ``size`` characters; an invalid string becomes valid and empty."""
        _check_non_negative("size", size)
        if self._buffer is None:
            self._buffer = ""

    def __len__(self) -> int:
        return len(self._buffer) if self._buffer is not None else 0

    def is_empty(self) -> bool:
        """Return True when the string holds no characters."""
        return len(self) == 0

    def __bool__(self) -> bool:
        return self._buffer is not None

    def __str__(self) -> str:
        return self._buffer if self._buffer is not None else ""

    def __repr__(self) -> str:
        if self._buffer is None:
            return "WString(<invalid>)"
        return f"WString({self._buffer!r})"

    def __iter__(self) -> Iterator[str]:
        return iter(self._buffer or "")

    # -- assignment and concatenation ---------------------------------------

    def assign(self, value: object) -> WString:
        """Replace the contents with a copy of ``value``; None makes the string invalid."""
        if value is None:
            self._invalidate()
        elif isinstance(value, WString):
            if value is not self:
                self._buffer = value._buffer
        elif isinstance(value, str):
            self._buffer = value
        elif isinstance(value, (bytes, bytearray)):
            self._buffer = bytes(value).decode("latin-1")
        else:
            raise TypeError(f"cannot assign {type(value).__name__} to a WString")
        return self

    def concat(self, value: object) -> bool:
        """Append ``value``; return False when it is None or an invalid WString.

        Integers are appended in decimal, floats with two decimals.
        """
        if value is None:
            return False
        if isinstance(value, WString):
            text = value._buffer
            if text is None:
                return False
        elif isinstance(value, str):
            text = value
        elif isinstance(value, (bytes, bytearray)):
            text = bytes(value).decode("latin-1")
        elif isinstance(value, int):
            text = itoa(int(value), 10)
        elif isinstance(value, float):
            text = dtostrf(value, 4, 2)
        else:
            raise TypeError(f"cannot concatenate {type(value).__name__} to a WString")
        if not text:
            return True
        self._buffer = (self._buffer or "") + text
        return True

    def __iadd__(self, other: object) -> WString:
        if not _is_concat_operand(other):
            return NotImplemented
        self.concat(other)
        return self

    def __add__(self, other: object) -> WString:
        if not _is_concat_operand(other):
            return NotImplemented
        result = WString(self)
        if not result.concat(other):
            result._invalidate()
        return result

    def __radd__(self, other: object) -> WString:
        if not _is_concat_operand(other):
            return NotImplemented
        result = WString(other)
        if not result.concat(self):
            result._invalidate()
        return result

    # -- comparison ----------------------------------------------------------

    def compare_to(self, other: TextLike) -> int:
        """Return a negative, zero or positive number as in C ``strcmp``."""
        mine = self._buffer
        theirs = _text_of(other)
        if mine is None or theirs is None:
            if theirs:
                return -ord(theirs[0])
            if mine:
                return ord(mine[0])
            return 0
        return _strcmp(mine, theirs)

    def equals(self, other: TextLike) -> bool:
        """Return True when both hold the same characters; None equals an empty string."""
        if isinstance(other, WString):
            return len(self) == len(other) and self.compare_to(other) == 0
        text = _text_of(other)
        if len(self) == 0:
            return not text
        if text is None:
            return False
        return self._buffer == text

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, (WString, str)):
            return NotImplemented
        return self.equals(other)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, (WString, str)):
            return NotImplemented
        return self.compare_to(other) < 0

    def __le__(self, other: object) -> bool:
        if not isinstance(other, (WString, str)):
            return NotImplemented
        return self.compare_to(other) <= 0

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, (WString, str)):
            return NotImplemented
        return self.compare_to(other) > 0

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, (WString, str)):
            return NotImplemented
        return self.compare_to(other) >= 0

    def equals_ignore_case(self, other: TextLike) -> bool:
        """Compare ignoring the case of ASCII letters."""
        if other is self:
            return True
        theirs = _text_of(other) or ""
        mine = self._buffer or ""
        if len(mine) != len(theirs):
            return False
        return lower_ascii(mine) == lower_ascii(theirs)

    def starts_with(self, prefix: TextLike, offset: int | None = None) -> bool:
        """Return True when ``prefix`` occurs at ``offset`` (default 0)."""
        text = _text_of(prefix)
        if offset is None:
            offset = 0
        _check_non_negative("offset", offset)
        if self._buffer is None or text is None:
            return False
        if offset + len(text) > len(self._buffer):
            return False
        return self._buffer.startswith(text, offset)

    def ends_with(self, suffix: TextLike) -> bool:
        """Return True when the string ends with ``suffix``."""
        text = _text_of(suffix)
        if self._buffer is None or text is None or len(self._buffer) < len(text):
            return False
        return self._buffer.endswith(text)

    # -- character access ------------------------------------------------------

    def char_at(self, index: int) -> str:
        """Return the character at ``index``, or NUL when out of range."""
        if self._buffer is None or index < 0 or index >= len(self._buffer):
            return "\0"
        return self._buffer[index]

    def set_char_at(self, index: int, c: str) -> None:
        """Overwrite the character at ``index``; out-of-range writes are ignored."""
        if not isinstance(c, str) or len(c) != 1:
            raise ValueError("c must be a single character")
        if self._buffer is None or index < 0 or index >= len(self._buffer):
            return
        self._buffer = self._buffer[:index] + c + self._buffer[index + 1:]

    def __getitem__(self, index: int) -> str:
        if not isinstance(index, int):
            raise TypeError("WString indices must be integers")
        return self.char_at(index)

    def __setitem__(self, index: int, c: str) -> None:
        if not isinstance(index, int):
            raise TypeError("WString indices must be integers")
        self.set_char_at(index, c)

    def get_bytes(self, bufsize: int, index: int = 0) -> bytes:
        """Return up to ``bufsize - 1`` characters from ``index`` as bytes.

        The room for the terminating NUL of a C buffer is accounted for but
        the NUL itself is not included.
        """
        _check_non_negative("bufsize", bufsize)
        _check_non_negative("index", index)
        if bufsize == 0 or index >= len(self):
            return b""
        return self._buffer[index:index + bufsize - 1].encode("latin-1")

    # -- search ----------------------------------------------------------------

    def index_of(self, target: TextLike, from_index: int = 0) -> int:
        """Return the first position of ``target`` at or after ``from_index``, or -1."""
        text = _text_of(target)
        if text is None:
            return -1
        return _index_of(self._buffer or "", text, from_index)

    def last_index_of(self, target: TextLike, from_index: int | None = None) -> int:
        """Return the last position of ``target`` at or before ``from_index``, or -1."""
        text = _text_of(target)
        if text is None:
            return -1
        return _last_index_of(self._buffer or "", text, from_index)

    def substring(self, begin: int, end: int | None = None) -> WString:
        """Return the characters between ``begin`` and ``end``; the bounds may be swapped."""
        _check_non_negative("begin", begin)
        length = len(self)
        if end is None:
            end = length
        _check_non_negative("end", end)
        if begin > end:
            begin, end = end, begin
        if begin >= length:
            return WString()
        return WString(self._buffer[begin:min(end, length)])

    # -- modification ------------------------------------------------------------

    def replace(self, find: TextLike, replacement: TextLike) -> None:
        """Replace every occurrence of ``find`` with ``replacement`` in place."""
        needle = _text_of(find)
        if not self._buffer or not needle:
            return
        self._buffer = replace_all(self._buffer, needle, _text_of(replacement) or "")

    def remove(self, index: int, count: int | None = None) -> None:
        """Remove ``count`` characters from ``index`` (to the end when None)."""
        _check_non_negative("index", index)
        if self._buffer is None:
            return
        self._buffer = remove_range(self._buffer, index, count)

    def to_lower_case(self) -> None:
        """Lower-case the ASCII letters in place."""
        if self._buffer is not None:
            self._buffer = lower_ascii(self._buffer)

    def to_upper_case(self) -> None:
        """Upper-case the ASCII letters in place."""
        if self._buffer is not None:
            self._buffer = upper_ascii(self._buffer)

    def trim(self) -> None:
        """Strip leading and trailing whitespace in place."""
        if self._buffer:
            self._buffer = trim_space(self._buffer)

    # -- conversion --------------------------------------------------------------

    def to_int(self) -> int:
        """Parse a leading decimal integer; 0 when there is none."""
        return atol(self._buffer) if self._buffer is not None else 0

    def to_float(self) -> float:
        """Parse a leading number, rounded to single precision."""
        value = self.to_double()
        try:
            return struct.unpack("<f", struct.pack("<f", value))[0]
        except OverflowError:
            return math.copysign(math.inf, value)

    def to_double(self) -> float:
        """Parse a leading floating-point number; 0.0 when there is none."""
        return atof(self._buffer) if self._buffer is not None else 0.0