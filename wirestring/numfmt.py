"""Number formatting and parsing with C library semantics."""

from __future__ import annotations

import re
import string

_C_WHITESPACE = " \t\n\v\f\r"
_DIGITS = string.digits + string.ascii_lowercase

_INT_RE = re.compile(r"[+-]?[0-9]+")
_HEX_FLOAT_RE = re.compile(
    r"[+-]?0[xX](?:[0-9a-fA-F]+\.?[0-9a-fA-F]*|\.[0-9a-fA-F]+)(?:[pP][+-]?[0-9]+)?"
)
_DEC_FLOAT_RE = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")
_SPECIAL_RE = re.compile(r"[+-]?(?:infinity|inf|nan)", re.IGNORECASE)


def dtostrf(value: float, width: int, precision: int) -> str:
    """Format ``value`` with ``precision`` decimals, padded to ``width``.

    A positive width right-aligns the text, a negative width left-aligns it.
    """
    if precision < 0:
        raise ValueError("precision must not be negative")
    text = f"{float(value):.{precision}f}"
    if width < 0:
        return text.ljust(-width)
    return text.rjust(width)


def itoa(value: int, base: int = 10) -> str:
    """Render an integer in ``base`` (2 to 36) using lower-case digits."""
    if not 2 <= base <= 36:
        raise ValueError(f"base must be between 2 and 36, got {base}")
    if value == 0:
        return "0"
    sign = "-" if value < 0 else ""
    magnitude = abs(value)
    digits = []
    while magnitude:
        magnitude, remainder = divmod(magnitude, base)
        digits.append(_DIGITS[remainder])
    return sign + "".join(reversed(digits))


def atol(text: str) -> int:
    """Parse the leading decimal integer of ``text``; 0 when there is none."""
    match = _INT_RE.match(text.lstrip(_C_WHITESPACE))
    return int(match.group()) if match else 0


def atof(text: str) -> float:
    """Parse the leading floating-point number of ``text``; 0.0 when there is none."""
    stripped = text.lstrip(_C_WHITESPACE)
    match = _HEX_FLOAT_RE.match(stripped)
    if match:
        return float.fromhex(match.group())
    match = _SPECIAL_RE.match(stripped)
    if match:
        return float(match.group())
    match = _DEC_FLOAT_RE.match(stripped)
    if match:
        return float(match.group())
    return 0.0