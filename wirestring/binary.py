"""Named binary constants ``B0`` .. ``B11111111`` and their values."""

from __future__ import annotations

import re
import warnings

_NAME_RE = re.compile(r"B([01]{1,8})")
_MAX_WIDTH = 8
_MAX_VALUE = (1 << _MAX_WIDTH) - 1


def binary_constant(name: str) -> int:
    """Return the value of a named binary constant such as ``"B00101"``.

    A name is ``B`` followed by one to eight binary digits. These names are
    deprecated in favour of ``0b`` literals, so a DeprecationWarning is issued.
    """
    if not isinstance(name, str):
        raise TypeError(f"name must be a str, got {type(name).__name__}")
    match = _NAME_RE.fullmatch(name)
    if match is None:
        raise ValueError(f"not a binary constant name: {name!r}")
    digits = match.group(1)
    warnings.warn(
        f"{name} is deprecated; use 0b{digits} instead",
        DeprecationWarning,
        stacklevel=2,
    )
    return int(digits, 2)


def constant_names(value: int) -> tuple[str, ...]:
    """Return every constant name for ``value`` (0 to 255), shortest first."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"value must be an int, got {type(value).__name__}")
    if not 0 <= value <= _MAX_VALUE:
        raise ValueError(f"value must be between 0 and {_MAX_VALUE}, got {value}")
    shortest = max(value.bit_length(), 1)
    return tuple(
        "B" + format(value, f"0{width}b")
        for width in range(shortest, _MAX_WIDTH + 1)
    )