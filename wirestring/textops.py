"""Search and edit operations on text with the semantics of the wiring String."""

from __future__ import annotations

import string

C_WHITESPACE = " \t\n\v\f\r"

_TO_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)
_TO_UPPER = str.maketrans(string.ascii_lowercase, string.ascii_uppercase)


def _check_non_negative(name: str, value: int) -> None:
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")


def index_of(text: str, target: str, from_index: int = 0) -> int:
    """Return the first position of ``target`` at or after ``from_index``, or -1."""
    _check_non_negative("from_index", from_index)
    if from_index >= len(text):
        return -1
    return text.find(target, from_index)


def _last_index_of_char(text: str, ch: str, from_index: int | None) -> int:
    if from_index is None:
        from_index = len(text) - 1
        if from_index < 0:
            return -1
    if from_index >= len(text):
        return -1
    return text.rfind(ch, 0, from_index + 1)


def _last_index_of_text(text: str, target: str, from_index: int | None) -> int:
    if not target or not text or len(target) > len(text):
        return -1
    if from_index is None:
        from_index = len(text) - len(target)
    if from_index >= len(text):
        from_index = len(text) - 1
    return text.rfind(target, 0, from_index + len(target))


def last_index_of(text: str, target: str, from_index: int | None = None) -> int:
    """Return the last position of ``target`` starting at or before ``from_index``.

    A single-character target past the end of the text gives -1; a longer
    target clamps ``from_index`` to the last position instead.
    """
    if from_index is not None:
        _check_non_negative("from_index", from_index)
    if len(target) == 1:
        return _last_index_of_char(text, target, from_index)
    return _last_index_of_text(text, target, from_index)


def replace_all(text: str, find: str, replacement: str) -> str:
    """Replace every occurrence of ``find`` with ``replacement``.

    Equal-length replacements scan forward; others scan backward from the end,
    as the wiring String does.
    """
    if not text or not find:
        return text
    if len(find) == len(replacement):
        return text.replace(find, replacement)
    if find not in text:
        return text
    index = len(text) - 1
    while index >= 0:
        index = _last_index_of_text(text, find, index)
        if index < 0:
            break
        text = text[:index] + replacement + text[index + len(find):]
        index -= 1
    return text


def remove_range(text: str, index: int, count: int | None = None) -> str:
    """Drop ``count`` characters from ``index`` (to the end when ``count`` is None)."""
    _check_non_negative("index", index)
    if count is not None:
        _check_non_negative("count", count)
    if index >= len(text):
        return text
    if count is None:
        return text[:index]
    if count == 0:
        return text
    return text[:index] + text[index + count:]


def trim_space(text: str) -> str:
    """Strip leading and trailing C whitespace."""
    return text.strip(C_WHITESPACE)


def lower_ascii(text: str) -> str:
    """Lower-case ASCII letters only."""
    return text.translate(_TO_LOWER)


def upper_ascii(text: str) -> str:
    """Upper-case ASCII letters only."""
    return text.translate(_TO_UPPER)