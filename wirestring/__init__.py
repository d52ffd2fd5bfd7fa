"""Microcontroller-style mutable strings, number formatting, buffer reads and binary constants."""

__version__ = "1.5.1"
__all__ = ["binary", "numfmt", "pgmspace", "textops", "wstring"]