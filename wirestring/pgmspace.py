"""Little-endian reads of bytes, words, double words and floats from a byte buffer."""

from __future__ import annotations

import struct


def _take(data: bytes | bytearray | memoryview, addr: int, size: int) -> bytes:
    if addr < 0 or addr + size > len(data):
        raise IndexError(f"cannot read {size} byte(s) at address {addr}")
    return bytes(data[addr:addr + size])


def read_byte(data: bytes | bytearray | memoryview, addr: int) -> int:
    """Return the unsigned byte at ``addr``."""
    return _take(data, addr, 1)[0]


def read_word(data: bytes | bytearray | memoryview, addr: int) -> int:
    """Return the unsigned 16-bit little-endian value at ``addr``."""
    return int.from_bytes(_take(data, addr, 2), "little")


def read_dword(data: bytes | bytearray | memoryview, addr: int) -> int:
    """Return the unsigned 32-bit little-endian value at ``addr``."""
    return int.from_bytes(_take(data, addr, 4), "little")


def read_ptr(data: bytes | bytearray | memoryview, addr: int) -> int:
    """Return the 32-bit address stored at ``addr``."""
    return read_dword(data, addr)


def read_float(data: bytes | bytearray | memoryview, addr: int) -> float:
    """Return the 32-bit IEEE 754 float stored little-endian at ``addr``."""
    return struct.unpack("<f", read_dword(data, addr).to_bytes(4, "little"))[0]