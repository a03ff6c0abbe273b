"""Helpers for quickly inspecting single byte and character values."""

from __future__ import annotations

import sys
from typing import TextIO


def _as_byte(value: int | bytes) -> int:
    if isinstance(value, (bytes, bytearray)):
        if len(value) != 1:
            raise ValueError(f"expected a single byte, got {len(value)} bytes")
        return value[0]
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"expected an int or a single byte, got {type(value).__name__}")
    if not 0 <= value <= 0xFF:
        raise ValueError(f"byte value out of range: {value}")
    return value


def _as_char(value: str | int) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"expected a single character, got {len(value)} characters")
        return value
    return chr(_as_byte(value))


def hex_line(byte: int | bytes) -> str:
    """Describe a byte as a two-digit hexadecimal number."""
    return f"HEX: 0x{_as_byte(byte):02X}"


def bin_line(byte: int | bytes) -> str:
    """Describe a byte as eight binary digits, most significant first."""
    return f"BIN: {_as_byte(byte):08b}"


def char_line(char: str | int) -> str:
    """Describe a character, naming the NUL character explicitly."""
    c = _as_char(char)
    if c == "\0":
        return "CHAR: NULL TERMINATOR"
    return f"CHAR: {c}"


def dbg_hex(byte: int | bytes, file: TextIO | None = None) -> None:
    """Print a byte as a hexadecimal number."""
    print(hex_line(byte), file=file if file is not None else sys.stdout)


def dbg_bin(byte: int | bytes, file: TextIO | None = None) -> None:
    """Print a byte as a binary number."""
    print(bin_line(byte), file=file if file is not None else sys.stdout)


def dbg_char(char: str | int, file: TextIO | None = None) -> None:
    """Print a raw character."""
    print(char_line(char), file=file if file is not None else sys.stdout)