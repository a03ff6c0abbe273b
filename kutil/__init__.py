"""Traced errors, outcome values, a cursor-based UTF-8 string and byte debugging helpers."""

__version__ = "0.1.0"
__all__ = ["kbg", "kerr", "kout", "kstr"]