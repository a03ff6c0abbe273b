"""A UTF-8 string with a byte cursor that moves one character at a time."""

from __future__ import annotations

import sys
from typing import TextIO


def utf8_char_length(byte: int) -> int:
    """Return the length of the UTF-8 sequence a leading byte starts, or 0."""
    if not 0 <= byte <= 0xFF:
        raise ValueError(f"byte value out of range: {byte}")
    if byte & 0x80 == 0x00:
        return 1
    if byte & 0xE0 == 0xC0:
        return 2
    if byte & 0xF0 == 0xE0:
        return 3
    if byte & 0xF8 == 0xF0:
        return 4
    return 0


class KStr:
    """UTF-8 bytes with a terminating NUL and a cursor measured in bytes.

    The terminator is part of the string: it counts towards ``byte_count``
    and ``char_count`` and the cursor visits it before reaching the end.
    """

    def __init__(self, text: str | bytes) -> None:
        raw = text.encode("utf-8") if isinstance(text, str) else bytes(text)
        self._raw = raw.split(b"\0", 1)[0]
        self._data = self._raw + b"\0"
        self.byte_count = len(self._data)
        self._position = 0
        self.char_count = self.count_chars()

    def __repr__(self) -> str:
        return f"KStr({self._raw!r}, position={self._position})"

    def pos(self) -> int:
        """Return the cursor position in bytes."""
        return self._position

    def at_start(self) -> bool:
        """Return True if the cursor is at the first byte."""
        return self._position == 0

    def at_end(self) -> bool:
        """Return True if the cursor is past the last byte."""
        return self._position >= self.byte_count

    def goto_end(self) -> None:
        """Move the cursor forward until it reaches the end."""
        while not self.at_end():
            self.next()

    def goto_start(self) -> None:
        """Move the cursor to the first byte."""
        self._position = 0

    def out_of_bounds(self) -> bool:
        """Return True if the cursor is beyond the last byte."""
        return self._position > self.byte_count - 1

    def last_char(self) -> int:
        """Return the last byte, which is the terminator."""
        return self._data[-1]

    def goto_pos(self, pos: int) -> None:
        """Move the cursor to a byte position, or to the end if it lies beyond."""
        if pos < 0:
            raise ValueError(f"position must not be negative: {pos}")
        if pos > self.byte_count:
            self.goto_end()
            return
        self._position = pos

    def count_chars(self) -> int:
        """Count the characters, terminator included, keeping the cursor in place."""
        start = self._position
        self.goto_start()
        count = 0
        while not self.at_end():
            self.next()
            count += 1
        self.goto_pos(start)
        return count

    def current(self) -> int:
        """Return the byte under the cursor, or 0 past the end."""
        if self._position < self.byte_count:
            return self._data[self._position]
        return 0

    def next(self) -> None:
        """Move the cursor to the start of the next character."""
        # A stray continuation byte is stepped over one byte at a time.
        self._position += utf8_char_length(self.current()) or 1
        if self.out_of_bounds():
            self.goto_end()

    def next_by(self, by: int) -> None:
        """Move the cursor forward by a number of characters."""
        for _ in range(by):
            self.next()

    def prev(self) -> None:
        """Move the cursor to the start of the previous character."""
        while self.current() & 0xC0 == 0x80 and self._position > 0:
            self._position -= 1
        if self._position == 0:
            return
        self._position -= 1
        while utf8_char_length(self.current()) == 0 and self._position > 0:
            self._position -= 1

    def prev_by(self, by: int) -> None:
        """Move the cursor backwards by a number of characters."""
        for _ in range(by):
            self.prev()

    def bytes_from_rng(self, start: int, end: int) -> bytes:
        """Return the bytes from start to end, both inclusive, clamped to the string."""
        if start < 0 or end < 0:
            raise ValueError("range bounds must not be negative")
        end = min(end, self.byte_count - 1)
        start = min(start, end)
        return self._raw[start:end + 1]

    def bytes_from_start(self) -> bytes:
        """Return the bytes from the start up to and including the cursor."""
        if self._position == 0:
            return b""
        return self._raw[:self._position + 1]

    def bytes_from_end(self) -> bytes:
        """Return the bytes from the cursor to the end."""
        if self.at_end():
            return b""
        return self._raw[self._position:]

    def dbg(self, file: TextIO | None = None) -> None:
        """Print the state of the string."""
        stream = file if file is not None else sys.stdout
        print("DEBUGGING: kstr", file=stream)
        print(f"BYTE COUNT: {self.byte_count}", file=stream)
        print(f"CHAR COUNT: {self.char_count}", file=stream)
        print(f"POSITION: {self._position}", file=stream)
        print(f"STRING: {self._raw.decode('utf-8', errors='replace')}", file=stream)
        print(f"CHAR: {chr(self.current())}", file=stream)