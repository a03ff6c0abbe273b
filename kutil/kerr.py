"""An error type that records the file and line where it was created."""

from __future__ import annotations

import inspect
import sys
from typing import TextIO


def _caller_location(depth: int) -> tuple[str, int]:
    frame = inspect.currentframe()
    try:
        for _ in range(depth + 1):
            if frame is None:
                break
            frame = frame.f_back
        if frame is None:
            return "<unknown>", 0
        return frame.f_code.co_filename, frame.f_lineno
    finally:
        del frame


class KError(Exception):
    """An error message tagged with the source file and line it came from."""

    def __init__(self, message: str, file: str, line: int) -> None:
        super().__init__(message)
        self.message = message
        self.file = file
        self.line = line

    @classmethod
    def here(cls, message: str) -> "KError":
        """Create an error located at the caller's file and line."""
        file, line = _caller_location(1)
        return cls(message, file, line)

    def is_empty(self) -> bool:
        """Return True if the error carries no message."""
        return not self.message

    def __str__(self) -> str:
        return f"({self.file} {self.line}) {self.message}"

    def __repr__(self) -> str:
        return f"KError(message={self.message!r}, file={self.file!r}, line={self.line!r})"

    def dbg(self, file: TextIO | None = None) -> None:
        """Print the error to a terminal-like stream."""
        print(f"🚨 {self}", file=file if file is not None else sys.stdout)


class Panic(SystemExit):
    """Raised to shut the program down after an unrecoverable error."""

    def __init__(self, error: KError) -> None:
        super().__init__(1)
        self.error = error


def panic(message: str) -> None:
    """Report an error at the caller's location and shut down."""
    file, line = _caller_location(1)
    error = KError(message, file, line)
    error.dbg()
    print("💣 PANICKING! SHUTTING DOWN..")
    raise Panic(error)