"""The outcome of an operation: either data or an error."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from kutil.kerr import panic


@dataclass(frozen=True)
class Outcome:
    """Holds the data of a successful operation or the error of a failed one."""

    err: Any = None
    data: Any = None

    @classmethod
    def ok(cls, data: Any) -> "Outcome":
        """Create a successful outcome holding data."""
        return cls(err=None, data=data)

    @classmethod
    def fail(cls, err: Any) -> "Outcome":
        """Create a failed outcome holding an error."""
        return cls(err=err, data=None)

    def is_err(self) -> bool:
        """Return True if the outcome holds an error."""
        return self.err is not None

    def get_err(self) -> Any:
        """Return the error; panic if there is none."""
        if not self.is_err():
            panic("KOUT: attempted to unwrap an error when no error exists")
        return self.err

    def get_data(self) -> Any:
        """Return the data; panic if the outcome is an error."""
        if self.is_err():
            panic("KOUT: attempted to unwrap data when no data exists")
        return self.data