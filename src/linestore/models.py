"""Data models for line store results."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Generic, TypeVar

T = TypeVar("T")

# Returned by read_line for a line past the end of the file.
NOTHING_PRESENT = "* Nothing present *"


class ErrorKind(str, Enum):
    CREATION_FAILURE = "creation_failure"
    READ_FAILURE = "read_failure"
    WRITE_FAILURE = "write_failure"
    INDEX_OUT_OF_RANGE = "index_out_of_range"
    DELETE_FAILURE = "delete_failure"


@dataclass(frozen=True)
class Result(Generic[T]):
    """Outcome of a store operation: a value, or an error kind plus message."""

    value: T | None = None
    error: ErrorKind | None = None
    message: str = ""

    @classmethod
    def success(cls, value: T | None = None) -> Result[T]:
        return cls(value=value)

    @classmethod
    def failure(cls, kind: ErrorKind, message: str) -> Result[T]:
        return cls(error=kind, message=message)

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> T | None:
        """Return the value, or raise the LineStoreError matching the error kind."""
        if self.error is not None:
            from linestore.errors import error_for

            raise error_for(self.error, self.message)
        return self.value
