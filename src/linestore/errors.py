"""Exceptions raised by LineFileStore construction and Result.unwrap()."""

from __future__ import annotations

from linestore.models import ErrorKind


class LineStoreError(Exception):
    """Base class; carries the ErrorKind that produced it."""

    kind: ErrorKind

    def __init__(self, message: str, kind: ErrorKind | None = None) -> None:
        super().__init__(message)
        if kind is not None:
            self.kind = kind


class CreationError(LineStoreError):
    kind = ErrorKind.CREATION_FAILURE


class ReadError(LineStoreError):
    kind = ErrorKind.READ_FAILURE


class WriteError(LineStoreError):
    kind = ErrorKind.WRITE_FAILURE


class LineIndexError(LineStoreError, IndexError):
    kind = ErrorKind.INDEX_OUT_OF_RANGE


class DeleteError(LineStoreError):
    kind = ErrorKind.DELETE_FAILURE


_BY_KIND: dict[ErrorKind, type[LineStoreError]] = {
    cls.kind: cls
    for cls in (CreationError, ReadError, WriteError, LineIndexError, DeleteError)
}


def error_for(kind: ErrorKind, message: str) -> LineStoreError:
    """Build the exception matching kind."""
    return _BY_KIND[kind](message)
