"""Line-oriented CRUD over a single text file.

LineFileStore is the public API:
    store = LineFileStore("notes.txt")      # creates an empty file if missing
    store.write_all("a\\nb\\nc")
    store.read_line(1).value                # "b"
    store.write_line("z", 1)
    store.read_all().value                  # "a\\nz\\nc"
    store.delete()

Lines are 0-indexed. Reads split on any line break; writes end every line with
the platform separator. Operations return a Result instead of raising; each
failure is logged once on the ``linestore.store`` logger.

write_all: temp file (mkstemp beside the resolved target) + rename.
write_line: read-modify-write under flock(LOCK_EX) on the file itself.
"""

from __future__ import annotations

import contextlib
import fcntl
import itertools
import logging
import os
import shutil
import tempfile
from pathlib import Path
from typing import IO

from linestore.config import StoreConfig
from linestore.errors import CreationError
from linestore.models import ErrorKind, Result

logger = logging.getLogger("linestore.store")

# Converted into Result failures; anything else propagates.
_IO_ERRORS = (OSError, UnicodeError)


def split_content(content: str) -> list[str]:
    """Split whole-file content on "\\n", dropping trailing empty lines.

    Content without any "\\n" (including "") is a single line.
    """
    if "\n" not in content:
        return [content]
    lines = content.split("\n")
    while lines and lines[-1] == "":
        lines.pop()
    return lines


def _strip_newline(line: str) -> str:
    return line[:-1] if line.endswith("\n") else line


class LineFileStore:
    """A text file treated as an ordered sequence of lines."""

    def __init__(self, path: Path | str, config: StoreConfig | None = None) -> None:
        self.path = Path(path)
        self.config = config or StoreConfig()
        self._create_if_missing()

    @classmethod
    def open(cls, path: Path | str, config: StoreConfig | None = None) -> Result[LineFileStore]:
        """Like the constructor, but reports a creation failure as a Result."""
        try:
            return Result.success(cls(path, config))
        except CreationError as exc:
            return Result.failure(ErrorKind.CREATION_FAILURE, str(exc))

    def __repr__(self) -> str:
        return f"LineFileStore({str(self.path)!r})"

    def exists(self) -> bool:
        return self.path.exists()

    # ------------------------------------------------------------------
    # Read
    # ------------------------------------------------------------------

    def read_all(self) -> Result[str]:
        """Whole file, lines joined by "\\n"."""
        try:
            with self._open("r") as f:
                lines = [_strip_newline(line) for line in f.readlines()]
        except _IO_ERRORS as exc:
            return self._fail(ErrorKind.READ_FAILURE, f"Unable to read file content: {exc}")
        return Result.success("\n".join(lines))

    def read_line(self, line_number: int) -> Result[str]:
        """Line at line_number, or the configured sentinel if there is no such line.

        Stops reading at the requested line.
        """
        try:
            with self._open("r") as f:
                if line_number < 0:
                    line = None
                else:
                    line = next(itertools.islice(f, line_number, None), None)
        except _IO_ERRORS as exc:
            return self._fail(
                ErrorKind.READ_FAILURE,
                f"Unable to read file content at line {line_number}: {exc}",
            )
        if line is None:
            return Result.success(self.config.sentinel)
        return Result.success(_strip_newline(line))

    # ------------------------------------------------------------------
    # Write
    # ------------------------------------------------------------------

    def write_all(self, content: str) -> Result[None]:
        """Replace the whole file with content, split into lines on "\\n"."""
        lines = split_content(content)
        # Follow symlinks so the rename replaces the real file, not the link.
        target = self.path.resolve()
        tmp: Path | None = None
        try:
            fd, tmp_name = tempfile.mkstemp(dir=target.parent, prefix=f".{target.name}.", suffix=".tmp")
            tmp = Path(tmp_name)
            with os.fdopen(fd, "w", encoding=self.config.encoding) as f:
                f.writelines(line + "\n" for line in lines)
            with contextlib.suppress(FileNotFoundError):
                shutil.copymode(target, tmp)
            tmp.replace(target)
        except _IO_ERRORS as exc:
            if tmp is not None:
                with contextlib.suppress(OSError):
                    tmp.unlink(missing_ok=True)
            return self._fail(ErrorKind.WRITE_FAILURE, f"Unable to write to the file content: {exc}")
        logger.debug("wrote %d lines to %s", len(lines), self.path)
        return Result.success()

    def write_line(self, content: str, line_number: int) -> Result[None]:
        """Replace one existing line. The file is left untouched if line_number is out of range."""
        try:
            with self._open("r+") as f:
                if self.config.lock:
                    fcntl.flock(f, fcntl.LOCK_EX)
                lines = [_strip_newline(line) for line in f.readlines()]
                if not 0 <= line_number < len(lines):
                    return self._fail(
                        ErrorKind.INDEX_OUT_OF_RANGE,
                        f"Line {line_number} out of range ({len(lines)} lines)",
                        level=logging.WARNING,
                    )
                lines[line_number] = content
                f.seek(0)
                f.writelines(line + "\n" for line in lines)
                f.truncate()
        except _IO_ERRORS as exc:
            return self._fail(ErrorKind.WRITE_FAILURE, f"Unable to write to the file: {exc}")
        logger.debug("updated line %d of %s", line_number, self.path)
        return Result.success()

    # ------------------------------------------------------------------
    # Delete
    # ------------------------------------------------------------------

    def delete(self) -> Result[None]:
        try:
            self.path.unlink()
        except OSError as exc:
            return self._fail(ErrorKind.DELETE_FAILURE, f"Unable to delete file: {exc}")
        logger.debug("deleted %s", self.path)
        return Result.success()

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------

    def _create_if_missing(self) -> None:
        if self.path.exists():
            return
        try:
            self.path.touch()
        except OSError as exc:
            logger.error("%s: Unable to create file: %s", self.path, exc)
            msg = f"Unable to create file: {exc}"
            raise CreationError(msg) from exc

    def _open(self, mode: str) -> IO[str]:
        return self.path.open(mode, encoding=self.config.encoding)

    def _fail(self, kind: ErrorKind, message: str, *, level: int = logging.ERROR) -> Result:
        logger.log(level, "%s: %s", self.path, message)
        return Result.failure(kind, message)
