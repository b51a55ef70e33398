"""LineStoreConfig: project-local config for line stores.

Looked up as ``linestore.toml`` in the working directory or any parent:

    [store]
    encoding = "utf-8"
    sentinel = "* Nothing present *"
    lock = true          # flock around single-line updates

    [logging]
    level = "WARNING"

Environment overrides (take precedence over the file):

    LINESTORE_ENCODING
    LINESTORE_LOG_LEVEL
"""

from __future__ import annotations

import codecs
import os
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from linestore.models import NOTHING_PRESENT

_CONFIG_FILENAME = "linestore.toml"
_DEFAULT_ENCODING = "utf-8"
_DEFAULT_LOG_LEVEL = "WARNING"


@dataclass
class StoreConfig:
    encoding: str = _DEFAULT_ENCODING
    sentinel: str = NOTHING_PRESENT
    lock: bool = True                 # exclusive flock during write_line

    def __post_init__(self) -> None:
        try:
            codecs.lookup(self.encoding)
        except LookupError as exc:
            msg = f"Unknown encoding: {self.encoding!r}"
            raise ValueError(msg) from exc
        if not isinstance(self.lock, bool):
            msg = f"store.lock must be true or false, got {self.lock!r}"
            raise ValueError(msg)


@dataclass
class LoggingConfig:
    level: str = _DEFAULT_LOG_LEVEL


@dataclass
class LineStoreConfig:
    """Resolved configuration."""

    root: Path                        # directory that contains linestore.toml (or cwd)
    store: StoreConfig = field(default_factory=StoreConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    @property
    def config_path(self) -> Path:
        return self.root / _CONFIG_FILENAME


def load_config(root: Path | str | None = None) -> LineStoreConfig:
    """Load linestore.toml from root (or search upward from cwd if root is None)."""
    root_path = _find_root(Path(root) if root else Path.cwd())
    config_path = root_path / _CONFIG_FILENAME

    raw: dict[str, Any] = {}
    if config_path.exists():
        with config_path.open("rb") as f:
            raw = tomllib.load(f)

    store_section = raw.get("store", {})
    log_section = raw.get("logging", {})

    encoding = os.environ.get("LINESTORE_ENCODING") or str(store_section.get("encoding", _DEFAULT_ENCODING))
    level = os.environ.get("LINESTORE_LOG_LEVEL") or str(log_section.get("level", _DEFAULT_LOG_LEVEL))

    return LineStoreConfig(
        root=root_path,
        store=StoreConfig(
            encoding=encoding,
            sentinel=str(store_section.get("sentinel", NOTHING_PRESENT)),
            lock=store_section.get("lock", True),
        ),
        logging=LoggingConfig(level=level.upper()),
    )


def _find_root(start: Path) -> Path:
    """Walk upward from start looking for linestore.toml."""
    for directory in (start, *start.parents):
        if (directory / _CONFIG_FILENAME).exists():
            return directory
    return start


def init_config(root: Path) -> Path:
    """Write a default linestore.toml at root. Raises if already exists."""
    config_path = root / _CONFIG_FILENAME
    if config_path.exists():
        msg = f"linestore.toml already exists at {config_path}"
        raise FileExistsError(msg)

    content = f"""\
[store]
encoding = "{_DEFAULT_ENCODING}"
# sentinel = "{NOTHING_PRESENT}"   # returned for a line past the end
# lock = true                      # flock around single-line updates

[logging]
level = "{_DEFAULT_LOG_LEVEL}"     # or set LINESTORE_LOG_LEVEL
"""
    config_path.write_text(content)
    return config_path
