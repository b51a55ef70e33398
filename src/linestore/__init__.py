"""Line-oriented persistence over a single text file.

    from linestore import LineFileStore

    store = LineFileStore("todo.txt")
    store.write_all("buy milk\nwalk dog")
    store.read_line(1).value    # "walk dog"
    store.read_line(9).value    # "* Nothing present *"

Operations return a Result; call .unwrap() to get the value or raise the
matching LineStoreError.
"""

from linestore.config import LineStoreConfig, StoreConfig, init_config, load_config
from linestore.errors import (
    CreationError,
    DeleteError,
    LineIndexError,
    LineStoreError,
    ReadError,
    WriteError,
)
from linestore.models import NOTHING_PRESENT, ErrorKind, Result
from linestore.store import LineFileStore

__all__ = [
    "NOTHING_PRESENT",
    "CreationError",
    "DeleteError",
    "ErrorKind",
    "LineFileStore",
    "LineIndexError",
    "LineStoreConfig",
    "LineStoreError",
    "ReadError",
    "Result",
    "StoreConfig",
    "WriteError",
    "init_config",
    "load_config",
]
