from color_lines.persistence.save_state import (
    SAVE_FORMAT_VERSION,
    InvalidSaveError,
    PersistenceError,
    SaveState,
)
from color_lines.persistence.store import JsonFileStore, SaveStore

__all__ = [
    "SAVE_FORMAT_VERSION",
    "InvalidSaveError",
    "JsonFileStore",
    "PersistenceError",
    "SaveState",
    "SaveStore",
]
