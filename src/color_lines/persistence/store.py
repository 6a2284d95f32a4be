import json
import logging
import os
from pathlib import Path
from typing import Protocol

from color_lines.config import GameConfig
from color_lines.persistence.save_state import InvalidSaveError, PersistenceError, SaveState

LOGGER = logging.getLogger(__name__)


class SaveStore(Protocol):
    def save(self, state: SaveState, config: GameConfig) -> None: ...

    def load(self, config: GameConfig) -> SaveState | None: ...


class JsonFileStore:
    """Stores one save record as a JSON file."""

    def __init__(self, path: Path) -> None:
        self._path = path

    @property
    def path(self) -> Path:
        return self._path

    def save(self, state: SaveState, config: GameConfig) -> None:
        # write to a temporary file first, so that a failed write never destroys the previous save
        tmp_path = self._path.with_name(self._path.name + ".tmp")
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            tmp_path.write_text(json.dumps(state.to_dict(config)), encoding="utf-8")
            os.replace(tmp_path, self._path)
        except OSError as e:
            msg = f"Failed to save game state to {self._path}: {e}"
            raise PersistenceError(msg) from e

    def load(self, config: GameConfig) -> SaveState | None:
        """Return the saved state, or None if there is no usable save."""
        if not self._path.exists():
            LOGGER.info("No save file at %s", self._path)
            return None

        try:
            data = json.loads(self._path.read_text(encoding="utf-8"))
            return SaveState.from_dict(data, config)
        except (OSError, UnicodeDecodeError, json.JSONDecodeError, InvalidSaveError) as e:
            LOGGER.warning("Failed to load game state from %s: %s", self._path, e)
            return None
