import json
from pathlib import Path

import pytest

from color_lines.config import GameConfig
from color_lines.persistence import JsonFileStore, PersistenceError, SaveState

CONFIG = GameConfig()


def create_state() -> SaveState:
    board_colors = [[-1] * 9 for _ in range(9)]
    board_colors[2][3] = 1
    board_colors[8][0] = 5
    return SaveState(
        board_colors=tuple(tuple(row) for row in board_colors),
        next_colors=(6, 6, 0),
        score=14,
        high_score=30,
    )


def test_save_and_load(tmp_path: Path) -> None:
    store = JsonFileStore(tmp_path / "save.json")
    state = create_state()

    store.save(state, CONFIG)

    assert store.path == tmp_path / "save.json"
    assert store.load(CONFIG) == state
    assert not (tmp_path / "save.json.tmp").exists()


def test_save_format(tmp_path: Path) -> None:
    store = JsonFileStore(tmp_path / "save.json")
    store.save(create_state(), CONFIG)

    record = json.loads((tmp_path / "save.json").read_text(encoding="utf-8"))

    assert record["version"] == 1
    assert record["boardColors"][2][3] == 1
    assert record["boardColors"][0][0] == -1
    assert record["nextColors"] == [6, 6, 0]
    assert record["score"] == 14
    assert record["highScore"] == 30


def test_save_overwrites_previous_save(tmp_path: Path) -> None:
    store = JsonFileStore(tmp_path / "save.json")
    store.save(create_state(), CONFIG)

    new_state = SaveState(board_colors=create_state().board_colors, next_colors=(1, 2, 3), score=0, high_score=30)
    store.save(new_state, CONFIG)

    assert store.load(CONFIG) == new_state


def test_save_creates_missing_directories(tmp_path: Path) -> None:
    store = JsonFileStore(tmp_path / "saves" / "color_lines" / "save.json")
    store.save(create_state(), CONFIG)

    assert store.load(CONFIG) == create_state()


def test_save_error(tmp_path: Path) -> None:
    not_a_directory = tmp_path / "file"
    not_a_directory.write_text("", encoding="utf-8")
    store = JsonFileStore(not_a_directory / "save.json")

    with pytest.raises(PersistenceError, match="Failed to save game state"):
        store.save(create_state(), CONFIG)


def test_load_missing_file(tmp_path: Path) -> None:
    assert JsonFileStore(tmp_path / "save.json").load(CONFIG) is None


@pytest.mark.parametrize(
    "content",
    [
        "",
        "{",
        "[]",
        '{"version": 1}',
        '{"version": 99, "boardSize": 9, "paletteSize": 7, "boardColors": [], "nextColors": [], "score": 0, '
        '"highScore": 0}',
    ],
)
def test_load_corrupt_file(tmp_path: Path, content: str) -> None:
    path = tmp_path / "save.json"
    path.write_text(content, encoding="utf-8")

    assert JsonFileStore(path).load(CONFIG) is None


def test_load_file_that_is_not_utf8(tmp_path: Path) -> None:
    path = tmp_path / "save.json"
    path.write_bytes(b"\xff\xfe\x00garbage")

    assert JsonFileStore(path).load(CONFIG) is None


def test_load_save_of_a_different_board_size(tmp_path: Path) -> None:
    store = JsonFileStore(tmp_path / "save.json")
    store.save(create_state(), CONFIG)

    assert store.load(GameConfig(board_size=7)) is None
