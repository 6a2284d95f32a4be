import pytest

from color_lines.config import GameConfig
from color_lines.game_logic.components import BallColor


def test_defaults() -> None:
    config = GameConfig()

    assert config.board_size == 9
    assert config.connect_count == 5
    assert config.balls_per_turn == 3
    assert config.num_colors == 7
    assert config.points_per_ball == 2
    assert config.points_per_bonus_ball == 8
    assert config.palette == tuple(BallColor)


def test_palette_is_prefix_of_all_colors() -> None:
    assert GameConfig(num_colors=3).palette == (BallColor.RED, BallColor.GREEN, BallColor.YELLOW)


@pytest.mark.parametrize(
    ("kwargs", "error"),
    [
        ({"board_size": 0}, "board_size"),
        ({"connect_count": 1}, "connect_count"),
        ({"board_size": 4}, "connect_count"),
        ({"balls_per_turn": 0}, "balls_per_turn"),
        ({"board_size": 5, "balls_per_turn": 26}, "balls_per_turn"),
        ({"num_colors": 0}, "num_colors"),
        ({"num_colors": 8}, "num_colors"),
        ({"points_per_bonus_ball": -8}, "points_per_ball"),
    ],
)
def test_invalid_config(kwargs: dict[str, int], error: str) -> None:
    with pytest.raises(ValueError, match=error):
        GameConfig(**kwargs)
