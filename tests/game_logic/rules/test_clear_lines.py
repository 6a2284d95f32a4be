import numpy as np

from color_lines.game_logic.components import Board, Position
from color_lines.game_logic.rules.clear_lines import ClearLinesRule, compute_points, find_crosses, find_lines


def test_no_lines() -> None:
    board = Board.from_string_representation(
        """
            .........
            .0000....
            .........
            ..1......
            ...1.....
            ....1....
            .....1...
            .........
            2.2.2.2.2
        """
    )
    assert ClearLinesRule().apply(board) is None
    assert board.count_empty() == 81 - 4 - 4 - 5


def test_horizontal_line() -> None:
    board = Board.from_string_representation(
        """
            .........
            .........
            .........
            .........
            00000....
            .........
            .........
            .........
            .........
        """
    )
    result = ClearLinesRule().apply(board)

    assert result is not None
    assert result.num_cleared == 5
    assert result.num_bonus == 0
    assert result.cleared_positions() == [Position(4, col) for col in range(5)]
    assert board.count_empty() == 81
    assert compute_points(result.num_cleared, result.num_bonus) == 10


def test_vertical_and_diagonal_lines() -> None:
    board = Board.from_string_representation(
        """
            3.......4
            3......4.
            3.....4..
            3....4...
            3...4....
            .........
            ..5......
            ...5.....
            ....5....
        """
    )
    rule = ClearLinesRule()
    result = rule.apply(board)

    assert result is not None
    assert result.num_cleared == 10
    assert (
        str(board)
        == """
            .........
            .........
            .........
            .........
            .........
            .........
            ..5......
            ...5.....
            ....5....
        """.replace(" ", "").strip()
    )


def test_down_right_diagonal_line() -> None:
    board = Board.from_string_representation(
        """
            .........
            .........
            .........
            .........
            6........
            .6.......
            ..6......
            ...6.....
            ....6....
        """
    )
    result = ClearLinesRule().apply(board)

    assert result is not None
    assert result.cleared_positions() == [Position(4 + i, i) for i in range(5)]
    assert board.count_empty() == 81


def test_long_line_is_cleared_completely() -> None:
    board = Board.from_string_representation(
        """
            .........
            .........
            111111111
            .........
            .........
            .........
            .........
            .........
            .........
        """
    )
    result = ClearLinesRule().apply(board)

    assert result is not None
    assert result.num_cleared == 9
    assert result.num_bonus == 0
    assert board.count_empty() == 81


def test_different_colors_do_not_form_a_line() -> None:
    board = Board.from_string_representation(
        """
            .........
            .........
            .........
            .........
            00001....
            .........
            .........
            .........
            .........
        """
    )
    assert ClearLinesRule().apply(board) is None
    assert str(board).splitlines()[4] == "00001...."


def test_other_balls_are_left_untouched() -> None:
    board = Board.from_string_representation(
        """
            .........
            ....1....
            222222...
            ....3....
            .........
            .........
            .........
            .........
            .........
        """
    )
    result = ClearLinesRule().apply(board)

    assert result is not None
    assert result.num_cleared == 6
    assert str(board).splitlines()[:4] == [".........", "....1....", ".........", "....3...."]


def test_cross_bonus() -> None:
    board = Board.from_string_representation(
        """
            .........
            .........
            ....0....
            ....0....
            ..00000..
            ....0....
            ....0....
            .........
            .........
        """
    )
    result = ClearLinesRule().apply(board)

    assert result is not None
    assert result.num_cleared == 9
    assert result.bonus_positions() == [
        Position(3, 4),
        Position(4, 3),
        Position(4, 4),
        Position(4, 5),
        Position(5, 4),
    ]
    assert compute_points(result.num_cleared, result.num_bonus) == 2 * 9 + 8 * 5
    assert board.count_empty() == 81


def test_no_bonus_for_crossing_on_the_border() -> None:
    board = Board.from_string_representation(
        """
            ..22222..
            ....2....
            ....2....
            ....2....
            ....2....
            .........
            .........
            .........
            .........
        """
    )
    result = ClearLinesRule().apply(board)

    assert result is not None
    assert result.num_cleared == 9
    assert result.num_bonus == 0


def test_no_bonus_for_corner_of_two_lines() -> None:
    board = Board.from_string_representation(
        """
            .........
            .........
            ..55555..
            ..5......
            ..5......
            ..5......
            ..5......
            .........
            .........
        """
    )
    result = ClearLinesRule().apply(board)

    assert result is not None
    assert result.num_cleared == 9
    assert result.num_bonus == 0


def test_bonus_of_a_block_is_the_union_of_its_plus_shapes() -> None:
    board = Board.from_string_representation(
        """
            .........
            .........
            ...444...
            ...444...
            ...444...
            ...444...
            ...444...
            .........
            .........
        """
    )
    result = ClearLinesRule().apply(board)

    assert result is not None
    assert result.num_cleared == 15
    # plus shapes centred on (3, 4), (4, 4) and (5, 4)
    assert result.num_bonus == 11
    assert not result.bonus[2, 3]
    assert not result.bonus[6, 5]
    assert (result.bonus & ~result.cleared).sum() == 0


def test_find_lines_with_shorter_connect_count() -> None:
    board = Board.from_string_representation(
        """
            000..
            .....
            ..1..
            ...1.
            ....1
        """
    )
    to_clear = find_lines(board.as_array(), connect_count=3)
    assert np.count_nonzero(to_clear) == 6

    rule = ClearLinesRule(connect_count=3)
    assert rule.connect_count == 3
    result = rule.apply(board)
    assert result is not None
    assert board.count_empty() == 25


def test_find_lines_board_smaller_than_line() -> None:
    board = Board.from_string_representation(
        """
            000
            000
            000
        """
    )
    assert not find_lines(board.as_array(), connect_count=5).any()


def test_find_crosses_only_marks_plus_shapes() -> None:
    to_clear = np.array(
        [
            [0, 1, 0, 0],
            [1, 1, 1, 0],
            [0, 1, 0, 0],
            [0, 0, 0, 0],
        ],
        dtype=bool,
    )
    assert np.array_equal(find_crosses(to_clear), to_clear)

    to_clear[0, 1] = False
    assert not find_crosses(to_clear).any()


def test_compute_points() -> None:
    assert compute_points(0, 0) == 0
    assert compute_points(5, 0) == 10
    assert compute_points(9, 5) == 58
    assert compute_points(5, 0, points_per_ball=3) == 15
    assert compute_points(9, 5, points_per_bonus_ball=1) == 23
