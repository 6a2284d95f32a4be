import logging

import click

from color_lines.cli.common import Coordinate, game_options
from color_lines.game_logic.game import Game
from color_lines.game_logic.interfaces.dependency_manager import DEPENDENCY_MANAGER
from color_lines.game_logic.interfaces.ui import UI
from color_lines.game_logic.ui_aggregator import UiAggregator
from color_lines.ui.cli import CLI

LOGGER = logging.getLogger(__name__)

_QUIT_COMMANDS = {"q", "quit", "exit"}
_NEW_GAME_COMMANDS = {"n", "new"}


@click.command()
@game_options
@click.option(
    "--new-game/--resume",
    default=False,
    show_default=True,
    help="Start a new game right away instead of continuing the saved one.",
)
@click.option(
    "--colors/--no-colors",
    default=True,
    show_default=True,
    help="Draw colored balls using ANSI escape codes. Without colors, balls are shown as their palette index.",
)
def play(game: Game, new_game: bool, colors: bool) -> None:  # noqa: FBT001
    """Play interactively: enter the row and column of the cell to click."""
    ui_aggregator = UiAggregator(game.board.as_array())
    DEPENDENCY_MANAGER.wire_up()

    ui = CLI(use_colors=colors, clear_screen=colors)
    ui.initialize(game.config.board_size)

    if new_game:
        # the saved high score carries over into the new game
        game.load()
        game.start_new_game()
    else:
        game.load_or_start_new_game()

    run_session(game, ui, ui_aggregator)


def run_session(game: Game, ui: UI, ui_aggregator: UiAggregator) -> None:
    coordinate = Coordinate(game.config.board_size)

    while True:
        ui.draw(ui_aggregator.ui_elements)

        if game.game_over:
            if not click.confirm("Play again?", default=True):
                return
            ui_aggregator.start_turn()
            game.start_new_game()
            continue

        raw = click.prompt("Cell (row,col), 'new' or 'quit'", type=str).strip().lower()
        if raw in _QUIT_COMMANDS:
            return

        ui_aggregator.start_turn()
        if raw in _NEW_GAME_COMMANDS:
            game.start_new_game()
            continue

        try:
            row, col = coordinate.convert(raw, None, None)
        except click.BadParameter as e:
            click.echo(e.format_message())
            continue

        game.click(row, col)
