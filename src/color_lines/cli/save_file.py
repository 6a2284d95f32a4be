"""Commands working directly on the save file, without an interactive session."""

import click

from color_lines.cli.common import Coordinate, game_options
from color_lines.game_logic.components import Position
from color_lines.game_logic.game import Game
from color_lines.game_logic.interfaces.dependency_manager import DEPENDENCY_MANAGER
from color_lines.game_logic.interfaces.ui import UiElements
from color_lines.ui.cli import CLI


def _print_game(game: Game) -> None:
    elements = UiElements(
        board=game.board.as_array(),
        next_colors=game.next_colors,
        score=game.score_tracker.score,
        high_score=game.score_tracker.high_score,
        game_over=game.game_over,
    )
    click.echo(CLI(use_colors=False).render(elements))


@click.command()
@game_options
def show(game: Game) -> None:
    """Print the saved game."""
    # nothing listens to the game outside of an interactive session
    DEPENDENCY_MANAGER.reset()

    if not game.load():
        msg = "No valid save file found."
        raise click.ClickException(msg)

    _print_game(game)


@click.command()
@game_options
def reset(game: Game) -> None:
    """Start a new game in the save file. The high score is kept."""
    DEPENDENCY_MANAGER.reset()

    game.load()
    game.start_new_game()
    _print_game(game)


@click.command()
@game_options
@click.argument("origin", type=Coordinate())
@click.argument("target", type=Coordinate())
def move(game: Game, origin: Position, target: Position) -> None:
    """Move the ball at ORIGIN to TARGET (both given as 'row,col') in the saved game."""
    DEPENDENCY_MANAGER.reset()

    if not game.load():
        msg = "No valid save file found. Start a game with 'reset' or 'play' first."
        raise click.ClickException(msg)

    if game.game_over:
        msg = "The saved game is over. Start a new one with 'reset'."
        raise click.ClickException(msg)

    if not game.move(origin, target):
        msg = f"Cannot move from {tuple(origin)} to {tuple(target)}."
        raise click.ClickException(msg)

    _print_game(game)
