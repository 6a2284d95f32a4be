from pathlib import Path

import click

from color_lines.cli.play import play
from color_lines.cli.save_file import move, reset, show
from color_lines.logging_config import configure_logging, default_log_dir


@click.group()
@click.option(
    "--log-dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=default_log_dir,
    show_default="logs/ in the working directory",
    help="Directory for the debug and info log files.",
)
def cli(log_dir: Path) -> None:
    """A command-line interface for the Color Lines game."""
    configure_logging(log_dir)


cli.add_command(play)
cli.add_command(show)
cli.add_command(reset)
cli.add_command(move)
