import click

from classroom.infrastructure.cli.game_commands import roots_play, roots_score
from classroom.infrastructure.cli.pizza_commands import (
    pizza_menu,
    pizza_order,
    pizza_price,
    pizza_shop,
)
from classroom.infrastructure.logging_setup import setup_logging


@click.group()
@click.option(
    "--log-level",
    envvar="CLASSROOM_LOG_LEVEL",
    default="WARNING",
    show_default=True,
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    help="Logging threshold (logs go to stderr).",
)
@click.option(
    "--log-format",
    envvar="CLASSROOM_LOG_FORMAT",
    default="text",
    show_default=True,
    type=click.Choice(["text", "json"]),
    help="Log record format.",
)
def cli(log_level: str, log_format: str) -> None:
    """Classroom apps: pizza storefront and square-root game"""
    setup_logging(log_level, log_format)


@cli.group()
def pizza() -> None:
    """Order pizza."""


@cli.group()
def roots() -> None:
    """Play the square-root guessing game."""


# Register subcommands
pizza.add_command(pizza_menu)
pizza.add_command(pizza_order)
pizza.add_command(pizza_price)
pizza.add_command(pizza_shop)
roots.add_command(roots_play)
roots.add_command(roots_score)
