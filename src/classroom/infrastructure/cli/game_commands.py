"""CLI commands for the square-root guessing game."""

from __future__ import annotations

import click

from classroom.application.dto import GuessDTO
from classroom.application.guess_session import DEFAULT_PRECISION, GuessSession
from classroom.application.pick_target import PickTargetHandler
from classroom.application.set_precision import SetPrecisionHandler
from classroom.application.set_target import SetTargetHandler
from classroom.application.show_guesses import ShowGuessesHandler, format_number
from classroom.application.submit_guess import SubmitGuessHandler
from classroom.domain.exceptions import DomainException
from classroom.infrastructure.bootstrap import guess_session

precision_option = click.option(
    "--precision",
    envvar="CLASSROOM_PRECISION",
    default=DEFAULT_PRECISION,
    show_default=True,
    type=click.IntRange(min=0),
    help="Correct digits after the decimal place needed to win.",
)


def _guess_line(guess: GuessDTO) -> str:
    return (
        f"[{guess.rating}] Guess {guess.number} ({guess.value}) You have "
        f"{guess.correct_digits} digits after the decimal correct. "
        f"The square of your guess is {guess.squared}."
    )


def _display_round(session: GuessSession) -> None:
    click.echo(
        f"Guess the square root of {format_number(float(session.target.value))} "
        f"to {session.precision.value} correct digits after the decimal place."
    )


def _display_guesses(session: GuessSession) -> None:
    for guess in ShowGuessesHandler(session).handle():
        click.echo(f"  {_guess_line(guess)}")


_PLAY_HELP = """Type a guess and press Enter. Other commands:
  :new            pick a new target number
  :target N       guess the root of N instead
  :precision N    digits after the decimal place needed
  :quit           leave"""


@click.command("play")
@precision_option
@click.option("--seed", envvar="CLASSROOM_SEED", type=int, default=None, help="Seed for target picking.")
@click.option("--target", type=float, default=None, help="Start with this target instead of a random one.")
def roots_play(precision: int, seed: int | None, target: float | None) -> None:
    """Interactive square-root guessing game."""
    try:
        session = guess_session(precision=precision, seed=seed, target=target)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(_PLAY_HELP)
    _display_round(session)

    while True:
        try:
            line = click.prompt("Enter your guess", default=session.current_guess.value)
        except click.Abort:
            break

        command, _, argument = line.strip().partition(" ")
        if command == ":quit":
            break
        if command == ":new":
            PickTargetHandler(session).handle()
            _display_round(session)
            continue
        if command == ":target":
            if not SetTargetHandler(session).handle(argument):
                click.echo(f"Not a number: {argument!r}", err=True)
            _display_round(session)
            continue
        if command == ":precision":
            if not SetPrecisionHandler(session).handle(argument):
                click.echo(f"Precision must be a whole number >= 0, got {argument!r}", err=True)
            _display_round(session)
            continue

        SubmitGuessHandler(session).handle(line)
        _display_guesses(session)


@click.command("score")
@click.option("--target", required=True, type=float, help="Number whose root is guessed.")
@click.option("--guess", required=True, help="Guess text, e.g. 10.6302.")
@precision_option
def roots_score(target: float, guess: str, precision: int) -> None:
    """Score a single guess against a target."""
    try:
        session = guess_session(precision=precision, target=target)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    result = SubmitGuessHandler(session).handle(guess)
    click.echo(_guess_line(result))
