'''
Multiplayer code guessing game (individual secrets)

Commands:
codeguess play      -> set up players, play until everyone cracks their code, show rankings

Every player gets their own hidden 4-digit code (distinct digits, may start
with 0) and guesses only that code. Feedback is "X,Y":
X = how many of the code's digits are in the guess, Y = how many are in the right place.
'''

import logging
import random
from enum import Enum
from typing import Optional

import typer
from typing_extensions import Annotated

from .config import LOG_LEVEL, PAUSE_SECONDS
from .console import GameIO, TerminalIO
from .session import GameSession, format_results

logger = logging.getLogger(__name__)

app = typer.Typer(help="Multiplayer 4-digit code guessing game (Bulls & Cows style)")


class LogLevel(str, Enum):
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


# Small factory so tests can swap the terminal for a scripted one
def get_io() -> GameIO:
    return TerminalIO()


@app.callback()
def main() -> None:
    """Multiplayer code guessing game."""


@app.command()
def play(
    random_order: Annotated[bool, typer.Option("--random-order", help="Shuffle the turn order")] = False,
    start: Annotated[Optional[int], typer.Option(min=0, help="Player number (1-based) who guesses first, 0 picks one at random")] = None,
    pause: Annotated[float, typer.Option(min=0, help="Seconds to wait before clearing the screen between turns")] = PAUSE_SECONDS,
    seed: Annotated[Optional[int], typer.Option(help="Seed for codes and turn order (repeatable games)")] = None,
    log_level: Annotated[LogLevel, typer.Option(case_sensitive=False, help="Logging level")] = LogLevel(LOG_LEVEL),
):
    """Play one or more games with the same group of players."""
    logging.basicConfig(
        level=log_level.value,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    io = get_io()
    io.clear_display()
    io.display("--- Multiplayer Code Guessing Game (Individual Secrets) ---")
    io.display("Each player has a unique, hidden 4-digit code (non-repeating digits, can start with 0).")
    io.display("Players take turns guessing their own secret. Feedback X,Y = correct digits, correct positions.")

    rng = random.Random(seed) if seed is not None else random.SystemRandom()
    names = io.read_player_names()

    game_number = 0
    while True:
        game_number += 1
        logger.info("starting game %d", game_number)
        try:
            session = GameSession.setup(
                names,
                rng=rng,
                turn_order="random" if random_order else "entered",
                start_index=_start_index(start, len(names), rng),
            )
        except ValueError as exc:
            # InsufficientPlayers / GenerationExhausted / bad --start all land here
            typer.echo(f"Error: {exc}", err=True)
            raise typer.Exit(code=1)

        io.display("All secret codes have been generated. Let the guessing begin!")
        if start == 0:
            io.display(f"Randomly selected {session.players[0].name} to start!")
        io.display(f"{session.players[0].name} goes first.")

        results = session.play(io, pause_seconds=pause)
        io.display(format_results(results))

        if not typer.confirm("Play again with the same players?", default=False):
            break
        io.clear_display()

    io.display("Thank you for playing! Goodbye.")


def _start_index(start: Optional[int], player_count: int, rng: random.Random) -> Optional[int]:
    # --start is 1-based on the command line; 0 means "pick someone at random"
    if start is None or player_count == 0:
        return None
    if start > player_count:
        raise ValueError(f"--start must be between 0 and {player_count}, got {start}.")
    if start == 0:
        return rng.randrange(player_count)
    return start - 1


if __name__ == "__main__":
    app()
