"""
Terminal side of the game.

GameIO is everything the game needs from the outside world. The engine only
talks to this protocol, so tests can plug in a scripted fake and the real
program uses TerminalIO below.
"""

import time
from typing import List, Protocol

import click
import typer

from .config import MAX_PLAYERS


class GameIO(Protocol):
    def read_player_names(self) -> List[str]: ...

    def read_guess(self, player_name: str) -> str: ...

    def display(self, message: str) -> None: ...

    def pause(self, seconds: float) -> None: ...

    def clear_display(self) -> None: ...


class TerminalIO:
    def __init__(self, max_players: int = MAX_PLAYERS) -> None:
        self.max_players = max_players

    def read_player_names(self) -> List[str]:
        while True:
            count = typer.prompt(f"Enter the number of players (2 to {self.max_players})", type=int)
            if 2 <= count <= self.max_players:
                break
            typer.echo(f"Please enter a number between 2 and {self.max_players}.")

        names = []
        for number in range(1, count + 1):
            name = ""
            while not name:
                name = typer.prompt(f"Enter name for Player {number}").strip()
            names.append(name)
        return names

    def read_guess(self, player_name: str) -> str:
        return typer.prompt(f"{player_name}, enter your 4-digit guess")

    def display(self, message: str) -> None:
        typer.echo(message)

    def pause(self, seconds: float) -> None:
        if seconds > 0:
            time.sleep(seconds)

    def clear_display(self) -> None:
        # no-op when stdout is not a terminal
        click.clear()
