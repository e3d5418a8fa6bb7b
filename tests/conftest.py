"""
- Provide a scripted stand-in for the terminal (ScriptedIO) so games can be played without a keyboard.
- Provide a make_session fixture that builds a GameSession with known secrets (no randomness).
"""
from typing import Dict, List, Optional, Sequence

import pytest

from codeguess.models import Player
from codeguess.session import GameSession


class ScriptedIO:
    """
    Plays back prepared input and records everything the game does:
      guesses: {"Alice": ["12a4", "1234"], ...}  (popped in order, per player)
    """

    def __init__(self, guesses: Optional[Dict[str, List[str]]] = None, names: Sequence[str] = ()):
        self.names = list(names)
        self.guesses = {name: list(items) for name, items in (guesses or {}).items()}
        self.prompts: List[str] = []
        self.messages: List[str] = []
        self.pauses: List[float] = []
        self.clears = 0

    def read_player_names(self) -> List[str]:
        return list(self.names)

    def read_guess(self, player_name: str) -> str:
        self.prompts.append(player_name)
        return self.guesses[player_name].pop(0)

    def display(self, message: str) -> None:
        self.messages.append(message)

    def pause(self, seconds: float) -> None:
        self.pauses.append(seconds)

    def clear_display(self) -> None:
        self.clears += 1


@pytest.fixture
def make_session():
    """Build a session in the given order, e.g. make_session(A=(1, 2, 3, 4), B=(5, 6, 7, 8))."""
    def _make(**codes):
        players = [Player(name=name, secret_code=tuple(code)) for name, code in codes.items()]
        return GameSession(players=players)
    return _make


@pytest.fixture
def scripted_io():
    return ScriptedIO
