"""
In-memory game records.

- Player: who is playing, their secret, and how far they got
- GuessEntry: feedback for one scored turn (the guessed digits are not kept)
"""

from dataclasses import dataclass, field
from time import time
from typing import List, Optional

from .types import Code


@dataclass
class GuessEntry:
    round: int
    total_matches: int
    positional_matches: int
    message: str
    timestamp: float = field(default_factory=time)


@dataclass
class Player:
    name: str
    secret_code: Code = field(repr=False)  # never shown until results
    is_finished: bool = False
    finishing_round: Optional[int] = None
    rank: Optional[int] = None
    history: List[GuessEntry] = field(default_factory=list)

    def finish(self, round_number: int) -> None:
        self.is_finished = True
        self.finishing_round = round_number
