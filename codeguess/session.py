"""
One game, from setup to results.

GameSession owns its players and round counter; nothing is global, so several
sessions can live side by side (handy for tests).

Lifecycle:
  GameSession.setup(names)  -> secrets generated, turn order fixed
  session.play(io)          -> TurnEngine runs until everyone has finished
  session.results()         -> ranks, rounds and revealed secrets
"""

import logging
import random
from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from .codegen import generate_unique_codes
from .config import MAX_RETRIES
from .console import GameIO
from .engine import format_code
from .errors import InsufficientPlayers
from .models import Player
from .ranking import ranking_order
from .schemas import GameResults, PlayerResult
from .turns import TurnEngine
from .types import TurnOrder

logger = logging.getLogger(__name__)

MIN_PLAYERS = 2


@dataclass
class GameSession:
    players: List[Player]
    current_round: int = 1
    active: bool = True
    _engine: Optional[TurnEngine] = field(default=None, init=False, repr=False, compare=False)

    @classmethod
    def setup(
        cls,
        names: Sequence[str],
        rng: Optional[random.Random] = None,
        turn_order: TurnOrder = "entered",
        start_index: Optional[int] = None,
        max_retries: int = MAX_RETRIES,
    ) -> "GameSession":
        """
        turn_order:
          entered -> players act in the order the names were given
          random  -> uniformly shuffled
        start_index picks who goes first (0-based, in the order above);
        the others keep their relative order.
        """
        if len(names) < MIN_PLAYERS:
            raise InsufficientPlayers(
                f"At least {MIN_PLAYERS} players are needed, got {len(names)}."
            )

        clean_names = [name.strip() for name in names]
        for name in clean_names:
            if not name:
                raise ValueError("Player names must not be empty.")

        if turn_order not in ("entered", "random"):
            raise ValueError(f"Unknown turn order: {turn_order!r}")
        if start_index is not None and not 0 <= start_index < len(clean_names):
            raise ValueError(f"start_index must be between 0 and {len(clean_names) - 1}.")

        rng = rng or random.SystemRandom()
        codes = generate_unique_codes(len(clean_names), rng=rng, max_retries=max_retries)
        players = [Player(name=name, secret_code=code) for name, code in zip(clean_names, codes)]

        if turn_order == "random":
            rng.shuffle(players)
        if start_index:
            players = players[start_index:] + players[:start_index]

        logger.info(
            "new game: %d players, order %s",
            len(players),
            ", ".join(player.name for player in players),
        )
        return cls(players=players)

    def engine(self) -> TurnEngine:
        if self._engine is None:
            self._engine = TurnEngine(self)
        return self._engine

    def play(self, io: GameIO, pause_seconds: float = 0) -> GameResults:
        self.engine().run(io, pause_seconds)
        return self.results()

    def results(self) -> GameResults:
        standings = []
        for player in ranking_order(self.players):
            standings.append(
                PlayerResult(
                    name=player.name,
                    rank=player.rank,
                    finishing_round=player.finishing_round,
                    guesses=len(player.history),
                    secret=format_code(player.secret_code),
                )
            )

        finished_rounds = [player.finishing_round for player in self.players if player.is_finished]
        return GameResults(
            rounds_played=max(finished_rounds) if finished_rounds else 0,
            standings=standings,
        )


def format_results(results: GameResults) -> str:
    lines = [
        "=" * 45,
        f"|{'FINAL RANKINGS':^43}|",
        "=" * 45,
    ]
    for row in results.standings:
        rank_text = f"Rank {row.rank}" if row.rank is not None else "Unranked"
        lines.append(f"| {row.name:<15} | {rank_text:<8} | Secret: {row.secret:<4} |")
    lines.append("=" * 45)
    lines.append(f"Rounds played: {results.rounds_played}")
    return "\n".join(lines)
