"""
Turn sequencing for one GameSession.

The engine is a small state machine:
  AwaitingGuess(player) -> (valid guess) -> AwaitingGuess(next player)
                                         -> RoundAdvance(n) when the order wraps
                                         -> GameOver when everyone has finished

Players always act in the session's fixed order. Finished players are skipped.
An invalid guess raises InvalidGuessFormat before anything is touched, so the
same player simply tries again.
"""

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, List, Optional, Union

from .console import GameIO
from .engine import Feedback, describe_feedback, format_code, parse_guess, score_guess
from .errors import InvalidGuessFormat
from .models import GuessEntry, Player
from .ranking import assign_ranks
from .types import CODE_LENGTH

if TYPE_CHECKING:
    from .session import GameSession

logger = logging.getLogger(__name__)

WINNING_FEEDBACK = Feedback(CODE_LENGTH, CODE_LENGTH)


@dataclass(frozen=True)
class AwaitingGuess:
    player: Player


@dataclass(frozen=True)
class RoundAdvance:
    round: int


@dataclass(frozen=True)
class GameOver:
    rounds_played: int


EngineState = Union[AwaitingGuess, RoundAdvance, GameOver]


@dataclass
class TurnResult:
    player: Player
    round: int
    feedback: Feedback
    message: str
    won: bool
    # states passed through after this guess, last one is the current state
    transitions: List[EngineState] = field(default_factory=list)

    @property
    def round_advanced(self) -> bool:
        return any(isinstance(state, RoundAdvance) for state in self.transitions)


class TurnEngine:
    def __init__(self, session: "GameSession") -> None:
        self.session = session
        self._index = 0
        self._state: EngineState = GameOver(session.current_round)

        players = session.players
        for index, player in enumerate(players):
            if not player.is_finished:
                self._index = index
                self._state = AwaitingGuess(player)
                break
        else:
            session.active = False

    @property
    def state(self) -> EngineState:
        return self._state

    @property
    def is_over(self) -> bool:
        return isinstance(self._state, GameOver)

    @property
    def current_player(self) -> Optional[Player]:
        if isinstance(self._state, AwaitingGuess):
            return self._state.player
        return None

    def submit(self, raw: str) -> TurnResult:
        """
        Score one guess for the player whose turn it is.
        Raises InvalidGuessFormat (nothing changes) or RuntimeError if the game is over.
        """
        if self.is_over:
            raise RuntimeError("Game is over. No more guesses allowed.")

        guess = parse_guess(raw)

        player = self.current_player
        round_number = self.session.current_round
        feedback = score_guess(player.secret_code, guess)
        message = describe_feedback(feedback)
        player.history.append(
            GuessEntry(
                round=round_number,
                total_matches=feedback.total_matches,
                positional_matches=feedback.positional_matches,
                message=message,
            )
        )

        won = feedback == WINNING_FEEDBACK
        if won:
            player.finish(round_number)
            assign_ranks(self.session.players)
            logger.info("%s finished in round %d (rank %d)", player.name, round_number, player.rank)

        return TurnResult(
            player=player,
            round=round_number,
            feedback=feedback,
            message=message,
            won=won,
            transitions=self._advance(),
        )

    def _advance(self) -> List[EngineState]:
        players = self.session.players
        if all(player.is_finished for player in players):
            self.session.active = False
            self._state = GameOver(self.session.current_round)
            logger.info("game over after %d round(s)", self.session.current_round)
            return [self._state]

        transitions: List[EngineState] = []
        index = self._index
        while True:
            index += 1
            if index == len(players):
                # passed the last player in the order: new round
                index = 0
                self.session.current_round += 1
                transitions.append(RoundAdvance(self.session.current_round))
            if not players[index].is_finished:
                break

        self._index = index
        self._state = AwaitingGuess(players[index])
        transitions.append(self._state)
        return transitions

    def run(self, io: GameIO, pause_seconds: float = 0) -> None:
        """Drive turns through `io` until every player has guessed their code."""
        while not self.is_over:
            player = self.current_player
            io.display("=" * 38)
            io.display(f"ROUND {self.session.current_round} | {player.name}'s guess")
            io.display("=" * 38)

            result = None
            while result is None:
                raw = io.read_guess(player.name)
                try:
                    result = self.submit(raw)
                except InvalidGuessFormat as exc:
                    io.display(f"{exc} Try again.")

            guess_text = raw.strip()
            io.display(
                f"Guess {guess_text}: Feedback (X,Y) -> "
                f"{result.feedback.total_matches},{result.feedback.positional_matches} ({result.message})"
            )
            if result.won:
                io.display(
                    f"CODE GUESSED! {player.name} cracked {format_code(player.secret_code)} "
                    f"in round {result.round} and finishes {_ordinal(player.rank)}."
                )

            if not self.is_over:
                io.display(f"...Moving to the next player in {pause_seconds:g} seconds...")
                io.pause(pause_seconds)
                io.clear_display()

        io.display("All players have finished the game.")


def _ordinal(number: int) -> str:
    if 10 <= number % 100 <= 20:
        suffix = "th"
    else:
        suffix = {1: "st", 2: "nd", 3: "rd"}.get(number % 10, "th")
    return f"{number}{suffix}"
