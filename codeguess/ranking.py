"""
Rank assignment.

Ranks are dense over finishing rounds: everyone who finished in the earliest
round is 1st, the next distinct round is 2nd, and so on.
  rounds [3, 5, 5, 7] -> ranks [1, 2, 2, 3]

Only finished players get a rank. Running it again (or after every win)
gives the same answer, so the turn engine calls it each time someone finishes.
"""

from typing import Dict, List, Sequence

from .models import Player


def assign_ranks(players: Sequence[Player]) -> Sequence[Player]:
    finished_rounds = sorted(
        {player.finishing_round for player in players if player.is_finished}
    )
    rank_by_round: Dict[int, int] = {}
    for position, round_number in enumerate(finished_rounds, start=1):
        rank_by_round[round_number] = position

    for player in players:
        if player.is_finished:
            player.rank = rank_by_round[player.finishing_round]
        else:
            player.rank = None
    return players


def ranking_order(players: Sequence[Player]) -> List[Player]:
    # Unranked players go last; ties keep turn order (sorted() is stable)
    return sorted(
        players,
        key=lambda player: (player.rank is None, player.rank or 0),
    )
