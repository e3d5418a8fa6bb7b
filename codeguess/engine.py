"""
Pure game logic (no terminal, no game state).
We compute two feedback numbers for each guess:
- total_matches: how many of the secret's digits appear anywhere in the guess
- positional_matches: how many indices are exactly correct (right digit, right place)

Secrets never repeat a digit, so a secret digit is matched at most once even
when the guess repeats it.
"""

from typing import NamedTuple, Sequence

from pydantic import ValidationError

from .errors import InvalidGuessFormat
from .schemas import GuessRequest
from .types import CODE_LENGTH, Guess


class Feedback(NamedTuple):
    total_matches: int
    positional_matches: int


def score_guess(secret: Sequence[int], guess: Sequence[int]) -> Feedback:
    """
    Example:
      secret = 7846
      guess  = 6473
      positional_matches = 0  (nothing lines up)
      total_matches      = 3  (7, 4 and 6 all appear)
      Returns Feedback(total_matches=3, positional_matches=0)
    """
    if len(secret) != CODE_LENGTH or len(guess) != CODE_LENGTH:
        raise ValueError(f"Secret and guess must both have {CODE_LENGTH} digits.")

    positional_matches = 0
    for secret_digit, guess_digit in zip(secret, guess):
        if secret_digit == guess_digit:
            positional_matches += 1

    # set() so a digit the guess repeats is only counted once
    total_matches = len(set(secret) & set(guess))

    return Feedback(total_matches, positional_matches)


def is_win(secret: Sequence[int], guess: Sequence[int]) -> bool:
    return score_guess(secret, guess) == Feedback(CODE_LENGTH, CODE_LENGTH)


def parse_guess(raw: str) -> Guess:
    """
    Turn what the player typed into 4 digits.
    Raises InvalidGuessFormat (with a readable reason) if it is not exactly 4 digits.
    """
    try:
        return GuessRequest(guess=raw).guess
    except ValidationError as exc:
        raise InvalidGuessFormat(_first_reason(exc)) from exc


def _first_reason(exc: ValidationError) -> str:
    first = exc.errors()[0]
    error = first.get("ctx", {}).get("error")
    if error is not None:
        return str(error)
    return first["msg"]


def describe_feedback(feedback: Feedback) -> str:
    # Never reveals which digits were right
    if feedback.total_matches == 0 and feedback.positional_matches == 0:
        return "all incorrect"
    return (
        str(feedback.total_matches)
        + " correct digit(s) and "
        + str(feedback.positional_matches)
        + " correct position(s)"
    )


def format_code(digits: Sequence[int]) -> str:
    return "".join(str(digit) for digit in digits)
