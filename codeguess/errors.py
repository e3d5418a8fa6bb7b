"""
Game errors.
All of them are ValueErrors so callers that only care about "bad input"
can catch one thing.
"""


class GameError(ValueError):
    pass


class InvalidGuessFormat(GameError):
    """Guess is not exactly 4 digits. The same player is asked again."""


class InsufficientPlayers(GameError):
    """Fewer than 2 player names were given at setup."""


class GenerationExhausted(GameError):
    """Not enough unique secret codes could be produced."""
