"""
Explicit validation & Pydantic models
- GuessRequest turns a typed line ("0485") into a list of digits, or explains what is wrong.
- PlayerResult / GameResults describe the final standings shown after a game.
"""

from typing import List, Optional
from pydantic import BaseModel, Field, field_validator

from .types import CODE_LENGTH, DIGITS

# 1. Validates a player's guess
class GuessRequest(BaseModel):
    guess: List[int] = Field(
        ..., description="Exactly 4 digits between 0 and 9. Repeated digits are allowed."
    )

    @field_validator("guess", mode="before")
    @classmethod
    def split_text(cls, value):
        """
        Accept the raw line the player typed.
        Surrounding whitespace is ignored, anything else must be a digit.
        """
        if not isinstance(value, str):
            return value

        text = value.strip()
        if len(text) != CODE_LENGTH:
            raise ValueError(f"Guess must be exactly {CODE_LENGTH} digits.")
        for char in text:
            if char not in DIGITS:
                raise ValueError("Guess must contain digits only.")
        return [int(char) for char in text]

    @field_validator("guess")
    @classmethod
    def validate_digits(cls, guess_list: List[int]) -> List[int]:
        if len(guess_list) != CODE_LENGTH:
            raise ValueError(f"Guess must be exactly {CODE_LENGTH} digits.")
        for digit in guess_list:
            if digit < 0 or digit > 9:
                raise ValueError("Each digit must be between 0 and 9 inclusive.")
        return guess_list

    model_config = {
        "json_schema_extra": {
            "examples": [
                {"guess": "0485"},
                {"guess": [7, 8, 4, 6]},
            ]
        }
    }

# 2. One row of the final standings
class PlayerResult(BaseModel):
    name: str = Field(..., description="Player name")
    rank: Optional[int] = Field(None, description="Dense rank over finishing rounds (ties share a rank)")
    finishing_round: Optional[int] = Field(None, description="Round in which the player guessed their code")
    guesses: int = Field(..., description="How many valid guesses the player made")
    secret: str = Field(..., description="The player's code, revealed once the game is over")

# 3. Whole game summary
class GameResults(BaseModel):
    rounds_played: int = Field(..., description="Round in which the last player finished")
    standings: List[PlayerResult] = Field(..., description="Players sorted by rank, then turn order")
