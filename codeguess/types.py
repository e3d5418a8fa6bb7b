"""
Labels for clarity.
"""

from typing import List, Literal, Tuple

Digit = int  # 0 -> 9
Code = Tuple[Digit, ...]  # secret: 4 distinct digits, never changes
Guess = List[Digit]  # 4 digits, repeats allowed
TurnOrder = Literal["entered", "random"]

CODE_LENGTH = 4
DIGITS = "0123456789"
# 10 * 9 * 8 * 7 possible secrets
TOTAL_CODES = 5040
