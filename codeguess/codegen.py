"""
Secret code generation.
Each player gets 4 distinct digits (0..9, first digit may be 0) and no two
players in one game share a code.

We draw random codes and throw away collisions. A slot only gets a bounded
number of draws; after that we pick straight from the codes nobody has yet,
so the call always finishes for up to 5040 players.
"""

import logging
import random
from itertools import permutations
from typing import List, Optional, Set

from .config import MAX_RETRIES
from .errors import GenerationExhausted
from .types import CODE_LENGTH, TOTAL_CODES, Code

logger = logging.getLogger(__name__)


def generate_code(rng: Optional[random.Random] = None) -> Code:
    # sample() never repeats an element, so the digits are distinct
    rng = rng or random.SystemRandom()
    return tuple(rng.sample(range(10), CODE_LENGTH))


def generate_unique_codes(
    n: int,
    rng: Optional[random.Random] = None,
    max_retries: int = MAX_RETRIES,
) -> List[Code]:
    """
    Returns n codes, all different from each other.
    Raises GenerationExhausted if n is more than the 5040 codes that exist.
    """
    if n < 1:
        raise ValueError("Need at least one code.")
    if max_retries < 1:
        raise ValueError("max_retries must be at least 1.")
    if n > TOTAL_CODES:
        raise GenerationExhausted(
            f"Cannot generate {n} unique codes; only {TOTAL_CODES} exist."
        )

    rng = rng or random.SystemRandom()
    codes: List[Code] = []
    used: Set[Code] = set()

    for slot in range(n):
        code = None
        tries = 0
        while tries < max_retries:
            candidate = generate_code(rng)
            tries += 1
            if candidate not in used:
                code = candidate
                break

        if code is None:
            logger.debug("slot %d: %d draws collided, choosing from unused codes", slot, tries)
            code = _pick_unused(used, rng)

        used.add(code)
        codes.append(code)

    logger.debug("generated %d unique codes", len(codes))
    return codes


def _pick_unused(used: Set[Code], rng: random.Random) -> Code:
    remaining = [code for code in permutations(range(10), CODE_LENGTH) if code not in used]
    if not remaining:
        raise GenerationExhausted("Every possible code is already taken.")
    return rng.choice(remaining)
