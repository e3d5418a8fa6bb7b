"""
Single place to:
- Load a local .env if present
- Read game settings from the environment
- Provide defaults that make `codeguess play` work out of the box

Command line options override anything read here.
A bad value stops the program at import with a RuntimeError naming the variable.
"""

import os

from dotenv import load_dotenv

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

# 1) Load env vars from .env if present (dev convenience)
load_dotenv()


def _read_number(name: str, default: str, convert, minimum):
    raw = os.getenv(name, default)
    try:
        value = convert(raw)
    except ValueError:
        raise RuntimeError(f"{name} must be a number, got {raw!r}.") from None
    if value < minimum:
        raise RuntimeError(f"{name} must be at least {minimum}, got {raw!r}.")
    return value


APP_ENV = os.getenv("APP_ENV", "local")

# 2) Seconds to wait before clearing the screen between turns,
#    so the next player does not see the previous feedback.
PAUSE_SECONDS = _read_number("CODEGUESS_PAUSE_SECONDS", "5", float, 0)

# 3) How many random draws one secret gets before we pick from the unused pool.
MAX_RETRIES = _read_number("CODEGUESS_MAX_RETRIES", "100", int, 1)

# 4) Upper bound the terminal asks for. The engine itself has no limit.
MAX_PLAYERS = _read_number("CODEGUESS_MAX_PLAYERS", "10", int, 2)

# 5) One of LOG_LEVELS, any case.
LOG_LEVEL = os.getenv("CODEGUESS_LOG_LEVEL", "WARNING").upper()
if LOG_LEVEL not in LOG_LEVELS:
    raise RuntimeError(
        f"CODEGUESS_LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}, got {LOG_LEVEL!r}."
    )
