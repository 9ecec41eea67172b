"""Runtime configuration read from the environment."""
import os
import random
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

DEFAULT_DB_PATH = os.getenv("MINDQUIZ_DB_PATH", str(Path.home() / ".mindquiz" / "mindquiz.db"))
DEFAULT_QUESTION_COUNT = int(os.getenv("MINDQUIZ_QUESTION_COUNT", 10))
DEFAULT_USER_ID = os.getenv("MINDQUIZ_USER", "default")
LOG_LEVEL = os.getenv("MINDQUIZ_LOG_LEVEL", "WARNING")
SEED = os.getenv("MINDQUIZ_SEED")


def make_rng(seed: int | str | None = None) -> random.Random:
    """Build the random source used for shuffling and template selection.

    Falls back to MINDQUIZ_SEED, then to an OS-seeded generator.
    """
    if seed is None:
        seed = SEED
    return random.Random(seed)


# Shared source for library calls made without an explicit rng.
default_rng = make_rng()
