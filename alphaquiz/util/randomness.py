from __future__ import annotations

"""Random source construction for option shuffling."""

import os
import random
from typing import Optional


def resolve_seed(seed: Optional[int] = None) -> Optional[int]:
    """Return ``seed`` if given, else the SEED env var when it is an integer."""
    if seed is not None:
        return int(seed)
    env = os.environ.get("SEED")
    if env is None:
        return None
    try:
        return int(env)
    except ValueError:
        print(f"[WARN] Ignoring non-integer SEED '{env}'.")
        return None


def make_rng(seed: Optional[int] = None) -> random.Random:
    """Build the Random instance handed to the runner."""
    return random.Random(resolve_seed(seed))
