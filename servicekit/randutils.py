"""Random string generation."""

from __future__ import annotations

import random
import string

LETTERS = string.ascii_lowercase + string.ascii_uppercase


def rand_str(n: int, rng: random.Random | None = None) -> str:
    """Return ``n`` random ASCII letters."""
    if n < 0:
        raise ValueError("length must not be negative")
    source = rng if rng is not None else random
    return "".join(source.choice(LETTERS) for _ in range(n))