"""Random integers in a half-open range."""

import random


def rand_int64(low: int, high: int) -> int:
    """Return a random integer in ``[low, high)``, or ``high`` if ``low >= high``."""
    if low >= high:
        return high
    return random.randrange(low, high)