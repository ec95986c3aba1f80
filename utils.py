# utils.py

import re
import time

GOLDEN_ANGLE = 137  # spreads consecutive pids around the colour wheel

SEED_PATTERN = re.compile(r"[+-]?\d+")
SEED_MIN = -2**63
SEED_MAX = 2**63 - 1


def time_seed():
    """Milliseconds since the epoch, used when no seed is given."""
    return int(time.time() * 1000)


def parse_seed(value):
    """
    Return `value` as a signed 64-bit seed, or a time-derived seed if it isn't one.

    Only plain decimal digits with an optional sign are accepted: no
    surrounding whitespace, no underscores, nothing outside the 64-bit range.
    """
    if value is None or not SEED_PATTERN.fullmatch(value):
        return time_seed()
    seed = int(value)
    if not SEED_MIN <= seed <= SEED_MAX:
        return time_seed()
    return seed


def get_color(pid):
    """Return a color for a page owner; free pages are grey."""
    if not pid:
        return "#d3d3d3"
    return f"hsl({(pid * GOLDEN_ANGLE) % 360}, 70%, 75%)"
