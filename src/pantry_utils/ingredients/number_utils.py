import math


def round_half_up(value: float) -> int:
    """Round to the nearest integer, with halves rounded up (2.5 -> 3)."""
    return int(math.floor(value + 0.5))


def percentage(part: float, whole: float) -> int:
    """Return ``part / whole`` as a rounded percentage, 0 when ``whole`` is 0."""
    if not whole:
        return 0
    return round_half_up(part / whole * 100)
