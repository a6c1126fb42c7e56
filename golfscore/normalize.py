"""Point normalization for multi-player and team point games.

Normalization is a display step: it shifts totals so the trailing side
shows 0. Decide winners from the raw totals, never from these.
"""

from typing import Tuple


def normalize_points(*values: float) -> Tuple[float, ...]:
    """
    Shift point totals so the lowest becomes 0.

    Pairwise differences are preserved.

    Example:
        normalize_points(-2, 5, 1)  # (0, 7, 3)
    """
    if not values:
        return ()
    low = min(values)
    return tuple(v - low for v in values)


def point_differentials(*values: float) -> Tuple[float, ...]:
    """Each total relative to the group average (sums to 0)."""
    if not values:
        return ()
    average = sum(values) / len(values)
    return tuple(v - average for v in values)
