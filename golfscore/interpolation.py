"""Piecewise-linear lookup against baseline tables."""

from typing import Iterable, Sequence, Tuple

from .models import LongGameBaseline, PuttingBaseline

Point = Tuple[float, float]


def interpolate(x: float, points: Iterable[Point]) -> float:
    """
    Linearly interpolate y at x, clamped to the range of the points.

    Points need not be sorted. Duplicate x values are not supported.

    Args:
        x: Lookup position
        points: (x, y) pairs

    Returns:
        y of the lowest point when x is at or below it, y of the highest
        point when x is at or above it, otherwise the value on the segment
        between the two bracketing points. 0 for no points.
    """
    ordered = sorted(points, key=lambda p: p[0])
    if not ordered:
        return 0

    if x <= ordered[0][0]:
        return ordered[0][1]
    if x >= ordered[-1][0]:
        return ordered[-1][1]

    for (x1, y1), (x2, y2) in zip(ordered, ordered[1:]):
        if x1 <= x <= x2:
            return y1 + (y2 - y1) * (x - x1) / (x2 - x1)

    return ordered[-1][1]


def interpolate_putting(distance_ft: float, table: Sequence[PuttingBaseline]) -> float:
    """Expected putts from distance_ft."""
    return interpolate(distance_ft, [(row.distance, row.expected_strokes) for row in table])


def interpolate_long_game(
    distance_yds: float,
    lie: str,
    table: Sequence[LongGameBaseline],
) -> float:
    """Expected strokes from distance_yds in the given lie.

    Rows with no value for the lie are left out before interpolating.
    """
    points = []
    for row in table:
        value = row.value_for(lie)
        if value is not None:
            points.append((row.distance, value))
    return interpolate(distance_yds, points)
