"""Handicap stroke allocation for net scoring."""

import math
from typing import Dict, Mapping, Optional, Tuple


def strokes_on_hole(
    handicap: Optional[float],
    stroke_index: int,
    total_holes: int = 18,
) -> int:
    """
    Strokes a player receives (positive) or gives back (negative) on a hole.

    A regular handicap spreads strokes over the holes in stroke-index order,
    wrapping round for handicaps above the hole count. A plus handicap
    (negative number) gives one stroke back on the hardest holes.
    Fractional handicaps are compared unrounded, so 12.5 receives a stroke
    on stroke index 12 but not on 13.

    Args:
        handicap: Playing handicap; None or 0 for scratch
        stroke_index: Hole difficulty rank, 1 = hardest
        total_holes: Holes in the round (default: 18)

    Returns:
        Strokes to subtract from the gross score
    """
    if not handicap:
        return 0

    if handicap < 0:
        return -1 if stroke_index <= abs(handicap) else 0

    full, extra = divmod(handicap, total_holes)
    strokes = int(full)
    if stroke_index <= extra:
        strokes += 1
    return strokes


def net_score(
    gross: int,
    handicap: Optional[float],
    stroke_index: int,
    total_holes: int = 18,
) -> int:
    """Gross score less handicap strokes on the hole."""
    return gross - strokes_on_hole(handicap, stroke_index, total_holes)


def match_stroke_allocation(
    handicap_a: float,
    handicap_b: float,
    holes: Mapping[int, int],
) -> Dict[int, Tuple[int, int]]:
    """
    Distribute the handicap difference between two sides of a match.

    Only the higher handicapper receives strokes, on holes taken in
    stroke-index order and wrapping round when the difference exceeds the
    number of holes. A fractional difference counts as a whole stroke,
    so 2.4 gives three strokes.

    Args:
        handicap_a: Side A playing handicap
        handicap_b: Side B playing handicap
        holes: hole_number -> stroke_index

    Returns:
        hole_number -> (strokes for A, strokes for B)
    """
    # Rounding first keeps 10.1 - 8.1 at two strokes
    difference = math.ceil(round(abs(handicap_a - handicap_b), 6))
    a_receives = handicap_a > handicap_b
    by_difficulty = sorted(holes, key=lambda number: holes[number])

    allocation = {number: (0, 0) for number in holes}
    if not by_difficulty:
        return allocation

    full, extra = divmod(difference, len(by_difficulty))
    for rank, number in enumerate(by_difficulty):
        strokes = full + (1 if rank < extra else 0)
        allocation[number] = (strokes, 0) if a_receives else (0, strokes)
    return allocation
