"""Match play status tracking.

One engine serves every head-to-head format (singles match play, best ball,
Umbriago hole comparisons). The caller maps its players or teams onto
sides A and B; status_value is holes won by A minus holes won by B.
"""

import logging
from typing import Iterable, Optional

from .constants import ALL_SQUARE, HOLE_HALVED, HOLE_LOST, HOLE_RESULTS, HOLE_WON
from .models import MatchResult, MatchState

logger = logging.getLogger('golfscore.match_play')


def new_match(total_holes: int = 18) -> MatchState:
    """All square with every hole still to play."""
    return MatchState(status_value=0, holes_remaining=total_holes)


def hole_result(score_a: Optional[float], score_b: Optional[float]) -> int:
    """
    Compare one hole's scores, lower wins.

    Returns:
        1 if A wins, -1 if B wins, 0 if halved or either score is missing
    """
    if score_a is None or score_b is None:
        return HOLE_HALVED
    if score_a < score_b:
        return HOLE_WON
    if score_b < score_a:
        return HOLE_LOST
    return HOLE_HALVED


def is_closed_out(state: MatchState) -> bool:
    """One side leads by more holes than remain."""
    return abs(state.status_value) > state.holes_remaining


def is_match_finished(state: MatchState) -> bool:
    """Closed out, or no holes left to play."""
    return is_closed_out(state) or state.holes_remaining == 0


def advance_match(state: MatchState, result: int) -> MatchState:
    """
    Apply one completed hole.

    Args:
        state: Current match state
        result: 1 (A wins hole), 0 (halved) or -1 (B wins hole)

    Returns:
        New MatchState; the input state is unchanged

    Raises:
        ValueError: If result is not -1, 0 or 1, or the match is already over
    """
    if result not in HOLE_RESULTS:
        raise ValueError(f'Hole result must be -1, 0 or 1, got {result!r}')
    if is_match_finished(state):
        raise ValueError(
            f'Match already decided (status {state.status_value}, '
            f'{state.holes_remaining} to play)'
        )

    new_state = MatchState(
        status_value=state.status_value + result,
        holes_remaining=state.holes_remaining - 1,
    )
    logger.debug(
        f'Match advanced: {state.status_value} -> {new_state.status_value}, '
        f'{new_state.holes_remaining} to play'
    )
    return new_state


def play_match(results: Iterable[int], total_holes: int = 18) -> MatchState:
    """
    Fold a sequence of hole results into a match state.

    Stops at the first hole that finishes the match; later results are
    ignored.
    """
    state = new_match(total_holes)
    for result in results:
        if is_match_finished(state):
            break
        state = advance_match(state, result)
    return state


def format_match_status(state: MatchState, a_name: str = 'A', b_name: str = 'B') -> str:
    """Running status, e.g. "All Square" or "Team A 2 Up"."""
    if state.status_value == 0:
        return ALL_SQUARE
    leader = a_name if state.status_value > 0 else b_name
    return f'{leader} {abs(state.status_value)} Up'


def format_match_status_with_holes(
    state: MatchState, a_name: str = 'A', b_name: str = 'B'
) -> str:
    """Running status with holes to play, e.g. "Team A 2 Up, 5 to play"."""
    status = format_match_status(state, a_name, b_name)
    if state.holes_remaining > 0:
        return f'{status}, {state.holes_remaining} to play'
    return status


def final_result(state: MatchState, a_name: str = 'A', b_name: str = 'B') -> MatchResult:
    """
    Result of a finished match.

    "3 & 2" when closed out with holes to spare, "1 Up" when decided on the
    last hole, "All Square" when halved.
    """
    if state.status_value == 0:
        return MatchResult(winner=None, result=ALL_SQUARE, holes_remaining=state.holes_remaining)

    winner = a_name if state.status_value > 0 else b_name
    margin = abs(state.status_value)

    if state.holes_remaining == 0:
        text = f'{margin} Up'
    else:
        text = f'{margin} & {state.holes_remaining}'
    return MatchResult(
        winner=winner, result=text, margin=margin, holes_remaining=state.holes_remaining
    )
