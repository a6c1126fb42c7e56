"""Boundary validation for values handed to the scoring engines.

Each check returns a list of error messages, empty when the input is
acceptable, so callers can reject bad input before it reaches an engine.
"""

from typing import Mapping, Optional, Sequence

from .constants import DRILL_TYPES, GREEN, HOLE_RESULTS, LONG_GAME_LIES, OB, SHOT_TYPES
from .match_play import is_match_finished
from .models import MatchState, Shot, SkinsState


def validate_hole_result(result) -> list[str]:
    """Hole result must be -1, 0 or 1."""
    if isinstance(result, bool) or result not in HOLE_RESULTS:
        return [f'Invalid hole result {result!r} (expected -1, 0 or 1)']
    return []


def validate_match_advance(state: MatchState, result) -> list[str]:
    """
    Check a hole result can be applied to a match.

    Checks:
    - Result is -1, 0 or 1
    - Match is not already closed out or complete
    """
    errors = validate_hole_result(result)
    if is_match_finished(state):
        errors.append(
            f'Match already finished (status {state.status_value}, '
            f'{state.holes_remaining} to play)'
        )
    return errors


def validate_skins_hole(
    state: SkinsState,
    hole_number: int,
    scores_by_player: Mapping[str, Optional[int]],
) -> list[str]:
    """
    Check a skins hole can be recorded.

    Checks:
    - Hole number is positive and follows the last recorded hole
    - Entered scores are positive whole numbers
    """
    errors = []

    if hole_number < 1:
        errors.append(f'Invalid hole number {hole_number}')
    elif state.last_hole is not None and hole_number <= state.last_hole:
        errors.append(f'Hole {hole_number} recorded out of order (last hole {state.last_hole})')

    for player, score in scores_by_player.items():
        if score is None:
            continue
        if isinstance(score, bool) or not isinstance(score, int) or score < 1:
            errors.append(f'{player} has invalid score {score!r} on hole {hole_number}')

    return errors


def validate_shot(shot: Shot, drill_type: Optional[str] = None) -> list[str]:
    """
    Check a recorded shot before scoring it.

    Checks:
    - Shot type, drill type and lies are known
    - Start distance is positive; a missed shot has a non-negative end distance
    """
    errors = []

    if shot.type not in SHOT_TYPES:
        errors.append(f'Unknown shot type {shot.type!r}')
    if drill_type is not None and drill_type not in DRILL_TYPES:
        errors.append(f'Unknown drill type {drill_type!r}')
    if shot.start_lie not in LONG_GAME_LIES + (GREEN,):
        errors.append(f'Unknown start lie {shot.start_lie!r}')
    if shot.start_distance <= 0:
        errors.append(f'Start distance must be positive, got {shot.start_distance}')

    if not shot.holed and not shot.is_ob and shot.end_lie != OB:
        if shot.end_lie not in LONG_GAME_LIES + (GREEN,):
            errors.append(f'Unknown end lie {shot.end_lie!r}')
        if shot.end_distance is None or shot.end_distance < 0:
            errors.append(f'End distance must be zero or more, got {shot.end_distance}')

    return errors


def validate_baseline_table(distances: Sequence[float], name: str = 'baseline') -> list[str]:
    """
    Check a baseline table's distances.

    Checks:
    - Table is not empty
    - No distance appears twice (interpolation needs unique x values)
    """
    if not distances:
        return [f'{name} table is empty']

    seen = set()
    duplicates = set()
    for distance in distances:
        if distance in seen:
            duplicates.add(distance)
        seen.add(distance)

    if duplicates:
        listed = ', '.join(f'{d:g}' for d in sorted(duplicates))
        return [f'{name} table has duplicate distances: {listed}']
    return []
