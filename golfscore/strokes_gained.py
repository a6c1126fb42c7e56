"""Strokes gained calculation against baseline tables.

Strokes gained for one shot is the drop in expected strokes to hole out,
less the stroke taken:

    SG = E(start) - (1 + E(end))

with E(end) = 0 when the shot is holed. Positive values beat the baseline.
"""

import logging
from typing import Optional

from .baseline import BaselineTables, get_default_baselines
from .config import get_distance_unit, get_ob_penalty_strokes
from .constants import (
    GREEN,
    LONG_GAME,
    LONG_GAME_LIES,
    METERS_TO_FEET,
    METERS_TO_YARDS,
    OB,
    OB_PENALTY_STROKES,
    PUTTING,
)
from .interpolation import interpolate_long_game, interpolate_putting
from .models import Shot
from .utils import round_half_away
from .validators import validate_shot

logger = logging.getLogger('golfscore.strokes_gained')


class StrokesGainedCalculator:
    """
    Scores individual shots against injected baseline tables.

    The tables are never reloaded or mutated, so one calculator can be
    shared by every round in the process.
    """

    def __init__(
        self,
        tables: BaselineTables,
        distance_unit: str = 'native',
        ob_penalty_strokes: int = OB_PENALTY_STROKES,
    ):
        """
        Initialize calculator.

        Args:
            tables: Putting and long-game baselines
            distance_unit: 'native' when distances are already feet (putting)
                and yards (long game), 'meters' to convert app input first
            ob_penalty_strokes: Penalty strokes charged for an OB shot
        """
        if distance_unit not in ('meters', 'native'):
            raise ValueError(f'Invalid distance unit: {distance_unit}')
        if ob_penalty_strokes < 1:
            raise ValueError(f'OB penalty must be at least 1 stroke, got {ob_penalty_strokes}')
        self.tables = tables
        self.distance_unit = distance_unit
        self.ob_penalty_strokes = ob_penalty_strokes

    def _putting_distance(self, distance: float) -> float:
        if self.distance_unit == 'meters':
            return distance * METERS_TO_FEET
        return distance

    def _long_game_distance(self, distance: float) -> float:
        if self.distance_unit == 'meters':
            return distance * METERS_TO_YARDS
        return distance

    def _warn_if_out_of_range(self, drill_type: str, distance: float) -> None:
        bounds = self.tables.distance_range(drill_type)
        if bounds is None:
            logger.warning(f'No {drill_type} baseline loaded; expected strokes default to 0')
            return
        low, high = bounds
        if distance <= 0 or distance < low or distance > high:
            logger.warning(
                f'{drill_type} distance {distance:.1f} out of range [{low}, {high}], clamping'
            )

    def expected_start(self, drill_type: str, start_distance: float, start_lie: str) -> float:
        """Expected strokes to hole out from the start of the shot."""
        if drill_type == PUTTING:
            distance = self._putting_distance(start_distance)
            self._warn_if_out_of_range(PUTTING, distance)
            return interpolate_putting(distance, self.tables.putting)

        distance = self._long_game_distance(start_distance)
        self._warn_if_out_of_range(LONG_GAME, distance)
        lie = 'fairway' if start_lie == GREEN else start_lie
        return interpolate_long_game(distance, lie, self.tables.long_game)

    def expected_end(self, holed: bool, end_lie: Optional[str], end_distance: Optional[float]) -> float:
        """Expected strokes to hole out from where the shot finished."""
        if holed:
            return 0
        distance = end_distance or 0
        if end_lie == GREEN:
            return interpolate_putting(self._putting_distance(distance), self.tables.putting)
        return interpolate_long_game(
            self._long_game_distance(distance), end_lie, self.tables.long_game
        )

    def calculate_strokes_gained(
        self,
        drill_type: str,
        start_distance: float,
        start_lie: str,
        holed: bool,
        end_lie: Optional[str] = None,
        end_distance: Optional[float] = None,
    ) -> float:
        """
        Strokes gained for a single shot.

        Args:
            drill_type: 'putting' or 'longGame'
            start_distance: Distance to the hole before the shot
            start_lie: tee, fairway, rough, sand or green
            holed: Whether the shot went in (end arguments are then ignored)
            end_lie: Lie after the shot; 'green' switches to the putting table
            end_distance: Distance to the hole after the shot

        Returns:
            Strokes gained rounded to 0.01. An 'OB' end lie is scored
            as out of bounds.

        Raises:
            ValueError: If a shot that was not holed has no known end lie
        """
        if not holed:
            if end_lie == OB:
                return self.calculate_ob_strokes_gained(drill_type, start_distance, start_lie)
            if end_lie not in LONG_GAME_LIES + (GREEN,):
                raise ValueError(f'Shot not holed but end lie is {end_lie!r}')

        start = self.expected_start(drill_type, start_distance, start_lie)
        end = self.expected_end(holed, end_lie, end_distance)
        return round_half_away(start - (1 + end), 2)

    def calculate_ob_strokes_gained(
        self,
        drill_type: str,
        start_distance: float,
        start_lie: str,
    ) -> float:
        """
        Strokes gained for a shot hit out of bounds.

        Stroke and distance: the player replays from the same spot after a
        penalty, so the shot costs the stroke taken plus the penalty.
        """
        start = self.expected_start(drill_type, start_distance, start_lie)
        return round_half_away(start - (1 + self.ob_penalty_strokes + start), 2)

    def score_shot(self, shot: Shot) -> float:
        """
        Strokes gained for a recorded Shot.

        Raises:
            ValueError: If the shot fails validate_shot
        """
        errors = validate_shot(shot)
        if errors:
            raise ValueError(f'Cannot score shot: {"; ".join(errors)}')

        drill_type = PUTTING if shot.type == 'putt' else LONG_GAME
        if shot.is_ob or shot.end_lie == OB:
            return self.calculate_ob_strokes_gained(drill_type, shot.start_distance, shot.start_lie)
        return self.calculate_strokes_gained(
            drill_type,
            shot.start_distance,
            shot.start_lie,
            shot.holed,
            shot.end_lie,
            shot.end_distance,
        )


def validate_distance(distance: float, drill_type: str, tables: BaselineTables) -> bool:
    """Check a distance is positive and inside the baseline's range."""
    if distance <= 0:
        return False
    bounds = tables.distance_range(drill_type)
    if bounds is None:
        return True
    low, high = bounds
    return low <= distance <= high


def default_calculator() -> StrokesGainedCalculator:
    """Calculator over the packaged baselines, using the configured unit and penalty."""
    return StrokesGainedCalculator(
        get_default_baselines(),
        distance_unit=get_distance_unit(),
        ob_penalty_strokes=get_ob_penalty_strokes(),
    )


def calculate_strokes_gained(
    drill_type: str,
    start_distance: float,
    start_lie: str,
    holed: bool,
    end_lie: Optional[str] = None,
    end_distance: Optional[float] = None,
) -> float:
    """Strokes gained for one shot using the packaged baselines."""
    return default_calculator().calculate_strokes_gained(
        drill_type, start_distance, start_lie, holed, end_lie, end_distance
    )


def calculate_ob_strokes_gained(drill_type: str, start_distance: float, start_lie: str) -> float:
    """Strokes gained for an OB shot using the packaged baselines."""
    return default_calculator().calculate_ob_strokes_gained(drill_type, start_distance, start_lie)
