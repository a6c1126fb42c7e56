"""Unit tests for the strokes gained calculator."""

import pytest

from golfscore.baseline import BaselineTables
from golfscore.constants import METERS_TO_FEET
from golfscore.models import Shot
from golfscore.strokes_gained import (
    StrokesGainedCalculator,
    calculate_ob_strokes_gained,
    calculate_strokes_gained,
    validate_distance,
)


@pytest.fixture
def calculator(tables):
    return StrokesGainedCalculator(tables)


class TestStrokesGained:
    """Tests for single-shot strokes gained."""

    def test_approach_to_green(self, calculator):
        """150 yd fairway shot to 10 ft: 2.95 - (1 + 1.61)."""
        sg = calculator.calculate_strokes_gained('longGame', 150, 'fairway', False, 'green', 10)
        assert sg == 0.34

    def test_holed_putt(self, calculator):
        """Holing a 10 footer gains 0.61."""
        sg = calculator.calculate_strokes_gained('putting', 10, 'green', True, 'green', 0)
        assert sg == 0.61

    def test_missed_putt_loses_strokes(self, calculator):
        """10 ft leaving 3 ft: 1.61 - (1 + 1.04)."""
        sg = calculator.calculate_strokes_gained('putting', 10, 'green', False, 'green', 3)
        assert sg == -0.43

    def test_tee_shot_to_fairway(self, calculator):
        """400 yd tee shot leaving 150 in the fairway."""
        sg = calculator.calculate_strokes_gained('longGame', 400, 'tee', False, 'fairway', 150)
        assert sg == 0.04

    def test_interpolated_start(self, calculator):
        """250 yd tee value is interpolated between the 200 and 400 rows."""
        # 3.12 + 0.87 * 0.25 = 3.3375; 3.3375 - (1 + 2.80)
        sg = calculator.calculate_strokes_gained('longGame', 250, 'tee', False, 'fairway', 100)
        assert sg == -0.46

    def test_holed_ignores_end_arguments(self, calculator):
        """Holed shots score expected start minus one, whatever the end values."""
        a = calculator.calculate_strokes_gained('longGame', 150, 'rough', True, 'sand', 500)
        b = calculator.calculate_strokes_gained('longGame', 150, 'rough', True, 'green', 3)
        assert a == b == 2.2

    def test_out_of_range_distance_clamps(self, calculator):
        """Distances below the table use the lowest row."""
        sg = calculator.calculate_strokes_gained('longGame', 50, 'tee', True, None, None)
        assert sg == 2.12

    def test_green_start_lie_in_long_game_uses_fairway(self, calculator):
        """A long-game shot started on the green reads the fairway column."""
        green = calculator.calculate_strokes_gained('longGame', 150, 'green', True)
        fairway = calculator.calculate_strokes_gained('longGame', 150, 'fairway', True)
        assert green == fairway

    def test_empty_tables(self):
        """With no baselines every expectation is zero."""
        calculator = StrokesGainedCalculator(BaselineTables(putting=(), long_game=()))
        assert calculator.calculate_strokes_gained('putting', 10, 'green', True) == -1.0

    def test_meters_are_converted(self, tables):
        """Meters convert to feet before the putting lookup."""
        metric = StrokesGainedCalculator(tables, distance_unit='meters')
        native = StrokesGainedCalculator(tables)
        assert metric.expected_start('putting', 3, 'green') == pytest.approx(
            native.expected_start('putting', 3 * METERS_TO_FEET, 'green')
        )

    def test_invalid_distance_unit(self, tables):
        """Unknown units are rejected at construction."""
        with pytest.raises(ValueError, match='Invalid distance unit'):
            StrokesGainedCalculator(tables, distance_unit='furlongs')

    def test_penalty_below_one_rejected(self, tables):
        """A zero or negative penalty would let OB shots score too well."""
        with pytest.raises(ValueError, match='OB penalty'):
            StrokesGainedCalculator(tables, ob_penalty_strokes=0)
        with pytest.raises(ValueError, match='OB penalty'):
            StrokesGainedCalculator(tables, ob_penalty_strokes=-1)

    def test_ob_end_lie_uses_ob_calculation(self, calculator):
        """An OB end lie costs stroke and distance instead of scoring as holed."""
        holed = calculator.calculate_strokes_gained('longGame', 400, 'tee', True)
        ob = calculator.calculate_strokes_gained('longGame', 400, 'tee', False, 'OB', None)
        assert holed == 2.99
        assert ob == -2.0

    @pytest.mark.parametrize('end_lie', [None, 'recovery'])
    def test_missed_shot_needs_known_end_lie(self, calculator, end_lie):
        with pytest.raises(ValueError, match='not holed'):
            calculator.calculate_strokes_gained('longGame', 400, 'tee', False, end_lie, 150)


class TestOutOfBounds:
    """Tests for OB scoring (stroke and distance)."""

    def test_ob_costs_two_strokes(self, calculator):
        """One stroke taken plus one penalty stroke."""
        assert calculator.calculate_ob_strokes_gained('longGame', 400, 'tee') == -2.0

    def test_ob_is_never_neutral(self, calculator):
        """Regression: OB shots were once stored with 0 strokes gained."""
        for distance in (100, 150, 200, 250, 400):
            for lie in ('tee', 'fairway', 'rough', 'sand'):
                assert calculator.calculate_ob_strokes_gained('longGame', distance, lie) != 0

    def test_ob_putt(self, calculator):
        """Putting off the green and out of bounds still costs the penalty."""
        assert calculator.calculate_ob_strokes_gained('putting', 10, 'green') == -2.0

    def test_custom_penalty(self, tables):
        """A two stroke penalty costs three in total."""
        calculator = StrokesGainedCalculator(tables, ob_penalty_strokes=2)
        assert calculator.calculate_ob_strokes_gained('longGame', 200, 'tee') == -3.0


class TestScoreShot:
    """Tests for scoring recorded Shot objects."""

    def test_putt_shot(self, calculator):
        shot = Shot(type='putt', start_distance=10, start_lie='green', holed=True)
        assert calculator.score_shot(shot) == 0.61

    def test_approach_shot(self, calculator):
        shot = Shot(
            type='approach',
            start_distance=150,
            start_lie='fairway',
            holed=False,
            end_lie='green',
            end_distance=10,
        )
        assert calculator.score_shot(shot) == 0.34

    def test_ob_flag(self, calculator):
        """is_ob routes to the OB calculation."""
        shot = Shot(type='tee', start_distance=400, start_lie='tee', holed=False, is_ob=True)
        assert calculator.score_shot(shot) == -2.0

    def test_ob_end_lie(self, calculator):
        """An 'OB' end lie is treated the same as the flag."""
        shot = Shot(
            type='tee', start_distance=400, start_lie='tee', holed=False, end_lie='OB', end_distance=0
        )
        assert calculator.score_shot(shot) == -2.0

    def test_missed_shot_without_end_lie_rejected(self, calculator):
        """Regression: a missed shot with no end lie used to score like a hole-out."""
        shot = Shot(type='tee', start_distance=400, start_lie='tee', holed=False)
        with pytest.raises(ValueError, match='Unknown end lie None'):
            calculator.score_shot(shot)

    def test_unknown_end_lie_rejected(self, calculator):
        shot = Shot(
            type='approach',
            start_distance=150,
            start_lie='fairway',
            holed=False,
            end_lie='recovery',
            end_distance=40,
        )
        with pytest.raises(ValueError, match='Cannot score shot'):
            calculator.score_shot(shot)

    def test_bad_start_distance_rejected(self, calculator):
        shot = Shot(type='putt', start_distance=0, start_lie='green', holed=True)
        with pytest.raises(ValueError, match='Start distance must be positive'):
            calculator.score_shot(shot)


class TestValidateDistance:
    """Tests for distance range checks."""

    def test_inside_range(self, tables):
        assert validate_distance(10, 'putting', tables) is True
        assert validate_distance(250, 'longGame', tables) is True

    def test_outside_range(self, tables):
        assert validate_distance(31, 'putting', tables) is False
        assert validate_distance(0, 'longGame', tables) is False


class TestPackagedBaselines:
    """Tests for the module-level helpers over the shipped tables."""

    def test_holed_three_meter_putt(self):
        """3 m is 9.84 ft: 1.56 + 0.05 * 0.84 expected putts."""
        assert calculate_strokes_gained('putting', 3, 'green', True) == 0.6

    def test_ob_default(self):
        assert calculate_ob_strokes_gained('longGame', 200, 'tee') == -2.0
