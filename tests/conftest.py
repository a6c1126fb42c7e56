"""Shared fixtures for golfscore tests."""

import pytest

from golfscore.baseline import BaselineTables
from golfscore.models import LongGameBaseline, PuttingBaseline


@pytest.fixture
def tables():
    """Small hand-made baselines with round numbers for exact arithmetic."""
    putting = (
        PuttingBaseline(distance=3, expected_strokes=1.04),
        PuttingBaseline(distance=10, expected_strokes=1.61),
        PuttingBaseline(distance=30, expected_strokes=1.98),
    )
    long_game = (
        LongGameBaseline(distance=100, fairway=2.80, rough=3.02, sand=3.23),
        LongGameBaseline(distance=150, fairway=2.95, rough=3.20, sand=3.25),
        LongGameBaseline(distance=200, tee=3.12, fairway=3.19, rough=3.42, sand=3.55),
        LongGameBaseline(distance=400, tee=3.99),
    )
    return BaselineTables(putting=putting, long_game=long_game)
