"""Unit tests for the match play status engine."""

import pytest

from golfscore.match_play import (
    advance_match,
    final_result,
    format_match_status,
    format_match_status_with_holes,
    hole_result,
    is_closed_out,
    is_match_finished,
    new_match,
    play_match,
)
from golfscore.models import MatchState


class TestHoleResult:
    """Tests for comparing one hole's scores."""

    def test_lower_score_wins(self):
        assert hole_result(4, 5) == 1
        assert hole_result(5, 4) == -1

    def test_halved(self):
        assert hole_result(4, 4) == 0

    def test_missing_score_halves(self):
        assert hole_result(None, 4) == 0
        assert hole_result(4, None) == 0


class TestAdvanceMatch:
    """Tests for hole-by-hole transitions."""

    def test_new_match(self):
        assert new_match() == MatchState(status_value=0, holes_remaining=18)
        assert new_match(9).holes_remaining == 9

    def test_advance(self):
        state = advance_match(new_match(), 1)
        assert state == MatchState(status_value=1, holes_remaining=17)
        state = advance_match(state, -1)
        assert state == MatchState(status_value=0, holes_remaining=16)

    def test_input_state_unchanged(self):
        start = new_match()
        advance_match(start, 1)
        assert start == MatchState(status_value=0, holes_remaining=18)

    def test_closure_detected_exactly(self):
        """Closure flips on the first hole where the lead exceeds holes left."""
        results = [1, 1, 1, 1, 0, -1] * 3
        state = new_match(18)
        closed_at = None
        for number, result in enumerate(results, start=1):
            state = advance_match(state, result)
            assert is_closed_out(state) == (abs(state.status_value) > state.holes_remaining)
            if is_closed_out(state):
                closed_at = number
                break
        assert closed_at == 13
        assert state == MatchState(status_value=7, holes_remaining=5)

    def test_invalid_result_rejected(self):
        with pytest.raises(ValueError, match='Hole result'):
            advance_match(new_match(), 2)

    def test_finished_match_rejected(self):
        with pytest.raises(ValueError, match='already decided'):
            advance_match(MatchState(status_value=4, holes_remaining=3), 0)
        with pytest.raises(ValueError):
            advance_match(MatchState(status_value=0, holes_remaining=0), 1)

    def test_play_match_stops_at_closure(self):
        state = play_match([1, 1, 1, 1, 0, -1] * 3)
        assert state == MatchState(status_value=7, holes_remaining=5)


class TestMatchResult:
    """Tests for finished-match results and status text."""

    def test_four_and_three(self):
        state = MatchState(status_value=4, holes_remaining=3)
        assert is_closed_out(state)
        result = final_result(state)
        assert result.winner == 'A'
        assert result.result == '4 & 3'
        assert result.margin == 4

    def test_dormie_is_not_closed(self):
        """3 up with 3 to play can still be halved."""
        state = MatchState(status_value=3, holes_remaining=3)
        assert not is_closed_out(state)
        assert not is_match_finished(state)

    def test_won_on_last_hole(self):
        result = final_result(MatchState(status_value=1, holes_remaining=0))
        assert result.result == '1 Up'

    def test_side_b_wins(self):
        result = final_result(MatchState(status_value=-2, holes_remaining=0), 'Team A', 'Team B')
        assert result.winner == 'Team B'
        assert result.result == '2 Up'

    def test_all_square(self):
        state = MatchState(status_value=0, holes_remaining=0)
        assert is_match_finished(state)
        result = final_result(state)
        assert result.winner is None
        assert result.result == 'All Square'

    def test_status_text(self):
        state = MatchState(status_value=-2, holes_remaining=5)
        assert format_match_status(state, 'Ann', 'Bo') == 'Bo 2 Up'
        assert format_match_status_with_holes(state, 'Ann', 'Bo') == 'Bo 2 Up, 5 to play'

    def test_status_text_last_hole(self):
        state = MatchState(status_value=0, holes_remaining=0)
        assert format_match_status_with_holes(state) == 'All Square'
