"""Tests for the score tracker."""

import pytest
from hypothesis import given, strategies as st

from engine.outcome import Outcome, Result
from engine.score import ScoreTracker


class TestScoreTracker:
    """Tests for ScoreTracker."""

    def test_starts_at_zero(self):
        """Test a new tracker."""
        score = ScoreTracker()
        assert score.as_dict() == {"wins": 0, "losses": 0, "ties": 0}
        assert score.rounds_played == 0

    @pytest.mark.parametrize(
        "outcome, column",
        [
            (Outcome.WIN, "wins"),
            (Outcome.BLACKJACK, "wins"),
            (Outcome.DEALER_BUST, "wins"),
            (Outcome.BUST, "losses"),
            (Outcome.DEALER_WINS, "losses"),
            (Outcome.PUSH, "ties"),
        ],
    )
    def test_record_increments_one_column(self, outcome, column):
        """Test that exactly one counter moves by one."""
        score = ScoreTracker()
        score.record(outcome)
        expected = {"wins": 0, "losses": 0, "ties": 0}
        expected[column] = 1
        assert score.as_dict() == expected

    def test_record_returns_result(self):
        """Test the returned score column."""
        assert ScoreTracker().record(Outcome.PUSH) == Result.TIE

    @given(st.lists(st.sampled_from(list(Outcome))))
    def test_rounds_played_matches_records(self, outcomes):
        """Test counters add up to the rounds recorded."""
        score = ScoreTracker()
        for outcome in outcomes:
            score.record(outcome)
        assert score.rounds_played == len(outcomes)
        assert min(score.as_dict().values()) >= 0

    def test_str(self):
        """Test score line."""
        score = ScoreTracker(wins=2, losses=1, ties=3)
        assert str(score) == "Wins: 2    Losses: 1    Ties: 3"
