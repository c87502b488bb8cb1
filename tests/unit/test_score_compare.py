"""
Unit tests for score validation and comparison.
"""

from decimal import Decimal

import pytest

from domain.models import AmrapScore, FreeformScore, RoundsScore, TimeScore, WeightScore
from domain.scoring import compare_scores, validate_score

pytestmark = pytest.mark.unit


class TestValidateScore:
    """Tests for validate_score()."""

    def test_time_needs_minutes_or_seconds(self):
        assert validate_score(TimeScore()) == "Enter a valid time"
        assert validate_score(TimeScore(seconds=30)) is None

    def test_amrap_needs_rounds(self):
        assert validate_score(AmrapScore(reps=15)) == "Enter rounds completed"
        assert validate_score(AmrapScore(rounds=8)) is None

    def test_weight_needs_amount(self):
        assert validate_score(WeightScore()) == "Enter a valid weight"
        assert validate_score(WeightScore(amount=Decimal("60"))) is None

    def test_rounds_needs_rounds(self):
        assert validate_score(RoundsScore()) == "Enter rounds completed"

    def test_freeform_is_always_valid(self):
        assert validate_score(FreeformScore()) is None


class TestCompareScores:
    """Tests for compare_scores()."""

    def test_lower_time_is_better(self):
        assert compare_scores("9:59", "10:00", "For Time") < 0
        assert compare_scores("10:00", "9:59", "For Time") > 0

    def test_amrap_orders_by_rounds_then_reps(self):
        assert compare_scores("9", "8+15", "AMRAP") < 0
        assert compare_scores("8+10", "8+15", "AMRAP") > 0

    def test_heavier_weight_is_better(self):
        assert compare_scores("102.5", "100", "Strength") < 0

    def test_equal_scores(self):
        assert compare_scores("12:00", "12:0", "For Time") == 0

    def test_unparseable_ranks_last(self):
        assert compare_scores("DNF", "25:00", "For Time") > 0
        assert compare_scores("10", "", "EMOM") < 0
        assert compare_scores("", None, "EMOM") == 0
