"""
Unit tests for workout type classification.

Tests for:
- classify() static table, case/whitespace handling and the freeform default
- is_lower_better() and score_label()
"""

import pytest

from domain.models import ScoreCategory
from domain.scoring import WORKOUT_TYPES, category_label, classify, is_lower_better, score_label

pytestmark = pytest.mark.unit


class TestClassify:
    """Tests for classify()."""

    @pytest.mark.parametrize(
        "label,expected",
        [
            ("For Time", ScoreCategory.TIME),
            ("Chipper", ScoreCategory.TIME),
            ("Metcon", ScoreCategory.TIME),
            ("AMRAP", ScoreCategory.AMRAP),
            ("Strength", ScoreCategory.WEIGHT),
            ("EMOM", ScoreCategory.ROUNDS),
            ("Rounds", ScoreCategory.ROUNDS),
            ("Interval", ScoreCategory.FREEFORM),
            ("Skill", ScoreCategory.FREEFORM),
            ("Other", ScoreCategory.FREEFORM),
        ],
    )
    def test_static_table(self, label, expected):
        assert classify(label) == expected

    def test_case_and_whitespace_insensitive(self):
        assert classify("  amrap ") == ScoreCategory.AMRAP
        assert classify("FOR TIME") == ScoreCategory.TIME

    @pytest.mark.parametrize("label", [None, "", "Tabata", "for-time"])
    def test_unknown_labels_are_freeform(self, label):
        assert classify(label) == ScoreCategory.FREEFORM

    def test_every_offered_type_is_in_the_table(self):
        """Only Interval, Skill and Other fall through to freeform."""
        freeform = {t for t in WORKOUT_TYPES if classify(t) == ScoreCategory.FREEFORM}
        assert freeform == {"Interval", "Skill", "Other"}


class TestHelpers:
    """Tests for is_lower_better() and score_label()."""

    def test_only_timed_workouts_are_lower_better(self):
        assert is_lower_better("For Time")
        assert is_lower_better("Chipper")
        assert not is_lower_better("AMRAP")
        assert not is_lower_better("Strength")
        assert not is_lower_better(None)

    @pytest.mark.parametrize(
        "label,expected",
        [
            ("For Time", "Time"),
            ("AMRAP", "Score"),
            ("Strength", "Weight"),
            ("EMOM", "Rounds"),
            ("Skill", "Score"),
        ],
    )
    def test_score_label(self, label, expected):
        assert score_label(label) == expected

    def test_category_label_accepts_value(self):
        assert category_label("weight") == "Weight"
