"""
Unit tests for personal record detection.

Tests cover:
- First set for an exercise
- Weight > volume > reps priority
- Ties never count
- Historical replay of an exercise's sets
"""
import pytest
from datetime import timedelta

from backend.core.pr_detection import check_for_pr, detect_historical_prs
from domain.models import PRType
from tests.fakes import NOW, make_set


# =============================================================================
# check_for_pr
# =============================================================================


@pytest.mark.unit
class TestFirstSet:
    """A set with no history is always a PR."""

    def test_weighted_first_set_is_weight_pr(self):
        result = check_for_pr(make_set(reps=5, weight=135), [])
        assert result.type == PRType.WEIGHT
        assert result.current_value == 135
        assert result.previous_value == 0

    def test_bodyweight_first_set_is_reps_pr(self):
        result = check_for_pr(make_set(reps=12), [])
        assert result.type == PRType.REPS
        assert result.current_value == 12
        assert result.previous_value == 0


@pytest.mark.unit
class TestPriority:
    """Weight beats volume beats reps."""

    def test_heavier_weight(self):
        previous = [make_set(reps=5, weight=225)]
        result = check_for_pr(make_set(reps=3, weight=235), previous)
        assert result.type == PRType.WEIGHT
        assert result.current_value == 235
        assert result.previous_value == 225

    def test_weight_wins_over_volume_and_reps(self):
        previous = [make_set(reps=5, weight=200)]
        result = check_for_pr(make_set(reps=10, weight=210), previous)
        assert result.type == PRType.WEIGHT

    def test_volume_pr_at_same_weight(self):
        """315x10 then 315x12: same weight, more volume."""
        previous = [make_set(reps=10, weight=315)]
        result = check_for_pr(make_set(reps=12, weight=315), previous)
        assert result.type == PRType.VOLUME
        assert result.current_value == 3780
        assert result.previous_value == 3150

    def test_volume_pr_compares_best_single_set(self):
        previous = [make_set(reps=10, weight=100), make_set(reps=3, weight=200)]
        result = check_for_pr(make_set(reps=8, weight=150), previous)
        assert result.type == PRType.VOLUME
        assert result.previous_value == 1000

    def test_reps_pr_for_bodyweight(self):
        previous = [make_set(reps=10), make_set(reps=8)]
        result = check_for_pr(make_set(reps=11), previous)
        assert result.type == PRType.REPS
        assert result.current_value == 11
        assert result.previous_value == 10

    def test_reps_pr_against_weighted_history(self):
        """More reps than ever, but lighter and less volume."""
        previous = [make_set(reps=5, weight=200), make_set(reps=8, weight=50)]
        result = check_for_pr(make_set(reps=9, weight=20), previous)
        assert result.type == PRType.REPS
        assert result.previous_value == 8


@pytest.mark.unit
class TestNoPR:
    """Equal or worse sets are not records."""

    def test_identical_set(self):
        previous = [make_set(reps=5, weight=225)]
        assert check_for_pr(make_set(reps=5, weight=225), previous) is None

    def test_worse_set(self):
        previous = [make_set(reps=5, weight=225)]
        assert check_for_pr(make_set(reps=3, weight=200), previous) is None

    def test_bodyweight_set_after_weighted_history(self):
        previous = [make_set(reps=12, weight=50)]
        assert check_for_pr(make_set(reps=10), previous) is None


# =============================================================================
# detect_historical_prs
# =============================================================================


@pytest.mark.unit
class TestHistoricalPRs:
    """Replay of an exercise's history."""

    def test_progression_sequence(self):
        sets = [
            make_set(set_id="set1", reps=8, weight=300, performed_at=NOW - timedelta(days=2)),
            make_set(set_id="set2", reps=10, weight=315, performed_at=NOW - timedelta(days=1)),
            make_set(set_id="set3", reps=12, weight=315, performed_at=NOW),
        ]
        assert detect_historical_prs(sets) == {
            "set1": PRType.WEIGHT,
            "set2": PRType.WEIGHT,
            "set3": PRType.VOLUME,
        }

    def test_input_order_does_not_matter(self):
        sets = [
            make_set(set_id="late", reps=5, weight=200, performed_at=NOW),
            make_set(set_id="early", reps=5, weight=250, performed_at=NOW - timedelta(days=3)),
        ]
        assert detect_historical_prs(sets) == {"early": PRType.WEIGHT}

    def test_non_pr_sets_are_absent(self):
        sets = [
            make_set(set_id="a", reps=5, weight=100, performed_at=NOW - timedelta(hours=2)),
            make_set(set_id="b", reps=5, weight=100, performed_at=NOW - timedelta(hours=1)),
            make_set(set_id="c", reps=4, weight=90, performed_at=NOW),
        ]
        assert detect_historical_prs(sets) == {"a": PRType.WEIGHT}

    def test_empty_history(self):
        assert detect_historical_prs([]) == {}
