"""
Insights Service for Workout Analytics.

This module ties the pure analyzers to the repository ports:
- Streaks and total workout days
- Personal record checks, live and historical
- Muscle group recovery status
- Progressive overload trends
- Focus suggestions
- Volume per exercise and today's stats

Every operation takes an explicit ``now`` so results are reproducible; it
only defaults to the current UTC instant at this outer seam.
"""
import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List, Optional, Sequence, Tuple

from application.ports.exercises_repository import ExercisesRepository
from application.ports.sets_repository import SetsRepository
from backend.core.focus_suggestions import generate_focus_suggestions
from backend.core.pr_detection import check_for_pr, detect_historical_prs
from backend.core.progressive_overload import analyze_progressive_overload
from backend.core.recovery_service import calculate_recovery_status
from backend.core.streak_calculator import calculate_streak_stats
from backend.core.training_stats import (
    calculate_daily_stats,
    calculate_volume_by_exercise,
)
from backend.settings import Settings, get_settings
from backend.utils.dates import ensure_utc, utc_now
from domain.models import (
    DailyStats,
    Exercise,
    ExerciseVolume,
    FocusSuggestion,
    OverloadSeries,
    PRResult,
    PRType,
    RecoveryRecord,
    StreakStats,
    WorkoutSet,
)

logger = logging.getLogger(__name__)


# =============================================================================
# Response DTOs
# =============================================================================


@dataclass
class InsightsReport:
    """All derived insights for one user at one instant."""
    generated_at: datetime
    streaks: StreakStats
    recovery: List[RecoveryRecord] = field(default_factory=list)
    progressive_overload: List[OverloadSeries] = field(default_factory=list)
    focus_suggestions: List[FocusSuggestion] = field(default_factory=list)
    volume_by_exercise: List[ExerciseVolume] = field(default_factory=list)
    daily_stats: Optional[DailyStats] = None
    user_id: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """JSON-compatible representation of the report."""
        return {
            "user_id": self.user_id,
            "generated_at": self.generated_at.isoformat(),
            "streaks": self.streaks.model_dump(mode="json"),
            "recovery": [r.model_dump(mode="json") for r in self.recovery],
            "progressive_overload": [
                s.model_dump(mode="json") for s in self.progressive_overload
            ],
            "focus_suggestions": [
                s.model_dump(mode="json") for s in self.focus_suggestions
            ],
            "volume_by_exercise": [
                v.model_dump(mode="json") for v in self.volume_by_exercise
            ],
            "daily_stats": (
                self.daily_stats.model_dump(mode="json") if self.daily_stats else None
            ),
        }


def build_insights_report(
    sets: Sequence[WorkoutSet],
    exercises: Sequence[Exercise],
    now: datetime,
    *,
    overload_exercise_count: int = 5,
    suggestion_limit: int = 5,
    weight_unit: str = "lbs",
    user_id: Optional[str] = None,
) -> InsightsReport:
    """
    Run every analyzer over one user's records.

    Args:
        sets: All sets for the user
        exercises: All exercises for the user, including deleted ones
        now: Reference instant
        overload_exercise_count: Exercises in the overload analysis
        suggestion_limit: Maximum focus suggestions
        weight_unit: Unit for today's stats
        user_id: Echoed into the report

    Returns:
        InsightsReport
    """
    now = ensure_utc(now)
    return InsightsReport(
        user_id=user_id,
        generated_at=now,
        streaks=calculate_streak_stats(sets, now),
        recovery=calculate_recovery_status(sets, exercises, now),
        progressive_overload=analyze_progressive_overload(
            sets, exercises, overload_exercise_count
        ),
        focus_suggestions=generate_focus_suggestions(
            sets, exercises, now, limit=suggestion_limit
        ),
        volume_by_exercise=calculate_volume_by_exercise(sets, exercises),
        daily_stats=calculate_daily_stats(sets, now, weight_unit),
    )


# =============================================================================
# Insights Service
# =============================================================================


class InsightsService:
    """
    Service for workout insights.

    Fetches a user's sets and exercises through the repository ports and
    delegates to the stateless analyzers. Nothing is cached between calls.
    """

    def __init__(
        self,
        sets_repo: SetsRepository,
        exercises_repo: ExercisesRepository,
        settings: Optional[Settings] = None,
    ):
        """
        Initialize the insights service.

        Args:
            sets_repo: Repository for logged sets
            exercises_repo: Repository for exercise metadata
            settings: Optional settings; defaults to get_settings()
        """
        self._sets_repo = sets_repo
        self._exercises_repo = exercises_repo
        self._settings = settings or get_settings()

    def _load(self, user_id: str) -> Tuple[List[WorkoutSet], List[Exercise]]:
        sets = self._sets_repo.list_for_user(user_id)
        exercises = self._exercises_repo.list_for_user(user_id, include_deleted=True)
        logger.debug(
            f"Loaded {len(sets)} sets and {len(exercises)} exercises for user {user_id}"
        )
        return sets, exercises

    def get_streak_stats(
        self,
        user_id: str,
        *,
        now: Optional[datetime] = None,
    ) -> StreakStats:
        """Current streak, longest streak and total workout days."""
        sets = self._sets_repo.list_for_user(user_id)
        return calculate_streak_stats(sets, now or utc_now())

    def check_set_for_pr(self, user_id: str, candidate: WorkoutSet) -> Optional[PRResult]:
        """
        Check if a just-logged set is a personal record.

        The candidate is compared against the user's other sets for the same
        exercise performed at or before it.

        Args:
            user_id: User ID
            candidate: The set to check (may already be stored)

        Returns:
            PRResult or None
        """
        history = self._sets_repo.list_for_user(user_id, exercise_id=candidate.exercise_id)
        previous = [
            s for s in history
            if s.id != candidate.id and s.performed_at <= candidate.performed_at
        ]
        result = check_for_pr(candidate, previous)
        if result is not None:
            logger.info(
                f"{result.type.value} PR for user {user_id} on exercise {candidate.exercise_id}"
            )
        return result

    def get_historical_prs(self, user_id: str, exercise_id: str) -> Dict[str, PRType]:
        """
        Which of an exercise's sets were PRs at the time they were logged.

        Returns an empty mapping if the exercise does not exist.
        """
        exercise = self._exercises_repo.get_by_id(user_id, exercise_id)
        if exercise is None:
            logger.warning(f"Exercise not found: {exercise_id}")
            return {}

        history = self._sets_repo.list_for_user(user_id, exercise_id=exercise_id)
        return detect_historical_prs(history)

    def get_recovery_status(
        self,
        user_id: str,
        *,
        now: Optional[datetime] = None,
    ) -> List[RecoveryRecord]:
        """Recovery records for all tracked muscle groups."""
        sets, exercises = self._load(user_id)
        return calculate_recovery_status(sets, exercises, now or utc_now())

    def get_progressive_overload(
        self,
        user_id: str,
        *,
        exercise_count: Optional[int] = None,
    ) -> List[OverloadSeries]:
        """Progression series for the most recently trained exercises."""
        sets, exercises = self._load(user_id)
        count = exercise_count
        if count is None:
            count = self._settings.overload_exercise_count
        return analyze_progressive_overload(sets, exercises, count)

    def get_focus_suggestions(
        self,
        user_id: str,
        *,
        now: Optional[datetime] = None,
    ) -> List[FocusSuggestion]:
        """Prioritized training suggestions."""
        sets, exercises = self._load(user_id)
        return generate_focus_suggestions(
            sets,
            exercises,
            now or utc_now(),
            limit=self._settings.focus_suggestion_limit,
        )

    def get_volume_by_exercise(
        self,
        user_id: str,
        *,
        start: Optional[datetime] = None,
        end: Optional[datetime] = None,
    ) -> List[ExerciseVolume]:
        """Total volume per exercise, optionally within a time range."""
        sets = self._sets_repo.list_for_user(user_id, start=start, end=end)
        exercises = self._exercises_repo.list_for_user(user_id, include_deleted=True)
        return calculate_volume_by_exercise(sets, exercises, start, end)

    def get_insights_report(
        self,
        user_id: str,
        *,
        now: Optional[datetime] = None,
    ) -> InsightsReport:
        """Every insight for a user in one report."""
        sets, exercises = self._load(user_id)
        return build_insights_report(
            sets,
            exercises,
            now or utc_now(),
            overload_exercise_count=self._settings.overload_exercise_count,
            suggestion_limit=self._settings.focus_suggestion_limit,
            weight_unit=self._settings.default_weight_unit,
            user_id=user_id,
        )
