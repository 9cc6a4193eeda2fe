"""
Domain models for the workout insight engine.

This package contains pure domain models that are independent of
infrastructure concerns (database, CLI, external services).

Logged records:
- WorkoutSet: One logged set (reps, optional weight + unit, timestamp)
- Exercise: A user's named exercise, soft-deletable

Derived records (computed on demand, never stored):
- PRResult, StreakStats, RecoveryRecord, OverloadSeries, FocusSuggestion
- ExerciseVolume, DailyStats, ExerciseDailyStats

Usage:
    >>> from domain.models import WorkoutSet, Exercise

    >>> ex = Exercise(id="e1", user_id="u1", name="Bench Press")
    >>> s = WorkoutSet(
    ...     id="s1", user_id="u1", exercise_id="e1",
    ...     reps=5, weight=100, unit="kg",
    ...     performed_at="2024-03-01T10:00:00Z",
    ... )
    >>> s.volume
    500.0
"""

from domain.models.exercise import Exercise
from domain.models.insights import (
    DailyStats,
    ExerciseDailyStats,
    ExerciseVolume,
    FocusSuggestion,
    MuscleGroup,
    OverloadDataPoint,
    OverloadSeries,
    PRResult,
    PRType,
    RecoveryRecord,
    RecoveryStatus,
    StreakStats,
    SuggestionPriority,
    SuggestionType,
    TRACKED_MUSCLE_GROUPS,
    Trend,
)
from domain.models.workout_set import (
    LBS_PER_KG,
    WeightUnit,
    WorkoutSet,
    convert_weight,
)

__all__ = [
    # Logged records
    "Exercise",
    "WorkoutSet",
    "WeightUnit",
    "LBS_PER_KG",
    "convert_weight",
    # Enums
    "MuscleGroup",
    "TRACKED_MUSCLE_GROUPS",
    "PRType",
    "RecoveryStatus",
    "Trend",
    "SuggestionType",
    "SuggestionPriority",
    # Derived records
    "PRResult",
    "StreakStats",
    "RecoveryRecord",
    "OverloadDataPoint",
    "OverloadSeries",
    "FocusSuggestion",
    "ExerciseVolume",
    "DailyStats",
    "ExerciseDailyStats",
]
