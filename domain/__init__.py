"""
Domain layer for the workout insight engine.

This package contains pure domain models that are independent of
infrastructure concerns (database, CLI, external services).
"""

from domain.models import (
    Exercise,
    FocusSuggestion,
    MuscleGroup,
    OverloadSeries,
    PRResult,
    RecoveryRecord,
    StreakStats,
    WorkoutSet,
)

__all__ = [
    "Exercise",
    "FocusSuggestion",
    "MuscleGroup",
    "OverloadSeries",
    "PRResult",
    "RecoveryRecord",
    "StreakStats",
    "WorkoutSet",
]
