"""
Derived insight records.

These are computed on demand from a user's sets and exercises and are never
persisted. All of them serialise to JSON-compatible structures with
``model_dump(mode="json")``.
"""

from datetime import date
from enum import Enum
from typing import List, Optional, Union

from pydantic import BaseModel, Field


# =============================================================================
# Enums
# =============================================================================


class MuscleGroup(str, Enum):
    """Muscle group buckets used for recovery and balance analysis."""

    CHEST = "Chest"
    BACK = "Back"
    SHOULDERS = "Shoulders"
    BICEPS = "Biceps"
    TRICEPS = "Triceps"
    QUADS = "Quads"
    HAMSTRINGS = "Hamstrings"
    GLUTES = "Glutes"
    CALVES = "Calves"
    CORE = "Core"
    OTHER = "Other"


# Every group except OTHER, in enumeration order
TRACKED_MUSCLE_GROUPS: List[MuscleGroup] = [
    g for g in MuscleGroup if g is not MuscleGroup.OTHER
]


class PRType(str, Enum):
    """Kind of personal record a set achieved."""

    WEIGHT = "weight"
    REPS = "reps"
    VOLUME = "volume"


class RecoveryStatus(str, Enum):
    """How long ago a muscle group was last trained."""

    FRESH = "fresh"  # 0-2 days
    RECOVERING = "recovering"  # 3-4 days
    READY = "ready"  # 5-7 days
    OVERDUE = "overdue"  # 8+ days or never


class Trend(str, Enum):
    """Volume trajectory of an exercise over recent workouts."""

    IMPROVING = "improving"
    PLATEAU = "plateau"
    DECLINING = "declining"


class SuggestionType(str, Enum):
    EXERCISE = "exercise"
    MUSCLE_GROUP = "muscle_group"
    BALANCE = "balance"


class SuggestionPriority(str, Enum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


Number = Union[int, float]


# =============================================================================
# Records
# =============================================================================


class PRResult(BaseModel):
    """A set's personal-record classification relative to prior sets."""

    type: PRType
    current_value: Number
    previous_value: Number

    model_config = {"frozen": True}


class StreakStats(BaseModel):
    """Consecutive-day workout streaks and total distinct workout days."""

    current_streak: int = Field(default=0, ge=0)
    longest_streak: int = Field(default=0, ge=0)
    total_workouts: int = Field(default=0, ge=0)

    model_config = {"frozen": True}


class RecoveryRecord(BaseModel):
    """Recovery state of one muscle group."""

    muscle_group: MuscleGroup
    last_trained_date: Optional[date] = Field(
        default=None,
        description="UTC day of the most recent set, None if never trained",
    )
    days_since: int = Field(..., description="Whole days since last trained; 999 if never")
    volume_last_7_days: Number = 0
    frequency_last_7_days: int = Field(
        default=0,
        ge=0,
        description="Distinct workout days in the trailing 7 days",
    )
    status: RecoveryStatus

    model_config = {"frozen": True}


class OverloadDataPoint(BaseModel):
    """Aggregates for a single workout day of one exercise."""

    date: date
    max_weight: Optional[float] = None
    max_reps: int
    volume: Number

    model_config = {"frozen": True}


class OverloadSeries(BaseModel):
    """Recent workout history and trend for one exercise."""

    exercise_id: str
    exercise_name: str
    data_points: List[OverloadDataPoint] = Field(default_factory=list)
    trend: Trend

    model_config = {"frozen": True}


class FocusSuggestion(BaseModel):
    """A ranked training recommendation."""

    type: SuggestionType
    priority: SuggestionPriority
    title: str
    reason: str
    suggested_exercises: Optional[List[str]] = None
    exercise_id: Optional[str] = Field(
        default=None,
        description="Set on exercise suggestions for deep-linking",
    )

    model_config = {"frozen": True}


class ExerciseVolume(BaseModel):
    """Total volume and set count for one exercise over a period."""

    exercise_id: str
    exercise_name: str
    total_volume: Number
    sets: int


class DailyStats(BaseModel):
    """Totals for a single day of training."""

    total_sets: int
    total_reps: int
    total_volume: float
    exercises_worked: int


class ExerciseDailyStats(BaseModel):
    """Per-exercise totals for a single day of training."""

    exercise_id: str
    name: str
    sets: int
    reps: int
    volume: float
