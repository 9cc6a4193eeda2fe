"""
Fake Repository Implementations for Testing.

This package provides in-memory fake implementations of repository interfaces
for fast, isolated testing. No database or external dependencies required.

Features:
- All fakes implement the same Protocol interfaces as real implementations
- Supports seeding with test data
- Supports reset() for test isolation
- Factory functions for building valid domain records

Usage:
    from tests.fakes import FakeSetsRepository, make_set

    repo = FakeSetsRepository()
    repo.seed([make_set(exercise_id="bench", reps=5, weight=225)])
"""
import uuid
from datetime import datetime, timezone
from typing import Optional

from domain.models import Exercise, WorkoutSet
from tests.fakes.exercises_repository import FakeExercisesRepository
from tests.fakes.sets_repository import FakeSetsRepository


# Fixed reference instant shared by the insight tests: a Monday, midday UTC
NOW = datetime(2024, 1, 15, 12, 0, tzinfo=timezone.utc)


# =============================================================================
# Factory Functions
# =============================================================================


def make_exercise(
    exercise_id: str,
    name: str,
    *,
    user_id: str = "test_user",
    deleted_at: Optional[datetime] = None,
) -> Exercise:
    """Create a valid Exercise."""
    return Exercise(
        id=exercise_id,
        user_id=user_id,
        name=name,
        created_at=datetime(2023, 1, 1, tzinfo=timezone.utc),
        deleted_at=deleted_at,
    )


def make_set(
    *,
    exercise_id: str = "bench",
    reps: int = 5,
    weight: Optional[float] = None,
    unit: Optional[str] = "lbs",
    performed_at: Optional[datetime] = None,
    user_id: str = "test_user",
    set_id: Optional[str] = None,
) -> WorkoutSet:
    """
    Create a valid WorkoutSet.

    The unit is dropped automatically for bodyweight sets.
    """
    return WorkoutSet(
        id=set_id or str(uuid.uuid4()),
        user_id=user_id,
        exercise_id=exercise_id,
        reps=reps,
        weight=weight,
        unit=unit if weight is not None else None,
        performed_at=performed_at or NOW,
    )


def create_sets_repo(*sets: WorkoutSet) -> FakeSetsRepository:
    """Create a FakeSetsRepository seeded with the given sets."""
    repo = FakeSetsRepository()
    repo.seed(sets)
    return repo


__all__ = [
    "NOW",
    "FakeExercisesRepository",
    "FakeSetsRepository",
    "create_sets_repo",
    "make_exercise",
    "make_set",
]
