"""
Focus Suggestions.

Rule-based training recommendations to keep training balanced:
- Neglected exercises (not trained in 7+ days)
- Push/pull and upper/lower volume imbalances
- Muscle groups with no volume in the last 7 days

Only active (non-deleted) exercises take part.
"""

import logging
from datetime import datetime, timedelta
from typing import Dict, Iterable, List, Optional, Sequence

from backend.core.muscle_groups import get_muscle_groups
from backend.utils.dates import ensure_utc, whole_days_between
from domain.models import (
    Exercise,
    FocusSuggestion,
    MuscleGroup,
    SuggestionPriority,
    SuggestionType,
    TRACKED_MUSCLE_GROUPS,
    WorkoutSet,
)

logger = logging.getLogger(__name__)

DEFAULT_SUGGESTION_LIMIT = 5
NEGLECT_THRESHOLD_DAYS = 7
RECENT_WINDOW = timedelta(days=7)

# Ratio above IMBALANCE_RATIO (or below its inverse) counts as imbalanced
IMBALANCE_RATIO = 2.0

PUSH_GROUPS = (MuscleGroup.CHEST, MuscleGroup.SHOULDERS, MuscleGroup.TRICEPS)
PULL_GROUPS = (MuscleGroup.BACK, MuscleGroup.BICEPS)
UPPER_GROUPS = (
    MuscleGroup.CHEST,
    MuscleGroup.BACK,
    MuscleGroup.SHOULDERS,
    MuscleGroup.BICEPS,
    MuscleGroup.TRICEPS,
)
LOWER_GROUPS = (
    MuscleGroup.QUADS,
    MuscleGroup.HAMSTRINGS,
    MuscleGroup.GLUTES,
    MuscleGroup.CALVES,
)

SAMPLE_EXERCISES: Dict[MuscleGroup, List[str]] = {
    MuscleGroup.CHEST: ["Bench Press", "Push-ups", "Dips"],
    MuscleGroup.BACK: ["Pull-ups", "Rows", "Deadlifts"],
    MuscleGroup.SHOULDERS: ["Overhead Press", "Lateral Raises", "Face Pulls"],
    MuscleGroup.BICEPS: ["Curls", "Chin-ups", "Hammer Curls"],
    MuscleGroup.TRICEPS: ["Dips", "Tricep Extensions", "Close-Grip Bench"],
    MuscleGroup.QUADS: ["Squats", "Leg Press", "Lunges"],
    MuscleGroup.HAMSTRINGS: ["Deadlifts", "Leg Curls", "RDLs"],
    MuscleGroup.GLUTES: ["Hip Thrusts", "Squats", "Lunges"],
    MuscleGroup.CALVES: ["Calf Raises", "Jump Rope", "Box Jumps"],
    MuscleGroup.CORE: ["Planks", "Crunches", "Leg Raises"],
    MuscleGroup.OTHER: [],
}

PRIORITY_ORDER = {
    SuggestionPriority.HIGH: 0,
    SuggestionPriority.MEDIUM: 1,
    SuggestionPriority.LOW: 2,
}


def get_sample_exercises(muscle_group: MuscleGroup) -> List[str]:
    """Example exercises that train the given muscle group."""
    return list(SAMPLE_EXERCISES.get(muscle_group, []))


def calculate_muscle_group_volumes(
    sets: Sequence[WorkoutSet],
    exercises: Sequence[Exercise],
    since: datetime,
) -> Dict[MuscleGroup, float]:
    """
    Sum set volume per muscle group for sets performed at or after ``since``.

    Only sets for the given exercises count; callers pass active exercises.
    Other is never included.
    """
    names = {ex.id: ex.name for ex in exercises}
    volumes: Dict[MuscleGroup, float] = {}

    for s in sets:
        if s.performed_at < since:
            continue
        name = names.get(s.exercise_id)
        if name is None:
            continue
        for group in get_muscle_groups(name):
            if group is MuscleGroup.OTHER:
                continue
            volumes[group] = volumes.get(group, 0) + s.volume

    return volumes


def _total(volumes: Dict[MuscleGroup, float], groups: Iterable[MuscleGroup]) -> float:
    return sum(volumes.get(group, 0) for group in groups)


def _neglected_exercises(
    sets: Sequence[WorkoutSet],
    active_exercises: Sequence[Exercise],
    now: datetime,
) -> List[FocusSuggestion]:
    last_trained: Dict[str, datetime] = {}
    for s in sets:
        current = last_trained.get(s.exercise_id)
        if current is None or s.performed_at > current:
            last_trained[s.exercise_id] = s.performed_at

    suggestions: List[FocusSuggestion] = []
    for exercise in active_exercises:
        last = last_trained.get(exercise.id)
        if last is None:
            # Created but never used
            continue

        days_since = whole_days_between(last, now)
        if days_since >= NEGLECT_THRESHOLD_DAYS:
            suggestions.append(FocusSuggestion(
                type=SuggestionType.EXERCISE,
                priority=SuggestionPriority.HIGH,
                title=f"Train {exercise.name}",
                reason=f"Haven't trained in {days_since} days",
                exercise_id=exercise.id,
            ))

    return suggestions


def _push_pull_balance(volumes: Dict[MuscleGroup, float]) -> Optional[FocusSuggestion]:
    push = _total(volumes, PUSH_GROUPS)
    pull = _total(volumes, PULL_GROUPS)
    if push <= 0 or pull <= 0:
        return None

    ratio = push / pull
    if ratio > IMBALANCE_RATIO:
        return FocusSuggestion(
            type=SuggestionType.BALANCE,
            priority=SuggestionPriority.MEDIUM,
            title="Balance Push/Pull Training",
            reason=f"Push volume is {ratio:.1f}x higher than pull",
            suggested_exercises=["Pull-ups", "Rows", "Lat Pulldowns"],
        )
    if ratio < 1 / IMBALANCE_RATIO:
        return FocusSuggestion(
            type=SuggestionType.BALANCE,
            priority=SuggestionPriority.MEDIUM,
            title="Balance Push/Pull Training",
            reason=f"Pull volume is {1 / ratio:.1f}x higher than push",
            suggested_exercises=["Bench Press", "Overhead Press", "Dips"],
        )
    return None


def _upper_lower_balance(volumes: Dict[MuscleGroup, float]) -> Optional[FocusSuggestion]:
    upper = _total(volumes, UPPER_GROUPS)
    lower = _total(volumes, LOWER_GROUPS)
    if upper <= 0 or lower <= 0:
        return None

    ratio = upper / lower
    if ratio > IMBALANCE_RATIO:
        return FocusSuggestion(
            type=SuggestionType.BALANCE,
            priority=SuggestionPriority.MEDIUM,
            title="Don't Skip Leg Day",
            reason=f"Upper body volume is {ratio:.1f}x higher than legs",
            suggested_exercises=["Squats", "Deadlifts", "Lunges"],
        )
    if ratio < 1 / IMBALANCE_RATIO:
        return FocusSuggestion(
            type=SuggestionType.BALANCE,
            priority=SuggestionPriority.MEDIUM,
            title="Train Upper Body More",
            reason=f"Leg volume is {1 / ratio:.1f}x higher than upper body",
            suggested_exercises=["Bench Press", "Pull-ups", "Rows"],
        )
    return None


def _untrained_muscle_groups(volumes: Dict[MuscleGroup, float]) -> List[FocusSuggestion]:
    return [
        FocusSuggestion(
            type=SuggestionType.MUSCLE_GROUP,
            priority=SuggestionPriority.MEDIUM,
            title=f"Train {group.value}",
            reason="No training in last 7 days",
            suggested_exercises=get_sample_exercises(group),
        )
        for group in TRACKED_MUSCLE_GROUPS
        if volumes.get(group, 0) == 0
    ]


def generate_focus_suggestions(
    sets: Sequence[WorkoutSet],
    exercises: Sequence[Exercise],
    now: datetime,
    limit: int = DEFAULT_SUGGESTION_LIMIT,
) -> List[FocusSuggestion]:
    """
    Generate prioritized training suggestions.

    Candidates are generated in rule order (neglected exercises, push/pull,
    upper/lower, untrained groups), stable-sorted by priority and truncated.

    Args:
        sets: All sets for the user (any order)
        exercises: The user's exercises; deleted ones are ignored
        now: Reference instant
        limit: Maximum number of suggestions

    Returns:
        Up to ``limit`` suggestions, high priority first
    """
    active = [ex for ex in exercises if ex.is_active]
    if not active or not sets:
        return []

    now = ensure_utc(now)
    active_ids = {ex.id for ex in active}
    active_sets = [s for s in sets if s.exercise_id in active_ids]

    suggestions: List[FocusSuggestion] = _neglected_exercises(active_sets, active, now)

    volumes = calculate_muscle_group_volumes(active_sets, active, now - RECENT_WINDOW)
    for balance in (_push_pull_balance(volumes), _upper_lower_balance(volumes)):
        if balance is not None:
            suggestions.append(balance)

    suggestions.extend(_untrained_muscle_groups(volumes))

    suggestions.sort(key=lambda s: PRIORITY_ORDER[s.priority])
    logger.debug(f"Generated {len(suggestions)} focus suggestions, returning up to {limit}")
    return suggestions[:limit]
