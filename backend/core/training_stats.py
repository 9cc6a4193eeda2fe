"""
Training Volume and Daily Statistics.

Aggregations behind the dashboard and history views:
- Total volume per exercise over an optional date range
- Today's totals, overall and per exercise, in the user's preferred unit
- Exercise ordering by most recent use
"""

from datetime import datetime
from typing import Dict, List, Optional, Sequence

from backend.utils.dates import day_key, ensure_utc
from domain.models import (
    DailyStats,
    Exercise,
    ExerciseDailyStats,
    ExerciseVolume,
    WorkoutSet,
)


def _converted_volume(s: WorkoutSet, target_unit: str) -> float:
    weight = s.weight_in(target_unit)
    if not weight:
        return 0.0
    return s.reps * weight


def calculate_volume_by_exercise(
    sets: Sequence[WorkoutSet],
    exercises: Sequence[Exercise],
    start: Optional[datetime] = None,
    end: Optional[datetime] = None,
) -> List[ExerciseVolume]:
    """
    Calculate total volume (reps x weight) for each exercise.

    Deleted exercises are included for history; sets for unknown exercises
    are skipped. Volume is summed in each set's own unit.

    Args:
        sets: Sets to aggregate
        exercises: All exercises for the user, including deleted ones
        start: Inclusive lower bound on performed_at
        end: Inclusive upper bound on performed_at

    Returns:
        Per-exercise totals sorted by volume descending
    """
    names = {ex.id: ex.name for ex in exercises}
    start = ensure_utc(start) if start is not None else None
    end = ensure_utc(end) if end is not None else None

    totals: Dict[str, ExerciseVolume] = {}
    for s in sets:
        if start is not None and s.performed_at < start:
            continue
        if end is not None and s.performed_at > end:
            continue
        name = names.get(s.exercise_id)
        if name is None:
            continue

        current = totals.get(s.exercise_id)
        if current is None:
            totals[s.exercise_id] = ExerciseVolume(
                exercise_id=s.exercise_id,
                exercise_name=name,
                total_volume=s.volume,
                sets=1,
            )
        else:
            current.total_volume += s.volume
            current.sets += 1

    return sorted(totals.values(), key=lambda v: v.total_volume, reverse=True)


def _sets_on_day(sets: Sequence[WorkoutSet], now: datetime) -> List[WorkoutSet]:
    today = day_key(now)
    return [s for s in sets if day_key(s.performed_at) == today]


def calculate_daily_stats(
    sets: Sequence[WorkoutSet],
    now: datetime,
    target_unit: str = "lbs",
) -> Optional[DailyStats]:
    """
    Totals for the UTC day of ``now``.

    Weights are converted to ``target_unit`` before computing volume so
    mixed-unit days add up correctly.

    Returns:
        DailyStats, or None if nothing was logged that day
    """
    today_sets = _sets_on_day(sets, now)
    if not today_sets:
        return None

    return DailyStats(
        total_sets=len(today_sets),
        total_reps=sum(s.reps for s in today_sets),
        total_volume=sum(_converted_volume(s, target_unit) for s in today_sets),
        exercises_worked=len({s.exercise_id for s in today_sets}),
    )


def calculate_daily_stats_by_exercise(
    sets: Sequence[WorkoutSet],
    exercises: Sequence[Exercise],
    now: datetime,
    target_unit: str = "lbs",
) -> List[ExerciseDailyStats]:
    """
    Per-exercise totals for the UTC day of ``now``.

    Returns:
        Stats sorted by most sets first, then name
    """
    lookup = {ex.id: ex for ex in exercises}
    stats: Dict[str, ExerciseDailyStats] = {}

    for s in _sets_on_day(sets, now):
        exercise = lookup.get(s.exercise_id)
        if exercise is None:
            continue

        entry = stats.get(s.exercise_id)
        if entry is None:
            entry = ExerciseDailyStats(
                exercise_id=s.exercise_id,
                name=exercise.name,
                sets=0,
                reps=0,
                volume=0.0,
            )
            stats[s.exercise_id] = entry

        entry.sets += 1
        entry.reps += s.reps
        entry.volume += _converted_volume(s, target_unit)

    return sorted(stats.values(), key=lambda e: (-e.sets, e.name))


def sort_exercises_by_recency(
    exercises: Sequence[Exercise],
    sets: Sequence[WorkoutSet],
) -> List[Exercise]:
    """
    Sort exercises by most recent use, then alphabetically.

    Exercises never used sort after all used ones. The input is not mutated.
    """
    last_used: Dict[str, datetime] = {}
    for s in sets:
        current = last_used.get(s.exercise_id)
        if current is None or s.performed_at > current:
            last_used[s.exercise_id] = s.performed_at

    used = [ex for ex in exercises if ex.id in last_used]
    unused = [ex for ex in exercises if ex.id not in last_used]

    used.sort(key=lambda ex: ex.name)
    used.sort(key=lambda ex: last_used[ex.id], reverse=True)
    unused.sort(key=lambda ex: ex.name)
    return used + unused
