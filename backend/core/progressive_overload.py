"""
Progressive Overload Analytics.

Tracks exercise progression over time to spot strength gains, plateaus and
regressions. Each exercise's sets are grouped into workout days and the
recent volume trajectory is classified into a trend.
"""

import logging
from collections import defaultdict
from datetime import date
from typing import Dict, List, Sequence

from backend.utils.dates import day_key
from domain.models import (
    Exercise,
    OverloadDataPoint,
    OverloadSeries,
    Trend,
    WorkoutSet,
)

logger = logging.getLogger(__name__)

DEFAULT_EXERCISE_COUNT = 5
MAX_WORKOUTS_PER_EXERCISE = 10

# Trend needs 3 recent + 3 previous workouts
TREND_WINDOW = 3
TREND_THRESHOLD_PERCENT = 5.0


def calculate_trend(data_points: Sequence[OverloadDataPoint]) -> Trend:
    """
    Classify the volume trend by comparing the last 3 workouts to the 3 before.

    With fewer than 6 workouts there is not enough history and the trend is
    a plateau. When the earlier average volume is zero, any recent volume
    counts as improving.

    Args:
        data_points: Workout data points sorted by date ascending

    Returns:
        improving (> +5%), declining (< -5%) or plateau
    """
    if len(data_points) < TREND_WINDOW * 2:
        return Trend.PLATEAU

    recent = data_points[-TREND_WINDOW:]
    previous = data_points[-TREND_WINDOW * 2:-TREND_WINDOW]

    recent_avg = sum(p.volume for p in recent) / len(recent)
    previous_avg = sum(p.volume for p in previous) / len(previous)

    if previous_avg == 0:
        return Trend.IMPROVING if recent_avg > 0 else Trend.PLATEAU

    change_percent = (recent_avg - previous_avg) / previous_avg * 100

    if change_percent > TREND_THRESHOLD_PERCENT:
        return Trend.IMPROVING
    if change_percent < -TREND_THRESHOLD_PERCENT:
        return Trend.DECLINING
    return Trend.PLATEAU


def build_data_points(sets: Sequence[WorkoutSet]) -> List[OverloadDataPoint]:
    """
    Group one exercise's sets into workout days.

    Only the 10 most recent workout days are kept, oldest first.

    Args:
        sets: Sets for a single exercise

    Returns:
        One data point per workout day
    """
    workouts: Dict[date, List[WorkoutSet]] = defaultdict(list)
    for s in sets:
        workouts[day_key(s.performed_at)].append(s)

    data_points: List[OverloadDataPoint] = []
    for workout_date in sorted(workouts)[-MAX_WORKOUTS_PER_EXERCISE:]:
        workout = workouts[workout_date]
        weights = [s.weight for s in workout if s.weight is not None]

        data_points.append(OverloadDataPoint(
            date=workout_date,
            max_weight=max(weights) if weights else None,  # None for bodyweight
            max_reps=max(s.reps for s in workout),
            volume=sum(s.volume for s in workout),
        ))

    return data_points


def analyze_progressive_overload(
    sets: Sequence[WorkoutSet],
    exercises: Sequence[Exercise],
    exercise_count: int = DEFAULT_EXERCISE_COUNT,
) -> List[OverloadSeries]:
    """
    Get progression data for the user's most recently trained exercises.

    Sets whose exercise is unknown are ignored before ranking, so the result
    has exactly min(exercise_count, exercises trained) entries.

    Args:
        sets: All sets for the user (any order)
        exercises: All exercises for the user, including deleted ones
        exercise_count: Number of exercises to return

    Returns:
        Progression series sorted by most recent activity
    """
    if not sets or exercise_count <= 0:
        return []

    exercise_names: Dict[str, str] = {ex.id: ex.name for ex in exercises}

    # Insertion order keeps first-seen order for equal last-workout times
    sets_by_exercise: Dict[str, List[WorkoutSet]] = {}
    for s in sets:
        if s.exercise_id not in exercise_names:
            continue
        sets_by_exercise.setdefault(s.exercise_id, []).append(s)

    ranked = sorted(
        sets_by_exercise.items(),
        key=lambda item: max(s.performed_at for s in item[1]),
        reverse=True,
    )[:exercise_count]

    result: List[OverloadSeries] = []
    for exercise_id, exercise_sets in ranked:
        data_points = build_data_points(exercise_sets)
        result.append(OverloadSeries(
            exercise_id=exercise_id,
            exercise_name=exercise_names[exercise_id],
            data_points=data_points,
            trend=calculate_trend(data_points),
        ))

    logger.debug(f"Built overload series for {len(result)} exercises")
    return result
