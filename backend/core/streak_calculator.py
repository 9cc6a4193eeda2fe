"""
Streak Calculation.

Workout streaks are counted in distinct UTC calendar days with at least one
logged set. A streak is broken by any gap of more than one day.
"""

from datetime import datetime
from typing import Sequence

from backend.utils.dates import day_key, distinct_days
from domain.models import StreakStats, WorkoutSet


def calculate_current_streak(sets: Sequence[WorkoutSet], now: datetime) -> int:
    """
    Calculate the current workout streak.

    The streak only counts if the most recent workout day is today or
    yesterday; otherwise it has been broken and the result is 0.

    Args:
        sets: All sets for the user (any order)
        now: Reference instant; its UTC day is "today"

    Returns:
        Consecutive days ending at the most recent workout day
    """
    days = distinct_days(s.performed_at for s in sets)
    if not days:
        return 0

    today = day_key(now)
    most_recent = days[-1]
    if (today - most_recent).days > 1:
        return 0

    streak = 1
    current = most_recent
    for previous in reversed(days[:-1]):
        if (current - previous).days != 1:
            break
        streak += 1
        current = previous

    return streak


def calculate_longest_streak(sets: Sequence[WorkoutSet]) -> int:
    """
    Calculate the longest streak across the whole history.

    Args:
        sets: All sets for the user (any order)

    Returns:
        Longest run of consecutive workout days (0 with no sets)
    """
    days = distinct_days(s.performed_at for s in sets)
    if not days:
        return 0

    longest = 1
    running = 1
    for previous, current in zip(days, days[1:]):
        if (current - previous).days == 1:
            running += 1
            longest = max(longest, running)
        else:
            running = 1

    return longest


def calculate_total_workouts(sets: Sequence[WorkoutSet]) -> int:
    """Number of distinct days with at least one set."""
    return len({day_key(s.performed_at) for s in sets})


def calculate_streak_stats(sets: Sequence[WorkoutSet], now: datetime) -> StreakStats:
    """Current, longest and total-workout figures in one record."""
    return StreakStats(
        current_streak=calculate_current_streak(sets, now),
        longest_streak=calculate_longest_streak(sets),
        total_workouts=calculate_total_workouts(sets),
    )
