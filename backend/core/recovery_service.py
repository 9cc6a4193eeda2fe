"""
Recovery Analytics.

Tracks recovery status for each muscle group based on:
- Days since the group was last trained
- Volume and frequency over the trailing 7 days
- A four-bucket recovery classification
"""

import logging
from dataclasses import dataclass, field
from datetime import datetime, timedelta
from typing import Dict, List, Optional, Sequence, Set

from backend.core.muscle_groups import get_muscle_groups
from backend.utils.dates import day_key, ensure_utc, whole_days_between
from domain.models import (
    Exercise,
    MuscleGroup,
    RecoveryRecord,
    RecoveryStatus,
    TRACKED_MUSCLE_GROUPS,
    WorkoutSet,
)

logger = logging.getLogger(__name__)

# Sentinel for "never trained"; consumers depend on this exact value
NEVER_TRAINED_DAYS = 999

RECENT_WINDOW = timedelta(days=7)


def classify_recovery(days_since: int) -> RecoveryStatus:
    """
    Classify recovery from days since a muscle group was last trained.

    Args:
        days_since: Whole days since last trained (999 if never)

    Returns:
        fresh (0-2), recovering (3-4), ready (5-7) or overdue (8+)
    """
    if days_since <= 2:
        return RecoveryStatus.FRESH
    if days_since <= 4:
        return RecoveryStatus.RECOVERING
    if days_since <= 7:
        return RecoveryStatus.READY
    return RecoveryStatus.OVERDUE


@dataclass
class _GroupMetrics:
    last_trained: Optional[datetime] = None
    volume_last_7_days: float = 0
    days_last_7_days: Set = field(default_factory=set)


def _never_trained(group: MuscleGroup) -> RecoveryRecord:
    return RecoveryRecord(
        muscle_group=group,
        last_trained_date=None,
        days_since=NEVER_TRAINED_DAYS,
        volume_last_7_days=0,
        frequency_last_7_days=0,
        status=RecoveryStatus.OVERDUE,
    )


def calculate_recovery_status(
    sets: Sequence[WorkoutSet],
    exercises: Sequence[Exercise],
    now: datetime,
) -> List[RecoveryRecord]:
    """
    Get recovery status for every tracked muscle group.

    Deleted exercises are included so history stays accurate. Sets whose
    exercise is unknown are skipped.

    Args:
        sets: All sets for the user (any order)
        exercises: All exercises for the user, including deleted ones
        now: Reference instant

    Returns:
        One record per muscle group except Other, most overdue first
    """
    if not sets:
        return [_never_trained(group) for group in TRACKED_MUSCLE_GROUPS]

    now = ensure_utc(now)
    window_start = now - RECENT_WINDOW
    exercise_names: Dict[str, str] = {ex.id: ex.name for ex in exercises}
    metrics: Dict[MuscleGroup, _GroupMetrics] = {
        group: _GroupMetrics() for group in TRACKED_MUSCLE_GROUPS
    }

    skipped = 0
    for s in sets:
        name = exercise_names.get(s.exercise_id)
        if name is None:
            skipped += 1
            continue

        for group in get_muscle_groups(name):
            if group is MuscleGroup.OTHER:
                continue
            m = metrics[group]

            if m.last_trained is None or s.performed_at > m.last_trained:
                m.last_trained = s.performed_at

            if s.performed_at >= window_start:
                m.volume_last_7_days += s.volume
                m.days_last_7_days.add(day_key(s.performed_at))

    if skipped:
        logger.debug(f"Skipped {skipped} sets with unknown exercises")

    records: List[RecoveryRecord] = []
    for group, m in metrics.items():
        if m.last_trained is None:
            records.append(_never_trained(group))
            continue

        days_since = whole_days_between(m.last_trained, now)
        records.append(RecoveryRecord(
            muscle_group=group,
            last_trained_date=day_key(m.last_trained),
            days_since=days_since,
            volume_last_7_days=m.volume_last_7_days,
            frequency_last_7_days=len(m.days_last_7_days),
            status=classify_recovery(days_since),
        ))

    # Most rested / overdue first; ties keep muscle group order
    records.sort(key=lambda r: r.days_since, reverse=True)
    return records
