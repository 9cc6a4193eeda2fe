"""
Personal Record (PR) Detection.

Decides whether a set is a new personal record for its exercise, and which
kind: heaviest weight, most volume (weight x reps) in a single set, or most
reps. Also replays an exercise's full history to mark which sets were PRs
at the time they were logged.
"""

from typing import Dict, List, Optional, Sequence

from domain.models import PRResult, PRType, WorkoutSet


def check_for_pr(
    current: WorkoutSet,
    previous_sets: Sequence[WorkoutSet],
) -> Optional[PRResult]:
    """
    Check if a set is a new personal record.

    Priority is weight > volume > reps: the first metric that strictly
    beats its previous best wins. Equal values never count.

    Args:
        current: The set to check
        previous_sets: Earlier sets for the same exercise and user,
            excluding ``current``, in any order

    Returns:
        PRResult if a record was set, None otherwise
    """
    current_weight = current.weight or 0
    current_reps = current.reps
    current_volume = current_weight * current_reps

    # First set for an exercise is always a PR against a zero baseline
    if not previous_sets:
        if current_weight > 0:
            return PRResult(type=PRType.WEIGHT, current_value=current_weight, previous_value=0)
        if current_reps > 0:
            return PRResult(type=PRType.REPS, current_value=current_reps, previous_value=0)
        return PRResult(type=PRType.VOLUME, current_value=current_volume, previous_value=0)

    max_previous_weight = max(s.weight or 0 for s in previous_sets)
    max_previous_reps = max(s.reps for s in previous_sets)
    max_previous_volume = max((s.weight or 0) * s.reps for s in previous_sets)

    if current_weight > 0 and current_weight > max_previous_weight:
        return PRResult(
            type=PRType.WEIGHT,
            current_value=current_weight,
            previous_value=max_previous_weight,
        )

    if current_volume > 0 and current_volume > max_previous_volume:
        return PRResult(
            type=PRType.VOLUME,
            current_value=current_volume,
            previous_value=max_previous_volume,
        )

    if current_reps > max_previous_reps:
        return PRResult(
            type=PRType.REPS,
            current_value=current_reps,
            previous_value=max_previous_reps,
        )

    return None


def detect_historical_prs(sets: Sequence[WorkoutSet]) -> Dict[str, PRType]:
    """
    Determine which sets in an exercise's history were PRs when logged.

    Each set is compared against every set performed before it. Sets with
    identical timestamps keep their input order.

    Args:
        sets: All sets for one exercise, in any order

    Returns:
        Mapping of set ID to PR type, for PR sets only

    Example:
        Sets of 300x8, then 315x10, then 315x12 (oldest first) give
        {"set1": weight, "set2": weight, "set3": volume}.
    """
    pr_map: Dict[str, PRType] = {}
    oldest_first: List[WorkoutSet] = sorted(sets, key=lambda s: s.performed_at)

    for index, current in enumerate(oldest_first):
        result = check_for_pr(current, oldest_first[:index])
        if result is not None:
            pr_map[current.id] = result.type

    return pr_map
