"""
Muscle Group Mapping.

Maps exercise names to the muscle groups they train, for recovery tracking
and training balance analysis.

Matching strategy:
1. Normalize input (strip, uppercase)
2. Exact match against the keyword table
3. Partial match: the longest keyword contained in the name wins
   (e.g., "BARBELL BENCH PRESS" matches "BENCH PRESS" before "BENCH" or "PRESS")
4. ["Other"] if nothing matches
"""

from typing import Dict, List, Tuple

from domain.models import MuscleGroup


CHEST = MuscleGroup.CHEST
BACK = MuscleGroup.BACK
SHOULDERS = MuscleGroup.SHOULDERS
BICEPS = MuscleGroup.BICEPS
TRICEPS = MuscleGroup.TRICEPS
QUADS = MuscleGroup.QUADS
HAMSTRINGS = MuscleGroup.HAMSTRINGS
GLUTES = MuscleGroup.GLUTES
CALVES = MuscleGroup.CALVES
CORE = MuscleGroup.CORE


# Keys are uppercase exercise names or keywords. Compound movements list
# every group they train.
EXERCISE_MUSCLE_MAP: Dict[str, Tuple[MuscleGroup, ...]] = {
    # Push (Chest, Shoulders, Triceps)
    "BENCH PRESS": (CHEST, TRICEPS),
    "BENCH": (CHEST, TRICEPS),
    "PUSH UP": (CHEST, TRICEPS),
    "PUSHUP": (CHEST, TRICEPS),
    "PUSH-UP": (CHEST, TRICEPS),
    "OVERHEAD PRESS": (SHOULDERS, TRICEPS),
    "SHOULDER PRESS": (SHOULDERS, TRICEPS),
    "PRESS": (SHOULDERS, TRICEPS),  # generic press is overhead
    "DIP": (CHEST, TRICEPS),
    "CHEST FLY": (CHEST,),
    "FLY": (CHEST,),
    "INCLINE PRESS": (CHEST, TRICEPS),
    "DECLINE PRESS": (CHEST, TRICEPS),
    # Pull (Back, Biceps)
    "PULL UP": (BACK, BICEPS),
    "PULLUP": (BACK, BICEPS),
    "PULL-UP": (BACK, BICEPS),
    "CHIN UP": (BACK, BICEPS),
    "CHINUP": (BACK, BICEPS),
    "CHIN-UP": (BACK, BICEPS),
    "ROW": (BACK, BICEPS),
    "DEADLIFT": (BACK, HAMSTRINGS, GLUTES),
    "LAT PULLDOWN": (BACK, BICEPS),
    "PULLDOWN": (BACK, BICEPS),
    "FACE PULL": (BACK, SHOULDERS),
    # Legs
    "SQUAT": (QUADS, GLUTES),
    "LEG PRESS": (QUADS, GLUTES),
    "LUNGE": (QUADS, GLUTES),
    "LEG CURL": (HAMSTRINGS,),
    "LEG EXTENSION": (QUADS,),
    "CALF RAISE": (CALVES,),
    "HIP THRUST": (GLUTES,),
    "ROMANIAN DEADLIFT": (HAMSTRINGS, GLUTES),
    "RDL": (HAMSTRINGS, GLUTES),
    "GOOD MORNING": (HAMSTRINGS, BACK),
    # Core
    "PLANK": (CORE,),
    "CRUNCH": (CORE,),
    "SIT UP": (CORE,),
    "SITUP": (CORE,),
    "SIT-UP": (CORE,),
    "AB WHEEL": (CORE,),
    "HANGING LEG RAISE": (CORE,),
    "LEG RAISE": (CORE,),
    # Arms (isolation)
    "CURL": (BICEPS,),
    "BICEP CURL": (BICEPS,),
    "HAMMER CURL": (BICEPS,),
    "TRICEP": (TRICEPS,),
    "TRICEP EXTENSION": (TRICEPS,),
    "SKULL CRUSHER": (TRICEPS,),
    "OVERHEAD EXTENSION": (TRICEPS,),
    # Shoulders (isolation)
    "LATERAL RAISE": (SHOULDERS,),
    "FRONT RAISE": (SHOULDERS,),
    "REAR DELT": (SHOULDERS,),
    "SHRUG": (BACK,),  # traps
}

# Longest keywords first; equal lengths keep table order
_KEYWORDS_BY_LENGTH: List[str] = sorted(EXERCISE_MUSCLE_MAP, key=len, reverse=True)


def get_muscle_groups(exercise_name: str) -> List[MuscleGroup]:
    """
    Get the muscle groups an exercise trains.

    Case-insensitive, never raises. For example:
    - "Bench Press" -> exact match -> [Chest, Triceps]
    - "Barbell Bench Press" -> partial match on "BENCH PRESS"
    - "Jumping Jacks" -> [Other]

    Args:
        exercise_name: Exercise name in any casing

    Returns:
        A new list of muscle groups for the exercise
    """
    normalized = (exercise_name or "").strip().upper()

    if normalized in EXERCISE_MUSCLE_MAP:
        return list(EXERCISE_MUSCLE_MAP[normalized])

    if normalized:
        for keyword in _KEYWORDS_BY_LENGTH:
            if keyword in normalized:
                return list(EXERCISE_MUSCLE_MAP[keyword])

    return [MuscleGroup.OTHER]


def get_all_muscle_groups() -> List[MuscleGroup]:
    """All supported muscle groups, including Other."""
    return list(MuscleGroup)
