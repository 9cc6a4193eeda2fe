"""
Sets Repository Interface (Port).

This module defines the abstract interface for querying a user's logged sets.
Used by the InsightsService to feed the analyzers; the insight engine never
writes through this port.
"""
from datetime import datetime
from typing import List, Optional, Protocol

from domain.models import WorkoutSet


class SetsRepository(Protocol):
    """
    Abstract interface for reading logged sets.

    Implementations may return sets in any order; the analyzers never rely
    on ordering.
    """

    def list_for_user(
        self,
        user_id: str,
        *,
        exercise_id: Optional[str] = None,
        start: Optional[datetime] = None,
        end: Optional[datetime] = None,
    ) -> List[WorkoutSet]:
        """
        Get sets for a user.

        Args:
            user_id: User ID
            exercise_id: Only return sets for this exercise
            start: Inclusive lower bound on performed_at
            end: Inclusive upper bound on performed_at

        Returns:
            List of WorkoutSet records
        """
        ...
