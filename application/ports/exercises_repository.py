"""
Exercises Repository Interface (Port).

This module defines the abstract interface for querying a user's exercises.
Implementations may use Supabase or other backends.
"""
from typing import List, Optional, Protocol

from domain.models import Exercise


class ExercisesRepository(Protocol):
    """
    Abstract interface for reading a user's exercises.

    Exercises are soft-deleted, so callers choose whether deleted ones are
    included: historical aggregates want them, suggestions do not.
    """

    def list_for_user(
        self,
        user_id: str,
        *,
        include_deleted: bool = False,
    ) -> List[Exercise]:
        """
        Get all exercises for a user.

        Args:
            user_id: User ID
            include_deleted: Include soft-deleted exercises

        Returns:
            List of Exercise records
        """
        ...

    def get_by_id(self, user_id: str, exercise_id: str) -> Optional[Exercise]:
        """
        Get one of the user's exercises by ID, deleted or not.

        Args:
            user_id: User ID (ownership check)
            exercise_id: Exercise ID

        Returns:
            Exercise or None if not found or not owned by the user
        """
        ...
