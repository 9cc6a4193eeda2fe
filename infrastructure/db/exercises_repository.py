"""
Supabase implementation of ExercisesRepository.

Reads the user's exercises from the ``exercises`` table. Exercises are
soft-deleted through the ``deleted_at`` column. Listing reads every page,
so users with long histories are not truncated at the response row cap.
"""
import logging
from typing import Any, Dict, List, Optional

from pydantic import ValidationError
from supabase import Client

from domain.models import Exercise
from infrastructure.db.pagination import fetch_all_rows

logger = logging.getLogger(__name__)

EXERCISES_TABLE = "exercises"
EXERCISE_COLUMNS = "id, user_id, name, created_at, deleted_at"


class SupabaseExercisesRepository:
    """
    Supabase implementation of ExercisesRepository protocol.

    Every query is scoped to the owning user.
    """

    def __init__(self, client: Client):
        """
        Initialize with Supabase client.

        Args:
            client: Supabase client instance (injected, not global)
        """
        self._client = client

    def list_for_user(
        self,
        user_id: str,
        *,
        include_deleted: bool = False,
    ) -> List[Exercise]:
        """Get all exercises for a user, active only unless asked otherwise."""

        def build_query():
            query = self._client.table(EXERCISES_TABLE) \
                .select(EXERCISE_COLUMNS) \
                .eq("user_id", user_id)

            if not include_deleted:
                query = query.is_("deleted_at", "null")

            return query.order("name").order("id")

        try:
            rows = fetch_all_rows(build_query)
        except Exception as e:
            logger.exception(f"Error fetching exercises for user {user_id}: {e}")
            raise

        return [ex for ex in (_row_to_exercise(row) for row in rows) if ex]

    def get_by_id(self, user_id: str, exercise_id: str) -> Optional[Exercise]:
        """Get one of the user's exercises by ID, including deleted ones."""
        try:
            result = self._client.table(EXERCISES_TABLE) \
                .select(EXERCISE_COLUMNS) \
                .eq("user_id", user_id) \
                .eq("id", exercise_id) \
                .limit(1) \
                .execute()
        except Exception as e:
            logger.exception(f"Error fetching exercise {exercise_id}: {e}")
            raise

        if not result.data:
            return None
        return _row_to_exercise(result.data[0])


def _row_to_exercise(row: Dict[str, Any]) -> Optional[Exercise]:
    try:
        return Exercise.model_validate(row)
    except ValidationError as e:
        logger.warning(f"Skipping malformed exercise row {row.get('id')}: {e}")
        return None
