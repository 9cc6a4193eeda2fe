"""
Supabase implementation of SetsRepository.

Reads the user's logged sets from the ``sets`` table. Rows that fail domain
validation are logged and skipped so one bad row cannot hide a user's
history; query failures are logged and re-raised to the caller. Results are
read page by page, so histories longer than the response row cap come back
complete.
"""
import logging
from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import ValidationError
from supabase import Client

from backend.utils.dates import ensure_utc
from domain.models import WorkoutSet
from infrastructure.db.pagination import fetch_all_rows

logger = logging.getLogger(__name__)

SETS_TABLE = "sets"
SET_COLUMNS = "id, user_id, exercise_id, reps, weight, unit, performed_at"


class SupabaseSetsRepository:
    """
    Supabase implementation of SetsRepository protocol.

    Sets are returned newest first, matching the ``(user_id, performed_at)``
    index the table is queried through.
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
        exercise_id: Optional[str] = None,
        start: Optional[datetime] = None,
        end: Optional[datetime] = None,
    ) -> List[WorkoutSet]:
        """Get sets for a user, optionally filtered by exercise and time range."""

        def build_query():
            query = self._client.table(SETS_TABLE) \
                .select(SET_COLUMNS) \
                .eq("user_id", user_id)

            if exercise_id is not None:
                query = query.eq("exercise_id", exercise_id)
            if start is not None:
                query = query.gte("performed_at", ensure_utc(start).isoformat())
            if end is not None:
                query = query.lte("performed_at", ensure_utc(end).isoformat())

            return query.order("performed_at", desc=True).order("id")

        try:
            rows = fetch_all_rows(build_query)
        except Exception as e:
            logger.exception(f"Error fetching sets for user {user_id}: {e}")
            raise

        return _rows_to_sets(rows)


def _rows_to_sets(rows: List[Dict[str, Any]]) -> List[WorkoutSet]:
    sets: List[WorkoutSet] = []
    for row in rows:
        try:
            sets.append(WorkoutSet.model_validate(row))
        except ValidationError as e:
            logger.warning(f"Skipping malformed set row {row.get('id')}: {e}")
    return sets
