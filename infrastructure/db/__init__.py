"""
Infrastructure Database Layer.

This package provides Supabase-backed implementations of the repository
interfaces defined in application.ports. These implementations are injected
into the InsightsService for clean separation of concerns and testability.

Usage:
    from supabase import create_client
    from infrastructure.db import SupabaseSetsRepository, SupabaseExercisesRepository

    # Create Supabase client
    client = create_client(SUPABASE_URL, SUPABASE_KEY)

    # Instantiate repositories with injected client
    sets_repo = SupabaseSetsRepository(client)
    exercises_repo = SupabaseExercisesRepository(client)
"""

from infrastructure.db.exercises_repository import SupabaseExercisesRepository
from infrastructure.db.sets_repository import SupabaseSetsRepository

__all__ = [
    "SupabaseExercisesRepository",
    "SupabaseSetsRepository",
]
