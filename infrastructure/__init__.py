"""
Infrastructure Layer for the workout insight engine.

This package contains concrete implementations of repository interfaces:
- db/: Supabase database implementations
"""

# Re-export database repositories for convenient access
from infrastructure.db import (
    SupabaseExercisesRepository,
    SupabaseSetsRepository,
)

__all__ = [
    "SupabaseExercisesRepository",
    "SupabaseSetsRepository",
]
