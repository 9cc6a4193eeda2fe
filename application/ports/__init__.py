"""
Repository Interfaces (Ports) for the workout insight engine.

This package defines abstract interfaces that decouple the analyzers from
infrastructure (database, export files). Implementations are provided
in the infrastructure layer.

Architecture follows the Ports & Adapters (Hexagonal) pattern:
- Ports: Abstract interfaces defined here (what the insight engine needs)
- Adapters: Concrete implementations in infrastructure/ (how it's provided)

Usage:
    from application.ports import SetsRepository, ExercisesRepository

    class InsightsService:
        def __init__(self, sets_repo: SetsRepository, exercises_repo: ExercisesRepository):
            self._sets_repo = sets_repo
            self._exercises_repo = exercises_repo
"""

from application.ports.exercises_repository import ExercisesRepository
from application.ports.sets_repository import SetsRepository

__all__ = [
    "ExercisesRepository",
    "SetsRepository",
]
