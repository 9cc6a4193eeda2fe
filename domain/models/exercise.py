"""
Exercise entity - a named movement a user logs sets against.

Exercises are soft-deleted only: sets that reference a deleted exercise stay
valid and still count toward historical aggregates.
"""

from datetime import datetime, timezone
from typing import Optional

from pydantic import AliasChoices, BaseModel, Field, field_validator


def _to_utc(v: datetime) -> datetime:
    if v.tzinfo is None:
        return v.replace(tzinfo=timezone.utc)
    return v.astimezone(timezone.utc)


def _from_epoch_millis(v):
    if isinstance(v, (int, float)) and not isinstance(v, bool):
        return datetime.fromtimestamp(v / 1000, tz=timezone.utc)
    return v


class Exercise(BaseModel):
    """
    A user's exercise.

    Examples:
        >>> ex = Exercise(id="e1", user_id="u1", name="  Bench Press ")
        >>> ex.name
        'Bench Press'
        >>> ex.is_active
        True
    """

    id: str = Field(
        ...,
        min_length=1,
        validation_alias=AliasChoices("id", "_id"),
        description="Unique exercise identifier",
    )
    user_id: str = Field(
        ...,
        min_length=1,
        validation_alias=AliasChoices("user_id", "userId"),
        description="Owning user",
    )
    name: str = Field(..., description="Display name, non-empty after stripping")
    created_at: Optional[datetime] = Field(
        default=None,
        validation_alias=AliasChoices("created_at", "createdAt"),
        description="When the exercise was created",
    )
    deleted_at: Optional[datetime] = Field(
        default=None,
        validation_alias=AliasChoices("deleted_at", "deletedAt"),
        description="Soft-delete timestamp; None while the exercise is active",
    )

    model_config = {"frozen": True}

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        """Strip whitespace; stored names of any length are kept."""
        v = v.strip()
        if not v:
            raise ValueError("Exercise name must not be empty")
        return v

    @field_validator("created_at", "deleted_at", mode="before")
    @classmethod
    def parse_epoch_millis(cls, v):
        """Accept epoch milliseconds as exported by the logging app."""
        return _from_epoch_millis(v)

    @field_validator("created_at", "deleted_at")
    @classmethod
    def ensure_utc(cls, v: Optional[datetime]) -> Optional[datetime]:
        if v is None:
            return None
        return _to_utc(v)

    @property
    def is_active(self) -> bool:
        """True unless the exercise has been soft-deleted."""
        return self.deleted_at is None
