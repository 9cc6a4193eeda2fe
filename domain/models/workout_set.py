"""
WorkoutSet value object - one logged performance of an exercise.

A set records reps, an optional weight with its unit, and the instant it was
performed. Sets are immutable once logged.
"""

import math
from datetime import datetime, timezone
from typing import Literal, Optional

from pydantic import AliasChoices, BaseModel, Field, field_validator, model_validator


WeightUnit = Literal["lbs", "kg"]

# 1 kilogram = 2.20462 pounds
LBS_PER_KG = 2.20462


def convert_weight(weight: float, from_unit: str, to_unit: str) -> float:
    """
    Convert a weight value between pounds and kilograms.

    Unknown units are returned unchanged.

    Args:
        weight: Weight value to convert
        from_unit: Source unit ("lbs" or "kg")
        to_unit: Target unit ("lbs" or "kg")

    Returns:
        Converted weight value
    """
    if from_unit == to_unit:
        return weight
    if from_unit == "lbs" and to_unit == "kg":
        return weight / LBS_PER_KG
    if from_unit == "kg" and to_unit == "lbs":
        return weight * LBS_PER_KG
    return weight


class WorkoutSet(BaseModel):
    """
    A single logged set.

    Volume for a set is always ``reps * (weight or 0)``: bodyweight sets
    contribute zero volume but still count toward reps and frequency.

    Examples:
        >>> s = WorkoutSet(
        ...     id="s1", user_id="u1", exercise_id="e1",
        ...     reps=5, weight=225, unit="lbs",
        ...     performed_at=datetime(2024, 1, 1, tzinfo=timezone.utc),
        ... )
        >>> s.volume
        1125.0
    """

    id: str = Field(
        ...,
        min_length=1,
        validation_alias=AliasChoices("id", "_id"),
        description="Unique set identifier",
    )
    user_id: str = Field(
        ...,
        min_length=1,
        validation_alias=AliasChoices("user_id", "userId"),
        description="Owning user",
    )
    exercise_id: str = Field(
        ...,
        min_length=1,
        validation_alias=AliasChoices("exercise_id", "exerciseId"),
        description="Exercise this set belongs to",
    )
    reps: int = Field(..., description="Repetitions completed (positive)")
    weight: Optional[float] = Field(
        default=None,
        description="Weight lifted; None for bodyweight sets",
    )
    unit: Optional[WeightUnit] = Field(
        default=None,
        description="Weight unit, required when weight is present",
    )
    performed_at: datetime = Field(
        ...,
        validation_alias=AliasChoices("performed_at", "performedAt"),
        description="When the set was performed (UTC)",
    )

    model_config = {"frozen": True}

    @field_validator("reps", mode="before")
    @classmethod
    def validate_reps(cls, v):
        """Reps must be a positive whole number."""
        if isinstance(v, bool) or not isinstance(v, (int, float)):
            raise ValueError("Reps must be a positive whole number")
        if isinstance(v, float) and not v.is_integer():
            raise ValueError("Reps must be a positive whole number")
        v = int(v)
        if v <= 0:
            raise ValueError("Reps must be a positive whole number")
        return v

    @field_validator("weight")
    @classmethod
    def validate_weight(cls, v: Optional[float]) -> Optional[float]:
        """Weight must be finite and positive, rounded to 2 places."""
        if v is None:
            return None
        if not math.isfinite(v) or v <= 0:
            raise ValueError("Weight must be a positive finite number")
        return round(v, 2)

    @field_validator("performed_at", mode="before")
    @classmethod
    def parse_epoch_millis(cls, v):
        """Accept epoch milliseconds as exported by the logging app."""
        if isinstance(v, (int, float)) and not isinstance(v, bool):
            return datetime.fromtimestamp(v / 1000, tz=timezone.utc)
        return v

    @field_validator("performed_at")
    @classmethod
    def ensure_utc(cls, v: datetime) -> datetime:
        """Naive timestamps are taken as UTC; aware ones are normalised to UTC."""
        if v.tzinfo is None:
            return v.replace(tzinfo=timezone.utc)
        return v.astimezone(timezone.utc)

    @model_validator(mode="before")
    @classmethod
    def drop_unit_without_weight(cls, data):
        """A unit carries no meaning on a bodyweight set."""
        if isinstance(data, dict) and data.get("weight") is None and data.get("unit") is not None:
            data = {**data, "unit": None}
        return data

    @model_validator(mode="after")
    def validate_unit(self) -> "WorkoutSet":
        """A weighted set needs a unit."""
        if self.weight is not None and self.unit is None:
            raise ValueError("Unit must be 'lbs' or 'kg' when weight is provided")
        return self

    @property
    def volume(self) -> float:
        """Total work for the set: reps x weight (0 for bodyweight)."""
        return self.reps * (self.weight or 0)

    def weight_in(self, unit: str) -> Optional[float]:
        """
        Get the set's weight converted to the given unit.

        Args:
            unit: Target unit ("lbs" or "kg")

        Returns:
            Converted weight, or None for bodyweight sets
        """
        if self.weight is None:
            return None
        return convert_weight(self.weight, self.unit or "lbs", unit)
