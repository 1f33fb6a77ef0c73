"""Training goal submitted from the mobile form."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class Distance(str, Enum):
    FIVE_K = "5k"
    TEN_K = "10k"
    HALF_MARATHON = "half_marathon"
    MARATHON = "marathon"
    OTHER = "OTHER"


class Level(str, Enum):
    BEGINNER = "beginner"
    OCCASIONAL = "occasional"
    REGULAR = "regular"
    CONFIRMED = "confirmed"
    EXPERT = "expert"


class Weekday(str, Enum):
    MONDAY = "monday"
    TUESDAY = "tuesday"
    WEDNESDAY = "wednesday"
    THURSDAY = "thursday"
    FRIDAY = "friday"
    SATURDAY = "saturday"
    SUNDAY = "sunday"


def normalize_language(tag: str | None) -> str:
    """Map any language tag to "fr" or "en" (fr, fr-FR, fr_CA -> fr; everything else -> en)."""
    if tag and tag.strip().lower().startswith("fr"):
        return "fr"
    return "en"


class GoalInput(BaseModel):
    """What the runner asked for. Built once per form submission and never mutated."""

    model_config = ConfigDict(frozen=True)

    distance: Distance
    custom_distance: str | None = Field(None, max_length=128, description="Required when distance is OTHER")
    target_time: str | None = Field(None, max_length=64, description="Free text, e.g. 1h45, 45min")
    weeks: int = Field(8, ge=4, le=16)
    sessions_per_week: int = Field(3, ge=2, le=7)
    # Count is not checked against sessions_per_week; the form only warns about a mismatch
    training_days: tuple[Weekday, ...] = Field(..., min_length=1, max_length=7)
    level: Level
    language: str = Field("fr", max_length=35)

    @field_validator("custom_distance", "target_time")
    @classmethod
    def _blank_to_none(cls, v: str | None) -> str | None:
        if v is None:
            return None
        v = v.strip()
        return v or None

    @field_validator("training_days")
    @classmethod
    def _dedupe_days(cls, v: tuple[Weekday, ...]) -> tuple[Weekday, ...]:
        return tuple(dict.fromkeys(v))

    @model_validator(mode="after")
    def _custom_distance_iff_other(self) -> "GoalInput":
        if self.distance is Distance.OTHER and not self.custom_distance:
            raise ValueError("custom_distance is required when distance is OTHER")
        if self.distance is not Distance.OTHER and self.custom_distance:
            raise ValueError("custom_distance is only allowed when distance is OTHER")
        return self

    @property
    def resolved_language(self) -> str:
        return normalize_language(self.language)
