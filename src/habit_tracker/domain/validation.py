"""Submission models used to validate habit records."""

from dataclasses import dataclass, field
from typing import Annotated

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, StringConstraints


def _reject_bool(value: object) -> object:
    if isinstance(value, bool):
        raise ValueError("must be a number")
    return value


Number = Annotated[float, BeforeValidator(_reject_bool)]
RequiredText = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]


MAX_EXERCISE_CALORIES = 2000


class _Submission(BaseModel):
    model_config = ConfigDict(extra="allow")

    notes: str | None = None


class ExerciseSubmission(_Submission):
    """Exercise session fields."""

    type: RequiredText
    duration: Number = Field(ge=1, le=480)
    calories: Number | None = Field(default=None, ge=1, le=MAX_EXERCISE_CALORIES)
    intensity: Number | None = Field(default=None, ge=1, le=3)
    exercises: Number | None = Field(default=None, ge=0)


class SleepSubmission(_Submission):
    """Night of sleep fields."""

    bedtime: RequiredText
    wakeupTime: RequiredText  # noqa: N815
    duration: Number = Field(ge=1, le=24)
    quality: Number = Field(ge=1, le=10)


class NutritionSubmission(_Submission):
    """Daily nutrition fields; every metric is optional."""

    calories: Number | None = Field(default=None, ge=1, le=5000)
    water: Number | None = Field(default=None, ge=0, le=20)
    meals: Number | None = Field(default=None, ge=0, le=10)
    protein: Number | None = Field(default=None, ge=0, le=300)


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of validating a submission."""

    is_valid: bool
    errors: dict[str, str] = field(default_factory=dict)
    data: dict[str, object] = field(default_factory=dict)
