"""Validation of habit record submissions."""

import logging
from collections.abc import Mapping

from pydantic import BaseModel, TypeAdapter, ValidationError

from habit_tracker.domain.dates import DEFAULT_LOCALE
from habit_tracker.domain.habits import HabitConfig, HabitType, builtin_type
from habit_tracker.domain.validation import (
    ExerciseSubmission,
    Number,
    NutritionSubmission,
    SleepSubmission,
    ValidationResult,
)

_logger = logging.getLogger(__name__)

_SUBMISSION_MODELS: dict[HabitType, type[BaseModel]] = {
    HabitType.EXERCISE: ExerciseSubmission,
    HabitType.SLEEP: SleepSubmission,
    HabitType.NUTRITION: NutritionSubmission,
}

_NUMBER = TypeAdapter(Number)

_FIELD_MESSAGES: dict[str, dict[HabitType, dict[str, str]]] = {
    "es": {
        HabitType.EXERCISE: {
            "duration": "La duración debe estar entre 1 y 480 minutos",
            "calories": "Las calorías deben estar entre 1 y 2000",
            "intensity": "La intensidad debe estar entre 1 y 3",
            "exercises": "Los ejercicios no pueden ser negativos",
        },
        HabitType.SLEEP: {
            "duration": "La duración debe estar entre 1 y 24 horas",
            "quality": "La calidad debe estar entre 1 y 10",
        },
        HabitType.NUTRITION: {
            "calories": "Las calorías deben estar entre 1 y 5000",
            "water": "Los vasos de agua deben estar entre 0 y 20",
            "meals": "Las comidas deben estar entre 0 y 10",
            "protein": "La proteína debe estar entre 0 y 300 gramos",
        },
    },
    "en": {
        HabitType.EXERCISE: {
            "duration": "duration must be between 1 and 480 minutes",
            "calories": "calories must be between 1 and 2000",
            "intensity": "intensity must be between 1 and 3",
            "exercises": "exercises must be zero or more",
        },
        HabitType.SLEEP: {
            "duration": "duration must be between 1 and 24 hours",
            "quality": "quality must be between 1 and 10",
        },
        HabitType.NUTRITION: {
            "calories": "calories must be between 1 and 5000",
            "water": "water must be between 0 and 20 glasses",
            "meals": "meals must be between 0 and 10",
            "protein": "protein must be between 0 and 300 grams",
        },
    },
}

_REQUIRED_MESSAGES = {
    "es": {
        "type": "El tipo de ejercicio es requerido",
        "bedtime": "La hora de dormir es requerida",
        "wakeupTime": "La hora de despertar es requerida",
    },
    "en": {},
}

_GENERIC_MESSAGES = {
    "es": {
        "required": "{field} es requerido",
        "number": "{field} debe ser un número",
        "unknown_habit": "Hábito desconocido: {field}",
    },
    "en": {
        "required": "{field} is required",
        "number": "{field} must be a number",
        "unknown_habit": "Unknown habit: {field}",
    },
}

_REQUIRED_ERRORS = {"missing", "string_too_short"}
_NUMBER_ERRORS = {"float_parsing", "float_type", "value_error"}


def validate(
    habit_id: str,
    data: Mapping[str, object],
    config: HabitConfig | None = None,
    locale: str = DEFAULT_LOCALE,
) -> ValidationResult:
    """Validate submitted fields for a habit.

    Every field is checked; the result carries one message per invalid
    field, in the locale's language. Empty strings and None count as "not
    supplied". Custom habits only require their daily target metrics to be
    numbers when a config is given.
    """
    language = _language(locale)
    cleaned = {
        key: value for key, value in data.items() if value is not None and value != ""
    }
    habit_type = builtin_type(habit_id)
    if habit_type is None:
        return _validate_custom(cleaned, config, language)

    model = _SUBMISSION_MODELS[habit_type]
    try:
        parsed = model.model_validate(cleaned)
    except ValidationError as exc:
        errors = _collect_errors(habit_type, exc, language)
        _logger.info(
            "Rejected %s submission: fields=%s", habit_type, sorted(errors)
        )
        return ValidationResult(is_valid=False, errors=errors)

    dumped = parsed.model_dump()
    normalized = {key: dumped[key] for key in cleaned if key in dumped}
    return ValidationResult(is_valid=True, data=normalized)


def unknown_habit(habit_id: str, locale: str = DEFAULT_LOCALE) -> ValidationResult:
    """Return the rejection for a habit id the catalog does not know."""
    message = _GENERIC_MESSAGES[_language(locale)]["unknown_habit"]
    return ValidationResult(
        is_valid=False, errors={"habit": message.format(field=habit_id)}
    )


def _validate_custom(
    cleaned: dict[str, object], config: HabitConfig | None, language: str
) -> ValidationResult:
    if config is None:
        return ValidationResult(is_valid=True, data=cleaned)
    normalized = dict(cleaned)
    errors: dict[str, str] = {}
    for metric in config.targets.daily:
        if metric not in cleaned:
            continue
        try:
            normalized[metric] = _NUMBER.validate_python(cleaned[metric])
        except ValidationError:
            errors[metric] = _GENERIC_MESSAGES[language]["number"].format(
                field=metric
            )
    if errors:
        _logger.info("Rejected %s submission: fields=%s", config.id, sorted(errors))
        return ValidationResult(is_valid=False, errors=errors)
    return ValidationResult(is_valid=True, data=normalized)


def _collect_errors(
    habit_type: HabitType, exc: ValidationError, language: str
) -> dict[str, str]:
    messages = _FIELD_MESSAGES[language][habit_type]
    generic = _GENERIC_MESSAGES[language]
    errors: dict[str, str] = {}
    for error in exc.errors():
        if not error["loc"]:
            continue
        field_name = str(error["loc"][0])
        if field_name in errors:
            continue
        if error["type"] in _REQUIRED_ERRORS:
            errors[field_name] = _REQUIRED_MESSAGES[language].get(
                field_name, generic["required"].format(field=field_name)
            )
        elif error["type"] in _NUMBER_ERRORS:
            errors[field_name] = generic["number"].format(field=field_name)
        elif field_name in messages:
            errors[field_name] = messages[field_name]
        else:
            errors[field_name] = f"{field_name}: {error['msg']}"
    return errors


def _language(locale: str) -> str:
    language = locale.split("-")[0].split("_")[0].lower()
    return language if language in _FIELD_MESSAGES else "en"
