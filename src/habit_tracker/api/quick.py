"""Quick action endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, HTTPException, Request
from pydantic import BaseModel

if TYPE_CHECKING:
    from habit_tracker.containers import AppContainer
    from habit_tracker.domain.validation import ValidationResult

router = APIRouter(prefix="/quick", tags=["quick"])


class QuickWorkout(BaseModel):
    type: str
    duration: float


class LastNight(BaseModel):
    bedtime: str
    wakeup_time: str
    quality: float


class QuickMeal(BaseModel):
    calories: float
    protein: float = 0


def _respond(result: ValidationResult) -> dict[str, object]:
    if not result.is_valid:
        raise HTTPException(status_code=422, detail={"errors": result.errors})
    return {"status": "ok", "data": result.data}


@router.post("/workout")
async def quick_workout(body: QuickWorkout, request: Request) -> dict[str, object]:
    """Log a workout with estimated calories."""
    container: AppContainer = request.app.state.container
    return _respond(
        container.quick_action_service.add_quick_workout(body.type, body.duration)
    )


@router.post("/sleep")
async def last_night(body: LastNight, request: Request) -> dict[str, object]:
    """Log last night's sleep."""
    container: AppContainer = request.app.state.container
    return _respond(
        container.quick_action_service.record_last_night(
            body.bedtime, body.wakeup_time, body.quality
        )
    )


@router.post("/water")
async def water_glass(request: Request) -> dict[str, object]:
    """Add a glass of water to today's record."""
    container: AppContainer = request.app.state.container
    return _respond(container.quick_action_service.add_water_glass())


@router.post("/meal")
async def meal(body: QuickMeal, request: Request) -> dict[str, object]:
    """Add a meal to today's totals."""
    container: AppContainer = request.app.state.container
    quick = container.quick_action_service
    return _respond(quick.add_meal(body.calories, body.protein))
