"""Habit, record and progress endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from fastapi import APIRouter, Body, HTTPException, Request, status

from habit_tracker.api.models import (
    CustomHabitCreate,
    GoalsUpdate,
    HabitOrder,
    TargetsUpdate,
)
from habit_tracker.api.serializers import (
    completion_payload,
    habit_payload,
    progress_payload,
    weekly_payload,
)
from habit_tracker.domain.dates import to_date_key

if TYPE_CHECKING:
    from habit_tracker.containers import AppContainer
    from habit_tracker.domain.validation import ValidationResult

router = APIRouter(prefix="/habits", tags=["habits"])
UNPROCESSABLE = 422


def _container(request: Request) -> AppContainer:
    return request.app.state.container


def _date_key(value: str | None) -> str | None:
    if value is None:
        return None
    try:
        return to_date_key(value)
    except ValueError as exc:
        raise HTTPException(status_code=UNPROCESSABLE, detail=str(exc)) from exc


def _not_found(habit_id: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND, detail=f"Unknown habit: {habit_id}"
    )


def _require_habit(request: Request, habit_id: str) -> AppContainer:
    container = _container(request)
    if container.habit_catalog.get_habit(habit_id) is None:
        raise _not_found(habit_id)
    return container


def _validation_response(result: ValidationResult) -> dict[str, object]:
    if not result.is_valid:
        raise HTTPException(
            status_code=UNPROCESSABLE,
            detail={"errors": result.errors},
        )
    return {"status": "ok", "data": result.data}


@router.get("")
async def list_habits(
    request: Request, active_only: bool = False
) -> dict[str, object]:
    """Return habits in display order."""
    catalog = _container(request).habit_catalog
    if active_only:
        habits = catalog.active_ordered_habits()
    else:
        habits = catalog.ordered_habits()
    return {"habits": [habit_payload(habit) for habit in habits]}


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_habit(body: CustomHabitCreate, request: Request) -> dict[str, object]:
    """Register a custom habit."""
    catalog = _container(request).habit_catalog
    try:
        habit = catalog.add_custom_habit(
            name=body.name,
            icon=body.icon,
            color=body.color,
            goals=body.goals,
            daily_targets=body.daily_targets,
            weekly_targets=body.weekly_targets,
            aggregation=body.aggregation,
            habit_id=body.id,
        )
    except ValueError as exc:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT, detail=str(exc)
        ) from exc
    return habit_payload(habit)


@router.put("/order")
async def reorder_habits(body: HabitOrder, request: Request) -> dict[str, object]:
    """Set the display order of habits."""
    habits = _container(request).habit_catalog.reorder(body.order)
    return {"habits": [habit_payload(habit) for habit in habits]}


@router.get("/{habit_id}")
async def get_habit(habit_id: str, request: Request) -> dict[str, object]:
    """Return one habit's configuration."""
    habit = _container(request).habit_catalog.get_habit(habit_id)
    if habit is None:
        raise _not_found(habit_id)
    return habit_payload(habit)


@router.delete("/{habit_id}")
async def remove_habit(habit_id: str, request: Request) -> dict[str, str]:
    """Remove a habit from the catalog."""
    try:
        _container(request).habit_catalog.remove_habit(habit_id)
    except KeyError as exc:
        raise _not_found(habit_id) from exc
    return {"status": "ok"}


@router.patch("/{habit_id}/goals")
async def update_goals(
    habit_id: str, body: GoalsUpdate, request: Request
) -> dict[str, object]:
    """Merge goal values into a habit."""
    try:
        habit = _container(request).habit_catalog.update_goals(habit_id, body.goals)
    except KeyError as exc:
        raise _not_found(habit_id) from exc
    return habit_payload(habit)


@router.patch("/{habit_id}/targets")
async def update_targets(
    habit_id: str, body: TargetsUpdate, request: Request
) -> dict[str, object]:
    """Merge daily and weekly targets into a habit."""
    try:
        habit = _container(request).habit_catalog.update_targets(
            habit_id, daily=body.daily, weekly=body.weekly
        )
    except KeyError as exc:
        raise _not_found(habit_id) from exc
    return habit_payload(habit)


@router.post("/{habit_id}/toggle")
async def toggle_habit(habit_id: str, request: Request) -> dict[str, object]:
    """Flip a habit's active flag."""
    try:
        habit = _container(request).habit_catalog.toggle_active(habit_id)
    except KeyError as exc:
        raise _not_found(habit_id) from exc
    return habit_payload(habit)


@router.get("/{habit_id}/records")
async def list_records(
    habit_id: str, request: Request, start: str, end: str
) -> dict[str, object]:
    """Return a habit's records in an inclusive date range."""
    records = _container(request).tracker_service.get_records_in_range(
        habit_id, _date_key(start), _date_key(end)
    )
    return {"records": records}


@router.get("/{habit_id}/records/{day}")
async def get_record(habit_id: str, day: str, request: Request) -> dict[str, object]:
    """Return a habit's record for one date."""
    date_key = _date_key(day)
    record = _container(request).tracker_service.get_record(habit_id, date_key)
    if record is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
    return record.flatten(date_key)


@router.put("/{habit_id}/records/{day}")
async def submit_record(
    habit_id: str,
    day: str,
    request: Request,
    fields: dict[str, Any] = Body(...),  # noqa: B008
) -> dict[str, object]:
    """Validate and store the day's record, replacing any existing one."""
    container = _require_habit(request, habit_id)
    result = container.tracker_service.submit_record(
        habit_id, fields, _date_key(day)
    )
    return _validation_response(result)


@router.patch("/{habit_id}/records/{day}")
async def update_record(
    habit_id: str,
    day: str,
    request: Request,
    fields: dict[str, Any] = Body(...),  # noqa: B008
) -> dict[str, object]:
    """Merge fields into the day's record."""
    container = _require_habit(request, habit_id)
    result = container.tracker_service.update_record(
        habit_id, fields, _date_key(day)
    )
    return _validation_response(result)


@router.delete("/{habit_id}/records/{day}")
async def delete_record(habit_id: str, day: str, request: Request) -> dict[str, str]:
    """Delete a habit's record for one date."""
    deleted = _container(request).tracker_service.delete_record(
        habit_id, _date_key(day)
    )
    if not deleted:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
    return {"status": "ok"}


@router.get("/{habit_id}/progress")
async def daily_progress(
    habit_id: str, request: Request, date: str | None = None
) -> dict[str, object]:
    """Return progress against daily targets for today or a given date."""
    progress = _container(request).tracker_service.get_daily_progress(
        habit_id, _date_key(date)
    )
    return progress_payload(progress)


@router.get("/{habit_id}/weekly")
async def weekly_view(habit_id: str, request: Request) -> dict[str, object]:
    """Return the seven-day summary ending today."""
    view = _container(request).tracker_service.get_weekly_view(habit_id)
    if view is None:
        raise _not_found(habit_id)
    return weekly_payload(view)


@router.get("/{habit_id}/completion")
async def completion(
    habit_id: str, request: Request, days: int = 7
) -> dict[str, object]:
    """Return completion stats for the trailing days."""
    if days < 1:
        raise HTTPException(
            status_code=UNPROCESSABLE,
            detail="days must be at least 1",
        )
    stats = _container(request).tracker_service.get_completion_stats(habit_id, days)
    return completion_payload(stats)
