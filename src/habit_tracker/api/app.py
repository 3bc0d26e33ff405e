"""FastAPI application factory."""

import logging

from fastapi import FastAPI, Request

from habit_tracker.api.admin import router as admin_router
from habit_tracker.api.habits import router as habits_router
from habit_tracker.api.quick import router as quick_router
from habit_tracker.app_logging import configure_logging
from habit_tracker.containers import AppContainer


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)
    logger = logging.getLogger(__name__)

    app = FastAPI(title="Habit Tracker")
    app.state.container = container

    app.include_router(habits_router)
    app.include_router(quick_router)
    app.include_router(admin_router)

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.get("/today")
    async def today(request: Request) -> dict[str, object]:
        """Return today's records for every habit."""
        state_container: AppContainer = request.app.state.container
        tracker = state_container.tracker_service
        date_key = tracker.today().isoformat()
        records = tracker.today_records()
        return {
            "date": date_key,
            "records": {
                str(habit_id): record.flatten(date_key)
                for habit_id, record in records.items()
            },
        }

    logger.info(
        "Habit tracker API ready (storage=%s)", container.settings.storage_backend
    )
    return app
