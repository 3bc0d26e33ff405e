"""Admin API endpoints with simple token auth."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, Depends, Header, HTTPException, Request, status

from habit_tracker.services.mock_data import seed_store

if TYPE_CHECKING:
    from habit_tracker.containers import AppContainer

router = APIRouter(prefix="/admin", tags=["admin"])


def _get_admin_token(request: Request) -> str:
    container: AppContainer = request.app.state.container
    return container.settings.admin_token


async def require_admin(
    x_admin_token: str | None = Header(default=None),
    admin_token: str = Depends(_get_admin_token),
) -> None:
    """Ensure requests include a valid admin token."""
    if not x_admin_token or x_admin_token != admin_token:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED)


@router.get("/health", dependencies=[Depends(require_admin)])
async def admin_health() -> dict[str, str]:
    """Admin health check endpoint."""
    return {"status": "ok"}


@router.get("/stats", dependencies=[Depends(require_admin)])
async def store_stats(request: Request) -> dict[str, object]:
    """Return record and habit counts."""
    container: AppContainer = request.app.state.container
    return {
        "records": container.record_store.count(),
        "habits": len(container.habit_catalog.list_habits()),
        "active_habits": len(container.habit_catalog.active_habits()),
        "storage_backend": container.settings.storage_backend,
    }


@router.delete("/records", dependencies=[Depends(require_admin)])
async def clear_records(request: Request) -> dict[str, str]:
    """Remove every stored record."""
    container: AppContainer = request.app.state.container
    container.record_store.clear()
    return {"status": "ok"}


@router.post("/seed", dependencies=[Depends(require_admin)])
async def seed_records(
    request: Request, days: int = 30, seed: int | None = None
) -> dict[str, object]:
    """Fill the store with generated sample records."""
    container: AppContainer = request.app.state.container
    added = seed_store(
        container.record_store, container.tracker_service.today(), days, seed
    )
    return {"status": "ok", "added": added}
