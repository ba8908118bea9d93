"""Health and status routes."""

from typing import Any

from fastapi import APIRouter
from pydantic import BaseModel

from ...app import IApplication


class HealthResponse(BaseModel):
    """Response model for health."""

    status: str


class StatusResponse(BaseModel):
    """Response model for runtime status."""

    running: bool
    mode: str
    bot: str
    model: str
    cursor: int | None = None
    pipeline: dict[str, int]
    dispatcher: dict[str, Any]


def create_control_router(app: IApplication) -> APIRouter:
    """Create control router."""
    router = APIRouter(prefix="/api", tags=["control"])

    @router.get("/health", response_model=HealthResponse)
    async def health() -> dict:
        """Liveness probe."""
        return {"status": "ok"}

    @router.get("/status", response_model=StatusResponse)
    async def status() -> dict:
        """Runtime state of the bot."""
        return app.status()

    return router
