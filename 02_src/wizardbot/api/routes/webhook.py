"""Telegram webhook route."""

import hmac
from typing import Any

from fastapi import APIRouter, Body, HTTPException, Request
from pydantic import BaseModel

from ...app import IApplication
from ...logging_config import get_logger
from ...models import Update

logger = get_logger(__name__)

SECRET_HEADER = "x-telegram-bot-api-secret-token"


class WebhookResponse(BaseModel):
    """Response model for an accepted update."""

    ok: bool


def create_webhook_router(app: IApplication) -> APIRouter:
    """Create webhook router."""
    router = APIRouter(tags=["webhook"])

    def ensure_webhook_auth(request: Request) -> None:
        expected = app.config.webhook_secret
        if not expected:
            return
        provided = request.headers.get(SECRET_HEADER, "").strip()
        if not hmac.compare_digest(provided.encode("utf-8"), expected.encode("utf-8")):
            logger.warning("Telegram webhook rejected due to invalid secret")
            raise HTTPException(status_code=401, detail="Unauthorized webhook")

    @router.post("/telegram/webhook", response_model=WebhookResponse)
    async def telegram_webhook(
        request: Request, payload: dict[str, Any] = Body(...)
    ) -> dict:
        """Queue one update pushed by Telegram."""
        ensure_webhook_auth(request)

        try:
            update = Update.from_dict(payload)
        except (TypeError, ValueError) as e:
            logger.warning("Invalid Telegram webhook payload: %s", e)
            raise HTTPException(status_code=400, detail="Invalid update payload")

        try:
            await app.submit_update(update)
        except RuntimeError as e:
            raise HTTPException(status_code=503, detail=str(e))
        return {"ok": True}

    return router
