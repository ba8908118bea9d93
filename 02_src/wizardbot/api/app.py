"""FastAPI application setup."""

from contextlib import asynccontextmanager

from fastapi import FastAPI

from .. import __version__
from ..app import IApplication
from .routes import control, webhook


def create_fastapi_app(application: IApplication) -> FastAPI:
    """Create the HTTP surface around a bot application.

    The bot is started and stopped with the FastAPI lifespan.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        await application.start()
        yield
        await application.stop()

    fastapi_app = FastAPI(
        title="Wizardbot API",
        description="Webhook and status endpoints for the content wizard bot",
        version=__version__,
        lifespan=lifespan,
    )

    fastapi_app.include_router(webhook.create_webhook_router(application))
    fastapi_app.include_router(control.create_control_router(application))

    return fastapi_app
