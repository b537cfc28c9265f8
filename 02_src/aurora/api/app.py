"""FastAPI application setup."""

from contextlib import asynccontextmanager

from fastapi import FastAPI

from ..app import Application
from .routes import control, messaging, observability


def create_fastapi_app(
    application: Application | None = None,
    sim: control.ISimControl | None = None,
) -> FastAPI:
    """Create and configure FastAPI application."""
    application = application or Application()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        await application.start()
        if sim is not None and hasattr(sim, "set_tracker"):
            sim.set_tracker(application.tracker)
        yield
        if sim is not None:
            await sim.stop()
        await application.stop()

    fastapi_app = FastAPI(
        title="Aurora API",
        description="Chat boundary for the municipal inspection assistant",
        version="0.1.0",
        lifespan=lifespan,
    )

    fastapi_app.include_router(messaging.create_messaging_router(application))
    fastapi_app.include_router(observability.create_observability_router(application))
    fastapi_app.include_router(control.create_control_router(application, sim))

    return fastapi_app
