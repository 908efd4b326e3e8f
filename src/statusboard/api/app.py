"""FastAPI application factory for Statusboard."""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from statusboard import __version__
from statusboard.api.routes import status
from statusboard.config.loader import load_config
from statusboard.config.models import StatusboardConfig
from statusboard.registry.manager import ServiceManager

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    config: StatusboardConfig = app.state.config
    manager: ServiceManager | None = getattr(app.state, "manager", None)
    if manager is None:
        manager = ServiceManager.from_config(config)
        app.state.manager = manager
    logger.info("Monitoring %d service(s)", len(manager.get_services()))

    if config.refresh.on_startup:
        await manager.update_all_status()
    if config.refresh.interval > 0:
        manager.start_periodic_refresh(config.refresh.interval)
    try:
        yield
    finally:
        await manager.shutdown()


def create_app(
    config: StatusboardConfig | None = None,
    manager: ServiceManager | None = None,
) -> FastAPI:
    app = FastAPI(
        title="Statusboard",
        version=__version__,
        description="Service status dashboard",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["GET"],
        allow_headers=["*"],
    )

    if config is None:
        try:
            config = load_config()
        except (FileNotFoundError, ValueError) as exc:
            # Fallback for environments without a config file (e.g. testing)
            logger.warning("Starting with an empty configuration: %s", exc)
            config = StatusboardConfig()

    app.state.config = config
    if manager is not None:
        app.state.manager = manager

    @app.get("/health", tags=["meta"])
    async def healthcheck() -> dict[str, str]:
        return {"status": "ok"}

    app.include_router(status.router, prefix="/api")

    # Serve the dashboard page at root
    landing_dir = Path(__file__).parent.parent / "landing"
    if landing_dir.is_dir():
        app.mount("/", StaticFiles(directory=str(landing_dir), html=True), name="landing")

    return app


app = create_app()
