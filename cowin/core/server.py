#!/usr/bin/env python3
"""
CoWIN Dashboard application factory.
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI

from ..api.routes.dashboard_routes import create_dashboard_routes
from ..api.vaccination_client import VaccinationClient
from ..dashboard import DashboardController
from .config import ServerConfig

logger = logging.getLogger("cowin.server")


def setup_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def create_app(config: ServerConfig, controller: Optional[DashboardController] = None) -> FastAPI:
    """
    Create the FastAPI app.

    The controller starts its one-shot fetch when the app starts up.
    """
    setup_logging(config.log_level)

    if controller is None:
        client = VaccinationClient(url=config.api_url, timeout=config.request_timeout)
        controller = DashboardController(client)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("Starting CoWIN dashboard")
        controller.start()
        yield
        # The fetch is never cancelled; a hung request holds shutdown until the transport gives up
        if controller.fetch_pending:
            logger.debug("Shutting down with vaccination fetch still in progress")
        logger.info("CoWIN dashboard stopped")

    app = FastAPI(title="CoWIN Dashboard", lifespan=lifespan)
    app.include_router(create_dashboard_routes(controller))

    @app.get("/health")
    def health():
        return {"status": "ok"}

    return app
