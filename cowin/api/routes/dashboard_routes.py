#!/usr/bin/env python3
"""
Dashboard Routes - Web UI and JSON view of the vaccination dashboard
"""

import logging
from pathlib import Path

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from ...dashboard import DashboardController
from ...dashboard.filters import setup_template_filters

logger = logging.getLogger("cowin.server")

UI_DIR = Path(__file__).resolve().parent.parent.parent / "ui"


def create_dashboard_routes(controller: DashboardController) -> APIRouter:
    """Create dashboard and web UI routes bound to one controller."""
    router = APIRouter()

    templates = Jinja2Templates(directory=[str(UI_DIR / "components"), str(UI_DIR)])
    setup_template_filters(templates)

    @router.get("/", response_class=HTMLResponse)
    def dashboard_main(request: Request):
        """Dashboard page: header plus loader, charts or failure view."""
        dashboard_data = controller.get_dashboard_data()
        logger.debug(f"Rendering dashboard view: {dashboard_data['view']}")
        return templates.TemplateResponse(request, "dashboard.html", dashboard_data)

    @router.get("/api/vaccination")
    def vaccination_data():
        """Current status and, once loaded, the vaccination summary."""
        return controller.get_api_data()

    return router
