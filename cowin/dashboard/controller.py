"""
Dashboard Controller

Owns the fetch lifecycle of the vaccination dashboard: a single request is
issued when the controller starts, its result is reshaped into a
VaccinationSummary and the current status decides which view is rendered.
"""

import asyncio
import logging
import time
from typing import Any, Dict, Optional, Union

from ..api.schemas import RawVaccinationResponse
from ..api.vaccination_client import VaccinationClient
from . import charts
from .config import (
    PAGE_TITLE, LOGO_URL, LOGO_ALT, LOGO_NAME,
    FAILURE_IMAGE_URL, FAILURE_IMAGE_ALT, FAILURE_MESSAGE,
)
from .state import (
    ApiStatus, Bracket, DailyVaccination, VaccinationSummary,
    EmptyView, FailureView, LoadingView, SuccessView,
)

logger = logging.getLogger("cowin.dashboard")

View = Union[EmptyView, LoadingView, SuccessView, FailureView]


def summarize_response(raw: RawVaccinationResponse) -> VaccinationSummary:
    """
    Reshape a validated API payload into a VaccinationSummary.

    Daily records keep their order; age and gender brackets are copied as-is.
    """
    daily = tuple(
        DailyVaccination(
            vaccine_date=record.vaccine_date,
            dose_1=record.dose_1,
            dose_2=record.dose_2,
            vaccine_type=record.vaccine_data,
        )
        for record in raw.last_7_days_vaccination
    )
    return VaccinationSummary(
        last_7_days_vaccination=daily,
        vaccination_by_age=tuple(Bracket(b.label, b.count) for b in raw.vaccination_by_age),
        vaccination_by_gender=tuple(Bracket(b.label, b.count) for b in raw.vaccination_by_gender),
    )


class DashboardController:
    """
    Vaccination dashboard controller.

    Status moves INITIAL -> PROGRESS -> SUCCESS | FAILURE exactly once per
    controller. The summary is set only together with SUCCESS.
    """

    def __init__(self, client: Optional[VaccinationClient] = None):
        self.client = client or VaccinationClient()
        self.api_status = ApiStatus.INITIAL
        self.summary: Optional[VaccinationSummary] = None
        self._fetch_task: Optional[asyncio.Task] = None

    def start(self) -> asyncio.Task:
        """
        Schedule the one-shot fetch on the running event loop.

        Must be called from within a running loop. Calling it again returns
        the task created by the first call.
        """
        if self._fetch_task is None:
            loop = asyncio.get_running_loop()
            self._fetch_task = loop.create_task(self.fetch_and_summarize())
        return self._fetch_task

    @property
    def fetch_pending(self) -> bool:
        """True while a started fetch has not finished."""
        return self._fetch_task is not None and not self._fetch_task.done()

    async def fetch_and_summarize(self) -> ApiStatus:
        """
        Fetch vaccination data and reshape it into a summary.

        Never raises: any transport, HTTP status or payload error ends in
        FAILURE with no summary. Returns the terminal status.
        """
        if self.api_status is not ApiStatus.INITIAL:
            logger.debug(f"Fetch already issued (status={self.api_status.value}), ignoring")
            return self.api_status

        self.api_status = ApiStatus.PROGRESS
        logger.info("Fetching vaccination data")
        started = time.monotonic()

        loop = asyncio.get_running_loop()
        try:
            # Blocking urllib call runs in the default executor
            payload = await loop.run_in_executor(None, self.client.get_vaccination_data)
            summary = summarize_response(RawVaccinationResponse.model_validate(payload))
        except Exception as e:
            self.api_status = ApiStatus.FAILURE
            logger.warning(f"Vaccination data fetch failed: {type(e).__name__}: {e}")
            return self.api_status

        self.summary = summary
        self.api_status = ApiStatus.SUCCESS
        logger.info(
            f"Vaccination data loaded in {time.monotonic() - started:.2f}s: "
            f"{len(summary.last_7_days_vaccination)} days, "
            f"{len(summary.vaccination_by_age)} age brackets, "
            f"{len(summary.vaccination_by_gender)} gender brackets"
        )
        return self.api_status

    def select_view(self) -> View:
        """Map the current status to its view descriptor."""
        if self.api_status is ApiStatus.SUCCESS:
            return SuccessView(self.summary)
        if self.api_status is ApiStatus.FAILURE:
            return FailureView()
        if self.api_status is ApiStatus.PROGRESS:
            return LoadingView()
        return EmptyView()

    def get_dashboard_data(self) -> Dict[str, Any]:
        """
        Get the template context for the dashboard page.

        Chart specs are only built for the success view.
        """
        view = self.select_view()
        data = {
            "page_title": PAGE_TITLE,
            "logo_url": LOGO_URL,
            "logo_alt": LOGO_ALT,
            "logo_name": LOGO_NAME,
            "status": self.api_status.value,
            "view": view.name,
        }

        if isinstance(view, SuccessView):
            data["charts"] = charts.build_charts(view.summary)
        elif isinstance(view, FailureView):
            data["failure"] = {
                "image_url": FAILURE_IMAGE_URL,
                "image_alt": FAILURE_IMAGE_ALT,
                "message": FAILURE_MESSAGE,
            }
        return data

    def get_api_data(self) -> Dict[str, Any]:
        """JSON-ready status, view name and (on success) the summary."""
        view = self.select_view()
        return {
            "status": self.api_status.value,
            "view": view.name,
            "summary": view.summary.to_dict() if isinstance(view, SuccessView) else None,
        }
