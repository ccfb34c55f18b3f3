"""CoWIN API client for querying vaccination statistics."""

import json
import logging
import urllib.request
from typing import Dict, Optional

logger = logging.getLogger("cowin.api")

VACCINATION_API_URL = "https://apis.ccbp.in/covid-vaccination-data"


class VaccinationClient:
    """Client for the CoWIN vaccination data API."""

    def __init__(self, url: str = VACCINATION_API_URL, timeout: Optional[float] = None):
        """
        Initialize vaccination client.

        Args:
            url: Full endpoint URL. Defaults to the public CoWIN data endpoint.
            timeout: Request timeout in seconds. None keeps the transport default.
        """
        self.url = url
        self.timeout = timeout

    def _query_api(self) -> dict:
        """
        Query the vaccination endpoint with a plain GET.

        Returns:
            Parsed JSON response

        Raises:
            urllib.error.HTTPError: If the API answers with a non-2xx status
            urllib.error.URLError: If the API cannot be reached
            json.JSONDecodeError: If the body is not valid JSON
        """
        req = urllib.request.Request(self.url, method="GET")

        if self.timeout is None:
            response_ctx = urllib.request.urlopen(req)
        else:
            response_ctx = urllib.request.urlopen(req, timeout=self.timeout)

        with response_ctx as response:
            return json.loads(response.read())

    def get_vaccination_data(self) -> Dict:
        """
        Get raw vaccination data.

        Returns:
            Dictionary with:
            - last_7_days_vaccination: [{vaccine_date, dose_1, dose_2}, ...]
            - vaccination_by_age: [{age, count}, ...]
            - vaccination_by_gender: [{gender, count}, ...]
        """
        logger.debug(f"Requesting vaccination data from {self.url}")
        data = self._query_api()
        if not isinstance(data, dict):
            raise ValueError(f"Unexpected vaccination payload type: {type(data).__name__}")
        return data
