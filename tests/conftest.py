"""Pytest configuration and shared fixtures"""
import json
import pytest
from unittest.mock import MagicMock

from cowin.dashboard import DashboardController


# Response shape as served by the CoWIN data API
MOCK_VACCINATION_RESPONSE = {
    "last_7_days_vaccination": [
        {"vaccine_date": "1st Sep", "dose_1": 5832, "dose_2": 2365},
        {"vaccine_date": "2nd Sep", "dose_1": 6497, "dose_2": 2943},
        {"vaccine_date": "3rd Sep", "dose_1": 6138, "dose_2": 2815},
        {"vaccine_date": "4th Sep", "dose_1": 5104, "dose_2": 2390},
        {"vaccine_date": "5th Sep", "dose_1": 1500, "dose_2": 1000},
        {"vaccine_date": "6th Sep", "dose_1": 7219, "dose_2": 3012},
        {"vaccine_date": "7th Sep", "dose_1": 6945, "dose_2": 500, "vaccine_data": "Covishield"},
    ],
    "vaccination_by_age": [
        {"age": "18-44", "count": 32547},
        {"age": "44-60", "count": 21536},
        {"age": "Above 60", "count": 11297},
    ],
    "vaccination_by_gender": [
        {"gender": "Male", "count": 34519},
        {"gender": "Female", "count": 30521},
        {"gender": "Others", "count": 340},
    ],
}


@pytest.fixture
def http_response():
    """Factory for urlopen() context-manager mocks returning payload as the body"""
    def make(payload):
        body = payload if isinstance(payload, bytes) else json.dumps(payload).encode()
        mock_response = MagicMock()
        mock_response.read.return_value = body
        mock_response.__enter__.return_value = mock_response
        return mock_response
    return make


@pytest.fixture
def vaccination_payload():
    """Fresh copy of the mock API payload"""
    return json.loads(json.dumps(MOCK_VACCINATION_RESPONSE))


@pytest.fixture
def stub_client(vaccination_payload):
    """Vaccination client stub returning the mock payload"""
    client = MagicMock()
    client.get_vaccination_data.return_value = vaccination_payload
    return client


@pytest.fixture
def failing_client():
    """Vaccination client stub whose request always fails"""
    import urllib.error

    client = MagicMock()
    client.get_vaccination_data.side_effect = urllib.error.HTTPError(
        "https://apis.ccbp.in/covid-vaccination-data", 500, "Internal Server Error", {}, None
    )
    return client


@pytest.fixture
def controller(stub_client):
    """Controller in its initial state, backed by the stub client"""
    return DashboardController(stub_client)
