"""
Dashboard state types: lifecycle status, the reshaped summary and the view
descriptors handed to the rendering layer.
"""

from dataclasses import asdict, dataclass
from enum import Enum
from typing import Any, Dict, Optional, Tuple


class ApiStatus(str, Enum):
    """Fetch lifecycle: INITIAL -> PROGRESS -> SUCCESS | FAILURE."""
    INITIAL = "INITIAL"
    PROGRESS = "PROGRESS"
    SUCCESS = "SUCCESS"
    FAILURE = "FAILURE"


@dataclass(frozen=True)
class DailyVaccination:
    """Doses given on one day."""
    vaccine_date: str
    dose_1: int
    dose_2: int
    vaccine_type: Optional[str] = None


@dataclass(frozen=True)
class Bracket:
    """Named category (age range or gender) with its count."""
    label: str
    count: int


@dataclass(frozen=True)
class VaccinationSummary:
    """UI-ready vaccination data. Built once per successful fetch."""
    last_7_days_vaccination: Tuple[DailyVaccination, ...]
    vaccination_by_age: Tuple[Bracket, ...]
    vaccination_by_gender: Tuple[Bracket, ...]

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class EmptyView:
    """Nothing to show yet; the fetch has not started."""
    name: str = "empty"


@dataclass(frozen=True)
class LoadingView:
    """Request outstanding; render the spinner."""
    name: str = "loading"


@dataclass(frozen=True)
class FailureView:
    """Fetch failed; render the static failure image and message."""
    name: str = "failure"


@dataclass(frozen=True)
class SuccessView:
    """Fetch succeeded; render charts from the summary."""
    summary: VaccinationSummary
    name: str = "success"
