#!/usr/bin/env python3
"""
CoWIN API Schemas - Pydantic Models for Response Validation
"""

from typing import List, Optional
from pydantic import AliasChoices, BaseModel, ConfigDict, Field, StrictInt


class DailyRecord(BaseModel):
    model_config = ConfigDict(extra="ignore")

    vaccine_date: str
    # Counts are copied as sent: no coercion from strings or floats, no range check
    dose_1: StrictInt
    dose_2: StrictInt
    # Vaccine type label, carried through but not charted
    vaccine_data: Optional[str] = None


class BracketRecord(BaseModel):
    model_config = ConfigDict(extra="ignore")

    label: str = Field(..., validation_alias=AliasChoices("age", "gender", "bracket", "label"))
    count: StrictInt


class RawVaccinationResponse(BaseModel):
    model_config = ConfigDict(extra="ignore")

    last_7_days_vaccination: List[DailyRecord]
    vaccination_by_age: List[BracketRecord]
    vaccination_by_gender: List[BracketRecord]
