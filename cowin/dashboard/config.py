"""
Dashboard Configuration

Chart styling, page text and axis formatting for the vaccination dashboard.
"""

from typing import Union

# Page chrome
PAGE_TITLE = "CoWIN Vaccination In India"
LOGO_URL = "https://assets.ccbp.in/frontend/react-js/cowin-logo.png"
LOGO_ALT = "website logo"
LOGO_NAME = "Co-WIN"

FAILURE_IMAGE_URL = "https://assets.ccbp.in/frontend/react-js/api-failure-view.png"
FAILURE_IMAGE_ALT = "failure view"
FAILURE_MESSAGE = "Something Went Wrong"

# Bar chart: one series per dose
COVERAGE_CHART = {
    "title": "Vaccination Coverage",
    "height": 500,
    "series": [
        {"key": "dose_1", "name": "Dose 1", "color": "#5a8dee"},
        {"key": "dose_2", "name": "Dose 2", "color": "#2d87bb"},
    ],
}

# Pie charts: cells are matched to brackets by position
GENDER_CHART = {
    "title": "Vaccination by gender",
    "height": 300,
    "start_angle": 0,
    "end_angle": 180,
    "inner_radius": 0.40,
    "outer_radius": 0.70,
    "cells": [
        {"name": "Male", "color": "#2d87bb"},
        {"name": "Female", "color": "#5a8dee"},
        {"name": "Others", "color": "#a3df9f"},
    ],
}

AGE_CHART = {
    "title": "Vaccination by Age",
    "height": 300,
    "start_angle": 0,
    "end_angle": 360,
    "inner_radius": 0.0,
    "outer_radius": 0.70,
    "cells": [
        {"name": "18-44", "color": "#2d87bb"},
        {"name": "44-60", "color": "#5a8dee"},
        {"name": "Above 60", "color": "#a3df9f"},
    ],
}

# Counts above this are abbreviated on the y axis
THOUSANDS_THRESHOLD = 1000


def format_count(count: Union[int, float]) -> str:
    """
    Format an axis tick value.

    Counts strictly greater than 1000 are shown in thousands with a "k"
    suffix and no rounding (1500 -> "1.5k", 2000 -> "2k"). Everything else
    is shown as the plain number (1000 -> "1000").
    """
    if count > THOUSANDS_THRESHOLD:
        thousands = count / 1000
        if float(thousands).is_integer():
            return f"{int(thousands)}k"
        return f"{thousands}k"
    if isinstance(count, float) and count.is_integer():
        return str(int(count))
    return str(count)

