"""
CoWIN Dashboard Module

Fetch lifecycle, data reshaping and chart preparation in pure Python.
Templates only render what the controller hands them.
"""

from .controller import DashboardController
from .state import ApiStatus

__all__ = ["DashboardController", "ApiStatus"]
