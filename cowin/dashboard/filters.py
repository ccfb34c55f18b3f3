"""
Jinja2 template filters for the dashboard.
"""

from fastapi.templating import Jinja2Templates

from .config import format_count


def setup_template_filters(templates: Jinja2Templates) -> None:
    """Register dashboard filters on a template environment."""
    templates.env.filters["format_count"] = format_count
