"""
Chart preparation for the vaccination dashboard.

Turns a VaccinationSummary into plain dictionaries that templates render as
inline SVG: a grouped bar chart for daily doses and two pie charts for the
age and gender brackets.
"""

import math
from typing import Any, Dict, List, Optional, Sequence

from .config import AGE_CHART, COVERAGE_CHART, GENDER_CHART, format_count
from .state import Bracket, DailyVaccination, VaccinationSummary

# SVG viewBox is PIE_SIZE x PIE_SIZE; radii in chart configs are fractions of half of it
PIE_SIZE = 200
Y_AXIS_TICKS = 4


def nice_step(max_value: float, ticks: int = Y_AXIS_TICKS) -> float:
    """Round max_value / ticks up to 1, 2 or 5 times a power of ten."""
    if max_value <= 0:
        return 1
    raw = max_value / ticks
    magnitude = 10 ** math.floor(math.log10(raw))
    for factor in (1, 2, 5, 10):
        if raw <= factor * magnitude:
            step = factor * magnitude
            return int(step) if step >= 1 else step
    return 10 * magnitude


def build_coverage_chart(days: Sequence[DailyVaccination]) -> Dict[str, Any]:
    """Grouped bar chart: one group per day, one bar per dose series."""
    series = COVERAGE_CHART["series"]
    max_value = max(
        (getattr(day, s["key"]) for day in days for s in series),
        default=0,
    )

    step = nice_step(max_value)
    ticks = []
    value = 0
    while True:
        ticks.append({"value": value, "label": format_count(value)})
        if value >= max_value:
            break
        value += step
    axis_max = ticks[-1]["value"] or 1

    groups = []
    for day in days:
        bars = []
        for s in series:
            bar_value = getattr(day, s["key"])
            bars.append({
                "name": s["name"],
                "color": s["color"],
                "value": bar_value,
                "height_pct": round(bar_value / axis_max * 100, 2),
            })
        groups.append({"label": day.vaccine_date, "bars": bars})

    return {
        "title": COVERAGE_CHART["title"],
        "height": COVERAGE_CHART["height"],
        "legend": [{"name": s["name"], "color": s["color"]} for s in series],
        "y_ticks": ticks,
        "axis_max": axis_max,
        "groups": groups,
    }


def _point(radius: float, angle_deg: float) -> str:
    """SVG coordinate for a polar angle measured counter-clockwise from 3 o'clock."""
    center = PIE_SIZE / 2
    theta = math.radians(angle_deg)
    x = center + radius * math.cos(theta)
    y = center - radius * math.sin(theta)
    return f"{x:.3f} {y:.3f}"


def segment_path(start: float, end: float, outer: float, inner: float = 0.0) -> Optional[str]:
    """
    SVG path for a pie or donut segment between two angles (degrees).

    Arcs are split at their midpoint so no single arc exceeds 180 degrees,
    which keeps full-circle segments drawable.
    """
    if end <= start or outer <= 0:
        return None
    mid = (start + end) / 2

    parts = [
        f"M {_point(outer, start)}",
        f"A {outer:.3f} {outer:.3f} 0 0 0 {_point(outer, mid)}",
        f"A {outer:.3f} {outer:.3f} 0 0 0 {_point(outer, end)}",
    ]
    if inner > 0:
        parts += [
            f"L {_point(inner, end)}",
            f"A {inner:.3f} {inner:.3f} 0 0 1 {_point(inner, mid)}",
            f"A {inner:.3f} {inner:.3f} 0 0 1 {_point(inner, start)}",
        ]
    else:
        parts.append(f"L {_point(0, 0)}")
    parts.append("Z")
    return " ".join(parts)


def build_pie_chart(brackets: Sequence[Bracket], config: Dict[str, Any]) -> Dict[str, Any]:
    """Pie or donut chart; bracket i takes the colour of cell i (cycled)."""
    palette = [cell["color"] for cell in config["cells"]]
    half = PIE_SIZE / 2
    outer = config["outer_radius"] * half
    inner = config["inner_radius"] * half
    sweep = config["end_angle"] - config["start_angle"]
    total = sum(b.count for b in brackets)

    segments: List[Dict[str, Any]] = []
    angle = config["start_angle"]
    for i, bracket in enumerate(brackets):
        share = bracket.count / total if total else 0
        end = angle + share * sweep
        segments.append({
            "label": bracket.label,
            "count": bracket.count,
            "color": palette[i % len(palette)],
            "percent": round(share * 100, 1),
            "path": segment_path(angle, end, outer, inner) if share else None,
        })
        angle = end

    return {
        "title": config["title"],
        "height": config["height"],
        "view_box": f"0 0 {PIE_SIZE} {PIE_SIZE}",
        "total": total,
        "segments": segments,
    }


def build_charts(summary: VaccinationSummary) -> Dict[str, Any]:
    """All dashboard charts, in page order."""
    return {
        "coverage": build_coverage_chart(summary.last_7_days_vaccination),
        "gender": build_pie_chart(summary.vaccination_by_gender, GENDER_CHART),
        "age": build_pie_chart(summary.vaccination_by_age, AGE_CHART),
    }
