"""Unit tests for chart preparation and axis formatting"""
import pytest

from cowin.dashboard.charts import (
    build_charts, build_coverage_chart, build_pie_chart, nice_step, segment_path,
)
from cowin.dashboard.config import AGE_CHART, GENDER_CHART, format_count
from cowin.dashboard.state import Bracket, DailyVaccination, VaccinationSummary


class TestFormatCount:
    """Axis label formatting"""

    @pytest.mark.parametrize("count, expected", [
        (0, "0"),
        (500, "500"),
        (1000, "1000"),     # strictly greater than 1000 abbreviates
        (1001, "1.001k"),
        (1500, "1.5k"),
        (2000, "2k"),
        (32547, "32.547k"),
        (2000.0, "2k"),
        (750.0, "750"),
    ])
    def test_format_count(self, count, expected):
        assert format_count(count) == expected


class TestNiceStep:

    @pytest.mark.parametrize("max_value, expected", [
        (0, 1),
        (4, 1),
        (100, 50),
        (7219, 2000),
        (19000, 5000),
    ])
    def test_nice_step(self, max_value, expected):
        assert nice_step(max_value) == expected


class TestCoverageChart:
    """Bar chart for daily doses"""

    def test_ticks_and_series(self):
        days = [
            DailyVaccination("1st Sep", 5832, 2365),
            DailyVaccination("2nd Sep", 7219, 3012),
        ]
        chart = build_coverage_chart(days)

        assert chart["title"] == "Vaccination Coverage"
        assert [t["label"] for t in chart["y_ticks"]] == ["0", "2k", "4k", "6k", "8k"]
        assert chart["axis_max"] == 8000
        assert chart["legend"] == [
            {"name": "Dose 1", "color": "#5a8dee"},
            {"name": "Dose 2", "color": "#2d87bb"},
        ]

        assert [g["label"] for g in chart["groups"]] == ["1st Sep", "2nd Sep"]
        tallest = chart["groups"][1]["bars"][0]
        assert tallest["value"] == 7219
        assert tallest["height_pct"] == pytest.approx(90.24, abs=0.01)

    def test_empty_days(self):
        chart = build_coverage_chart([])
        assert chart["groups"] == []
        assert chart["y_ticks"] == [{"value": 0, "label": "0"}]
        assert chart["axis_max"] == 1


class TestPieChart:
    """Pie and donut segments"""

    def test_gender_half_donut(self):
        brackets = [Bracket("Male", 34519), Bracket("Female", 30521), Bracket("Others", 340)]
        chart = build_pie_chart(brackets, GENDER_CHART)

        assert chart["title"] == "Vaccination by gender"
        assert chart["total"] == 65380
        assert [s["color"] for s in chart["segments"]] == ["#2d87bb", "#5a8dee", "#a3df9f"]
        assert [s["percent"] for s in chart["segments"]] == [52.8, 46.7, 0.5]
        assert all(s["path"].startswith("M ") for s in chart["segments"])
        # Donut segments trace back along the inner radius
        assert " A 40.000 40.000 0 0 1 " in chart["segments"][0]["path"]

    def test_palette_cycles_for_extra_brackets(self):
        brackets = [Bracket(str(i), 1) for i in range(4)]
        chart = build_pie_chart(brackets, AGE_CHART)

        assert chart["segments"][3]["color"] == chart["segments"][0]["color"]

    def test_zero_total_draws_nothing(self):
        chart = build_pie_chart([Bracket("18-44", 0), Bracket("44-60", 0)], AGE_CHART)

        assert chart["total"] == 0
        assert all(s["path"] is None for s in chart["segments"])
        assert all(s["percent"] == 0 for s in chart["segments"])

    def test_full_circle_segment_path(self):
        path = segment_path(0, 360, outer=70)

        assert path.startswith("M 170.000 100.000")
        assert path.count(" A ") == 2
        assert path.endswith("L 100.000 100.000 Z")

    def test_empty_segment_has_no_path(self):
        assert segment_path(90, 90, outer=70) is None


def test_build_charts_uses_summary_order():
    summary = VaccinationSummary(
        last_7_days_vaccination=(DailyVaccination("1st Sep", 10, 5),),
        vaccination_by_age=(Bracket("18-44", 3), Bracket("44-60", 2), Bracket("Above 60", 1)),
        vaccination_by_gender=(Bracket("Male", 1), Bracket("Female", 1), Bracket("Others", 1)),
    )
    charts = build_charts(summary)

    assert charts["age"]["title"] == "Vaccination by Age"
    assert [s["label"] for s in charts["age"]["segments"]] == ["18-44", "44-60", "Above 60"]
    assert [s["label"] for s in charts["gender"]["segments"]] == ["Male", "Female", "Others"]
    assert charts["coverage"]["groups"][0]["bars"][1]["value"] == 5
