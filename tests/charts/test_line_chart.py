"""Tests for the line chart generator."""

import pytest

from incubator_charts.charts.base import ChartOptions, DataPoint
from incubator_charts.charts.generators.line_chart import (
    build_line_chart_document,
    compute_line_points,
    render_line_chart,
)
from incubator_charts.charts.geometry import PlotArea, ValueRange
from incubator_charts.exceptions import ChartDataError


class TestComputeLinePoints:
    """Tests for point placement."""

    def test_three_point_scenario(self, monthly_series):
        """Points spread across the plot and scale between min and max."""
        area = PlotArea(600, 300)
        points = compute_line_points(
            monthly_series, area, ValueRange.from_values([100, 300, 200])
        )

        assert [(p.x, p.y) for p in points] == [(80, 240), (325, 40), (570, 140)]
        assert [p.period for p in points] == ["Jan", "Feb", "Mar"]

    def test_single_point_on_y_axis(self):
        """A single point sits at the left edge without dividing by zero."""
        area = PlotArea(600, 300)
        points = compute_line_points(
            [DataPoint("Jan", 42)], area, ValueRange.from_values([42])
        )

        assert points[0].x == 80
        assert points[0].y == 240


class TestLineChartDocument:
    """Structural tests for build_line_chart_document."""

    def test_markers_line_and_area(self, monthly_series):
        """N markers, one polyline and one area path for N > 1."""
        document = build_line_chart_document(monthly_series)

        assert len(document.find_all("circle", "data-point")) == 3
        assert len(document.find_all("polyline", "data-line")) == 1
        assert len(document.find_all("path", "data-area")) == 1

    def test_polyline_spans_all_points(self, monthly_series):
        """The polyline visits every point in input order."""
        document = build_line_chart_document(monthly_series)
        polyline = document.find_all("polyline")[0]

        assert polyline.attrs["points"] == "80,240 325,40 570,140"

    def test_area_closes_on_baseline(self, monthly_series):
        """The area path starts and ends on the x-axis."""
        document = build_line_chart_document(monthly_series)
        area = document.find_all("path", "data-area")[0]

        assert area.attrs["d"] == "M80,240 80,240 325,40 570,140 570,240 Z"

    def test_y_axis_labels_span_min_to_max(self, monthly_series):
        """Six y-axis labels from the series minimum up to its maximum."""
        document = build_line_chart_document(monthly_series)
        labels = document.find_all("g", "y-axis-labels")[0].children

        assert [label.text for label in labels] == [
            "R100",
            "R140",
            "R180",
            "R220",
            "R260",
            "R300",
        ]
        assert all(label.attrs["text-anchor"] == "end" for label in labels)

    def test_x_axis_labels_for_short_series(self, monthly_series):
        """Every period is labelled when the series is short."""
        document = build_line_chart_document(monthly_series)
        labels = document.find_all("g", "x-axis-labels")[0].children

        assert [label.text for label in labels] == ["Jan", "Feb", "Mar"]
        assert all(label.attrs["y"] == 260 for label in labels)

    def test_x_axis_labels_thinned_for_long_series(self):
        """Twelve months are labelled every second month."""
        data = [DataPoint(f"M{i}", i * 10) for i in range(12)]
        document = build_line_chart_document(data)
        labels = document.find_all("g", "x-axis-labels")[0].children

        assert [label.text for label in labels] == ["M0", "M2", "M4", "M6", "M8", "M10"]

    def test_grid_lines_drawn_beneath_data(self, monthly_series):
        """Grid lines come before the data line in document order."""
        document = build_line_chart_document(monthly_series)
        tags = [(e.tag, e.css_class) for e in document.elements]

        assert len(document.find_all("line", "grid-line")) == 6
        assert tags.index(("g", "grid")) < tags.index(("polyline", "data-line"))

    def test_show_grid_false(self, monthly_series):
        """No grid lines, axes still drawn."""
        document = build_line_chart_document(
            monthly_series, ChartOptions(title="Revenue", show_grid=False)
        )

        assert document.find_all("line", "grid-line") == []
        assert len(document.find_all("line", "axis-line")) == 2

    def test_show_labels_false(self, monthly_series):
        """Only the title remains as text; markers are still drawn."""
        document = build_line_chart_document(
            monthly_series, ChartOptions(title="Revenue", show_labels=False)
        )

        assert document.texts() == ["Revenue"]
        assert len(document.find_all("circle", "data-point")) == 3

    def test_single_point_has_no_line(self):
        """A single point renders axes, one marker, one x label and the y scale."""
        document = build_line_chart_document([DataPoint("Jan", 500)])

        assert len(document.find_all("circle", "data-point")) == 1
        assert document.find_all("polyline") == []
        assert document.find_all("path") == []
        assert len(document.find_all("line", "axis-line")) == 2
        assert len(document.find_all("g", "x-axis-labels")[0].children) == 1
        assert len(document.find_all("g", "y-axis-labels")[0].children) == 6

    def test_flat_series_sits_on_baseline(self):
        """Identical values do not divide by zero."""
        document = build_line_chart_document([DataPoint("A", 0), DataPoint("B", 0)])
        markers = document.find_all("circle", "data-point")

        assert [m.attrs["cy"] for m in markers] == [240, 240]

    def test_negative_values_are_scaled(self):
        """Line charts accept negative values via auto-scaling."""
        data = [DataPoint("Jan", -50), DataPoint("Feb", 50)]
        document = build_line_chart_document(data)
        markers = document.find_all("circle", "data-point")

        assert [m.attrs["cy"] for m in markers] == [240, 40]

    def test_custom_color_in_styles(self, monthly_series):
        """The line color feeds the data style rules."""
        document = build_line_chart_document(
            monthly_series, ChartOptions(title="Profit", color="#ef4444")
        )

        assert "#ef4444" in document.styles[".data-line"]
        assert "#ef4444" in document.styles[".data-point"]

    def test_nan_value_rejected(self):
        """Non-finite values raise ChartDataError."""
        with pytest.raises(ChartDataError):
            build_line_chart_document([DataPoint("Jan", float("nan"))])


class TestRenderLineChart:
    """Tests for the markup returned by render_line_chart."""

    def test_default_dimensions(self, monthly_series):
        """Defaults to a 600x300 document."""
        svg = render_line_chart(monthly_series, ChartOptions(title="Revenue"))

        assert svg.startswith('<svg width="600" height="300"')
        assert 'xmlns="http://www.w3.org/2000/svg"' in svg
        assert svg.count("<circle") == 3
        assert svg.count("<polyline") == 1

    def test_empty_series_renders_placeholder(self):
        """An empty series renders the placeholder, not a chart."""
        svg = render_line_chart([], ChartOptions(title="Empty"))

        assert "Empty" in svg
        assert "No data available" in svg
        assert "<polyline" not in svg
        assert "<circle" not in svg

    def test_idempotent(self, monthly_series):
        """Identical arguments give byte-identical output."""
        options = ChartOptions(title="Revenue")

        assert render_line_chart(monthly_series, options) == render_line_chart(
            monthly_series, options
        )

    def test_title_is_escaped(self, monthly_series):
        """Markup characters in the title are escaped."""
        svg = render_line_chart(monthly_series, ChartOptions(title="R&D <2024>"))

        assert "R&amp;D &lt;2024&gt;" in svg
        assert "<2024>" not in svg
