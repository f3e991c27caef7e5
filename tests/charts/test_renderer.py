"""Tests for chart type dispatch and option resolution."""

import pytest

from incubator_charts.charts import render_chart
from incubator_charts.charts.base import (
    ChartOptions,
    ChartType,
    CurrencyFormat,
    DataPoint,
)
from incubator_charts.exceptions import ChartDataError


class TestRenderChart:
    """Tests for render_chart."""

    @pytest.mark.parametrize(
        "chart_type,marker",
        [
            (ChartType.LINE, "<polyline"),
            (ChartType.BAR, 'class="bar"'),
            (ChartType.PIE, 'class="slice"'),
            ("line", "<polyline"),
            ("pie", 'class="slice"'),
        ],
    )
    def test_dispatch(self, chart_type, marker, monthly_series):
        svg = render_chart(chart_type, monthly_series, ChartOptions(title="Dispatch"))

        assert marker in svg

    def test_unknown_type(self, monthly_series):
        with pytest.raises(ValueError):
            render_chart("radar", monthly_series)

    def test_currency_option_reaches_labels(self, monthly_series):
        options = ChartOptions(title="USD", currency=CurrencyFormat("$"))
        svg = render_chart(ChartType.BAR, monthly_series, options)

        assert ">$300</text>" in svg
        assert ">R300</text>" not in svg


class TestChartOptions:
    """Tests for ChartOptions.resolve defaults."""

    def test_line_defaults(self):
        resolved = ChartOptions().resolve(ChartType.LINE)

        assert (resolved.width, resolved.height) == (600, 300)
        assert resolved.color == "#3b82f6"
        assert resolved.title == "Chart"
        assert resolved.show_grid is True
        assert resolved.show_labels is True

    def test_pie_defaults(self):
        resolved = ChartOptions(title="").resolve(ChartType.PIE)

        assert (resolved.width, resolved.height) == (400, 400)
        assert resolved.title == "Pie Chart"

    def test_unset_title_follows_chart_type(self):
        assert ChartOptions().resolve(ChartType.LINE).title == "Chart"
        assert ChartOptions().resolve(ChartType.BAR).title == "Bar Chart"
        assert ChartOptions().resolve(ChartType.PIE).title == "Pie Chart"

    def test_explicit_values_win(self):
        resolved = ChartOptions(
            title="Custom", color="#000", width=800, height=200
        ).resolve(ChartType.BAR)

        assert (resolved.title, resolved.color) == ("Custom", "#000")
        assert (resolved.width, resolved.height) == (800, 200)


class TestDataPoint:
    """Tests for DataPoint.from_dict."""

    def test_from_dict(self):
        point = DataPoint.from_dict({"period": 2024, "value": "12.5"})

        assert point == DataPoint("2024", 12.5)

    def test_missing_field(self):
        with pytest.raises(ChartDataError, match="missing"):
            DataPoint.from_dict({"period": "Jan"})

    def test_non_numeric_value(self):
        with pytest.raises(ChartDataError, match="not numeric"):
            DataPoint.from_dict({"period": "Jan", "value": "lots"})
