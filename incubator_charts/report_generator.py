"""
Financial Report Generator

Builds the chart section of a company's financial export: a monthly
turnover trend, a net profit trend and quarterly turnover averages,
rendered as inline SVG inside an HTML fragment ready for an
HTML-to-PDF conversion service.
"""

import html
from dataclasses import dataclass
from datetime import date, datetime

import structlog

from incubator_charts.charts import ChartOptions, render_bar_chart, render_line_chart
from incubator_charts.charts.base import DEFAULT_CURRENCY, CurrencyFormat
from incubator_charts.exceptions import ReportError
from incubator_charts.series import (
    FinancialCheckIn,
    filter_by_date_range,
    net_profit_series,
    quarterly_average_series,
    turnover_series,
)

logger = structlog.get_logger(__name__)

CHART_WIDTH = 600
CHART_HEIGHT = 300


@dataclass(frozen=True)
class FinancialCharts:
    """Rendered SVG markup for the three financial export charts."""

    turnover_chart: str
    profitability_chart: str
    quarterly_trends_chart: str

    def sections(self) -> list[tuple[str, str]]:
        """(heading, svg) pairs in report order."""
        return [
            ("Turnover", self.turnover_chart),
            ("Profitability", self.profitability_chart),
            ("Quarterly Trends", self.quarterly_trends_chart),
        ]


class FinancialReportGenerator:
    """Generates the chart section of a company's financial PDF export."""

    def __init__(
        self,
        company_name: str,
        currency: CurrencyFormat = DEFAULT_CURRENCY,
        date_range: str = "all",
    ):
        self.company_name = company_name
        self.currency = currency
        self.date_range = date_range

    def _options(self, title: str, color: str) -> ChartOptions:
        return ChartOptions(
            title=title,
            color=color,
            width=CHART_WIDTH,
            height=CHART_HEIGHT,
            currency=self.currency,
        )

    def generate_charts(self, check_ins: list[FinancialCheckIn]) -> FinancialCharts:
        """Render the three charts; empty inputs yield placeholder charts."""
        return FinancialCharts(
            turnover_chart=render_line_chart(
                turnover_series(check_ins),
                self._options("Monthly Turnover Trend", "#10b981"),
            ),
            profitability_chart=render_line_chart(
                net_profit_series(check_ins),
                self._options("Net Profit Trend", "#ef4444"),
            ),
            quarterly_trends_chart=render_bar_chart(
                quarterly_average_series(check_ins),
                self._options("Quarterly Turnover Performance", "#8b5cf6"),
            ),
        )

    def generate_report(
        self,
        check_ins: list[FinancialCheckIn],
        today: date | None = None,
        generated_at: datetime | None = None,
    ) -> str:
        """Build the HTML fragment for the PDF export.

        Args:
            check_ins: Company check-ins ordered newest first
            today: Reference day for the date range filter
            generated_at: Timestamp printed in the header (default: now)

        Returns:
            HTML fragment with one section per chart

        Raises:
            ReportError: if no check-ins remain after date filtering
        """
        selected = filter_by_date_range(check_ins, self.date_range, today)
        if not selected:
            logger.warning(
                "No financial data for report",
                company=self.company_name,
                date_range=self.date_range,
                total_check_ins=len(check_ins),
            )
            raise ReportError(
                f"No financial data found for {self.company_name}",
                company=self.company_name,
            )

        charts = self.generate_charts(selected)
        timestamp = (generated_at or datetime.now()).strftime("%Y-%m-%d %H:%M:%S")

        parts = [
            '<div class="financial-charts">',
            f"<h1>{html.escape(self.company_name)} - Financial Overview</h1>",
            f'<p class="report-meta">Generated: {timestamp} | '
            f"Check-ins: {len(selected)} | Range: {html.escape(self.date_range)}</p>",
        ]
        for heading, svg in charts.sections():
            parts.append('<section class="chart-section">')
            parts.append(f"<h2>{heading}</h2>")
            parts.append(svg.strip())
            parts.append("</section>")
        parts.append("</div>")

        logger.info(
            "Generated financial report",
            company=self.company_name,
            check_ins=len(selected),
        )
        return "\n".join(parts) + "\n"
