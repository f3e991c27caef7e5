"""
Command-line entry point for rendering dashboard charts.

Examples:
  # Line chart from a JSON series
  python -m incubator_charts.main chart line --input revenue.json --title "Revenue"

  # Bar chart from a CSV file with period,value columns
  python -m incubator_charts.main chart bar --input quarters.csv --output quarters.svg

  # Pie chart of the ten largest categories, the rest grouped as "Other"
  python -m incubator_charts.main chart pie --input industries.json --top 10

  # Financial report fragment for the PDF export
  python -m incubator_charts.main report --input checkins.json --company "Acme"
"""

import argparse
import json
import logging
import sys
from pathlib import Path

import pandas as pd
import structlog
from rich.console import Console

from incubator_charts.charts import ChartOptions, ChartType, DataPoint, render_chart
from incubator_charts.config import config
from incubator_charts.exceptions import ChartError, SeriesLoadError
from incubator_charts.report_generator import FinancialReportGenerator
from incubator_charts.series import FinancialCheckIn, top_categories

logger = structlog.get_logger(__name__)

console = Console(stderr=True)


def suppress_all_logging():
    """Suppress all logging output for quiet mode."""
    logging.getLogger().setLevel(logging.CRITICAL)
    for name in logging.root.manager.loggerDict:
        logging.getLogger(name).setLevel(logging.CRITICAL)
        logging.getLogger(name).propagate = False

    structlog.configure(
        processors=[],
        wrapper_class=structlog.make_filtering_bound_logger(logging.CRITICAL),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )


def _read_json(path: Path) -> object:
    try:
        with open(path, encoding="utf-8") as f:
            return json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise SeriesLoadError(str(path), f"Could not read {path}: {e}") from e


def load_series(path: Path) -> list[DataPoint]:
    """Load a series from JSON (list of {period, value}) or CSV (period,value columns).

    Raises:
        SeriesLoadError: if the file is unreadable or has the wrong shape
    """
    if path.suffix.lower() == ".csv":
        try:
            frame = pd.read_csv(path)
        except (OSError, pd.errors.ParserError, pd.errors.EmptyDataError) as e:
            raise SeriesLoadError(str(path), f"Could not read {path}: {e}") from e
        missing = {"period", "value"} - set(frame.columns)
        if missing:
            raise SeriesLoadError(
                str(path), f"{path} is missing columns: {', '.join(sorted(missing))}"
            )
        records = frame[["period", "value"]].to_dict(orient="records")
    else:
        records = _read_json(path)
        if not isinstance(records, list):
            raise SeriesLoadError(str(path), f"{path} must contain a JSON list")

    return [DataPoint.from_dict(record) for record in records]


def load_check_ins(path: Path) -> list[FinancialCheckIn]:
    """Load financial check-in records from a JSON list."""
    records = _read_json(path)
    if not isinstance(records, list):
        raise SeriesLoadError(str(path), f"{path} must contain a JSON list")
    try:
        return [FinancialCheckIn.from_dict(record) for record in records]
    except (KeyError, TypeError, ValueError) as e:
        raise SeriesLoadError(str(path), f"Invalid check-in record in {path}: {e}") from e


def parse_arguments(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Render dashboard charts as standalone SVG",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Suppress all logging and status output",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    chart = subparsers.add_parser("chart", help="Render a single chart from a series")
    chart.add_argument(
        "chart_type",
        choices=[chart_type.value for chart_type in ChartType],
        help="Chart type",
    )
    chart.add_argument(
        "--input", type=Path, required=True, help="Series file (.json or .csv)"
    )
    chart.add_argument(
        "--title", type=str, default=None, help="Chart title (default per chart type)"
    )
    chart.add_argument("--color", type=str, default=None, help="Line/bar color")
    chart.add_argument("--width", type=float, default=None, help="Width in px")
    chart.add_argument("--height", type=float, default=None, help="Height in px")
    chart.add_argument(
        "--no-grid", action="store_true", help="Hide horizontal grid lines"
    )
    chart.add_argument(
        "--no-labels", action="store_true", help="Hide axis and value labels"
    )
    chart.add_argument(
        "--top",
        type=int,
        default=None,
        metavar="N",
        help="Keep the N largest positive values and fold the rest into \"Other\"",
    )
    chart.add_argument(
        "--output",
        type=Path,
        default=None,
        help="Output SVG file (default: stdout)",
    )

    report = subparsers.add_parser(
        "report", help="Render the financial chart section for a company"
    )
    report.add_argument(
        "--input", type=Path, required=True, help="Check-in records (.json)"
    )
    report.add_argument("--company", type=str, required=True, help="Company name")
    report.add_argument(
        "--date-range",
        type=str,
        default="all",
        choices=["all", "last-6-months", "last-12-months", "last-24-months", "current-year"],
        help="Restrict check-ins to a date range",
    )
    report.add_argument(
        "--output",
        type=Path,
        default=None,
        help="Output HTML file (default: stdout)",
    )

    return parser.parse_args(argv)


def run_chart(args: argparse.Namespace) -> str:
    data = load_series(args.input)
    if args.top is not None:
        data = top_categories(
            ((point.period, point.value) for point in data), limit=args.top
        )
    options = ChartOptions(
        title=args.title,
        color=args.color,
        width=args.width,
        height=args.height,
        show_grid=not args.no_grid,
        show_labels=not args.no_labels,
        currency=config.currency_format(),
    )
    return render_chart(args.chart_type, data, options)


def run_report(args: argparse.Namespace) -> str:
    check_ins = load_check_ins(args.input)
    generator = FinancialReportGenerator(
        args.company,
        currency=config.currency_format(),
        date_range=args.date_range,
    )
    return generator.generate_report(check_ins)


def write_output(content: str, output: Path | None) -> None:
    """Write to ``output`` (creating parent directories) or to stdout."""
    if output is None:
        sys.stdout.write(content)
        return
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(content, encoding="utf-8")


def main(argv: list[str] | None = None) -> int:
    args = parse_arguments(argv)
    quiet = args.quiet or config.quiet_mode
    if quiet:
        suppress_all_logging()

    logger.debug(
        "Running command", command=args.command, environment=config.environment
    )

    try:
        if args.command == "chart":
            content = run_chart(args)
        else:
            content = run_report(args)
        write_output(content, args.output)
    except ChartError as e:
        logger.warning("Chart generation failed", command=args.command, error=str(e))
        if not quiet:
            console.print(f"\n[bold red]Error:[/bold red] {e}\n")
        return 1

    if args.output is not None and not quiet:
        console.print(f"[green]Wrote {args.output}[/green]")
    return 0


if __name__ == "__main__":
    sys.exit(main())
