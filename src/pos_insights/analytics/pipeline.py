"""CLI wrapper for the sales analytics engine.

This module provides a command-line interface for building a report from
the cleaned CSV facts. All core logic is in pos_insights.analytics.api.

Usage:

    pos-insights-report --data-root data --period week --current-date 2025-01-08
    pos-insights-report --data-root data --start-date 2025-01-01 --end-date 2025-01-15 \
        --store-id 2 --format console
"""

from __future__ import annotations

import argparse
import json
import logging
import sys

from pos_insights.analytics.api import AnalyticsRequest, get_sales_analytics
from pos_insights.analytics.config import DEFAULT_PERIOD
from pos_insights.analytics.formatters import format_report_for_console
from pos_insights.analytics.periods import PeriodKind
from pos_insights.config import DataPaths
from pos_insights.exceptions import PosInsightsError
from pos_insights.records.csv_store import CsvRecordRepository

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Build a sales analytics report.")
    parser.add_argument(
        "--data-root",
        type=str,
        help="Root of the cleaned data directory. Defaults to $POS_INSIGHTS_DATA_ROOT.",
    )
    parser.add_argument(
        "--period",
        type=str,
        default=DEFAULT_PERIOD,
        choices=[kind.value for kind in PeriodKind],
        help=f"Period kind (default: {DEFAULT_PERIOD})",
    )
    parser.add_argument("--store-id", type=str, help="Only report on this store id")
    parser.add_argument("--current-date", type=str, help="Anchor date, YYYY-MM-DD (default: today)")
    parser.add_argument("--start-date", type=str, help="Explicit range start, YYYY-MM-DD")
    parser.add_argument("--end-date", type=str, help="Explicit range end, YYYY-MM-DD")
    parser.add_argument(
        "--format",
        type=str,
        default="json",
        choices=["json", "console"],
        help="Output format (default: json)",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose output",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point.

    Returns:
        Process exit status: 0 on success, 1 on a request, config or data error.
    """
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        paths = DataPaths.from_root(args.data_root) if args.data_root else DataPaths.from_env()
        request = AnalyticsRequest.from_query(
            {
                "period": args.period,
                "storeId": args.store_id,
                "currentDate": args.current_date,
                "startDate": args.start_date,
                "endDate": args.end_date,
            }
        )
        report = get_sales_analytics(CsvRecordRepository(paths), request)
    except PosInsightsError as e:
        logger.debug("Report failed", exc_info=True)
        print(f"[ERROR] {e}", file=sys.stderr)
        return 1

    if args.format == "console":
        print(format_report_for_console(report))
    else:
        print(json.dumps(report.to_dict(), ensure_ascii=False, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
