"""Sales analytics engine.

Builds one period-scoped report from two independently recorded sources,
point-of-sale transaction lines and daily register closes:

- **periods**: current and previous period boundaries (day/week/month/year)
- **reconcile**: per-source customers/sales, merged by taking the larger value
- **composition**: product, category and daily sales breakdowns
- **comparison**: period-over-period deltas of the reconciled metrics
- **report**: assembly into an AnalyticsReport

Example:
    >>> from pos_insights.analytics import AnalyticsRequest, get_sales_analytics
    >>> from pos_insights.records import InMemoryRecordRepository
    >>>
    >>> request = AnalyticsRequest.from_query({"period": "week", "currentDate": "2025-01-08"})
    >>> report = get_sales_analytics(InMemoryRecordRepository(), request)
    >>> report.to_dict()["totalSales"]
    0
"""

from pos_insights.analytics.api import AnalyticsRequest, get_sales_analytics
from pos_insights.analytics.periods import PeriodKind, resolve_period
from pos_insights.analytics.report import build_report, empty_report
from pos_insights.analytics.types import AnalyticsReport

__all__ = [
    "AnalyticsReport",
    "AnalyticsRequest",
    "PeriodKind",
    "build_report",
    "empty_report",
    "get_sales_analytics",
    "resolve_period",
]
