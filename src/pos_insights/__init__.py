"""POS Insights - sales analytics over point-of-sale records.

This package reconciles point-of-sale transaction lines with daily
register-close summaries into period-scoped sales reports.

Module Structure:
    pos_insights.records: Record types and repositories (in-memory, CSV)
    pos_insights.analytics: Period resolution, reconciliation, composition,
        comparison and report assembly
    pos_insights.config: DataPaths configuration

Quick Start:
    >>> from pos_insights import DataPaths
    >>> from pos_insights.analytics import AnalyticsRequest, get_sales_analytics
    >>> from pos_insights.records import CsvRecordRepository
    >>>
    >>> repository = CsvRecordRepository(DataPaths.from_root("data"))
    >>> request = AnalyticsRequest.from_query({"period": "month", "currentDate": "2025-01-15"})
    >>> report = get_sales_analytics(repository, request)
    >>> print(report.to_dict()["totalSales"])
"""

__version__ = "0.1.0"

from pos_insights.config import DataPaths
from pos_insights.exceptions import (
    ConfigError,
    DataQualityError,
    FetchError,
    InvalidRequestError,
    MalformedDateError,
    PosInsightsError,
)

__all__ = [
    "ConfigError",
    "DataPaths",
    "DataQualityError",
    "FetchError",
    "InvalidRequestError",
    "MalformedDateError",
    "PosInsightsError",
    "__version__",
]
