"""Example: Monthly sales analytics report from cleaned CSV facts

This example builds the month-over-month sales report for one store from the
cleaned silver-layer CSVs and prints both the console summary and the JSON
response.

Prerequisites:
- data/b_clean/sales/fact_sales_record_line.csv
- data/b_clean/register_close/fact_register_close_daily.csv
"""

import json
from pathlib import Path

from pos_insights import DataPaths
from pos_insights.analytics import AnalyticsRequest, get_sales_analytics
from pos_insights.analytics.formatters import format_report_for_console
from pos_insights.records import CsvRecordRepository

# Anchor date and store - MODIFY AS NEEDED
current_date = "2025-01-15"
store_id = "1"

paths = DataPaths.from_root(Path("data"))
repository = CsvRecordRepository(paths)

request = AnalyticsRequest.from_query(
    {"period": "month", "storeId": store_id, "currentDate": current_date}
)
report = get_sales_analytics(repository, request)

print(format_report_for_console(report, title=f"Store {store_id} - month of {current_date}"))

# Same report as the HTTP response body
print(json.dumps(report.to_dict(), ensure_ascii=False, indent=2))

# Explicit range: no previous-period comparison
range_request = AnalyticsRequest.from_query(
    {"storeId": store_id, "startDate": "2025-01-06", "endDate": "2025-01-12"}
)
range_report = get_sales_analytics(repository, range_request)
print(f"\nWeek of 2025-01-06: {range_report.total_sales:,} in sales")
print("comparisonDetail present:", "comparisonDetail" in range_report.to_dict())
