"""Console output formatting for analytics reports."""

from __future__ import annotations

from pos_insights.analytics.types import AnalyticsReport, CompositionEntry

TOP_ENTRIES = 10


def _format_signed(value: float, suffix: str = "") -> str:
    return f"{value:+,.1f}{suffix}" if suffix else f"{value:+,.0f}"


def _format_shares(title: str, entries: tuple[CompositionEntry, ...]) -> list[str]:
    lines = [title]
    if not entries:
        lines.append("  (no sales)")
        return lines
    for entry in entries[:TOP_ENTRIES]:
        lines.append(f"  {entry.name:<30} {entry.sales:>12,.0f} {entry.percentage:>6.1f}%")
    if len(entries) > TOP_ENTRIES:
        lines.append(f"  ... {len(entries) - TOP_ENTRIES} more")
    return lines


def format_report_for_console(report: AnalyticsReport, title: str = "Sales Analytics") -> str:
    """Build a human-readable summary of an analytics report.

    Args:
        report: AnalyticsReport to render.
        title: Heading printed above the summary.

    Returns:
        Multi-line text for console output.
    """
    lines = [title, "=" * 60]
    lines.append(f"Customers:              {report.total_customers:>12,}")
    lines.append(f"Sales:                  {report.total_sales:>12,}")
    lines.append(f"Average customer value: {report.average_customer_value:>12,}")
    lines.append(f"Purchase rate:          {report.purchase_rate:>12}")

    discrepancy = report.discrepancy
    lines.append("")
    lines.append(
        f"Customers by source: sales records {discrepancy.sales_record_customers:,}, "
        f"register closes {discrepancy.register_close_customers:,} "
        f"(difference {discrepancy.difference:+,})"
    )

    detail = report.comparison_detail
    if detail is not None:
        lines.append("")
        lines.append(f"Comparison ({detail.label})")
        lines.append(
            f"  Customers: {_format_signed(detail.diff.total_customers)} "
            f"({_format_signed(detail.percent.total_customers, '%')})"
        )
        lines.append(
            f"  Sales:     {_format_signed(detail.diff.total_sales)} "
            f"({_format_signed(detail.percent.total_sales, '%')})"
        )
        lines.append(
            f"  Average:   {_format_signed(detail.diff.average_customer_value)} "
            f"({_format_signed(detail.percent.average_customer_value, '%')})"
        )

    lines.append("")
    lines.extend(_format_shares("Products", report.composition.products))
    lines.append("")
    lines.extend(_format_shares("Categories", report.composition.categories))
    lines.append("")
    lines.append("Daily sales")
    if not report.composition.daily:
        lines.append("  (no sales)")
    for day in report.composition.daily:
        lines.append(f"  {day.date}  {day.sales:>12,.0f}")

    return "\n".join(lines)
