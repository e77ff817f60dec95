"""Period-over-period comparison of reconciled headline metrics."""

from __future__ import annotations

from pos_insights.analytics.periods import PeriodKind
from pos_insights.analytics.types import MetricDeltas, PeriodComparison, ReconciledMetrics


def percent_change(current: float, previous: float) -> float:
    """Return (current - previous) / previous * 100, or 0 when previous is not positive.

    The result is not clamped.

    Examples:
        >>> percent_change(150, 100)
        50.0
        >>> percent_change(10, 0)
        0.0
    """
    if previous > 0:
        return (current - previous) / previous * 100
    return 0.0


def compare_periods(
    current: ReconciledMetrics,
    previous: ReconciledMetrics,
    kind: PeriodKind,
) -> PeriodComparison:
    """Compare current and previous reconciled metrics.

    Args:
        current: Reconciled metrics of the reported period.
        previous: Reconciled metrics of the preceding period.
        kind: Period kind; decides the comparison label only.

    Returns:
        PeriodComparison with absolute and percentage deltas per metric.
    """
    diff = MetricDeltas(
        total_customers=current.total_customers - previous.total_customers,
        total_sales=current.total_sales - previous.total_sales,
        average_customer_value=current.average_customer_value - previous.average_customer_value,
    )
    percent = MetricDeltas(
        total_customers=percent_change(current.total_customers, previous.total_customers),
        total_sales=percent_change(current.total_sales, previous.total_sales),
        average_customer_value=percent_change(
            current.average_customer_value, previous.average_customer_value
        ),
    )
    return PeriodComparison(
        label=kind.comparison_label, previous=previous, diff=diff, percent=percent
    )
