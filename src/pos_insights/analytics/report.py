"""Report assembly.

``build_report`` is the pure engine: given the record sets of the current
period (and optionally the previous one) it reconciles, composes and
compares, then assembles an AnalyticsReport. It performs no I/O.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from pos_insights.analytics.comparison import compare_periods
from pos_insights.analytics.composition import compose
from pos_insights.analytics.config import PURCHASE_RATE_PLACEHOLDER
from pos_insights.analytics.periods import PeriodKind
from pos_insights.analytics.reconcile import reconcile_sources
from pos_insights.analytics.types import (
    AnalyticsReport,
    Composition,
    CustomerDiscrepancy,
    PeriodComparison,
    ReconciledMetrics,
    Reconciliation,
    RegisterCloseView,
    SourceMetrics,
)
from pos_insights.records.types import RegisterCloseSummary, TransactionLine

logger = logging.getLogger(__name__)


def empty_report() -> AnalyticsReport:
    """Return the canonical report for a period with no records in either source."""
    return AnalyticsReport(
        reconciled=ReconciledMetrics(total_customers=0, total_sales=0.0),
        purchase_rate=PURCHASE_RATE_PLACEHOLDER,
        composition=Composition(),
        register_close=RegisterCloseView(metrics=SourceMetrics(total_customers=0, total_sales=0.0)),
        discrepancy=CustomerDiscrepancy(sales_record_customers=0, register_close_customers=0),
    )


def assemble_report(
    current: Reconciliation,
    composition: Composition,
    comparison: PeriodComparison | None = None,
) -> AnalyticsReport:
    """Compose reconciliation, composition and comparison into one report."""
    return AnalyticsReport(
        reconciled=current.reconciled,
        purchase_rate=PURCHASE_RATE_PLACEHOLDER,
        composition=composition,
        register_close=current.register_close,
        discrepancy=current.discrepancy,
        comparison_detail=comparison,
    )


def build_report(
    lines: Sequence[TransactionLine],
    closes: Sequence[RegisterCloseSummary],
    previous_lines: Sequence[TransactionLine] | None = None,
    previous_closes: Sequence[RegisterCloseSummary] | None = None,
    kind: PeriodKind | None = None,
) -> AnalyticsReport:
    """Compute the analytics report for one period's record sets.

    Args:
        lines: Current-period transaction lines.
        closes: Current-period register closes.
        previous_lines: Previous-period transaction lines, None to skip the comparison.
        previous_closes: Previous-period register closes, None to skip the comparison.
        kind: Period kind naming the comparison; required when previous records are given.

    Returns:
        AnalyticsReport. When both current sets are empty this is exactly
        ``empty_report()``.

    Raises:
        ValueError: If previous records are given without a period kind.
    """
    if not lines and not closes:
        logger.info("No sales records or register closes in period; returning empty report")
        return empty_report()

    current = reconcile_sources(lines, closes)
    composition = compose(lines)

    comparison = None
    if previous_lines is not None or previous_closes is not None:
        if kind is None:
            raise ValueError("A period kind is required to compare with a previous period.")
        previous = reconcile_sources(previous_lines or (), previous_closes or ())
        comparison = compare_periods(current.reconciled, previous.reconciled, kind)

    report = assemble_report(current, composition, comparison)
    logger.info(
        "Built report: %d customers, sales %d, %d products, %d days, %d categories",
        report.total_customers,
        report.total_sales,
        len(composition.products),
        len(composition.daily),
        len(composition.categories),
    )
    return report
