"""Source reconciliation of transaction lines and register closes.

Each source yields its own customer count and sales total:

- Transaction lines: customers = number of distinct business days with
  sales (one visit day per date, however many lines share it); sales = sum
  of ``sales_amount``.
- Register closes: customers = sum of ``customer_count``; sales = sum of
  ``total_sales``; plus gender and payment-method totals.

The reported figure for each metric is the larger of the two sources, since
either one may lag behind through partial data entry. The average customer
value is recomputed from the reconciled totals.

Each source's sales total is rounded to integer currency units before it is
reconciled, so the headline totals, the average and the period diffs all
agree with the reported integers.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from pos_insights.analytics.grouping import to_frame
from pos_insights.analytics.types import (
    PaymentMethodTotals,
    ReconciledMetrics,
    Reconciliation,
    RegisterCloseView,
    SourceMetrics,
    round_currency,
)
from pos_insights.records.types import RegisterCloseSummary, TransactionLine

logger = logging.getLogger(__name__)


def summarize_transaction_lines(lines: Sequence[TransactionLine]) -> SourceMetrics:
    """Derive customers and sales from transaction lines."""
    df = to_frame(lines, TransactionLine)
    if df.empty:
        return SourceMetrics(total_customers=0, total_sales=0.0)

    visit_days = df["date"].map(lambda d: d.isoformat()).nunique()
    return SourceMetrics(
        total_customers=int(visit_days),
        total_sales=round_currency(df["sales_amount"].sum()),
    )


def summarize_register_closes(closes: Sequence[RegisterCloseSummary]) -> RegisterCloseView:
    """Derive customers, sales, demographics and payment totals from register closes."""
    df = to_frame(closes, RegisterCloseSummary)
    if df.empty:
        return RegisterCloseView(metrics=SourceMetrics(total_customers=0, total_sales=0.0))

    return RegisterCloseView(
        metrics=SourceMetrics(
            total_customers=int(df["customer_count"].sum()),
            total_sales=round_currency(df["total_sales"].sum()),
        ),
        male_count=int(df["male_count"].sum()),
        female_count=int(df["female_count"].sum()),
        unspecified_count=int(df["unspecified_count"].sum()),
        payment_methods=PaymentMethodTotals(
            cash=float(df["cash_amount"].sum()),
            credit=float(df["credit_amount"].sum()),
            point=float(df["point_amount"].sum()),
            electronic_money=float(df["electronic_money_amount"].sum()),
        ),
    )


def reconcile(sales_record: SourceMetrics, register_close: SourceMetrics) -> ReconciledMetrics:
    """Merge two per-source figures, taking the larger value of each metric."""
    return ReconciledMetrics(
        total_customers=max(sales_record.total_customers, register_close.total_customers),
        total_sales=max(sales_record.total_sales, register_close.total_sales),
    )


def reconcile_sources(
    lines: Sequence[TransactionLine],
    closes: Sequence[RegisterCloseSummary],
) -> Reconciliation:
    """Summarize both sources of one period and reconcile them.

    Args:
        lines: Transaction lines already filtered to the period and store.
        closes: Register closes already filtered to the period and store.

    Returns:
        Reconciliation holding the merged metrics and both per-source views.
    """
    sales_record = summarize_transaction_lines(lines)
    register_close = summarize_register_closes(closes)
    logger.debug(
        "Sales records: %d lines, %d customers, sales %.2f; "
        "register closes: %d records, %d customers, sales %.2f",
        len(lines),
        sales_record.total_customers,
        sales_record.total_sales,
        len(closes),
        register_close.metrics.total_customers,
        register_close.metrics.total_sales,
    )

    result = Reconciliation(
        reconciled=reconcile(sales_record, register_close.metrics),
        sales_record=sales_record,
        register_close=register_close,
    )
    if lines and closes and result.discrepancy.difference != 0:
        logger.warning(
            "Customer counts disagree: sales records %d, register closes %d",
            sales_record.total_customers,
            register_close.metrics.total_customers,
        )
    return result
