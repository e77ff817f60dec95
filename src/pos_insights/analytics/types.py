"""Derived value types produced by the analytics engine.

All types are frozen dataclasses built fresh per request and never
persisted. ``AnalyticsReport.to_dict`` renders the response shape with
camelCase keys and integer currency units.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_FLOOR, Decimal
from typing import Any


def round_currency(value: float) -> int:
    """Round a monetary value to integer units, with halves rounded up.

    The value is converted through its shortest decimal representation so
    floats just below a half are not pushed over it.

    Examples:
        >>> round_currency(2.5)
        3
        >>> round_currency(-2.5)
        -2
        >>> round_currency(0.49999999999999994)
        0
    """
    return int((Decimal(str(value)) + Decimal("0.5")).to_integral_value(rounding=ROUND_FLOOR))


@dataclass(frozen=True)
class SourceMetrics:
    """Customer count and sales total derived from one record source."""

    total_customers: int
    total_sales: float

    @property
    def average_customer_value(self) -> float:
        if self.total_customers <= 0:
            return 0.0
        return self.total_sales / self.total_customers


@dataclass(frozen=True)
class PaymentMethodTotals:
    cash: float = 0.0
    credit: float = 0.0
    point: float = 0.0
    electronic_money: float = 0.0

    def to_dict(self) -> dict[str, int]:
        return {
            "cash": round_currency(self.cash),
            "credit": round_currency(self.credit),
            "point": round_currency(self.point),
            "electronicMoney": round_currency(self.electronic_money),
        }


@dataclass(frozen=True)
class RegisterCloseView:
    """Register-close side of the reconciliation, with demographics and payments."""

    metrics: SourceMetrics
    male_count: int = 0
    female_count: int = 0
    unspecified_count: int = 0
    payment_methods: PaymentMethodTotals = PaymentMethodTotals()

    def to_dict(self) -> dict[str, Any]:
        return {
            "totalCustomers": self.metrics.total_customers,
            "totalSales": round_currency(self.metrics.total_sales),
            "averageCustomerValue": round_currency(self.metrics.average_customer_value),
            "maleCount": self.male_count,
            "femaleCount": self.female_count,
            "unspecifiedCount": self.unspecified_count,
            "paymentMethods": self.payment_methods.to_dict(),
        }


@dataclass(frozen=True)
class ReconciledMetrics:
    """Authoritative headline figures after merging both sources.

    ``average_customer_value`` is always derived from the reconciled totals.
    """

    total_customers: int
    total_sales: float

    @property
    def average_customer_value(self) -> float:
        if self.total_customers <= 0:
            return 0.0
        return self.total_sales / self.total_customers


@dataclass(frozen=True)
class CustomerDiscrepancy:
    """Customer counts of both sources, exposed next to the reconciled figure."""

    sales_record_customers: int
    register_close_customers: int

    @property
    def difference(self) -> int:
        return self.register_close_customers - self.sales_record_customers

    def to_dict(self) -> dict[str, int]:
        return {
            "salesRecordCustomers": self.sales_record_customers,
            "registerCloseCustomers": self.register_close_customers,
            "difference": self.difference,
        }


@dataclass(frozen=True)
class Reconciliation:
    """Full output of reconciling one period's record sets."""

    reconciled: ReconciledMetrics
    sales_record: SourceMetrics
    register_close: RegisterCloseView

    @property
    def discrepancy(self) -> CustomerDiscrepancy:
        return CustomerDiscrepancy(
            sales_record_customers=self.sales_record.total_customers,
            register_close_customers=self.register_close.metrics.total_customers,
        )


@dataclass(frozen=True)
class CompositionEntry:
    """Sales share of one product or category."""

    name: str
    sales: float
    percentage: float

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "sales": round_currency(self.sales),
            "percentage": self.percentage,
        }


@dataclass(frozen=True)
class DailySales:
    """Sales total of one business day.

    Attributes:
        date: Canonical ``YYYY-MM-DD`` string, so string order is date order.
        sales: Summed sales amount.
    """

    date: str
    sales: float

    def to_dict(self) -> dict[str, Any]:
        return {"date": self.date, "sales": round_currency(self.sales)}


@dataclass(frozen=True)
class Composition:
    """Ranked breakdowns built from one period's transaction lines."""

    products: tuple[CompositionEntry, ...] = ()
    daily: tuple[DailySales, ...] = ()
    categories: tuple[CompositionEntry, ...] = ()


@dataclass(frozen=True)
class MetricDeltas:
    """One value per headline metric (customers, sales, average value)."""

    total_customers: float
    total_sales: float
    average_customer_value: float


@dataclass(frozen=True)
class PeriodComparison:
    """Current-vs-previous comparison of the reconciled headline metrics.

    Attributes:
        label: Comparison name derived from the period kind, e.g. "month-over-month".
        previous: Reconciled metrics of the previous period.
        diff: current - previous per metric.
        percent: diff / previous * 100 per metric, 0 when previous is 0.
    """

    label: str
    previous: ReconciledMetrics
    diff: MetricDeltas
    percent: MetricDeltas

    def to_dict(self) -> dict[str, Any]:
        return {
            "label": self.label,
            "prev": {
                "totalCustomers": self.previous.total_customers,
                "totalSales": round_currency(self.previous.total_sales),
                "averageCustomerValue": round_currency(self.previous.average_customer_value),
            },
            "diff": {
                "totalCustomers": int(self.diff.total_customers),
                "totalSales": round_currency(self.diff.total_sales),
                "averageCustomerValue": round_currency(self.diff.average_customer_value),
            },
            "percent": {
                "totalCustomers": self.percent.total_customers,
                "totalSales": self.percent.total_sales,
                "averageCustomerValue": self.percent.average_customer_value,
            },
        }


@dataclass(frozen=True)
class AnalyticsReport:
    """Complete sales analytics response for one period.

    ``purchase_rate`` is a placeholder constant (100); no formula exists for it.
    ``comparison_detail`` is None when an explicit date range was requested or
    when the current period has no records at all.
    """

    reconciled: ReconciledMetrics
    purchase_rate: int
    composition: Composition
    register_close: RegisterCloseView
    discrepancy: CustomerDiscrepancy
    comparison_detail: PeriodComparison | None = None

    @property
    def total_customers(self) -> int:
        return self.reconciled.total_customers

    @property
    def total_sales(self) -> int:
        return round_currency(self.reconciled.total_sales)

    @property
    def average_customer_value(self) -> int:
        return round_currency(self.reconciled.average_customer_value)

    def to_dict(self) -> dict[str, Any]:
        """Render the report with the camelCase keys of the HTTP response."""
        result: dict[str, Any] = {
            "totalCustomers": self.total_customers,
            "averageCustomerValue": self.average_customer_value,
            "totalSales": self.total_sales,
            "purchaseRate": self.purchase_rate,
            "productComposition": [entry.to_dict() for entry in self.composition.products],
            "dailySales": [entry.to_dict() for entry in self.composition.daily],
            "categorySales": [entry.to_dict() for entry in self.composition.categories],
            "registerCloseSummary": self.register_close.to_dict(),
            "comparison": self.discrepancy.to_dict(),
        }
        if self.comparison_detail is not None:
            result["comparisonDetail"] = self.comparison_detail.to_dict()
        return result
