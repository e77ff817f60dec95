"""Tests for the period-over-period comparison."""

import pytest

from pos_insights.analytics.comparison import compare_periods, percent_change
from pos_insights.analytics.periods import PeriodKind
from pos_insights.analytics.types import ReconciledMetrics, round_currency


def test_percent_change() -> None:
    assert percent_change(150, 100) == 50.0
    assert percent_change(50, 100) == -50.0


def test_percent_change_is_not_clamped() -> None:
    assert percent_change(500, 100) == 400.0
    assert percent_change(0, 100) == -100.0


def test_percent_change_without_previous_is_zero() -> None:
    assert percent_change(10, 0) == 0.0
    assert percent_change(0, 0) == 0.0


def test_compare_periods() -> None:
    current = ReconciledMetrics(total_customers=10, total_sales=1000.0)
    previous = ReconciledMetrics(total_customers=5, total_sales=400.0)

    result = compare_periods(current, previous, PeriodKind.MONTH)

    assert result.label == "month-over-month"
    assert result.previous == previous
    assert result.diff.total_customers == 5
    assert result.diff.total_sales == 600.0
    assert result.diff.average_customer_value == pytest.approx(20.0)
    assert result.percent.total_customers == pytest.approx(100.0)
    assert result.percent.total_sales == pytest.approx(150.0)
    assert result.percent.average_customer_value == pytest.approx(25.0)


def test_comparison_dict_rounds_average_diff() -> None:
    current = ReconciledMetrics(total_customers=3, total_sales=1000.0)
    previous = ReconciledMetrics(total_customers=3, total_sales=400.0)

    detail = compare_periods(current, previous, PeriodKind.WEEK).to_dict()

    assert detail["label"] == "week-over-week"
    assert detail["prev"] == {"totalCustomers": 3, "totalSales": 400, "averageCustomerValue": 133}
    assert detail["diff"] == {"totalCustomers": 0, "totalSales": 600, "averageCustomerValue": 200}
    assert detail["percent"]["totalCustomers"] == 0.0
    assert detail["percent"]["totalSales"] == pytest.approx(150.0)


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (2.5, 3),
        (112.5, 113),
        (-2.5, -2),
        (0.49999999999999994, 0),
        (100.4, 100),
    ],
)
def test_round_currency_rounds_halves_up(value: float, expected: int) -> None:
    assert round_currency(value) == expected
