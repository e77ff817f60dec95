"""Tests for product, category and daily composition."""

from datetime import date

import pytest

from pos_insights.analytics.composition import (
    category_composition,
    compose,
    daily_sales,
    product_composition,
)
from pos_insights.records.types import TransactionLine


def _line(day: int, product: str, amount: float, category: str | None = "Food") -> TransactionLine:
    return TransactionLine(
        date=date(2024, 5, day),
        store_id=1,
        product_name=product,
        category_name=category,
        sales_amount=amount,
    )


def test_product_composition_example() -> None:
    lines = [_line(1, "A", 100), _line(1, "B", 50), _line(2, "A", 75)]

    result = product_composition(lines)

    assert [(entry.name, entry.sales) for entry in result] == [("A", 175), ("B", 50)]
    assert result[0].percentage == pytest.approx(77.777, abs=0.01)
    assert result[1].percentage == pytest.approx(22.222, abs=0.01)
    assert sum(entry.percentage for entry in result) == pytest.approx(100)


def test_ties_keep_encounter_order() -> None:
    """Equal sales keep the order in which the products first appeared."""
    lines = [_line(1, "C", 50), _line(1, "D", 50), _line(2, "E", 100), _line(2, "F", 50)]

    result = product_composition(lines)

    assert [entry.name for entry in result] == ["E", "C", "D", "F"]


def test_names_are_grouped_by_exact_equality() -> None:
    lines = [_line(1, "Coffee", 10), _line(1, "coffee", 10), _line(1, "Coffee ", 10)]

    assert len(product_composition(lines)) == 3


def test_daily_series_is_ascending_by_date() -> None:
    lines = [_line(3, "A", 30), _line(1, "A", 10), _line(2, "B", 20), _line(1, "B", 5)]

    result = daily_sales(lines)

    assert [(day.date, day.sales) for day in result] == [
        ("2024-05-01", 15),
        ("2024-05-02", 20),
        ("2024-05-03", 30),
    ]
    assert sum(day.sales for day in result) == sum(line.sales_amount for line in lines)


def test_missing_category_uses_uncategorized_label() -> None:
    lines = [_line(1, "A", 60, category="Drinks"), _line(1, "B", 40, category=None)]

    result = category_composition(lines)

    assert [(entry.name, entry.sales) for entry in result] == [
        ("Drinks", 60),
        ("uncategorized", 40),
    ]
    assert [entry.percentage for entry in result] == pytest.approx([60.0, 40.0])


def test_zero_sales_gives_zero_percentages() -> None:
    lines = [_line(1, "A", 0), _line(2, "B", 0)]

    products = product_composition(lines)
    categories = category_composition(lines)

    assert [entry.percentage for entry in products] == [0.0, 0.0]
    assert [entry.percentage for entry in categories] == [0.0]


def test_empty_lines_give_empty_composition() -> None:
    result = compose([])

    assert result.products == ()
    assert result.daily == ()
    assert result.categories == ()
