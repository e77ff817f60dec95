"""Composition breakdowns of one period's transaction lines.

Product and category shares are ranked by sales, largest first, with ties
left in encounter order. The daily series is keyed by the canonical
``YYYY-MM-DD`` string, so ascending string order is chronological order.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence

from pos_insights.analytics.config import UNCATEGORIZED_LABEL
from pos_insights.analytics.grouping import rank_descending, sum_by
from pos_insights.analytics.types import Composition, CompositionEntry, DailySales
from pos_insights.records.types import TransactionLine


def _share(
    lines: Sequence[TransactionLine], key: Callable[[TransactionLine], str]
) -> tuple[CompositionEntry, ...]:
    total = sum(line.sales_amount for line in lines)
    ranked = rank_descending(sum_by(lines, key, lambda line: line.sales_amount))
    return tuple(
        CompositionEntry(
            name=name,
            sales=float(sales),
            percentage=(float(sales) / total * 100) if total > 0 else 0.0,
        )
        for name, sales in ranked.items()
    )


def category_of(line: TransactionLine) -> str:
    """Category name of a line, or the uncategorized label when it has none."""
    return line.category_name if line.category_name is not None else UNCATEGORIZED_LABEL


def product_composition(lines: Sequence[TransactionLine]) -> tuple[CompositionEntry, ...]:
    """Sales share per product name."""
    return _share(lines, lambda line: line.product_name)


def category_composition(lines: Sequence[TransactionLine]) -> tuple[CompositionEntry, ...]:
    """Sales share per category name."""
    return _share(lines, category_of)


def daily_sales(lines: Sequence[TransactionLine]) -> tuple[DailySales, ...]:
    """Sales per business day, oldest first."""
    sums = sum_by(lines, lambda line: line.date.isoformat(), lambda line: line.sales_amount)
    return tuple(
        DailySales(date=day, sales=float(sales)) for day, sales in sums.sort_index().items()
    )


def compose(lines: Sequence[TransactionLine]) -> Composition:
    """Build all three breakdowns for one period."""
    return Composition(
        products=product_composition(lines),
        daily=daily_sales(lines),
        categories=category_composition(lines),
    )
