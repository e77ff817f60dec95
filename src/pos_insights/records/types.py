"""Raw record types read by the analytics engine.

Both record kinds are owned by the storage layer. The engine only reads
them, so they are frozen dataclasses.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, time


@dataclass(frozen=True)
class DateRange:
    """Inclusive datetime boundary of a reporting period.

    Attributes:
        start: First instant of the range (00:00:00 of the first day).
        end: Last instant of the range (23:59:59.999999 of the last day).
    """

    start: datetime
    end: datetime

    @classmethod
    def from_dates(cls, start: date, end: date) -> DateRange:
        """Build a whole-day range covering ``start`` through ``end``."""
        return cls(start=datetime.combine(start, time.min), end=datetime.combine(end, time.max))

    @property
    def start_date(self) -> date:
        return self.start.date()

    @property
    def end_date(self) -> date:
        return self.end.date()

    def contains(self, day: date) -> bool:
        """Return True if the calendar day falls inside the range."""
        return self.start_date <= day <= self.end_date

    def __str__(self) -> str:
        return f"{self.start_date.isoformat()}..{self.end_date.isoformat()}"


@dataclass(frozen=True)
class TransactionLine:
    """One sold-product line recorded by the point of sale.

    Attributes:
        date: Business day of the sale.
        store_id: Store that recorded the sale.
        product_name: Product name used for composition grouping.
        category_name: Product category name, None if the product has no category.
        quantity: Units sold.
        unit_price: Price per unit.
        sales_amount: Recorded sales amount for the line (non-negative).
    """

    date: date
    store_id: int
    product_name: str
    category_name: str | None = None
    quantity: float = 0
    unit_price: float = 0.0
    sales_amount: float = 0.0


@dataclass(frozen=True)
class RegisterCloseSummary:
    """Daily close-out of one store's register.

    At most one summary exists per store and date.
    """

    date: date
    store_id: int
    groups_count: int = 0
    customer_count: int = 0
    male_count: int = 0
    female_count: int = 0
    unspecified_count: int = 0
    total_sales: float = 0.0
    net_sales: float = 0.0
    cash_amount: float = 0.0
    credit_amount: float = 0.0
    point_amount: float = 0.0
    electronic_money_amount: float = 0.0
