"""Record fetcher contract and the in-memory implementation."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Protocol

from pos_insights.records.types import DateRange, RegisterCloseSummary, TransactionLine


class RecordRepository(Protocol):
    """Read-only access to the two record sources of the analytics engine.

    Implementations return every record whose date lies within the inclusive
    range. ``store_id=None`` means all stores. Implementations may be called
    from several threads at once.
    """

    def fetch_transaction_lines(
        self, date_range: DateRange, store_id: int | None = None
    ) -> Sequence[TransactionLine]: ...

    def fetch_register_close_summaries(
        self, date_range: DateRange, store_id: int | None = None
    ) -> Sequence[RegisterCloseSummary]: ...


class InMemoryRecordRepository:
    """RecordRepository backed by in-memory tuples.

    Examples:
        >>> from datetime import date
        >>> repo = InMemoryRecordRepository(
        ...     transaction_lines=[TransactionLine(date(2024, 5, 1), 1, "A", sales_amount=100)]
        ... )
        >>> may = DateRange.from_dates(date(2024, 5, 1), date(2024, 5, 31))
        >>> len(repo.fetch_transaction_lines(may))
        1
    """

    def __init__(
        self,
        transaction_lines: Iterable[TransactionLine] = (),
        register_closes: Iterable[RegisterCloseSummary] = (),
    ) -> None:
        self.transaction_lines = tuple(transaction_lines)
        self.register_closes = tuple(register_closes)

    def fetch_transaction_lines(
        self, date_range: DateRange, store_id: int | None = None
    ) -> tuple[TransactionLine, ...]:
        return tuple(
            line
            for line in self.transaction_lines
            if date_range.contains(line.date) and (store_id is None or line.store_id == store_id)
        )

    def fetch_register_close_summaries(
        self, date_range: DateRange, store_id: int | None = None
    ) -> tuple[RegisterCloseSummary, ...]:
        return tuple(
            close
            for close in self.register_closes
            if date_range.contains(close.date) and (store_id is None or close.store_id == store_id)
        )
