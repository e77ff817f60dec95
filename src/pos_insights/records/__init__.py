"""Record sources of the analytics engine.

The engine reads two independently recorded sources:

- **TransactionLine**: one sold-product line from the point of sale.
- **RegisterCloseSummary**: one daily register close-out per store.

Access goes through the RecordRepository protocol so the engine never
depends on a concrete storage client.

Example:
    >>> from pos_insights import DataPaths
    >>> from pos_insights.records import CsvRecordRepository
    >>>
    >>> repository = CsvRecordRepository(DataPaths.from_root("data"))
"""

from pos_insights.records.csv_store import CsvRecordRepository
from pos_insights.records.repository import InMemoryRecordRepository, RecordRepository
from pos_insights.records.types import DateRange, RegisterCloseSummary, TransactionLine

__all__ = [
    "CsvRecordRepository",
    "DateRange",
    "InMemoryRecordRepository",
    "RecordRepository",
    "RegisterCloseSummary",
    "TransactionLine",
]
