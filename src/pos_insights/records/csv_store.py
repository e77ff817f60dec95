"""CSV-backed record repository.

Reads the cleaned silver-layer facts written by the import jobs:

- ``fact_sales_record_line.csv``: one row per sold-product line
- ``fact_register_close_daily.csv``: one row per store x business day

Files are re-read on every fetch, so the repository holds no state between
requests.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

import pandas as pd

from pos_insights.exceptions import DataQualityError
from pos_insights.records.types import DateRange, RegisterCloseSummary, TransactionLine

if TYPE_CHECKING:
    from pos_insights.config import DataPaths

logger = logging.getLogger(__name__)

TRANSACTION_LINE_REQUIRED = ["date", "store_id", "product_name", "sales_amount"]

TRANSACTION_LINE_NUMERIC = ["quantity", "unit_price"]

REGISTER_CLOSE_REQUIRED = ["date", "store_id", "customer_count", "total_sales"]

REGISTER_CLOSE_COUNTS = [
    "groups_count",
    "male_count",
    "female_count",
    "unspecified_count",
]

REGISTER_CLOSE_AMOUNTS = [
    "net_sales",
    "cash_amount",
    "credit_amount",
    "point_amount",
    "electronic_money_amount",
]


def _read_csv(path: Path, required: list[str], label: str) -> pd.DataFrame:
    """Read a fact CSV and check that its required columns are present."""
    if not path.exists():
        raise FileNotFoundError(f"No {label} CSV found at {path}")

    # Text columns keep their literal spelling; numeric columns are coerced below.
    df = pd.read_csv(path, encoding="utf-8", dtype=str)

    missing = [col for col in required if col not in df.columns]
    if missing:
        raise DataQualityError(f"{label} CSV {path} is missing required columns: {missing}")

    raw_dates = df["date"]
    df["date"] = pd.to_datetime(raw_dates, errors="coerce", format="mixed")
    bad_dates = df["date"].isna()
    if bad_dates.any():
        samples = raw_dates[bad_dates].head(3).tolist()
        raise DataQualityError(f"{label} CSV {path} has unparseable dates: {samples}")
    df["date"] = df["date"].dt.date

    df["store_id"] = _numeric(df, "store_id", path, label).astype(int)

    logger.debug("Loaded %d %s rows from %s", len(df), label, path)
    return df


def _numeric(df: pd.DataFrame, column: str, path: Path, label: str) -> pd.Series:
    """Coerce a required column to numbers, failing on blanks or garbage."""
    values = pd.to_numeric(df[column], errors="coerce")
    if values.isna().any():
        raise DataQualityError(f"{label} CSV {path} has non-numeric values in '{column}'")
    return values


def _optional_numeric(df: pd.DataFrame, column: str) -> pd.Series:
    if column not in df.columns:
        return pd.Series(0, index=df.index)
    return pd.to_numeric(df[column], errors="coerce").fillna(0)


def _select(df: pd.DataFrame, date_range: DateRange, store_id: int | None) -> pd.DataFrame:
    mask = (df["date"] >= date_range.start_date) & (df["date"] <= date_range.end_date)
    if store_id is not None:
        mask &= df["store_id"] == store_id
    return df[mask]


class CsvRecordRepository:
    """RecordRepository reading cleaned CSV facts under DataPaths.

    Args:
        paths: DataPaths configuration.

    Raises:
        FileNotFoundError: From fetch calls, if a fact CSV is missing.
        DataQualityError: From fetch calls, if a fact CSV violates record invariants.
    """

    def __init__(self, paths: DataPaths) -> None:
        self.paths = paths

    def load_transaction_lines(self) -> pd.DataFrame:
        """Load and validate every transaction line."""
        path = self.paths.transaction_lines_csv
        df = _read_csv(path, TRANSACTION_LINE_REQUIRED, "transaction lines")

        df["sales_amount"] = _numeric(df, "sales_amount", path, "transaction lines")
        negative = df["sales_amount"] < 0
        if negative.any():
            raise DataQualityError(
                f"transaction lines CSV {path} has {int(negative.sum())} negative sales_amount rows"
            )

        for col in TRANSACTION_LINE_NUMERIC:
            df[col] = _optional_numeric(df, col)

        if "category_name" not in df.columns:
            df["category_name"] = None
        categories = df["category_name"].astype(object)
        df["category_name"] = categories.where(categories.notna(), None)
        df["product_name"] = df["product_name"].astype(str)
        return df

    def load_register_closes(self) -> pd.DataFrame:
        """Load and validate every register close."""
        path = self.paths.register_closes_csv
        df = _read_csv(path, REGISTER_CLOSE_REQUIRED, "register close")

        df["customer_count"] = _numeric(df, "customer_count", path, "register close")
        df["total_sales"] = _numeric(df, "total_sales", path, "register close")
        for col in REGISTER_CLOSE_COUNTS + REGISTER_CLOSE_AMOUNTS:
            df[col] = _optional_numeric(df, col)

        duplicates = df.duplicated(subset=["store_id", "date"], keep=False)
        if duplicates.any():
            keys = df.loc[duplicates, ["store_id", "date"]].drop_duplicates().head(3)
            raise DataQualityError(
                f"register close CSV {path} has more than one close per store and date: "
                f"{keys.to_dict('records')}"
            )
        return df

    def fetch_transaction_lines(
        self, date_range: DateRange, store_id: int | None = None
    ) -> tuple[TransactionLine, ...]:
        df = _select(self.load_transaction_lines(), date_range, store_id)
        return tuple(
            TransactionLine(
                date=row["date"],
                store_id=int(row["store_id"]),
                product_name=row["product_name"],
                category_name=row["category_name"],
                quantity=float(row["quantity"]),
                unit_price=float(row["unit_price"]),
                sales_amount=float(row["sales_amount"]),
            )
            for row in df.to_dict("records")
        )

    def fetch_register_close_summaries(
        self, date_range: DateRange, store_id: int | None = None
    ) -> tuple[RegisterCloseSummary, ...]:
        df = _select(self.load_register_closes(), date_range, store_id)
        return tuple(
            RegisterCloseSummary(
                date=row["date"],
                store_id=int(row["store_id"]),
                customer_count=int(row["customer_count"]),
                total_sales=float(row["total_sales"]),
                **{col: int(row[col]) for col in REGISTER_CLOSE_COUNTS},
                **{col: float(row[col]) for col in REGISTER_CLOSE_AMOUNTS},
            )
            for row in df.to_dict("records")
        )
