"""Ordered group-then-fold primitives used by the aggregators.

Grouping is exact equality on the key; names are not trimmed or
case-folded. Keys keep first-encounter order so that stable ranking leaves
ties in the order the records arrived.
"""

from __future__ import annotations

from collections.abc import Callable, Hashable, Iterable
from dataclasses import fields
from typing import Any, TypeVar

import pandas as pd

T = TypeVar("T")


def to_frame(records: Iterable[Any], record_type: type) -> pd.DataFrame:
    """Build a DataFrame with one column per dataclass field of ``record_type``.

    An empty iterable yields an empty frame with the same columns.
    """
    columns = [f.name for f in fields(record_type)]
    rows = [tuple(getattr(record, col) for col in columns) for record in records]
    return pd.DataFrame(rows, columns=columns)


def sum_by(
    records: Iterable[T],
    key: Callable[[T], Hashable],
    value: Callable[[T], float],
) -> pd.Series:
    """Group records by ``key`` and sum ``value`` within each group.

    Returns:
        Float Series indexed by group key, in first-encounter key order.
        Empty when there are no records.
    """
    keys: list[Hashable] = []
    values: list[float] = []
    for record in records:
        keys.append(key(record))
        values.append(float(value(record)))

    frame = pd.DataFrame(
        {
            "key": pd.Series(keys, dtype=object),
            "value": pd.Series(values, dtype=float),
        }
    )
    return frame.groupby("key", sort=False, dropna=False)["value"].sum()


def rank_descending(sums: pd.Series) -> pd.Series:
    """Sort group sums largest first, keeping encounter order for ties."""
    return sums.sort_values(ascending=False, kind="stable")
