"""Period resolution for sales analytics.

Turns a period kind and an anchor date into the inclusive boundary of the
current period and of the period immediately before it. Weeks start on
Monday. The previous period is found by shifting the anchor back one unit
first and bucketing afterwards, so month and year shifts follow calendar
arithmetic (2024-03-31 minus one month is 2024-02-29).
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from datetime import date, datetime, timedelta
from enum import Enum

import pandas as pd

from pos_insights.exceptions import InvalidRequestError, MalformedDateError
from pos_insights.records.types import DateRange

logger = logging.getLogger(__name__)

_ISO_DATE = re.compile(r"^\d{4}-\d{2}-\d{2}(?:[T ].*)?$")


class PeriodKind(str, Enum):
    """Bucketing granularity of a report."""

    DAY = "day"
    WEEK = "week"
    MONTH = "month"
    YEAR = "year"

    @classmethod
    def parse(cls, value: str | PeriodKind) -> PeriodKind:
        """Parse a period name, raising InvalidRequestError for unknown names."""
        if isinstance(value, PeriodKind):
            return value
        try:
            return cls(value)
        except ValueError:
            choices = ", ".join(kind.value for kind in cls)
            raise InvalidRequestError(
                f"Invalid period '{value}'. Must be one of: {choices}."
            ) from None

    @property
    def comparison_label(self) -> str:
        """Name of the period-over-period comparison, e.g. "week-over-week"."""
        return f"{self.value}-over-{self.value}"


def parse_date(value: str | date | datetime, field: str = "date") -> date:
    """Parse an ISO date string into a calendar date.

    Args:
        value: ISO date (or datetime) string, or a date/datetime object.
        field: Parameter name used in the error message.

    Returns:
        The calendar date, with any time component dropped.

    Raises:
        MalformedDateError: If the string is not an ISO date or does not parse.

    Examples:
        >>> parse_date("2024-03-31")
        datetime.date(2024, 3, 31)
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str) or not _ISO_DATE.match(value):
        raise MalformedDateError(f"Invalid {field} '{value}': expected an ISO date (YYYY-MM-DD)")
    try:
        parsed = pd.to_datetime(value, format="ISO8601")
    except (ValueError, TypeError) as e:
        raise MalformedDateError(f"Invalid {field} '{value}': {e}") from e
    return parsed.date()


def period_range(kind: PeriodKind, anchor: date) -> DateRange:
    """Return the inclusive range of the period of ``kind`` containing ``anchor``.

    Examples:
        >>> str(period_range(PeriodKind.WEEK, date(2025, 1, 1)))
        '2024-12-30..2025-01-05'
    """
    if kind is PeriodKind.DAY:
        start = end = anchor
    elif kind is PeriodKind.WEEK:
        start = anchor - timedelta(days=anchor.weekday())
        end = start + timedelta(days=6)
    elif kind is PeriodKind.MONTH:
        start = anchor.replace(day=1)
        end = anchor.replace(day=pd.Timestamp(anchor).days_in_month)
    else:
        start = date(anchor.year, 1, 1)
        end = date(anchor.year, 12, 31)
    return DateRange.from_dates(start, end)


def shift_anchor(kind: PeriodKind, anchor: date, periods: int = 1) -> date:
    """Move ``anchor`` back by ``periods`` units of ``kind``.

    Month and year shifts clamp to the last valid day of the target month.
    """
    if kind is PeriodKind.DAY:
        return anchor - timedelta(days=periods)
    if kind is PeriodKind.WEEK:
        return anchor - timedelta(weeks=periods)
    if kind is PeriodKind.MONTH:
        offset = pd.DateOffset(months=periods)
    else:
        offset = pd.DateOffset(years=periods)
    return (pd.Timestamp(anchor) - offset).date()


def previous_period_range(kind: PeriodKind, anchor: date) -> DateRange:
    """Return the range of the period immediately before the one containing ``anchor``."""
    return period_range(kind, shift_anchor(kind, anchor))


@dataclass(frozen=True)
class ResolvedPeriod:
    """Boundaries a report is computed over.

    Attributes:
        current: Range of the reported period.
        previous: Range of the preceding period, None for explicit ranges.
        kind: Period kind, None for explicit ranges.
        anchor: Anchor date, None for explicit ranges.
    """

    current: DateRange
    previous: DateRange | None = None
    kind: PeriodKind | None = None
    anchor: date | None = None

    @property
    def is_explicit(self) -> bool:
        return self.kind is None


def resolve_period(
    kind: str | PeriodKind = PeriodKind.MONTH,
    anchor: date | None = None,
    start: date | None = None,
    end: date | None = None,
    today: date | None = None,
) -> ResolvedPeriod:
    """Resolve the current and previous boundaries of a report.

    An explicit ``start``/``end`` pair is used verbatim as whole days and
    disables the previous period. Otherwise the period of ``kind`` around
    ``anchor`` (default ``today``, default the local current date) is used.

    Raises:
        InvalidRequestError: If only one of start/end is given, the range is
            reversed, or the kind is unknown.
    """
    if (start is None) != (end is None):
        raise InvalidRequestError("startDate and endDate must be given together.")

    if start is not None and end is not None:
        if start > end:
            raise InvalidRequestError(
                f"startDate {start.isoformat()} is after endDate {end.isoformat()}."
            )
        resolved = ResolvedPeriod(current=DateRange.from_dates(start, end))
        logger.info("Resolved explicit range %s", resolved.current)
        return resolved

    kind = PeriodKind.parse(kind)
    if anchor is None:
        anchor = today if today is not None else date.today()

    resolved = ResolvedPeriod(
        current=period_range(kind, anchor),
        previous=previous_period_range(kind, anchor),
        kind=kind,
        anchor=anchor,
    )
    logger.info(
        "Resolved %s period around %s: current %s, previous %s",
        kind.value,
        anchor.isoformat(),
        resolved.current,
        resolved.previous,
    )
    return resolved
