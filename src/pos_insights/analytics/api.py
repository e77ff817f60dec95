"""Public API for sales analytics.

This module provides the main entry point for building a sales analytics
report from a record repository.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping, Sequence
from concurrent.futures import Future, ThreadPoolExecutor
from dataclasses import dataclass
from datetime import date
from typing import TYPE_CHECKING, Any

from pos_insights.analytics.config import DEFAULT_PERIOD, MAX_FETCH_WORKERS
from pos_insights.analytics.periods import PeriodKind, ResolvedPeriod, parse_date, resolve_period
from pos_insights.analytics.report import build_report
from pos_insights.exceptions import FetchError, InvalidRequestError

if TYPE_CHECKING:
    from pos_insights.analytics.types import AnalyticsReport
    from pos_insights.records.repository import RecordRepository
    from pos_insights.records.types import DateRange

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AnalyticsRequest:
    """Validated parameters of one analytics request.

    Attributes:
        period: Period kind (default month).
        store_id: Store to report on; None aggregates all stores.
        current_date: Anchor date; None means today.
        start_date: Explicit range start; overrides period bucketing when set.
        end_date: Explicit range end; set together with start_date.
    """

    period: PeriodKind = PeriodKind(DEFAULT_PERIOD)
    store_id: int | None = None
    current_date: date | None = None
    start_date: date | None = None
    end_date: date | None = None

    @classmethod
    def from_query(cls, params: Mapping[str, Any]) -> AnalyticsRequest:
        """Parse query-style request parameters.

        Recognized keys are ``period``, ``storeId``, ``currentDate``, ``startDate``
        and ``endDate``. Blank values count as absent.

        Raises:
            InvalidRequestError: If the period or store id is invalid.
            MalformedDateError: If a date does not parse.

        Examples:
            >>> request = AnalyticsRequest.from_query({"period": "week", "storeId": "3"})
            >>> request.period, request.store_id
            (<PeriodKind.WEEK: 'week'>, 3)
        """

        def _get(name: str) -> Any:
            value = params.get(name)
            if isinstance(value, str):
                value = value.strip()
            return value if value not in (None, "") else None

        period = _get("period") or DEFAULT_PERIOD

        store_id = _get("storeId")
        if store_id is not None:
            try:
                store_id = int(store_id)
            except (TypeError, ValueError):
                raise InvalidRequestError(
                    f"Invalid storeId '{store_id}'. Must be an integer."
                ) from None

        def _date(name: str) -> date | None:
            value = _get(name)
            return parse_date(value, name) if value is not None else None

        return cls(
            period=PeriodKind.parse(period),
            store_id=store_id,
            current_date=_date("currentDate"),
            start_date=_date("startDate"),
            end_date=_date("endDate"),
        )

    def resolve(self, today: date | None = None) -> ResolvedPeriod:
        """Resolve the current and previous boundaries of this request."""
        return resolve_period(
            kind=self.period,
            anchor=self.current_date,
            start=self.start_date,
            end=self.end_date,
            today=today,
        )


def _fetch_all(
    repository: RecordRepository,
    period: ResolvedPeriod,
    store_id: int | None,
    max_workers: int,
) -> dict[tuple[str, str], Sequence[Any]]:
    """Run every record fetch of a request concurrently and wait for all of them.

    Keys are ``(period, source)`` pairs such as ``("current", "sales")``.

    Raises:
        FetchError: If any fetch fails; the first failure in key order wins.
    """
    ranges: dict[str, DateRange] = {"current": period.current}
    if period.previous is not None:
        ranges["previous"] = period.previous

    sources: dict[str, Callable[[DateRange, int | None], Sequence[Any]]] = {
        "sales": repository.fetch_transaction_lines,
        "register_close": repository.fetch_register_close_summaries,
    }

    results: dict[tuple[str, str], Sequence[Any]] = {}
    with ThreadPoolExecutor(max_workers=max_workers, thread_name_prefix="analytics-fetch") as pool:
        futures: dict[tuple[str, str], Future] = {
            (label, source): pool.submit(fetch, date_range, store_id)
            for label, date_range in ranges.items()
            for source, fetch in sources.items()
        }
        for (label, source), future in futures.items():
            try:
                records = future.result()
            except Exception as e:
                logger.error("Fetching %s %s records failed: %s", label, source, e)
                raise FetchError(
                    f"Failed to fetch {label} {source} records for {ranges[label]}: {e}"
                ) from e
            results[(label, source)] = tuple(records)
            logger.debug(
                "Fetched %d %s %s records for %s",
                len(results[(label, source)]),
                label,
                source,
                ranges[label],
            )
    return results


def get_sales_analytics(
    repository: RecordRepository,
    request: AnalyticsRequest | None = None,
    *,
    today: date | None = None,
    max_workers: int = MAX_FETCH_WORKERS,
) -> AnalyticsReport:
    """Build the sales analytics report for a request.

    This function:
    1. Resolves the current (and, for period requests, previous) boundary
    2. Fetches transaction lines and register closes for each boundary concurrently
    3. Reconciles, composes and compares the records into one report

    Args:
        repository: Record source implementing RecordRepository.
        request: Validated request; None means the default monthly report for today.
        today: Date used as "now" when the request has no anchor date.
        max_workers: Thread pool size for the concurrent fetches.

    Returns:
        AnalyticsReport for the requested period.

    Raises:
        InvalidRequestError: If the request cannot be resolved; nothing is fetched.
        FetchError: If any record fetch fails; no partial report is built.

    Examples:
        >>> from pos_insights.records import InMemoryRecordRepository
        >>> report = get_sales_analytics(InMemoryRecordRepository())
        >>> report.to_dict()["purchaseRate"]
        100
    """
    if request is None:
        request = AnalyticsRequest()

    period = request.resolve(today=today)
    records = _fetch_all(repository, period, request.store_id, max_workers)

    if period.is_explicit:
        return build_report(records[("current", "sales")], records[("current", "register_close")])

    return build_report(
        records[("current", "sales")],
        records[("current", "register_close")],
        previous_lines=records[("previous", "sales")],
        previous_closes=records[("previous", "register_close")],
        kind=period.kind,
    )
