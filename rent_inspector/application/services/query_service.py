"""Read-only projections over the published collection: search, date window, sort.

Nothing here touches the store; every function takes the items to project
and returns a new list.
"""

from collections.abc import Sequence
from datetime import datetime, timedelta, timezone
from typing import TypeVar

from rent_inspector.domain.entities import DateFilter, Property, Record, SortOrder

T = TypeVar("T", Property, Record)

_WINDOW_DAYS = {
    DateFilter.WEEK: 7,
    DateFilter.MONTH: 30,
    DateFilter.YEAR: 365,
}


def window_start(date_filter: DateFilter, now: datetime) -> datetime | None:
    """Inclusive start instant of a preset window; None for ALL.

    TODAY starts at midnight in ``now``'s own timezone. The service clock
    is UTC by default, so days are UTC days unless the caller passes a
    local-time clock.
    """
    if date_filter is DateFilter.ALL:
        return None
    if date_filter is DateFilter.TODAY:
        return now.replace(hour=0, minute=0, second=0, microsecond=0)
    return now - timedelta(days=_WINDOW_DAYS[date_filter])


def filter_by_range(items: Sequence[T], start: datetime, end: datetime) -> list[T]:
    """Keep items created inside ``[start, end]``, both ends inclusive."""
    if start > end:
        raise ValueError("start must not be after end")
    return [item for item in items if start <= item.created_at <= end]


def filter_by_date(
    items: Sequence[T], date_filter: DateFilter, now: datetime | None = None
) -> list[T]:
    """Keep items created inside ``[start, now]`` for the chosen preset."""
    if date_filter is DateFilter.ALL:
        return list(items)
    now = now or datetime.now(timezone.utc)
    return filter_by_range(items, window_start(date_filter, now), now)


def search_records(records: Sequence[Record], query: str) -> list[Record]:
    """Case-insensitive substring match on the display title."""
    needle = query.strip().casefold()
    if not needle:
        return list(records)
    return [record for record in records if needle in record.display_title.casefold()]


def search_properties(properties: Sequence[Property], query: str) -> list[Property]:
    """Case-insensitive substring match on name, address or display name."""
    needle = query.strip().casefold()
    if not needle:
        return list(properties)
    return [
        prop
        for prop in properties
        if any(
            needle in text.casefold()
            for text in (prop.name, prop.address, prop.display_name)
        )
    ]


def sort_by_created(items: Sequence[T], order: SortOrder) -> list[T]:
    """Sort by creation time. Stable: equal timestamps keep their input order."""
    return sorted(
        items,
        key=lambda item: item.created_at,
        reverse=order is SortOrder.DESCENDING,
    )


class QueryService:
    """Composes the projections: date filter, then search, then sort.

    Sorting always comes last so that a narrowed result set is never
    re-expanded by a later step.
    """

    def __init__(self, clock=None) -> None:
        self._clock = clock or (lambda: datetime.now(timezone.utc))

    def query_records(
        self,
        records: Sequence[Record],
        *,
        search: str = "",
        date_filter: DateFilter = DateFilter.ALL,
        sort_order: SortOrder = SortOrder.DESCENDING,
    ) -> list[Record]:
        result = filter_by_date(records, date_filter, self._clock())
        result = search_records(result, search)
        return sort_by_created(result, sort_order)

    def query_properties(
        self,
        properties: Sequence[Property],
        *,
        search: str = "",
        date_filter: DateFilter = DateFilter.ALL,
        sort_order: SortOrder = SortOrder.DESCENDING,
    ) -> list[Property]:
        result = filter_by_date(properties, date_filter, self._clock())
        result = search_properties(result, search)
        return sort_by_created(result, sort_order)
