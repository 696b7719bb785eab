"""Unit tests for the QueryService — date windows, search and stable sorting."""

from datetime import datetime, timedelta, timezone

import pytest

from rent_inspector.application.services.query_service import (
    QueryService,
    filter_by_date,
    filter_by_range,
    search_properties,
    search_records,
    sort_by_created,
    window_start,
)
from rent_inspector.domain.entities import DateFilter, Property, Record, SortOrder

NOW = datetime(2024, 6, 15, 15, 30, tzinfo=timezone.utc)


def _record(title: str, days_ago: float = 0, **kwargs) -> Record:
    return Record(title=title, created_at=NOW - timedelta(days=days_ago), **kwargs)


@pytest.fixture
def service() -> QueryService:
    return QueryService(clock=lambda: NOW)


# ── Date windows ─────────────────────────────────────────────────────


def test_window_start_presets():
    assert window_start(DateFilter.ALL, NOW) is None
    assert window_start(DateFilter.TODAY, NOW) == datetime(2024, 6, 15, tzinfo=timezone.utc)
    assert window_start(DateFilter.WEEK, NOW) == NOW - timedelta(days=7)
    assert window_start(DateFilter.MONTH, NOW) == NOW - timedelta(days=30)
    assert window_start(DateFilter.YEAR, NOW) == NOW - timedelta(days=365)


def test_filter_by_date_window_is_inclusive():
    records = [_record("edge", days_ago=7), _record("outside", days_ago=7.01), _record("now")]

    kept = filter_by_date(records, DateFilter.WEEK, NOW)

    assert [r.title for r in kept] == ["edge", "now"]


def test_filter_by_date_today_starts_at_midnight():
    records = [_record("this morning", days_ago=0.6), _record("yesterday", days_ago=0.7)]

    kept = filter_by_date(records, DateFilter.TODAY, NOW)

    assert [r.title for r in kept] == ["this morning"]


def test_filter_by_date_today_follows_the_clock_timezone():
    kyiv = timezone(timedelta(hours=3))
    local_now = NOW.astimezone(kyiv)
    # 22:00 UTC the day before is 01:00 on the 15th in UTC+3
    records = [Record(title="after local midnight", created_at=datetime(2024, 6, 14, 22, tzinfo=timezone.utc))]

    assert filter_by_date(records, DateFilter.TODAY, NOW) == []
    assert [r.title for r in filter_by_date(records, DateFilter.TODAY, local_now)] == ["after local midnight"]


def test_filter_by_range_is_inclusive_at_both_ends():
    records = [
        _record("start", days_ago=10),
        _record("middle", days_ago=5),
        _record("end", days_ago=2),
        _record("late", days_ago=1),
    ]

    kept = filter_by_range(records, NOW - timedelta(days=10), NOW - timedelta(days=2))

    assert [r.title for r in kept] == ["start", "middle", "end"]


def test_filter_by_range_rejects_inverted_bounds():
    with pytest.raises(ValueError):
        filter_by_range([], NOW, NOW - timedelta(days=1))


def test_filter_by_date_excludes_future_items():
    records = [_record("future", days_ago=-1), _record("past", days_ago=1)]
    assert [r.title for r in filter_by_date(records, DateFilter.YEAR, NOW)] == ["past"]


# ── Search ───────────────────────────────────────────────────────────


def test_search_records_is_case_insensitive_substring():
    records = [_record("Flat 12 Move-In"), _record("House"), _record("flat 3")]

    assert [r.title for r in search_records(records, "FLAT")] == ["Flat 12 Move-In", "flat 3"]


def test_search_records_blank_query_returns_everything():
    records = [_record("a"), _record("b")]
    assert search_records(records, "   ") == records


def test_search_records_matches_fallback_title():
    untitled = Record(created_at=datetime(2024, 3, 5, tzinfo=timezone.utc))
    assert search_records([untitled], "mar 5") == [untitled]


def test_search_properties_matches_name_or_address():
    props = [
        Property(name="Riverside", address="1 Quay Rd"),
        Property(name="", address="22 Elm Street"),
        Property(),
    ]

    assert [p.address for p in search_properties(props, "elm")] == ["22 Elm Street"]
    assert [p.name for p in search_properties(props, "river")] == ["Riverside"]
    assert search_properties(props, "new prop") == [props[2]]


# ── Sorting ──────────────────────────────────────────────────────────


def test_sort_by_created_both_directions():
    records = [_record("mid", 2), _record("old", 5), _record("new", 0)]

    assert [r.title for r in sort_by_created(records, SortOrder.ASCENDING)] == ["old", "mid", "new"]
    assert [r.title for r in sort_by_created(records, SortOrder.DESCENDING)] == ["new", "mid", "old"]


def test_sort_by_created_ties_keep_input_order():
    records = [_record("first", 1), _record("second", 1), _record("third", 1)]

    for order in SortOrder:
        assert [r.title for r in sort_by_created(records, order)] == ["first", "second", "third"]


# ── Composition ──────────────────────────────────────────────────────


def test_query_records_filters_searches_then_sorts(service):
    records = [
        _record("Kitchen report", 40),
        _record("Kitchen check", 3),
        _record("Bath", 1),
        _record("Kitchen again", 1),
    ]

    result = service.query_records(
        records,
        search="kitchen",
        date_filter=DateFilter.MONTH,
        sort_order=SortOrder.ASCENDING,
    )

    assert [r.title for r in result] == ["Kitchen check", "Kitchen again"]


def test_query_does_not_mutate_input(service):
    records = [_record("b", 1), _record("a", 2)]
    snapshot = list(records)

    service.query_records(records, sort_order=SortOrder.ASCENDING)

    assert records == snapshot


def test_query_properties_default_is_newest_first(service):
    older = Property(name="old", created_at=NOW - timedelta(days=3))
    newer = Property(name="new", created_at=NOW - timedelta(days=1))

    assert [p.name for p in service.query_properties([older, newer])] == ["new", "old"]
