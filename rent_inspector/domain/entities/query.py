"""Value types describing read-only projections over the published collection."""

from enum import Enum


class DateFilter(str, Enum):
    """Creation-date window presets, evaluated against "now" at call time."""

    ALL = "all"
    TODAY = "today"
    WEEK = "week"
    MONTH = "month"
    YEAR = "year"


class SortOrder(str, Enum):
    ASCENDING = "ascending"
    DESCENDING = "descending"
