"""UI-facing input checks: user name rules and length / range caps.

The store accepts anything structurally valid; these helpers are what the
HTTP layer and any other front end call before handing data to it.
"""

import re

from rent_inspector.config import Settings, get_settings
from rent_inspector.domain.exceptions import FieldValidationError

USER_NAME_MIN_LENGTH = 2
USER_NAME_MAX_LENGTH = 50

# Latin and Ukrainian/Russian Cyrillic letters, spaces, apostrophes, hyphens
_USER_NAME_PATTERN = re.compile(r"^[a-zA-Zа-яА-ЯёЁіІїЇєЄґҐ'’\-\s]+$")
_ALLOWED_PUNCTUATION = {"'", "’", "-"}


def validate_user_name(raw: str, settings: Settings | None = None) -> str:
    """Return the cleaned user name or raise FieldValidationError.

    A blank name falls back to the configured default user name.
    """
    settings = settings or get_settings()
    name = raw.strip()
    if not name:
        return settings.default_user_name

    if len(name) < USER_NAME_MIN_LENGTH:
        raise FieldValidationError(
            "user_name",
            FieldValidationError.NAME_TOO_SHORT,
            f"must be at least {USER_NAME_MIN_LENGTH} characters",
        )
    if len(name) > USER_NAME_MAX_LENGTH:
        raise FieldValidationError(
            "user_name",
            FieldValidationError.NAME_TOO_LONG,
            f"must be at most {USER_NAME_MAX_LENGTH} characters",
        )
    if any(ch.isdigit() for ch in name):
        raise FieldValidationError(
            "user_name", FieldValidationError.CONTAINS_DIGITS, "must not contain digits"
        )
    if any(not (ch.isalpha() or ch.isspace() or ch in _ALLOWED_PUNCTUATION) for ch in name):
        raise FieldValidationError(
            "user_name",
            FieldValidationError.CONTAINS_SPECIAL_CHARACTERS,
            "only letters, spaces, apostrophes and hyphens are allowed",
        )
    if not _USER_NAME_PATTERN.match(name):
        raise FieldValidationError(
            "user_name",
            FieldValidationError.INVALID_CHARACTERS,
            "only Latin and Cyrillic letters are allowed",
        )
    return name


def check_max_length(field: str, value: str, limit: int) -> str:
    if len(value) > limit:
        raise FieldValidationError(
            field, FieldValidationError.TOO_LONG, f"must be at most {limit} characters"
        )
    return value


def validate_record_title(title: str, settings: Settings | None = None) -> str:
    settings = settings or get_settings()
    return check_max_length("title", title.strip(), settings.max_record_title_length)


def validate_room_name(name: str, settings: Settings | None = None) -> str:
    settings = settings or get_settings()
    return check_max_length("custom_name", name.strip(), settings.max_room_name_length)


def validate_comment(comment: str, settings: Settings | None = None) -> str:
    settings = settings or get_settings()
    return check_max_length("comment", comment, settings.max_comment_length)


def validate_photo_count(count: int, settings: Settings | None = None) -> int:
    """``count`` is the number of photos the room would hold afterwards."""
    settings = settings or get_settings()
    if count > settings.max_photos_per_room:
        raise FieldValidationError(
            "photos",
            FieldValidationError.OUT_OF_RANGE,
            f"a room holds at most {settings.max_photos_per_room} photos",
        )
    return count


def validate_reminder_interval(days: int, settings: Settings | None = None) -> int:
    """0 turns reminders off; anything else must sit inside the configured range."""
    settings = settings or get_settings()
    if days == 0:
        return days
    if not settings.min_reminder_interval <= days <= settings.max_reminder_interval:
        raise FieldValidationError(
            "reminder_interval",
            FieldValidationError.OUT_OF_RANGE,
            f"must be 0 or between {settings.min_reminder_interval} "
            f"and {settings.max_reminder_interval} days",
        )
    return days
