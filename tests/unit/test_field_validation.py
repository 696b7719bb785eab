"""Unit tests for the UI-facing field validation helpers."""

import pytest

from rent_inspector.application.services.field_validation import (
    validate_comment,
    validate_photo_count,
    validate_record_title,
    validate_reminder_interval,
    validate_room_name,
    validate_user_name,
)
from rent_inspector.config import Settings
from rent_inspector.domain.exceptions import FieldValidationError


@pytest.fixture
def settings() -> Settings:
    return Settings(_env_file=None)


@pytest.mark.parametrize("name", ["Anna", "Mary-Jane", "O'Brien", "Олена Петренко", "Їжак Ґудзик"])
def test_valid_user_names(settings, name):
    assert validate_user_name(f"  {name} ", settings) == name


def test_blank_user_name_falls_back_to_default(settings):
    assert validate_user_name("   ", settings) == settings.default_user_name


@pytest.mark.parametrize(
    "name, code",
    [
        ("A", FieldValidationError.NAME_TOO_SHORT),
        ("A" * 51, FieldValidationError.NAME_TOO_LONG),
        ("Anna2", FieldValidationError.CONTAINS_DIGITS),
        ("Anna!", FieldValidationError.CONTAINS_SPECIAL_CHARACTERS),
        ("Ana_Maria", FieldValidationError.CONTAINS_SPECIAL_CHARACTERS),
        ("Ἀλέξανδρος", FieldValidationError.INVALID_CHARACTERS),
    ],
)
def test_invalid_user_names_report_distinct_codes(settings, name, code):
    with pytest.raises(FieldValidationError) as exc_info:
        validate_user_name(name, settings)
    assert exc_info.value.code == code
    assert exc_info.value.field == "user_name"


def test_length_caps(settings):
    assert validate_record_title("x" * 100, settings) == "x" * 100
    assert validate_room_name("x" * 50, settings) == "x" * 50
    assert validate_comment("x" * 500, settings) == "x" * 500

    for validator, length in (
        (validate_record_title, 101),
        (validate_room_name, 51),
        (validate_comment, 501),
    ):
        with pytest.raises(FieldValidationError) as exc_info:
            validator("x" * length, settings)
        assert exc_info.value.code == FieldValidationError.TOO_LONG


def test_photo_count_cap(settings):
    assert validate_photo_count(10, settings) == 10
    with pytest.raises(FieldValidationError):
        validate_photo_count(11, settings)


@pytest.mark.parametrize("days", [0, 1, 30, 365])
def test_reminder_interval_accepts_off_and_range(settings, days):
    assert validate_reminder_interval(days, settings) == days


@pytest.mark.parametrize("days", [-1, 366])
def test_reminder_interval_rejects_out_of_range(settings, days):
    with pytest.raises(FieldValidationError) as exc_info:
        validate_reminder_interval(days, settings)
    assert exc_info.value.code == FieldValidationError.OUT_OF_RANGE
