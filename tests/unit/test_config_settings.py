"""Unit tests for application settings configuration."""

from pathlib import Path

from rent_inspector.config import Settings


def test_settings_uses_project_env_file_independent_of_cwd():
    """Settings should always include the project .env as an env source."""
    env_files = Settings.model_config.get("env_file")
    assert env_files is not None

    normalized = {str(Path(item)) for item in env_files}
    expected_project_env = str(Path(__file__).resolve().parents[2] / ".env")

    assert expected_project_env in normalized
    assert str(Path(".env")) in normalized



def test_settings_defaults_for_store_and_limits():
    settings = Settings(_env_file=None)

    assert settings.schema_version == 5
    assert settings.max_photos_per_room == 10
    assert settings.min_reminder_interval == 1
    assert settings.max_reminder_interval == 365


def test_settings_swaps_inverted_reminder_range():
    settings = Settings(_env_file=None, min_reminder_interval=90, max_reminder_interval=7)

    assert settings.min_reminder_interval == 7
    assert settings.max_reminder_interval == 90
