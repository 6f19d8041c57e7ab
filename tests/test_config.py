"""Tests for settings validation, SQLite foreign keys and the server entry point."""

from unittest.mock import patch

import pytest
from pydantic import ValidationError
from sqlalchemy import create_engine, text

from biztime.api.core.config import Settings
from biztime.api.core.db import enable_sqlite_foreign_keys
from biztime.api.main import run


def test_unknown_log_level_is_rejected():
    with pytest.raises(ValidationError):
        Settings(LOG_LEVEL="LOUD")


def test_log_level_is_case_insensitive():
    assert Settings(LOG_LEVEL="debug").LOG_LEVEL == "DEBUG"


def test_test_environment_selects_test_database():
    settings = Settings(
        ENVIRONMENT="test",
        DATABASE_URL="sqlite:///./main.db",
        TEST_DATABASE_URL="sqlite:///./other.db",
    )
    assert settings.database_url == "sqlite:///./other.db"


def test_sqlite_foreign_keys_enabled_on_connect():
    engine = create_engine("sqlite://")
    enable_sqlite_foreign_keys(engine)

    with engine.connect() as conn:
        assert conn.execute(text("PRAGMA foreign_keys")).scalar() == 1

    engine.dispose()


def test_run_starts_uvicorn():
    with patch("uvicorn.run") as mock_run:
        run()

    mock_run.assert_called_once()
    assert mock_run.call_args.args == ("biztime.api.main:app",)
