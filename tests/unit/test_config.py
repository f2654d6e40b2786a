"""Tests for settings and logging helpers."""

import pydantic
import pytest
import structlog

from src.config import bind_log_context, clear_log_context, get_settings, reset_settings


@pytest.fixture
def fresh_settings(tmp_path, monkeypatch):
    monkeypatch.setenv("STORAGE_DATA_DIR", str(tmp_path / "data"))
    reset_settings()
    yield
    reset_settings()


class TestSettings:
    def test_planning_defaults(self, fresh_settings):
        planning = get_settings().planning

        assert planning.lookup_timeout == 10.0
        assert planning.max_concurrent_lookups == 16
        assert (planning.currency_places, planning.quantity_places, planning.volume_places) == (
            2,
            4,
            3,
        )

    def test_planning_from_env(self, fresh_settings, monkeypatch):
        monkeypatch.setenv("PLANNING_LOOKUP_TIMEOUT", "2.5")
        monkeypatch.setenv("PLANNING_MAX_CONCURRENT_LOOKUPS", "3")

        planning = get_settings().planning

        assert planning.lookup_timeout == 2.5
        assert planning.max_concurrent_lookups == 3

    def test_rejects_zero_concurrency(self, fresh_settings, monkeypatch):
        monkeypatch.setenv("PLANNING_MAX_CONCURRENT_LOOKUPS", "0")

        with pytest.raises(pydantic.ValidationError):
            get_settings()

    def test_data_dir_is_created(self, fresh_settings, tmp_path):
        settings = get_settings()

        assert (tmp_path / "data").is_dir()
        assert settings.storage.db_path == tmp_path / "data" / "planner.db"


class TestLogContext:
    def test_bind_and_clear(self):
        bind_log_context(request_id="abc123")
        assert structlog.contextvars.get_contextvars() == {"request_id": "abc123"}

        clear_log_context()
        assert structlog.contextvars.get_contextvars() == {}
