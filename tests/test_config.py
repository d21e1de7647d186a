"""Tests for environment-driven configuration."""

from __future__ import annotations

import pytest

from habitflow.config import BaseConfig, TestConfig
from habitflow.errors import ConfigError


def test_defaults(tmp_path, monkeypatch):
    monkeypatch.setenv("HABITFLOW_DATA_DIR", str(tmp_path / "data"))
    monkeypatch.delenv("HABITFLOW_DATABASE_URL", raising=False)
    monkeypatch.delenv("HABITFLOW_REMINDER_POLL_SECONDS", raising=False)
    monkeypatch.delenv("HABITFLOW_DEFAULT_SNOOZE_MINUTES", raising=False)

    config = BaseConfig()

    assert config.DATA_DIR == (tmp_path / "data").resolve()
    assert config.DATA_DIR.is_dir()
    assert config.DATABASE_URL.endswith("habitflow.db")
    assert config.REMINDER_POLL_SECONDS == 60
    assert config.DEFAULT_SNOOZE_MINUTES == 10


def test_overrides(tmp_path, monkeypatch):
    monkeypatch.setenv("HABITFLOW_DATA_DIR", str(tmp_path))
    monkeypatch.setenv("HABITFLOW_DATABASE_URL", "sqlite:///elsewhere.db")
    monkeypatch.setenv("HABITFLOW_DEV_MODE", "no")
    monkeypatch.setenv("HABITFLOW_DEFAULT_SNOOZE_MINUTES", "5")

    config = BaseConfig()

    assert config.DATABASE_URL == "sqlite:///elsewhere.db"
    assert config.DEV_MODE is False
    assert config.DEFAULT_SNOOZE_MINUTES == 5


@pytest.mark.parametrize("value", ["soon", "0", "-3"])
def test_invalid_poll_interval(tmp_path, monkeypatch, value):
    monkeypatch.setenv("HABITFLOW_DATA_DIR", str(tmp_path))
    monkeypatch.setenv("HABITFLOW_REMINDER_POLL_SECONDS", value)
    with pytest.raises(ConfigError):
        BaseConfig()


def test_test_config_uses_memory_database(tmp_path):
    config = TestConfig(tmp_path)
    assert config.DATABASE_URL == "sqlite://"
    assert config.DATA_DIR == tmp_path
    assert config.DEV_MODE is False


def test_create_tracker_end_to_end(tmp_path):
    from datetime import datetime

    from habitflow import create_tracker
    from habitflow.models import Habit

    tracker = create_tracker(TestConfig(tmp_path))
    habit = tracker.habits.create(Habit(name="Walk"))
    result = tracker.record_check_in(habit.id, "2024-03-18", 1, now=datetime(2024, 3, 18, 12, 0))
    assert result.streak.current_streak == 1
