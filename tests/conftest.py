"""Shared test fixtures and utilities for timesplitter tests."""

import pytest
import yaml

from timesplitter.period.periodconfig import CONFIG_ENV_VAR, clear_config_cache


@pytest.fixture(autouse=True)
def fresh_config(monkeypatch):
    """Run every test against the packaged config with an empty cache.

    Tests that set TIMESPLITTER_CONFIG_PATH get a clean slate afterwards.
    """
    monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)
    clear_config_cache()
    yield
    clear_config_cache()


@pytest.fixture
def config_override(tmp_path, monkeypatch):
    """Fixture returning a function that installs a config override.

    Example:
        def test_min_count(config_override):
            config_override({"min_period_count": 3})
            assert get_min_period_count() == 3
    """
    def _install(data, filename="override.yaml"):
        path = tmp_path / filename
        with open(path, "w", encoding="utf-8") as f:
            yaml.safe_dump(data, f)
        monkeypatch.setenv(CONFIG_ENV_VAR, str(path))
        clear_config_cache()
        return path

    return _install


@pytest.fixture
def sample_ranges():
    """Fixture providing (start, end, count) triples covering same-day,
    overnight, full-day and uneven splits.
    """
    return [
        ("10:00", "13:00", 3),
        ("10:00", "13:00", 4),
        ("22:00", "02:00", 4),
        ("10:00", "10:00", 2),
        ("00:00", "00:00", 7),
        ("09:15", "17:40", 6),
        ("23:59", "00:01", 2),
        ("10:00", "10:10", 3),
        ("06:30", "06:29", 11),
    ]
