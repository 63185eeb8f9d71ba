"""Tests for bus_factor.retrieval.config ensuring env overrides and defaults work.

Run with coverage to validate configuration handling:
    pytest tests/test_config.py --maxfail=1 -v --cov=bus_factor.retrieval.config --cov-report=term-missing
"""

from importlib import reload

import bus_factor.retrieval.config as config


def test_config_defaults_are_present():
    assert config.ACCEPT_HEADER == "application/vnd.github.v3+json"
    assert config.BASE_URL.startswith("https://")
    assert config.REQUEST_TIMEOUT > 0
    assert config.USER_AGENT.startswith("bus-factor")


def test_env_override_for_limits(monkeypatch):
    monkeypatch.setenv("BUS_FACTOR_CONTRIBUTORS_LIMIT", "10")
    monkeypatch.setenv("BUS_FACTOR_THRESHOLD", "0.5")
    reloaded = reload(config)
    try:
        assert reloaded.CONTRIBUTORS_LIMIT == 10
        assert reloaded.BUS_FACTOR_THRESHOLD == 0.5
    finally:
        monkeypatch.delenv("BUS_FACTOR_CONTRIBUTORS_LIMIT", raising=False)
        monkeypatch.delenv("BUS_FACTOR_THRESHOLD", raising=False)
        reload(config)


def test_default_limits_without_env(monkeypatch):
    monkeypatch.delenv("BUS_FACTOR_CONTRIBUTORS_LIMIT", raising=False)
    monkeypatch.delenv("BUS_FACTOR_THRESHOLD", raising=False)
    reloaded = reload(config)
    assert reloaded.CONTRIBUTORS_LIMIT == 25
    assert reloaded.BUS_FACTOR_THRESHOLD == 0.75
