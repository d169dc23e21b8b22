"""
Environment-driven settings.
"""
from pathlib import Path

import pytest

from src.config import DEFAULT_INPUT_PATH, load_settings

ENV_VARS = [
    "CAMPAIGN_INPUT_PATH",
    "CAMPAIGN_OUTPUT_DIR",
    "CAMPAIGN_BENCHMARK_PATH",
    "CAMPAIGN_MIN_DAYS",
    "CAMPAIGN_CURRENCY_SYMBOL",
    "CAMPAIGN_LOG_LEVEL",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


def test_defaults():
    settings = load_settings()
    assert settings.input_path == DEFAULT_INPUT_PATH
    assert settings.benchmark_path is None
    assert settings.min_days == 1
    assert settings.currency_symbol == "₹"
    assert settings.log_level == "INFO"


def test_overrides(monkeypatch, tmp_path):
    monkeypatch.setenv("CAMPAIGN_INPUT_PATH", str(tmp_path / "in.csv"))
    monkeypatch.setenv("CAMPAIGN_BENCHMARK_PATH", str(tmp_path / "bench.json"))
    monkeypatch.setenv("CAMPAIGN_MIN_DAYS", "2")
    monkeypatch.setenv("CAMPAIGN_CURRENCY_SYMBOL", "$")
    monkeypatch.setenv("CAMPAIGN_LOG_LEVEL", "debug")

    settings = load_settings()

    assert settings.input_path == Path(tmp_path / "in.csv")
    assert settings.benchmark_path == Path(tmp_path / "bench.json")
    assert settings.min_days == 2
    assert settings.currency_symbol == "$"
    assert settings.log_level == "DEBUG"


@pytest.mark.parametrize("raw", ["0", "-1", "two"])
def test_invalid_min_days(monkeypatch, raw):
    monkeypatch.setenv("CAMPAIGN_MIN_DAYS", raw)
    with pytest.raises(ValueError):
        load_settings()


def test_invalid_log_level(monkeypatch):
    monkeypatch.setenv("CAMPAIGN_LOG_LEVEL", "chatty")
    with pytest.raises(ValueError):
        load_settings()
