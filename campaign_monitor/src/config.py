"""Environment-driven runtime settings."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
DEFAULT_INPUT_PATH = PROJECT_ROOT / "data" / "raw" / "input.csv"
DEFAULT_OUTPUT_DIR = PROJECT_ROOT / "output"
DEFAULT_CURRENCY_SYMBOL = "₹"


@dataclass(frozen=True)
class Settings:
    input_path: Path = DEFAULT_INPUT_PATH
    output_dir: Path = DEFAULT_OUTPUT_DIR
    benchmark_path: Path | None = None
    min_days: int = 1
    currency_symbol: str = DEFAULT_CURRENCY_SYMBOL
    log_level: str = "INFO"


def _min_days() -> int:
    raw = os.getenv("CAMPAIGN_MIN_DAYS", "1")
    try:
        value = int(raw)
    except ValueError as exc:
        raise ValueError(f"Invalid CAMPAIGN_MIN_DAYS: {raw}") from exc
    if value < 1:
        raise ValueError(f"CAMPAIGN_MIN_DAYS must be >= 1, got {value}")
    return value


def _log_level() -> str:
    raw = os.getenv("CAMPAIGN_LOG_LEVEL", "INFO").strip().upper()
    if not isinstance(logging.getLevelName(raw), int):
        raise ValueError(f"Invalid CAMPAIGN_LOG_LEVEL: {raw}")
    return raw


def _optional_path(name: str) -> Path | None:
    raw = os.getenv(name, "").strip()
    return Path(raw) if raw else None


def load_settings() -> Settings:
    """Read settings from the environment, falling back to project defaults."""
    return Settings(
        input_path=_optional_path("CAMPAIGN_INPUT_PATH") or DEFAULT_INPUT_PATH,
        output_dir=_optional_path("CAMPAIGN_OUTPUT_DIR") or DEFAULT_OUTPUT_DIR,
        benchmark_path=_optional_path("CAMPAIGN_BENCHMARK_PATH"),
        min_days=_min_days(),
        currency_symbol=os.getenv("CAMPAIGN_CURRENCY_SYMBOL", DEFAULT_CURRENCY_SYMBOL) or DEFAULT_CURRENCY_SYMBOL,
        log_level=_log_level(),
    )
