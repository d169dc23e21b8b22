"""Shared numeric/formatting utilities for reporting."""

from __future__ import annotations

import math
import re
from typing import Any

from src.domain.models import CTR, INSTALLS, MONEY_METRICS

_NUMERIC_NOISE = re.compile(r"[%₹$€£,]")
_INSTALLS_NOISE = re.compile(r"[\",]")
_TRAILING_ZERO_CENTS = re.compile(r"\.00$")
_DECIMAL = re.compile(r"[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?", re.ASCII)


def _finite_or_none(text: str) -> float | None:
    # plain ASCII decimals only
    if not _DECIMAL.fullmatch(text):
        return None
    try:
        value = float(text)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(value):
        return None
    return value


def to_float(value: Any, default: float = 0.0) -> float:
    """Parse a display value such as "3.58%", "₹0.30" or "1,234"; anything unparseable is `default`."""
    if value is None or isinstance(value, bool):
        return default
    if isinstance(value, (int, float)):
        return float(value) if math.isfinite(value) else default
    text = _NUMERIC_NOISE.sub("", str(value)).strip()
    if not text:
        return default
    parsed = _finite_or_none(text)
    return default if parsed is None else parsed


def clean_installs(value: Any) -> str:
    if value is None:
        return ""
    text = _TRAILING_ZERO_CENTS.sub("", _INSTALLS_NOISE.sub("", str(value))).strip()
    if not text:
        return ""
    parsed = _finite_or_none(text)
    if parsed is None:
        return text
    return str(math.trunc(parsed))


def strip_zero_cents(value: str) -> str:
    return _TRAILING_ZERO_CENTS.sub("", value)


def fmt_metric_value(metric: str, value: float, currency_symbol: str = "₹") -> str:
    if metric == CTR:
        return f"{value:.2f}%"
    if metric in MONEY_METRICS:
        return f"{currency_symbol}{value:.2f}"
    return f"{value:.2f}"


def fmt_axis_tick(metric: str, value: float, currency_symbol: str = "₹") -> str:
    if metric == CTR:
        return f"{value:.1f}%"
    if metric in MONEY_METRICS:
        return f"{currency_symbol}{value:.2f}"
    if metric == INSTALLS:
        if value >= 1_000:
            return f"{value / 1_000:.1f}K"
        return f"{value:.0f}"
    return f"{value}"
