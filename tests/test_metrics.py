"""
Numeric parsing and display formatting.

Guards against:
1. Percent/currency/thousands noise leaking into parsed values
2. Unparseable values raising instead of falling back to zero
3. Installs cleanup keeping separators or the ".00" suffix
"""
import math

from src.application.reporting.metrics import (
    clean_installs,
    fmt_axis_tick,
    fmt_metric_value,
    strip_zero_cents,
    to_float,
)


# ---------------------------------------------------------------------------
# to_float
# ---------------------------------------------------------------------------

def test_to_float_strips_percent():
    assert to_float("3.58%") == 3.58


def test_to_float_strips_rupee_glyph():
    assert to_float("₹0.30") == 0.30


def test_to_float_strips_thousands_separator():
    assert to_float("1,234") == 1234


def test_to_float_trims_whitespace():
    assert to_float("  12.5 % ") == 12.5


def test_to_float_passes_numbers_through():
    assert to_float(0.56) == 0.56
    assert to_float(7) == 7.0


def test_to_float_unparseable_is_zero():
    assert to_float(None) == 0
    assert to_float("abc") == 0
    assert to_float("") == 0
    assert to_float("   ") == 0


def test_to_float_non_finite_is_zero():
    assert to_float(float("nan")) == 0
    assert to_float("inf") == 0
    assert to_float(math.inf) == 0


def test_to_float_rejects_non_decimal_text():
    assert to_float("1_000") == 0
    assert to_float("٣") == 0
    assert to_float("0x10") == 0


def test_to_float_accepts_plain_decimal_forms():
    assert to_float(".5") == 0.5
    assert to_float("-2.") == -2.0
    assert to_float("1e3") == 1000.0


# ---------------------------------------------------------------------------
# clean_installs
# ---------------------------------------------------------------------------

def test_clean_installs_drops_separator_and_cents():
    assert clean_installs("5,390.00") == "5390"


def test_clean_installs_trims():
    assert clean_installs("  221995  ") == "221995"


def test_clean_installs_strips_quotes():
    assert clean_installs('"1,214"') == "1214"


def test_clean_installs_truncates_fraction():
    assert clean_installs("12.7") == "12"


def test_clean_installs_numeric_input():
    assert clean_installs(557437) == "557437"
    assert clean_installs(45912.0) == "45912"


def test_clean_installs_passes_through_unexpected_text():
    assert clean_installs("n/a") == "n/a"
    assert clean_installs("1_000") == "1_000"
    assert clean_installs("٣") == "٣"


def test_clean_installs_missing_is_empty():
    assert clean_installs(None) == ""
    assert clean_installs("") == ""


# ---------------------------------------------------------------------------
# Formatting
# ---------------------------------------------------------------------------

def test_fmt_metric_value_ctr_is_percentage():
    assert fmt_metric_value("CTR", 3.58) == "3.58%"
    assert fmt_metric_value("CTR", 2) == "2.00%"


def test_fmt_metric_value_money_has_currency_glyph():
    assert fmt_metric_value("Avg. CPC", 0.3) == "₹0.30"
    assert fmt_metric_value("Cost / Install", 2.3, currency_symbol="$") == "$2.30"


def test_fmt_axis_tick_per_metric():
    assert fmt_axis_tick("CTR", 3.58) == "3.6%"
    assert fmt_axis_tick("Avg. CPC", 0.3) == "₹0.30"
    assert fmt_axis_tick("Installs", 1500) == "1.5K"
    assert fmt_axis_tick("Installs", 950) == "950"


def test_strip_zero_cents_only_at_end():
    assert strip_zero_cents("₹1.00") == "₹1"
    assert strip_zero_cents("1.005") == "1.005"
    assert strip_zero_cents("3.00%") == "3.00%"
