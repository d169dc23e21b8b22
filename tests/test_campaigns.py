"""
Campaign identity, grouping and day sequencing.

Guards against:
1. Revisions of the same line ("D IQ 2" vs "D IQ 3") merging
2. Cosmetic display formatting leaking into grouping keys
3. Day ordering drifting away from plain string order
"""
from src.domain.benchmark import build_benchmark_lookup, default_benchmarks
from src.domain.campaigns import campaign_options, canonical_campaign_key, display_campaign, group_by_campaign
from src.domain.days import sequence_days
from src.domain.models import BenchmarkRecord, NormalizedRecord


def _record(campaign, day, **metrics):
    return NormalizedRecord(campaign=campaign, day=day, **metrics)


# ---------------------------------------------------------------------------
# Keys and labels
# ---------------------------------------------------------------------------

def test_key_ignores_surrounding_whitespace():
    assert canonical_campaign_key("  Campaign A  ") == canonical_campaign_key("Campaign A")


def test_key_keeps_revision_number():
    assert canonical_campaign_key("D IQ 2: X") != canonical_campaign_key("D IQ 3: X")


def test_key_keeps_case_and_inner_spacing():
    assert canonical_campaign_key("D IQ 2:  X") != canonical_campaign_key("D IQ 2: X")
    assert canonical_campaign_key("campaign a") != canonical_campaign_key("Campaign A")


def test_key_of_missing_name_is_empty():
    assert canonical_campaign_key(None) == ""


def test_display_normalizes_prefix_spacing():
    assert display_campaign("  d iq2:Andrd India Ads 10") == "D IQ 2: Andrd India Ads 10"
    assert display_campaign("DIQ 3:   Andrd India Ads 20 ") == "D IQ 3: Andrd India Ads 20"


def test_display_leaves_other_names_alone():
    assert display_campaign("Brain Games: Andrd India TLC 25 v1") == "Brain Games: Andrd India TLC 25 v1"


# ---------------------------------------------------------------------------
# Grouping
# ---------------------------------------------------------------------------

def test_group_preserves_first_seen_order():
    records = [
        _record("B", "d1"),
        _record("A", "d1"),
        _record("B", "d2"),
    ]
    grouped = group_by_campaign(records)
    assert list(grouped.keys()) == ["B", "A"]
    assert grouped["B"].days == ["d1", "d2"]


def test_group_last_duplicate_day_wins():
    records = [
        _record("A", "d1", ctr="1%"),
        _record("A", "d1", ctr="2%"),
    ]
    grouped = group_by_campaign(records)
    assert grouped["A"].get("d1").ctr == "2%"
    assert len(grouped["A"].records) == 1


def test_group_does_not_merge_display_equivalent_names():
    records = [
        _record("D IQ 2: X", "d1"),
        _record("D IQ 2:X", "d1"),
    ]
    grouped = group_by_campaign(records)
    assert len(grouped) == 2
    assert display_campaign("D IQ 2: X") == display_campaign("D IQ 2:X")


def test_series_get_missing_day():
    grouped = group_by_campaign([_record("A", "d1")])
    assert grouped["A"].get("d2") is None
    assert grouped["A"].get(None) is None


def test_campaign_options_sorted_with_labels():
    options = campaign_options(["D IQ 3:X", "Brain", "", "D IQ 2:  Y"])
    assert options == [
        ("Brain", "Brain"),
        ("D IQ 2:  Y", "D IQ 2: Y"),
        ("D IQ 3:X", "D IQ 3: X"),
    ]


# ---------------------------------------------------------------------------
# Day sequencing
# ---------------------------------------------------------------------------

def test_sequence_days_sorted_with_last_and_prev():
    records = [_record("A", day) for day in ["2024-01-10", "2024-01-02", "2024-01-09"]]
    days = sequence_days(records)
    assert days.days == ("2024-01-02", "2024-01-09", "2024-01-10")
    assert days.last_day == "2024-01-10"
    assert days.prev_day == "2024-01-09"


def test_sequence_days_is_global_across_campaigns():
    records = [_record("A", "2024-01-01"), _record("B", "2024-01-02"), _record("A", "2024-01-02")]
    assert sequence_days(records).days == ("2024-01-01", "2024-01-02")


def test_sequence_days_single_day_has_no_prev():
    days = sequence_days([_record("A", "2024-01-01")])
    assert days.last_day == "2024-01-01"
    assert days.prev_day is None


def test_sequence_days_empty():
    days = sequence_days([])
    assert len(days) == 0
    assert days.last_day is None
    assert days.prev_day is None


def test_sequence_days_uses_plain_string_order():
    days = sequence_days([_record("A", "Jan 9"), _record("A", "Jan 10")])
    assert days.days == ("Jan 10", "Jan 9")


# ---------------------------------------------------------------------------
# Benchmarks
# ---------------------------------------------------------------------------

def test_benchmark_lookup_uses_same_key_rule():
    lookup = build_benchmark_lookup([BenchmarkRecord.from_row({" Campaign ": "  Campaign A ", "CTR": "3%"})])
    assert lookup["Campaign A"].ctr == "3%"


def test_benchmark_lookup_later_entry_wins():
    lookup = build_benchmark_lookup(
        [
            BenchmarkRecord(campaign="A", ctr="1%"),
            BenchmarkRecord(campaign="A", ctr="2%"),
        ]
    )
    assert lookup["A"].ctr == "2%"


def test_default_benchmarks_keep_revisions_apart():
    lookup = build_benchmark_lookup(default_benchmarks())
    assert lookup["D IQ 2: Andrd India Ads 10"].ctr == "3.58%"
    assert lookup["D IQ 3: Andrd India Ads 10"].ctr == "4.93%"
