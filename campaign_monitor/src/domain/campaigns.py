"""Campaign identity and grouping rules.

`canonical_campaign_key` is the only identity used for grouping and benchmark
lookup. `display_campaign` is cosmetic: it tidies the "D IQ <n>:" prefix for
labels and must never be used as, or turned into, a lookup key, since two
campaigns that differ only in spacing are still distinct campaigns.
"""

from __future__ import annotations

import re
from typing import Any, Iterable

from src.domain.models import CampaignSeries, NormalizedRecord

_DIQ_PREFIX = re.compile(r"^\s*D\s*IQ\s*(\d+):\s*", re.IGNORECASE)


def canonical_campaign_key(name: Any) -> str:
    return str(name or "").strip()


def display_campaign(name: Any) -> str:
    return _DIQ_PREFIX.sub(r"D IQ \1: ", str(name or ""), count=1).strip()


def group_by_campaign(records: Iterable[NormalizedRecord]) -> dict[str, CampaignSeries]:
    """Partition records by campaign key, keeping first-seen key order; the last record per day wins."""
    grouped: dict[str, CampaignSeries] = {}
    for record in records:
        key = canonical_campaign_key(record.campaign)
        series = grouped.get(key)
        if series is None:
            series = CampaignSeries(key=key)
            grouped[key] = series
        series.records[record.day] = record
    return grouped


def campaign_options(keys: Iterable[str]) -> list[tuple[str, str]]:
    """Selector entries as (key, label), sorted by key."""
    return [(key, display_campaign(key)) for key in sorted(key for key in keys if key)]
