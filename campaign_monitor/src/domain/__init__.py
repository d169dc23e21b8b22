"""Domain layer package."""

from .campaigns import campaign_options, canonical_campaign_key, display_campaign, group_by_campaign
from .days import sequence_days
from .models import AlertRecord, BenchmarkRecord, CampaignSeries, DaySequence, NormalizedRecord

__all__ = [
    "AlertRecord",
    "BenchmarkRecord",
    "CampaignSeries",
    "DaySequence",
    "NormalizedRecord",
    "campaign_options",
    "canonical_campaign_key",
    "display_campaign",
    "group_by_campaign",
    "sequence_days",
]
