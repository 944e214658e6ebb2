from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal

from dashboard.models import CampaignInput

_CENTS = Decimal("0.01")


def round2(x: float) -> float:
    # Decimal's ROUND_HALF_UP rounds halves away from zero
    return float(Decimal(repr(float(x))).quantize(_CENTS, rounding=ROUND_HALF_UP))


@dataclass(frozen=True)
class Metrics:
    ctr: float
    cpc: float


def compute_metrics(data: CampaignInput) -> Metrics:
    impressions = data.impressions or 0
    clicks = data.clicks or 0
    budget = data.budget or 0.0

    ctr = (clicks / impressions) * 100 if impressions > 0 else 0.0
    cpc = budget / clicks if clicks > 0 else 0.0

    return Metrics(ctr=round2(ctr), cpc=round2(cpc))
