from __future__ import annotations

import math
import re
from dataclasses import dataclass
from typing import Iterable, Mapping, Optional

from dashboard.models import CampaignInput, CampaignRecord

NAME_REQUIRED = "Campaign name is required"
NAME_TAKEN = "A campaign with this name already exists"
IMPRESSIONS_NOT_POSITIVE = "Impressions must be a positive number"
CLICKS_NEGATIVE = "Clicks cannot be negative"
CLICKS_EXCEED_IMPRESSIONS = "Clicks cannot exceed impressions"
BUDGET_NOT_POSITIVE = "Budget must be a positive number"
ZERO_CLICKS_WITH_BUDGET = (
    "Cannot calculate CPC with zero clicks. Either increase clicks or set budget to zero."
)


@dataclass(frozen=True)
class ValidationResult:
    ok: bool
    reason: str = ""

    @staticmethod
    def accept() -> "ValidationResult":
        return ValidationResult(True)

    @staticmethod
    def reject(reason: str) -> "ValidationResult":
        return ValidationResult(False, reason)


# Leading number only, trailing text ignored: "1.5" -> 1, "12 clicks" -> 12
_LEADING_INT = re.compile(r"\s*([+-]?[0-9]+)")
_LEADING_DECIMAL = re.compile(r"\s*([+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?)")


def _parse_int(raw: Optional[str]) -> Optional[int]:
    if raw is None:
        return None
    m = _LEADING_INT.match(str(raw))
    return int(m.group(1)) if m else None


def _parse_decimal(raw: Optional[str]) -> Optional[float]:
    if raw is None:
        return None
    m = _LEADING_DECIMAL.match(str(raw))
    if not m:
        return None
    value = float(m.group(1))
    return value if math.isfinite(value) else None


def parse_form(fields: Mapping[str, Optional[str]]) -> CampaignInput:
    """Build a CampaignInput from the raw string fields of the campaign form.

    Missing or unparseable numbers come back as None so that the matching
    rule in `validate` rejects them.
    """
    return CampaignInput(
        name=(fields.get("campaignName") or "").strip(),
        impressions=_parse_int(fields.get("impressions")),
        clicks=_parse_int(fields.get("clicks")),
        budget=_parse_decimal(fields.get("budget")),
    )


def validate(data: CampaignInput, existing: Iterable[CampaignRecord]) -> ValidationResult:
    # Order matters: the first failing rule is the one reported.
    name = (data.name or "").strip()
    if not name:
        return ValidationResult.reject(NAME_REQUIRED)

    key = name.lower()
    if any(c.name.lower() == key for c in existing):
        return ValidationResult.reject(NAME_TAKEN)

    if data.impressions is None or data.impressions <= 0:
        return ValidationResult.reject(IMPRESSIONS_NOT_POSITIVE)

    if data.clicks is None or data.clicks < 0:
        return ValidationResult.reject(CLICKS_NEGATIVE)

    if data.clicks > data.impressions:
        return ValidationResult.reject(CLICKS_EXCEED_IMPRESSIONS)

    if data.budget is None or data.budget <= 0:
        return ValidationResult.reject(BUDGET_NOT_POSITIVE)

    # Together with the budget rule above this rejects every zero-click campaign.
    if data.clicks == 0 and data.budget > 0:
        return ValidationResult.reject(ZERO_CLICKS_WITH_BUDGET)

    return ValidationResult.accept()
