from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict, Optional

RECORD_FIELDS = ("id", "name", "impressions", "clicks", "budget", "ctr", "cpc")


@dataclass(frozen=True)
class CampaignInput:
    name: str
    # None means the form value was missing or unparseable
    impressions: Optional[int]
    clicks: Optional[int]
    budget: Optional[float]


@dataclass(frozen=True)
class CampaignRecord:
    id: int
    name: str
    impressions: int
    clicks: int
    budget: float
    ctr: float
    cpc: float

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @staticmethod
    def from_dict(data: Dict[str, Any]) -> "CampaignRecord":
        missing = [k for k in RECORD_FIELDS if k not in data]
        if missing:
            raise ValueError(f"Campaign record is missing fields: {', '.join(missing)}")
        name = data["name"]
        if not isinstance(name, str):
            raise ValueError(f"Campaign name must be a string, got {type(name).__name__}")
        return CampaignRecord(
            id=int(data["id"]),
            name=name,
            impressions=int(data["impressions"]),
            clicks=int(data["clicks"]),
            budget=float(data["budget"]),
            ctr=float(data["ctr"]),
            cpc=float(data["cpc"]),
        )
