from __future__ import annotations

import itertools
import json
import logging
from typing import List, Optional, Tuple

from dashboard.errors import PersistenceReadError, PersistenceWriteError, ValidationError
from dashboard.ids import IdGenerator
from dashboard.metrics import compute_metrics
from dashboard.models import CampaignInput, CampaignRecord
from dashboard.storage import KeyValueStorage
from dashboard.validation import validate

logger = logging.getLogger(__name__)

DEFAULT_KEY = "campaignData"

# Shared by every store in the process so changes can be ordered across sessions
_revisions = itertools.count(1)


def dumps_records(records) -> str:
    return json.dumps([r.to_dict() for r in records], ensure_ascii=False)


def loads_records(blob: str) -> List[CampaignRecord]:
    try:
        data = json.loads(blob)
    except json.JSONDecodeError as e:
        raise PersistenceReadError(f"Stored campaigns are not valid JSON: {e}") from e
    if not isinstance(data, list):
        raise PersistenceReadError(f"Stored campaigns must be a list, got {type(data).__name__}")
    try:
        return [CampaignRecord.from_dict(item) for item in data]
    except (TypeError, ValueError) as e:
        raise PersistenceReadError(f"Stored campaign is malformed: {e}") from e


class CampaignStore:
    """The only writer of the campaign list.

    Every mutation rewrites the whole list under one key. Persistence is best
    effort: a failed write leaves the in-memory change in place and reports
    False so the caller can warn the user.
    """

    def __init__(
        self,
        storage: KeyValueStorage,
        key: str = DEFAULT_KEY,
        ids: Optional[IdGenerator] = None,
    ):
        self.storage = storage
        self.key = key
        self.ids = ids or IdGenerator()
        self._records: List[CampaignRecord] = []
        # 0 until the first add or delete
        self.revision = 0

    def all(self) -> Tuple[CampaignRecord, ...]:
        return tuple(self._records)

    def __len__(self) -> int:
        return len(self._records)

    def load(self) -> bool:
        try:
            blob = self.storage.get(self.key)
            # An empty blob counts as nothing stored
            records = loads_records(blob) if blob else []
        except PersistenceReadError as e:
            logger.warning("Failed to load campaigns from '%s': %s", self.key, e)
            self._records = []
            return False
        self._records = records
        self.ids.observe(r.id for r in records)
        logger.info("Loaded %d campaign(s) from '%s'", len(records), self.key)
        return True

    def save(self) -> bool:
        try:
            self.storage.set(self.key, dumps_records(self._records))
        except PersistenceWriteError as e:
            logger.warning("Failed to save campaigns to '%s': %s", self.key, e)
            return False
        return True

    def add(self, record: CampaignRecord) -> bool:
        self._records.append(record)
        self.revision = next(_revisions)
        logger.info("Added campaign %s (%s)", record.id, record.name)
        return self.save()

    def delete(self, record_id: int) -> Optional[Tuple[CampaignRecord, bool]]:
        for i, r in enumerate(self._records):
            if r.id == record_id:
                del self._records[i]
                self.revision = next(_revisions)
                logger.info("Deleted campaign %s (%s)", r.id, r.name)
                return r, self.save()
        return None

    def create(self, data: CampaignInput) -> Tuple[CampaignRecord, bool]:
        result = validate(data, self._records)
        if not result.ok:
            raise ValidationError(result.reason)

        m = compute_metrics(data)
        record = CampaignRecord(
            id=self.ids.next_id(),
            name=data.name.strip(),
            impressions=int(data.impressions),
            clicks=int(data.clicks),
            budget=float(data.budget),
            ctr=m.ctr,
            cpc=m.cpc,
        )
        return record, self.add(record)
