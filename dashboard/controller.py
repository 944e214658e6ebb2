from __future__ import annotations

import logging
import weakref
from typing import Mapping, Optional, Tuple

from dashboard.errors import ValidationError
from dashboard.messages import Messenger
from dashboard.models import CampaignRecord
from dashboard.store import CampaignStore
from dashboard.validation import parse_form

logger = logging.getLogger(__name__)

SAVE_FAILED = "Failed to save data locally"
LOAD_FAILED = "Failed to load saved data"


class CampaignDashboard:
    """One per session: wires the form, the store and the message banner."""

    def __init__(self, store: CampaignStore, messenger: Optional[Messenger] = None):
        self.store = store
        self.messages = messenger or Messenger()

    @property
    def campaigns(self) -> Tuple[CampaignRecord, ...]:
        return self.store.all()

    def start(self) -> bool:
        ok = self.store.load()
        if not ok:
            self.messages.error(LOAD_FAILED)
        return ok

    def submit(self, fields: Mapping[str, Optional[str]]) -> Optional[CampaignRecord]:
        data = parse_form(fields)
        try:
            record, saved = self.store.create(data)
        except ValidationError as e:
            logger.info("Rejected campaign %r: %s", data.name, e.reason)
            self.messages.error(e.reason)
            return None

        if saved:
            self.messages.success(f'Campaign "{record.name}" added successfully!')
        else:
            self.messages.error(SAVE_FAILED)
        return record

    def delete(self, record_id: int) -> Optional[CampaignRecord]:
        removed = self.store.delete(record_id)
        if removed is None:
            return None
        record, saved = removed
        if saved:
            self.messages.success(f'Campaign "{record.name}" deleted successfully!')
        else:
            self.messages.error(SAVE_FAILED)
        return record

    def flush(self) -> bool:
        ok = self.store.save()
        if not ok:
            self.messages.error(SAVE_FAILED)
        return ok


class ExitSaver:
    """Process-wide last-chance save across all live sessions.

    Only the most recently changed dashboard is saved: every other session
    holds an older view of the same storage key. Dashboards are held weakly
    so ended sessions can be collected.
    """

    def __init__(self):
        self._dashboards = weakref.WeakSet()

    def track(self, dashboard: CampaignDashboard) -> None:
        self._dashboards.add(dashboard)

    def latest(self) -> Optional[CampaignDashboard]:
        changed = [d for d in self._dashboards if d.store.revision > 0]
        return max(changed, key=lambda d: d.store.revision, default=None)

    def flush(self) -> Optional[bool]:
        dashboard = self.latest()
        if dashboard is None:
            return None
        logger.info("Saving %d campaign(s) on shutdown", len(dashboard.store))
        return dashboard.flush()
