"""Tests for the per-session dashboard controller and the messages it raises."""

import gc

from dashboard.controller import LOAD_FAILED, SAVE_FAILED, CampaignDashboard, ExitSaver
from dashboard.store import CampaignStore
from dashboard.validation import NAME_REQUIRED, ZERO_CLICKS_WITH_BUDGET
from tests.factories import make_form


class TestSubmit:

    def test_valid_form_adds_campaign_and_reports_success(self, dashboard):
        record = dashboard.submit(make_form(name="Monsoon Video"))

        assert record is not None
        assert dashboard.campaigns == (record,)
        msg = dashboard.messages.current()
        assert msg.severity == "success"
        assert msg.text == 'Campaign "Monsoon Video" added successfully!'

    def test_invalid_form_reports_reason(self, dashboard):
        assert dashboard.submit(make_form(name="  ")) is None
        assert dashboard.campaigns == ()
        msg = dashboard.messages.current()
        assert (msg.severity, msg.text) == ("error", NAME_REQUIRED)

    def test_zero_clicks_rejected(self, dashboard):
        assert dashboard.submit(make_form(clicks="0", budget="100")) is None
        assert dashboard.messages.current().text == ZERO_CLICKS_WITH_BUDGET

    def test_unparseable_impressions_rejected(self, dashboard):
        assert dashboard.submit(make_form(impressions="lots")) is None
        assert dashboard.messages.current().text == "Impressions must be a positive number"

    def test_save_failure_keeps_campaign_and_warns(self, dashboard, storage):
        storage.fail_writes = True
        record = dashboard.submit(make_form())

        assert record is not None
        assert dashboard.campaigns == (record,)
        msg = dashboard.messages.current()
        assert (msg.severity, msg.text) == ("error", SAVE_FAILED)


class TestDelete:

    def test_delete_reports_success(self, dashboard):
        record = dashboard.submit(make_form(name="Old Promo"))
        assert dashboard.delete(record.id) == record
        assert dashboard.campaigns == ()
        assert dashboard.messages.current().text == 'Campaign "Old Promo" deleted successfully!'

    def test_delete_unknown_id_is_silent(self, dashboard):
        dashboard.submit(make_form())
        dashboard.messages.clear()

        assert dashboard.delete(-1) is None
        assert dashboard.messages.current() is None
        assert len(dashboard.campaigns) == 1


class TestStartAndFlush:

    def test_start_with_corrupt_blob_warns_and_starts_empty(self, dashboard, storage):
        storage.set("campaignData", "not json at all")
        assert dashboard.start() is False
        assert dashboard.campaigns == ()
        assert dashboard.messages.current().text == LOAD_FAILED

    def test_flush_retries_a_failed_save(self, dashboard, storage):
        storage.fail_writes = True
        dashboard.submit(make_form())
        storage.fail_writes = False

        assert dashboard.flush() is True
        assert storage.get("campaignData") is not None

    def test_flush_failure_is_reported(self, dashboard, storage):
        storage.fail_writes = True
        assert dashboard.flush() is False
        assert dashboard.messages.current().text == SAVE_FAILED


class TestExitSaver:

    def test_saves_only_most_recently_changed_dashboard(self, storage):
        saver = ExitSaver()
        first = CampaignDashboard(CampaignStore(storage))
        second = CampaignDashboard(CampaignStore(storage))
        saver.track(first)
        saver.track(second)

        second.submit(make_form(name="Older change"))
        first.submit(make_form(name="Newer change"))

        assert saver.latest() is first

    def test_nothing_changed_nothing_saved(self, storage):
        saver = ExitSaver()
        idle = CampaignDashboard(CampaignStore(storage))
        saver.track(idle)
        assert saver.flush() is None
        assert storage.writes == 0

    def test_ended_sessions_are_dropped(self, storage):
        saver = ExitSaver()
        dashboard = CampaignDashboard(CampaignStore(storage))
        saver.track(dashboard)
        dashboard.submit(make_form())

        del dashboard
        gc.collect()
        assert saver.latest() is None
