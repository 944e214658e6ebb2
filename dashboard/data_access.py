from __future__ import annotations

import atexit

import streamlit as st

from dashboard.controller import CampaignDashboard, ExitSaver
from dashboard.messages import Messenger
from dashboard.settings import Settings, configure_logging, load_settings
from dashboard.store import CampaignStore

_SESSION_KEY = "campaign_dashboard"


@st.cache_resource(show_spinner=False)
def get_settings() -> Settings:
    settings = load_settings()
    configure_logging(settings.log_level)
    return settings


@st.cache_resource(show_spinner=False)
def get_exit_saver() -> ExitSaver:
    # One shutdown hook for the whole server, not one per session
    saver = ExitSaver()
    atexit.register(saver.flush)
    return saver


def build_dashboard(settings: Settings, saver: ExitSaver) -> CampaignDashboard:
    store = CampaignStore(settings.storage.build(), key=settings.storage.key)
    dashboard = CampaignDashboard(store, Messenger(settings.message_dismiss_seconds))
    dashboard.start()
    saver.track(dashboard)
    return dashboard


def get_dashboard() -> CampaignDashboard:
    if _SESSION_KEY not in st.session_state:
        st.session_state[_SESSION_KEY] = build_dashboard(get_settings(), get_exit_saver())
    return st.session_state[_SESSION_KEY]


def show_message(dashboard: CampaignDashboard) -> None:
    m = dashboard.messages.current()
    if m is None:
        return
    if m.severity == "success":
        st.success(m.text)
    else:
        st.error(m.text)
