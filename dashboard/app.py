from __future__ import annotations

import sys
from pathlib import Path
import streamlit as st

# Make imports stable regardless of where Streamlit is launched
PROJECT_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(PROJECT_ROOT))

from dashboard.charts import performance_figure  # noqa: E402
from dashboard.data_access import get_dashboard, get_settings, show_message  # noqa: E402
from dashboard.ui_utils import escape_markdown, fmt_money, fmt_num, fmt_pct  # noqa: E402


st.set_page_config(
    page_title="Ad Campaign Insights",
    layout="wide",
)

settings = get_settings()
dashboard = get_dashboard()
symbol = settings.currency_symbol

st.title("Ad Campaign Insights Dashboard")
st.caption("Record campaigns | CTR & CPC derived on entry | Saved locally")

show_message(dashboard)

# Bumping the form version gives the inputs fresh keys, which clears them
form_version = st.session_state.setdefault("form_version", 0)

st.markdown("### Add a campaign")
with st.form(f"campaign_form_{form_version}"):
    name = st.text_input("Campaign name", key=f"campaignName_{form_version}")
    c1, c2, c3 = st.columns(3)
    impressions = c1.text_input("Impressions", key=f"impressions_{form_version}")
    clicks = c2.text_input("Clicks", key=f"clicks_{form_version}")
    budget = c3.text_input(f"Budget ({symbol})", key=f"budget_{form_version}")
    submitted = st.form_submit_button("Add Campaign")

if submitted:
    added = dashboard.submit({
        "campaignName": name,
        "impressions": impressions,
        "clicks": clicks,
        "budget": budget,
    })
    if added is not None:
        st.session_state["form_version"] = form_version + 1
    st.rerun()

campaigns = dashboard.campaigns

st.markdown("### Campaigns")
if not campaigns:
    st.info("No campaigns yet. Add your first campaign above to see CTR and CPC.")
    st.stop()

cols = st.columns(3)
for i, c in enumerate(campaigns):
    with cols[i % 3].container(border=True):
        head, btn = st.columns([5, 1])
        head.markdown(f"#### {escape_markdown(c.name)}")
        btn.button("×", key=f"delete_{c.id}", help="Delete campaign", on_click=dashboard.delete, args=(c.id,))
        m1, m2 = st.columns(2)
        m1.metric("CTR", fmt_pct(c.ctr))
        m2.metric("CPC", fmt_money(c.cpc, symbol))
        st.caption(
            f"**Impressions:** {fmt_num(c.impressions)} · "
            f"**Clicks:** {fmt_num(c.clicks)} · "
            f"**Budget:** {fmt_money(c.budget, symbol)}"
        )

st.markdown("### Performance")
st.plotly_chart(performance_figure(campaigns, symbol), use_container_width=True)

st.info("Use the Streamlit pages menu for the campaign table and metric definitions.")
