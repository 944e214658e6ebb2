from __future__ import annotations

import streamlit as st

from dashboard.charts import portfolio_totals, records_frame
from dashboard.data_access import get_dashboard, get_settings, show_message
from dashboard.ui_utils import fmt_money, fmt_num, fmt_pct

st.title("Campaign Table")

settings = get_settings()
dashboard = get_dashboard()
show_message(dashboard)

df = records_frame(dashboard.campaigns)
if df.empty:
    st.warning("No campaigns recorded yet.")
    st.stop()

totals = portfolio_totals(df)
c1, c2, c3, c4 = st.columns(4)
c1.metric("Campaigns", fmt_num(totals["campaigns"]))
c2.metric("Total Budget", fmt_money(totals["total_budget"], settings.currency_symbol))
c3.metric("Avg CTR", fmt_pct(totals["avg_ctr"]))
c4.metric("Avg CPC", fmt_money(totals["avg_cpc"], settings.currency_symbol))

sort_by = st.selectbox("Sort by", ["entry order", "ctr", "cpc", "budget"], index=0)
show = df if sort_by == "entry order" else df.sort_values(sort_by, ascending=False)

st.markdown("### All campaigns")
st.dataframe(show.drop(columns=["id"]), use_container_width=True, hide_index=True)

st.download_button(
    "Download CSV",
    data=df.to_csv(index=False).encode("utf-8"),
    file_name="campaigns.csv",
    mime="text/csv",
)
