from __future__ import annotations

from typing import Sequence

import pandas as pd
import plotly.graph_objects as go
from plotly.subplots import make_subplots

from dashboard.models import RECORD_FIELDS, CampaignRecord

CTR_COLOR = "rgba(102, 126, 234, 0.8)"
CPC_COLOR = "rgba(118, 75, 162, 0.8)"


def records_frame(records: Sequence[CampaignRecord]) -> pd.DataFrame:
    if not records:
        return pd.DataFrame(columns=list(RECORD_FIELDS))
    return pd.DataFrame([r.to_dict() for r in records], columns=list(RECORD_FIELDS))


def portfolio_totals(df: pd.DataFrame) -> dict:
    if df.empty:
        return {"campaigns": 0, "total_budget": 0.0, "avg_ctr": float("nan"), "avg_cpc": float("nan")}
    return {
        "campaigns": int(len(df)),
        "total_budget": float(df["budget"].sum()),
        "avg_ctr": float(df["ctr"].mean()),
        "avg_cpc": float(df["cpc"].mean()),
    }


def performance_figure(records: Sequence[CampaignRecord], currency_symbol: str = "₹") -> go.Figure:
    """Bar chart keyed by campaign name: CTR on the left axis, CPC on the right."""
    names = [r.name for r in records]
    cpc_label = f"CPC ({currency_symbol})"

    fig = make_subplots(specs=[[{"secondary_y": True}]])
    fig.add_trace(
        go.Bar(
            x=names,
            y=[r.ctr for r in records],
            name="CTR (%)",
            marker_color=CTR_COLOR,
            offsetgroup="ctr",
        ),
        secondary_y=False,
    )
    fig.add_trace(
        go.Bar(
            x=names,
            y=[r.cpc for r in records],
            name=cpc_label,
            marker_color=CPC_COLOR,
            offsetgroup="cpc",
        ),
        secondary_y=True,
    )
    fig.update_layout(
        title_text="Campaign Performance Metrics",
        barmode="group",
        margin=dict(l=40, r=10, t=50, b=40),
        legend=dict(orientation="h", yanchor="bottom", y=1.02, xanchor="right", x=1),
    )
    fig.update_xaxes(title_text="Campaigns")
    fig.update_yaxes(title_text="CTR (%)", showgrid=False, secondary_y=False)
    fig.update_yaxes(title_text=cpc_label, showgrid=True, secondary_y=True)
    return fig
