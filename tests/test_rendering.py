"""Tests for the plain-data helpers behind the cards, chart and table."""

import math

from dashboard.charts import performance_figure, portfolio_totals, records_frame
from dashboard.models import RECORD_FIELDS
from dashboard.ui_utils import escape_markdown, fmt_money, fmt_num, fmt_pct
from tests.factories import make_record


class TestFormatting:

    def test_fmt_pct(self):
        assert fmt_pct(5.0) == "5.00%"
        assert fmt_pct(None) == "—"
        assert fmt_pct(float("nan")) == "—"

    def test_fmt_num_thousands(self):
        assert fmt_num(1234567) == "1,234,567"

    def test_fmt_money_uses_symbol(self):
        assert fmt_money(10) == "₹10.00"
        assert fmt_money(1500.5, "$") == "$1,500.50"

    def test_escape_markdown(self):
        assert escape_markdown("**Bold** [link](x)") == r"\*\*Bold\*\* \[link\]\(x\)"
        assert escape_markdown("Plain Name") == "Plain Name"


class TestRecordsFrame:

    def test_columns_and_order(self):
        records = [make_record(id=2, name="B"), make_record(id=1, name="A")]
        df = records_frame(records)
        assert list(df.columns) == list(RECORD_FIELDS)
        assert df["name"].tolist() == ["B", "A"]

    def test_empty(self):
        df = records_frame([])
        assert df.empty
        assert list(df.columns) == list(RECORD_FIELDS)

    def test_totals(self):
        df = records_frame([
            make_record(id=1, name="A", impressions=1000, clicks=50, budget=500),
            make_record(id=2, name="B", impressions=1000, clicks=100, budget=500),
        ])
        totals = portfolio_totals(df)
        assert totals["campaigns"] == 2
        assert totals["total_budget"] == 1000.0
        assert totals["avg_ctr"] == 7.5
        assert totals["avg_cpc"] == 7.5

    def test_totals_empty(self):
        totals = portfolio_totals(records_frame([]))
        assert totals["campaigns"] == 0
        assert math.isnan(totals["avg_ctr"])


class TestPerformanceFigure:

    def test_two_series_keyed_by_name(self):
        records = [make_record(id=1, name="A"), make_record(id=2, name="B", clicks=100)]
        fig = performance_figure(records, "$")

        ctr, cpc = fig.data
        assert list(ctr.x) == ["A", "B"]
        assert list(ctr.y) == [5.0, 10.0]
        assert list(cpc.y) == [10.0, 5.0]
        assert cpc.name == "CPC ($)"
        assert cpc.yaxis == "y2"
        assert fig.layout.title.text == "Campaign Performance Metrics"

    def test_empty_chart(self):
        fig = performance_figure([])
        assert len(fig.data) == 2
        assert len(fig.data[0].x or ()) == 0
