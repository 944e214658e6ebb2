from __future__ import annotations

import streamlit as st

st.title("Definitions & Rules")

st.markdown(
    r"""
### Metrics
- **CTR (Click-Through Rate)** = clicks / impressions × 100, shown as a percentage
- **CPC (Cost Per Click)** = budget / clicks, shown in the configured currency
- Both are rounded to 2 decimals (halves away from zero) when the campaign is added

### Validation rules (checked in this order, first failure is shown)
1. Campaign name is required
2. Names must be unique, ignoring case
3. Impressions must be a positive whole number
4. Clicks cannot be negative
5. Clicks cannot exceed impressions
6. Budget must be a positive number
7. Zero clicks with a positive budget is rejected, since CPC cannot be calculated

### Storage
- Campaigns are kept as one JSON list under a single key and rewritten on every add or delete
- If saving fails the campaign stays on screen for this session and a warning is shown
- If saved data cannot be read, the dashboard starts empty
"""
)

st.info("Campaigns cannot be edited. Delete and re-add a campaign to change its numbers.")
