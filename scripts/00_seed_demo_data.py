from __future__ import annotations

import sys
from pathlib import Path
from typing import Dict, List

import numpy as np


def _project_root_from_this_file(this_file: Path) -> Path:
    # scripts/00_seed_demo_data.py -> project root is parent of "scripts"
    return this_file.resolve().parents[1]


sys.path.insert(0, str(_project_root_from_this_file(Path(__file__))))

from dashboard.controller import CampaignDashboard  # noqa: E402
from dashboard.settings import configure_logging, load_settings  # noqa: E402
from dashboard.store import CampaignStore  # noqa: E402

CHANNELS = ["Search", "Display", "Social", "Video"]
THEMES = ["Festive Sale", "Brand Awareness", "Retargeting", "App Installs", "New Launch"]


def _rng(seed: int) -> np.random.Generator:
    return np.random.default_rng(seed)


def make_demo_forms(rng: np.random.Generator, n: int) -> List[Dict[str, str]]:
    """Raw form fields for `n` plausible campaigns (always at least one click)."""
    impressions = rng.integers(5_000, 250_000, size=n)
    true_ctr = rng.uniform(0.004, 0.06, size=n)
    clicks = np.maximum(rng.binomial(impressions, true_ctr), 1)
    budget = np.round(rng.uniform(500, 60_000, size=n), 2)
    channels = rng.choice(CHANNELS, size=n)
    themes = rng.choice(THEMES, size=n)

    return [
        {
            "campaignName": f"{channels[i]} - {themes[i]} #{i + 1}",
            "impressions": str(int(impressions[i])),
            "clicks": str(int(clicks[i])),
            "budget": f"{budget[i]:.2f}",
        }
        for i in range(n)
    ]


def main() -> None:
    settings = load_settings(_project_root_from_this_file(Path(__file__)))
    configure_logging(settings.log_level)

    store = CampaignStore(settings.storage.build(), key=settings.storage.key)
    dashboard = CampaignDashboard(store)
    dashboard.start()

    added = 0
    for form in make_demo_forms(_rng(settings.demo_seed), settings.demo_n_campaigns):
        if dashboard.submit(form) is not None:
            added += 1
        else:
            print(f"- skipped {form['campaignName']}: {dashboard.messages.current().text}")

    print(f"✅ Seeded {added} demo campaign(s); store now holds {len(store)}.")


if __name__ == "__main__":
    main()
