from __future__ import annotations

import sys
from pathlib import Path


def _project_root_from_this_file(this_file: Path) -> Path:
    return this_file.resolve().parents[1]


sys.path.insert(0, str(_project_root_from_this_file(Path(__file__))))

from dashboard.charts import records_frame  # noqa: E402
from dashboard.settings import configure_logging, load_settings  # noqa: E402
from dashboard.store import CampaignStore  # noqa: E402


def main() -> None:
    settings = load_settings(_project_root_from_this_file(Path(__file__)))
    configure_logging(settings.log_level)

    store = CampaignStore(settings.storage.build(), key=settings.storage.key)
    if not store.load():
        raise SystemExit("Stored campaigns could not be read; nothing exported.")

    out_path = settings.export_path
    out_path.parent.mkdir(parents=True, exist_ok=True)
    records_frame(store.all()).to_csv(out_path, index=False)

    print("✅ Campaigns exported:")
    print(f"- {out_path} ({len(store)} rows)")


if __name__ == "__main__":
    main()
