from __future__ import annotations

from pathlib import Path
import importlib
import sys


def _project_root_from_this_file(this_file: Path) -> Path:
    # scripts/run_all.py -> project root is parent of "scripts"
    return this_file.resolve().parents[1]


def main() -> None:
    project_root = _project_root_from_this_file(Path(__file__))

    # Ensure imports work regardless of where you run the command from
    sys.path.insert(0, str(project_root))

    seed_mod = importlib.import_module("scripts.00_seed_demo_data")
    export_mod = importlib.import_module("scripts.01_export_campaigns")

    seed_mod.main()
    export_mod.main()

    print("\n✅ Demo data ready.")
    print("Next:")
    print("  streamlit run dashboard/app.py")


if __name__ == "__main__":
    main()
