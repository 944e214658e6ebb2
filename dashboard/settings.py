from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import yaml

from dashboard.storage import FileStorage, KeyValueStorage, MemoryStorage

CONFIG_ENV_VAR = "CAMPAIGN_DASHBOARD_CONFIG"


def _project_root_from_this_file(this_file: Path) -> Path:
    # dashboard/settings.py -> project root is parent of "dashboard"
    return this_file.resolve().parents[1]


def _load_yaml(cfg_path: Path) -> dict:
    if not cfg_path.exists():
        raise FileNotFoundError(f"Missing config file: {cfg_path}")
    with cfg_path.open("r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


@dataclass(frozen=True)
class StorageSettings:
    backend: str
    data_dir: Path
    key: str
    max_bytes: Optional[int]

    def build(self) -> KeyValueStorage:
        if self.backend == "file":
            return FileStorage(self.data_dir, max_bytes=self.max_bytes)
        if self.backend == "memory":
            return MemoryStorage(max_bytes=self.max_bytes)
        raise ValueError(f"Unknown storage backend: {self.backend!r} (expected 'file' or 'memory')")


@dataclass(frozen=True)
class Settings:
    project_root: Path
    storage: StorageSettings
    message_dismiss_seconds: float
    currency_symbol: str
    log_level: str
    demo_n_campaigns: int
    demo_seed: int
    export_path: Path

    @staticmethod
    def from_config(project_root: Path, cfg: dict) -> "Settings":
        st_cfg = cfg.get("storage", {})
        ui = cfg.get("ui", {})
        demo = cfg.get("demo", {})
        out = cfg.get("output", {})
        max_bytes = st_cfg.get("max_bytes")

        storage = StorageSettings(
            backend=str(st_cfg.get("backend", "file")),
            data_dir=project_root / st_cfg.get("data_dir", "data/storage"),
            key=str(st_cfg.get("key", "campaignData")),
            max_bytes=int(max_bytes) if max_bytes is not None else None,
        )
        return Settings(
            project_root=project_root,
            storage=storage,
            message_dismiss_seconds=float(ui.get("message_dismiss_seconds", 5)),
            currency_symbol=str(ui.get("currency_symbol", "₹")),
            log_level=str(cfg.get("logging", {}).get("level", "INFO")).upper(),
            demo_n_campaigns=int(demo.get("n_campaigns", 8)),
            demo_seed=int(demo.get("seed", 42)),
            export_path=project_root / out.get("export_path", "data/exports/campaigns.csv"),
        )


def load_settings(project_root: Optional[Path] = None, cfg_path: Optional[Path] = None) -> Settings:
    root = project_root or _project_root_from_this_file(Path(__file__))
    if cfg_path is None:
        env = os.getenv(CONFIG_ENV_VAR)
        cfg_path = Path(env) if env else root / "config" / "settings.yaml"
    return Settings.from_config(root, _load_yaml(cfg_path))


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
